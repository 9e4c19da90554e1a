from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict

LOG = logging.getLogger("roguerooms.config")

DEFAULT_CONFIG = {
    "dir_prefix": "roguerooms.rooms.",
    "room_suffix": "_room",
    "time_file": "currentTime.txt",
    "room_count": 7,
}

CONFIG_FILENAME = ".roguerooms"

def _ensure_cfg(cfg: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(DEFAULT_CONFIG)
    merged.update({k: v for k, v in cfg.items() if k in DEFAULT_CONFIG})
    for key in ("dir_prefix", "room_suffix", "time_file"):
        if not isinstance(merged[key], str) or not merged[key]:
            merged[key] = DEFAULT_CONFIG[key]
    # Needs room for three connections each and enough names in the pool.
    if not isinstance(merged["room_count"], int) or not 4 <= merged["room_count"] <= 10:
        merged["room_count"] = DEFAULT_CONFIG["room_count"]
    return merged

def load_config(base_dir: Path) -> Dict[str, Any]:
    cfg_path = base_dir / CONFIG_FILENAME
    if not cfg_path.exists():
        return dict(DEFAULT_CONFIG)
    try:
        with cfg_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        LOG.warning("Ignoring unreadable config '%s': %s", cfg_path, e)
        return dict(DEFAULT_CONFIG)
    if not isinstance(data, dict):
        LOG.warning("Ignoring config '%s': expected a JSON object", cfg_path)
        return dict(DEFAULT_CONFIG)
    return _ensure_cfg(data)

def save_config(base_dir: Path, cfg: Dict[str, Any]) -> None:
    cfg_path = base_dir / CONFIG_FILENAME
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    with cfg_path.open("w", encoding="utf-8") as f:
        json.dump(_ensure_cfg(cfg), f, indent=2, sort_keys=True)

def time_file_path(base_dir: Path, cfg: Dict[str, Any]) -> Path:
    return base_dir / cfg["time_file"]
