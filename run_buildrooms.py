from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from pathlib import Path

from roguerooms_core.config import CONFIG_FILENAME, load_config, save_config
from roguerooms_core.graph import GraphError
from roguerooms_core.hashing import seed_for_text
from roguerooms_core.worldgen import build_rooms, layout_fingerprint, write_run_directory


LOG = logging.getLogger("roguerooms.build")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Generate a fresh set of RogueRooms room files")
    parser.add_argument("--dir", type=Path, default=Path(os.environ.get("ROGUEROOMS_DIR", ".")),
                        help="Directory to create the run directory in (default: $ROGUEROOMS_DIR or .)")
    parser.add_argument("--seed", default=os.environ.get("ROGUEROOMS_SEED"),
                        help="Seed text for a reproducible layout")
    parser.add_argument("--save-config", action="store_true",
                        help=f"Write the effective settings to {CONFIG_FILENAME} in --dir")
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="[%(levelname)s] %(message)s")

    base_dir = args.dir.expanduser().resolve()
    cfg = load_config(base_dir)
    rng = random.Random(seed_for_text(args.seed)) if args.seed else random.Random()
    if args.save_config:
        save_config(base_dir, cfg)
        LOG.info("Saved settings to %s", base_dir / CONFIG_FILENAME)
    try:
        rooms = build_rooms(rng, count=cfg["room_count"])
    except GraphError as exc:
        LOG.error("Could not generate rooms: %s", exc)
        return 1
    LOG.debug("Layout fingerprint %s", layout_fingerprint(rooms))
    try:
        write_run_directory(base_dir, rooms, prefix=cfg["dir_prefix"], suffix=cfg["room_suffix"])
    except OSError as exc:
        LOG.error("Error creating directory: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
