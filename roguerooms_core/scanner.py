from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Dict, Iterator, Optional
from .room import Room, RoomType
from .roomfile import RoomFileError, read_room

LOG = logging.getLogger("roguerooms.scanner")

def newest_rooms_dir(base_dir: Path, prefix: str) -> Optional[Path]:
    newest: Optional[Path] = None
    newest_mtime = float("-inf")
    try:
        with os.scandir(base_dir) as it:
            for entry in it:
                if not entry.name.startswith(prefix) or not entry.is_dir(follow_symlinks=False):
                    continue
                mtime = entry.stat(follow_symlinks=False).st_mtime
                # Later entries win ties.
                if mtime >= newest_mtime:
                    newest, newest_mtime = Path(entry.path), mtime
    except OSError as e:
        LOG.warning("Could not open directory '%s': %s", base_dir, e)
        return None
    return newest

def iter_room_files(run_dir: Path, suffix: str = "_room") -> Iterator[Path]:
    with os.scandir(run_dir) as it:
        for entry in sorted(it, key=lambda e: e.name):
            if entry.name.endswith(suffix) and entry.is_file():
                yield Path(entry.path)

def load_rooms(run_dir: Path, suffix: str = "_room") -> Dict[str, Room]:
    try:
        paths = list(iter_room_files(run_dir, suffix))
    except OSError as e:
        raise RoomFileError(f"Directory '{run_dir}' could not be opened: {e}") from e
    rooms: Dict[str, Room] = {}
    for path in paths:
        room = read_room(path)
        if room.name in rooms:
            raise RoomFileError(f"{path}: duplicate room {room.name}")
        rooms[room.name] = room
    _validate_rooms(run_dir, rooms)
    LOG.debug("Loaded %d rooms from %s", len(rooms), run_dir)
    return rooms

def _validate_rooms(run_dir: Path, rooms: Dict[str, Room]) -> None:
    if not rooms:
        raise RoomFileError(f"No room files in '{run_dir}'")
    for room in rooms.values():
        unknown = [c for c in room.connections if c not in rooms]
        if unknown:
            raise RoomFileError(f"{room.name} connects to unknown room(s): {', '.join(unknown)}")
    for kind in (RoomType.START, RoomType.END):
        found = [r.name for r in rooms.values() if r.room_type is kind]
        if len(found) != 1:
            raise RoomFileError(f"Expected exactly one {kind.value} in '{run_dir}', found {len(found)}")
