from __future__ import annotations
import logging
import os
import random
from pathlib import Path
from typing import List, Sequence
from .room import Room, RoomType
from .graph import generate_graph, is_reachable, adjacency_by_name
from .hashing import hash_hex
from .roomfile import format_room, write_room

LOG = logging.getLogger("roguerooms.worldgen")

ROOM_NAME_POOL = (
    "Dungeon",
    "Barracks",
    "Garden",
    "Game",
    "Medical",
    "Corridor",
    "Kitchen",
    "Stairs",
    "Basement",
    "Attic",
)

DIR_MODE = 0o755

def select_room_names(rng: random.Random, count: int = 7, pool: Sequence[str] = ROOM_NAME_POOL) -> List[str]:
    if count > len(pool):
        raise ValueError(f"Cannot pick {count} names from a pool of {len(pool)}")
    return rng.sample(list(pool), count)

def assign_room_types(rng: random.Random, count: int = 7) -> List[RoomType]:
    start = rng.randrange(count)
    end = rng.randrange(count)
    while end == start:
        end = rng.randrange(count)
    types = [RoomType.MID] * count
    types[start] = RoomType.START
    types[end] = RoomType.END
    return types

def build_rooms(rng: random.Random | None = None, count: int = 7) -> List[Room]:
    rng = rng or random.Random()
    graph = generate_graph(rng, size=count)
    names = select_room_names(rng, count)
    types = assign_room_types(rng, count)
    rooms = [
        Room(name=names[slot], room_type=types[slot], connections=tuple(names[n] for n in graph.neighbours(slot)))
        for slot in range(count)
    ]
    LOG.debug("Generated %d edges over %d rooms", len(graph.edges()), count)
    return rooms

def layout_fingerprint(rooms: Sequence[Room]) -> str:
    blob = "".join(format_room(r) for r in sorted(rooms, key=lambda r: r.name))
    return hash_hex(blob.encode("utf-8"))

def run_dir_name(prefix: str, pid: int | None = None) -> str:
    return f"{prefix}{os.getpid() if pid is None else pid}"

def write_run_directory(base_dir: Path, rooms: Sequence[Room], *, prefix: str, suffix: str = "_room",
                        pid: int | None = None) -> Path:
    run_dir = base_dir / run_dir_name(prefix, pid)
    run_dir.mkdir(mode=DIR_MODE)
    written = 0
    for room in rooms:
        path = run_dir / f"{room.name}{suffix}"
        try:
            write_room(path, room)
            written += 1
        except OSError as e:
            LOG.error("Error writing room file '%s': %s", path, e)
    LOG.info("Wrote %d/%d room files to %s", written, len(rooms), run_dir)
    start = next((r.name for r in rooms if r.is_start), None)
    end = next((r.name for r in rooms if r.is_end), None)
    if start and end and not is_reachable(adjacency_by_name(rooms), start, end):
        LOG.warning("END room %s is not reachable from START room %s", end, start)
    return run_dir
