from __future__ import annotations
from pathlib import Path
from typing import List, Optional
from .room import Room, RoomType, MAX_CONNECTIONS

NAME_LABEL = "ROOM NAME: "
CONNECTION_LABEL = "CONNECTION "
TYPE_LABEL = "ROOM TYPE: "

class RoomFileError(ValueError):
    pass

def format_room(room: Room) -> str:
    lines = [f"{NAME_LABEL}{room.name}"]
    for idx, conn in enumerate(room.connections, start=1):
        lines.append(f"{CONNECTION_LABEL}{idx}: {conn}")
    lines.append(f"{TYPE_LABEL}{room.room_type.value}")
    return "\n".join(lines) + "\n"

def write_room(path: Path, room: Room) -> None:
    with path.open("w", encoding="utf-8") as f:
        f.write(format_room(room))

def _parse_connection(line: str, expected: int, source: str) -> str:
    number, sep, payload = line[len(CONNECTION_LABEL):].partition(": ")
    if not sep or not number.isdigit():
        raise RoomFileError(f"{source}: malformed connection line {line!r}")
    if int(number) != expected:
        raise RoomFileError(f"{source}: expected CONNECTION {expected}, found {number}")
    return payload

def parse_room(text: str, source: str = "<room>") -> Room:
    name: Optional[str] = None
    room_type: Optional[RoomType] = None
    connections: List[str] = []
    for raw in text.splitlines():
        line = raw.rstrip("\r")
        if not line.strip():
            continue
        if line.startswith(NAME_LABEL):
            name = line[len(NAME_LABEL):]
        elif line.startswith(TYPE_LABEL):
            value = line[len(TYPE_LABEL):]
            try:
                room_type = RoomType(value)
            except ValueError:
                raise RoomFileError(f"{source}: unknown room type {value!r}") from None
        elif line.startswith(CONNECTION_LABEL):
            if len(connections) >= MAX_CONNECTIONS:
                raise RoomFileError(f"{source}: more than {MAX_CONNECTIONS} connections")
            connections.append(_parse_connection(line, len(connections) + 1, source))
        else:
            raise RoomFileError(f"{source}: unrecognised line {line!r}")
    if not name:
        raise RoomFileError(f"{source}: missing ROOM NAME line")
    if room_type is None:
        raise RoomFileError(f"{source}: missing ROOM TYPE line")
    try:
        return Room(name=name, room_type=room_type, connections=tuple(connections))
    except ValueError as e:
        raise RoomFileError(f"{source}: {e}") from e

def read_room(path: Path) -> Room:
    try:
        with path.open("r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise RoomFileError(f"Could not read room file '{path}': {e}") from e
    return parse_room(text, source=str(path))
