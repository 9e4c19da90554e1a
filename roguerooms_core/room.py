from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

MAX_CONNECTIONS = 6

class RoomType(str, Enum):
    START = "START_ROOM"
    MID = "MID_ROOM"
    END = "END_ROOM"

@dataclass(frozen=True)
class Room:
    name: str
    room_type: RoomType = RoomType.MID
    connections: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence but store a tuple so the record stays immutable.
        object.__setattr__(self, "connections", tuple(self.connections))
        object.__setattr__(self, "room_type", RoomType(self.room_type))
        if not self.name:
            raise ValueError("Room name must not be empty")
        if len(self.connections) > MAX_CONNECTIONS:
            raise ValueError(f"{self.name}: {len(self.connections)} connections exceeds {MAX_CONNECTIONS}")
        if self.name in self.connections:
            raise ValueError(f"{self.name}: room cannot connect to itself")
        if len(set(self.connections)) != len(self.connections):
            raise ValueError(f"{self.name}: duplicate connection")

    @property
    def is_start(self) -> bool:
        return self.room_type is RoomType.START

    @property
    def is_end(self) -> bool:
        return self.room_type is RoomType.END
