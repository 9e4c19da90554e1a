from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional
from roguerooms_core.room import Room
from roguerooms_core.timekeeper import TimeKeeper
from .renderer import PROMPT, APOLOGY, render_location, render_victory

LOG = logging.getLogger("roguerooms.adventure")

TIME_COMMAND = "time"

class OutcomeKind(str, Enum):
    MOVE = "move"
    TIME = "time"
    INVALID = "invalid"
    WIN = "win"

@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    message: str = ""

class Adventure:
    def __init__(self, rooms: Dict[str, Room], timekeeper: Optional[TimeKeeper] = None):
        start = [r for r in rooms.values() if r.is_start]
        if len(start) != 1:
            raise ValueError(f"Expected exactly one START room, found {len(start)}")
        self.rooms = rooms
        self.timekeeper = timekeeper
        self.current: Room = start[0]
        self.path: List[str] = []

    @property
    def steps(self) -> int:
        return len(self.path)

    @property
    def won(self) -> bool:
        return self.current.is_end

    def handle(self, command: str) -> Outcome:
        if command.endswith("\n"):
            command = command[:-1]
        if command == TIME_COMMAND:
            if self.timekeeper is None:
                return Outcome(OutcomeKind.INVALID, APOLOGY)
            return Outcome(OutcomeKind.TIME, self.timekeeper.request_time())
        if command not in self.current.connections:
            LOG.debug("Unknown room %r from %s", command, self.current.name)
            return Outcome(OutcomeKind.INVALID, APOLOGY)
        self.current = self.rooms[command]
        self.path.append(command)
        if self.won:
            return Outcome(OutcomeKind.WIN, render_victory(self.path))
        return Outcome(OutcomeKind.MOVE)

def run_adventure(adventure: Adventure, read_line: Callable[[], str], write: Callable[[str], None]) -> List[str]:
    # read_line behaves like sys.stdin.readline ("" at end of input).
    last: Optional[Outcome] = None
    while not adventure.won:
        if last is None or last.kind is not OutcomeKind.TIME:
            write(render_location(adventure.current) + "\n")
        write(PROMPT)
        line = read_line()
        if not line:
            raise EOFError("Input ended before the END room was found")
        write("\n")
        last = adventure.handle(line)
        if last.kind is OutcomeKind.WIN:
            write(last.message + "\n")
        elif last.kind in (OutcomeKind.TIME, OutcomeKind.INVALID):
            write(last.message + "\n\n")
    return list(adventure.path)
