from __future__ import annotations
from typing import List, Sequence
from roguerooms_core.room import Room

PROMPT = "WHERE TO? >"
APOLOGY = "HUH? I DON'T UNDERSTAND THAT ROOM. TRY AGAIN."

def render_location(room: Room) -> str:
    conns = ", ".join(room.connections)
    return f"CURRENT LOCATION: {room.name}\nPOSSIBLE CONNECTIONS: {conns}."

def render_victory(path: Sequence[str]) -> str:
    out: List[str] = []
    out.append("YOU HAVE FOUND THE END ROOM. CONGRATULATIONS!")
    out.append(f"YOU TOOK {len(path)} STEPS. YOUR PATH TO VICTORY WAS:")
    out.extend(path)
    return "\n".join(out)
