import pytest

from roguerooms_core.room import Room, RoomType
from roguerooms_core.roomfile import RoomFileError, format_room, parse_room, read_room, write_room


def test_format_room_matches_file_layout():
    room = Room("Garden", RoomType.START, ("Attic", "Kitchen", "Stairs"))

    assert format_room(room) == (
        "ROOM NAME: Garden\n"
        "CONNECTION 1: Attic\n"
        "CONNECTION 2: Kitchen\n"
        "CONNECTION 3: Stairs\n"
        "ROOM TYPE: START_ROOM\n"
    )


def test_written_room_reads_back_identically(tmp_path):
    room = Room("Medical", RoomType.END, ("Game", "Dungeon", "Attic", "Corridor", "Stairs", "Basement"))
    path = tmp_path / "Medical_room"

    write_room(path, room)

    parsed = read_room(path)
    assert parsed.name == "Medical"
    assert parsed.connections == ("Game", "Dungeon", "Attic", "Corridor", "Stairs", "Basement")
    assert parsed.room_type is RoomType.END


def test_parse_room_without_connections():
    room = parse_room("ROOM NAME: Attic\nROOM TYPE: MID_ROOM\n")

    assert room == Room("Attic", RoomType.MID, ())


@pytest.mark.parametrize("text", [
    "CONNECTION 1: Attic\nROOM TYPE: MID_ROOM\n",
    "ROOM NAME: Attic\nCONNECTION 1: Game\n",
    "ROOM NAME: Attic\nROOM TYPE: SIDE_ROOM\n",
    "ROOM NAME: Attic\nCONNECTION 2: Game\nROOM TYPE: MID_ROOM\n",
    "ROOM NAME: Attic\nDOOR: Game\nROOM TYPE: MID_ROOM\n",
    "ROOM NAME: Attic\nCONNECTION 1: Attic\nROOM TYPE: MID_ROOM\n",
    "ROOM NAME: Attic\n" + "".join(f"CONNECTION {i}: R{i}\n" for i in range(1, 8)) + "ROOM TYPE: MID_ROOM\n",
])
def test_parse_room_rejects_malformed_records(text):
    with pytest.raises(RoomFileError):
        parse_room(text)


def test_read_room_wraps_missing_file(tmp_path):
    with pytest.raises(RoomFileError, match="Could not read room file"):
        read_room(tmp_path / "Nowhere_room")


def test_room_rejects_more_than_six_connections():
    with pytest.raises(ValueError):
        Room("Attic", RoomType.MID, tuple(f"R{i}" for i in range(7)))
