from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from roguerooms_cli.adventure import Adventure, run_adventure
from roguerooms_core.config import load_config, time_file_path
from roguerooms_core.roomfile import RoomFileError
from roguerooms_core.scanner import load_rooms, newest_rooms_dir
from roguerooms_core.timekeeper import TimeKeeper, TimeKeeperError


LOG = logging.getLogger("roguerooms.play")


def _write(text: str):
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Play through the newest set of RogueRooms room files")
    parser.add_argument("--dir", type=Path, default=Path(os.environ.get("ROGUEROOMS_DIR", ".")),
                        help="Directory holding the run directories (default: $ROGUEROOMS_DIR or .)")
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="[%(levelname)s] %(message)s")

    base_dir = args.dir.expanduser().resolve()
    cfg = load_config(base_dir)
    run_dir = newest_rooms_dir(base_dir, cfg["dir_prefix"])
    if run_dir is None:
        LOG.error("No '%s*' directory found in %s; run run_buildrooms.py first.", cfg["dir_prefix"], base_dir)
        return 1
    try:
        rooms = load_rooms(run_dir, cfg["room_suffix"])
    except RoomFileError as exc:
        LOG.error(str(exc))
        return 1

    with TimeKeeper(time_file_path(base_dir, cfg)) as timekeeper:
        try:
            run_adventure(Adventure(rooms, timekeeper), sys.stdin.readline, _write)
        except TimeKeeperError as exc:
            LOG.critical(str(exc))
            return 1
        except (EOFError, KeyboardInterrupt):
            _write("\n")
            LOG.info("Adventure abandoned.")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
