from __future__ import annotations
import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Callable, List

LOG = logging.getLogger("roguerooms.time")

class TimeKeeperError(RuntimeError):
    pass

def format_timestamp(moment: datetime) -> str:
    """Render e.g. ``1:03pm, Tuesday, September 13, 2016``."""
    hour = moment.strftime("%I").lstrip("0")
    return f"{hour}:{moment:%M}{moment.strftime('%p').lower()}, {moment:%A, %B %d, %Y}"

class TimeKeeper:
    # The caller holds the lock while idle and hands it to one worker per request.
    def __init__(self, path: Path, clock: Callable[[], datetime] = datetime.now):
        self.path = path
        self._clock = clock
        self._lock = threading.Lock()
        self._lock.acquire()
        self._held = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        if self._held:
            self._lock.release()
            self._held = False

    def _produce(self, failures: List[BaseException]):
        with self._lock:
            try:
                line = format_timestamp(self._clock())
                with self.path.open("w", encoding="utf-8") as f:
                    f.write(line + "\n")
            except Exception as e:
                failures.append(e)

    def request_time(self) -> str:
        if not self._held:
            raise TimeKeeperError("TimeKeeper is closed")
        failures: List[BaseException] = []
        worker = threading.Thread(target=self._produce, args=(failures,), name="roguerooms-time")
        self._lock.release(); self._held = False
        try:
            worker.start()
        except RuntimeError as e:
            self._lock.acquire(); self._held = True
            raise TimeKeeperError(f"Thread was unable to be created: {e}") from e
        worker.join()
        self._lock.acquire(); self._held = True
        if failures:
            raise TimeKeeperError(f"Time worker failed: {failures[0]}") from failures[0]
        return self._read_back()

    def _read_back(self) -> str:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                line = f.readline()
        except OSError as e:
            raise TimeKeeperError(f"Could not read time file '{self.path}': {e}") from e
        if not line:
            raise TimeKeeperError(f"Time file '{self.path}' is empty")
        LOG.debug("Read time %r from %s", line, self.path)
        return line.rstrip("\n")
