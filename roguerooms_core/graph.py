from __future__ import annotations
import logging
import random
from collections import deque
from typing import Dict, Iterable, List, Mapping, Tuple

LOG = logging.getLogger("roguerooms.graph")

DEFAULT_SIZE = 7
MIN_DEGREE = 3
MAX_DEGREE = 6
MAX_ATTEMPTS = 1000

class GraphError(RuntimeError):
    pass

class ConnectionGraph:
    """Symmetric adjacency; neighbours stay in the order edges were added."""

    def __init__(self, size: int = DEFAULT_SIZE, *, min_degree: int = MIN_DEGREE, max_degree: int = MAX_DEGREE):
        if size < 2:
            raise ValueError("A connection graph needs at least two slots")
        if not 0 <= min_degree <= max_degree <= size - 1:
            raise ValueError(f"Degree bounds [{min_degree}, {max_degree}] impossible for {size} slots")
        self.size = size
        self.min_degree = min_degree
        self.max_degree = max_degree
        self._adj: List[List[int]] = [[] for _ in range(size)]

    def degree(self, node: int) -> int:
        return len(self._adj[node])

    def neighbours(self, node: int) -> Tuple[int, ...]:
        return tuple(self._adj[node])

    def can_add_connection_from(self, node: int) -> bool:
        return self.degree(node) < self.max_degree

    def connection_exists(self, a: int, b: int) -> bool:
        return b in self._adj[a]

    def connect(self, a: int, b: int) -> None:
        if a == b:
            raise GraphError(f"Self connection on slot {a}")
        if self.connection_exists(a, b):
            raise GraphError(f"Slots {a} and {b} are already connected")
        if not (self.can_add_connection_from(a) and self.can_add_connection_from(b)):
            raise GraphError(f"Slots {a}/{b} already have {self.max_degree} connections")
        self._adj[a].append(b)
        self._adj[b].append(a)

    def is_full(self) -> bool:
        return all(self.degree(n) >= self.min_degree for n in range(self.size))

    def edges(self) -> List[Tuple[int, int]]:
        return [(a, b) for a in range(self.size) for b in self._adj[a] if a < b]

    def add_random_connection(self, rng: random.Random) -> Tuple[int, int]:
        open_slots = [n for n in range(self.size) if self.can_add_connection_from(n)]
        # With max_degree == size - 1 every open slot still has a partner.
        # Larger graphs can stall with no pair left; generate_graph restarts them.
        candidates = [a for a in open_slots if self._partners(a, open_slots)]
        if not candidates:
            raise GraphError("No two slots can be connected any more")
        a = rng.choice(candidates)
        # Drawing only from valid partners is the same as redrawing until one fits.
        b = rng.choice(self._partners(a, open_slots))
        self.connect(a, b)
        return a, b

    def _partners(self, a: int, open_slots: List[int]) -> List[int]:
        return [b for b in open_slots if b != a and not self.connection_exists(a, b)]

def generate_graph(rng: random.Random | None = None, size: int = DEFAULT_SIZE, *,
                   min_degree: int = MIN_DEGREE, max_degree: int = MAX_DEGREE) -> ConnectionGraph:
    rng = rng or random.Random()
    for attempt in range(1, MAX_ATTEMPTS + 1):
        graph = ConnectionGraph(size, min_degree=min_degree, max_degree=min(max_degree, size - 1))
        try:
            while not graph.is_full():
                graph.add_random_connection(rng)
            return graph
        except GraphError as e:
            LOG.debug("Graph attempt %d stalled (%s); starting over", attempt, e)
    raise GraphError(f"Could not build a {size}-slot graph in {MAX_ATTEMPTS} attempts")

def is_reachable(adjacency: Mapping[str, Iterable[str]], start: str, goal: str) -> bool:
    if start not in adjacency:
        return False
    seen = {start}; queue = deque([start])
    while queue:
        cur = queue.popleft()
        if cur == goal:
            return True
        for nxt in adjacency.get(cur, ()):
            if nxt not in seen:
                seen.add(nxt); queue.append(nxt)
    return False

def adjacency_by_name(rooms: Iterable) -> Dict[str, Tuple[str, ...]]:
    return {room.name: tuple(room.connections) for room in rooms}
