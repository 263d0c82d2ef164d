"""Grid mazes: tiles, positions, three path finders and a path walker."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from enum import Enum, IntEnum
from itertools import count
from typing import Optional, Sequence

MOVE_TICK = 100
"""Ticks a :class:`Walker` waits before taking its next step."""


class TileType(Enum):
    NONE = 0
    EMPTY = 1
    WALL = 2


class Dir(IntEnum):
    """Facing directions, numbered so that ``+1`` turns left and ``-1`` turns right."""

    UP = 0
    LEFT = 1
    DOWN = 2
    RIGHT = 3


@dataclass(frozen=True, order=True)
class Pos:
    """A grid cell; ordered by row, then column."""

    y: int = 0
    x: int = 0

    def __add__(self, other: "Pos") -> "Pos":
        if not isinstance(other, Pos):
            return NotImplemented
        return Pos(self.y + other.y, self.x + other.x)


Grid = Sequence[Sequence[TileType]]

_DIR_COUNT = len(Dir)
_FRONT = {
    Dir.UP: Pos(-1, 0),
    Dir.LEFT: Pos(0, -1),
    Dir.DOWN: Pos(1, 0),
    Dir.RIGHT: Pos(0, 1),
}
_STEP_COST = 10


def can_go(grid: Grid, pos: Pos) -> bool:
    """True when ``pos`` lies inside ``grid`` on an empty tile."""
    if not 0 <= pos.y < len(grid):
        return False
    row = grid[pos.y]
    return 0 <= pos.x < len(row) and row[pos.x] is TileType.EMPTY


def right_hand_path(grid: Grid, start: Pos, dest: Pos) -> list[Pos]:
    """Follow the right-hand wall from ``start`` to ``dest``.

    Dead ends walked into and back out of are removed from the result.
    Raises ValueError when the walk loops without reaching ``dest``.
    """
    pos = start
    facing = Dir.UP
    walked = [pos]
    seen = {(pos, facing)}
    while pos != dest:
        right = Dir((facing - 1) % _DIR_COUNT)
        if can_go(grid, pos + _FRONT[right]):
            facing = right
            pos = pos + _FRONT[facing]
            walked.append(pos)
        elif can_go(grid, pos + _FRONT[facing]):
            pos = pos + _FRONT[facing]
            walked.append(pos)
        else:
            facing = Dir((facing + 1) % _DIR_COUNT)
        state = (pos, facing)
        if state in seen:
            raise ValueError(f"no path from {start} to {dest}")
        seen.add(state)

    trimmed: list[Pos] = []
    for here, nxt in zip(walked, walked[1:]):
        if trimmed and trimmed[-1] == nxt:
            trimmed.pop()
        else:
            trimmed.append(here)
    trimmed.append(walked[-1])
    return trimmed


def _trace_back(parent: dict[Pos, Pos], start: Pos, dest: Pos) -> list[Pos]:
    if dest not in parent:
        raise ValueError(f"no path from {start} to {dest}")
    path = [dest]
    pos = dest
    while parent[pos] != pos:
        pos = parent[pos]
        path.append(pos)
    path.reverse()
    return path


def bfs_path(grid: Grid, start: Pos, dest: Pos) -> list[Pos]:
    """Shortest path by breadth-first search; raises ValueError if none exists."""
    parent: dict[Pos, Pos] = {start: start}
    queue = [start]
    for pos in queue:
        if pos == dest:
            break
        for step in _FRONT.values():
            nxt = pos + step
            if not can_go(grid, nxt) or nxt in parent:
                continue
            parent[nxt] = pos
            queue.append(nxt)
    return _trace_back(parent, start, dest)


def astar_path(grid: Grid, start: Pos, dest: Pos) -> list[Pos]:
    """Shortest path by A* with a Manhattan heuristic; raises ValueError if none exists."""

    def heuristic(pos: Pos) -> int:
        return _STEP_COST * (abs(dest.y - pos.y) + abs(dest.x - pos.x))

    closed: set[Pos] = set()
    best: dict[Pos, int] = {}
    parent: dict[Pos, Pos] = {start: start}
    ticket = count()

    start_f = heuristic(start)
    best[start] = start_f
    open_list: list[tuple[int, int, int, Pos]] = [(start_f, next(ticket), 0, start)]

    while open_list:
        f, _, g, pos = heapq.heappop(open_list)
        if pos in closed or best.get(pos, f) < f:
            continue
        closed.add(pos)
        if pos == dest:
            break
        for step in _FRONT.values():
            nxt = pos + step
            if not can_go(grid, nxt) or nxt in closed:
                continue
            next_g = g + _STEP_COST
            next_f = next_g + heuristic(nxt)
            known: Optional[int] = best.get(nxt)
            if known is not None and known <= next_f:
                continue
            best[nxt] = next_f
            parent[nxt] = pos
            heapq.heappush(open_list, (next_f, next(ticket), next_g, nxt))

    if dest not in closed:
        raise ValueError(f"no path from {start} to {dest}")
    return _trace_back(parent, start, dest)


class Walker:
    """Steps along a path, one cell each time enough ticks have passed."""

    def __init__(self, path: Sequence[Pos]) -> None:
        if not path:
            raise ValueError("path must not be empty")
        self.path = list(path)
        self.pos = self.path[0]
        self._index = 0
        self._sum_tick = 0

    def update(self, delta_tick: int) -> None:
        """Advance the clock by ``delta_tick`` and move if a step is due."""
        if self.finished():
            return
        self._sum_tick += delta_tick
        if self._sum_tick >= MOVE_TICK:
            self._sum_tick = 0
            self.pos = self.path[self._index]
            self._index += 1

    def finished(self) -> bool:
        """True once every cell of the path has been visited."""
        return self._index >= len(self.path)