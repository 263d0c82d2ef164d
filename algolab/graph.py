"""Graph searches on small integer-labelled graphs."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Optional, Sequence

Adjacency = Sequence[Sequence[int]]
Weights = Sequence[Sequence[Optional[int]]]


@dataclass
class BfsResult:
    """Visit order, the vertex each one was discovered from, and hop counts.

    ``parent`` and ``distance`` are ``None`` for vertices never reached; the
    start vertex is its own parent.
    """

    order: list[int]
    parent: list[Optional[int]]
    distance: list[Optional[int]]


@dataclass
class DijkstraResult:
    """Cheapest cost to every vertex and the vertex it was reached from."""

    cost: list[Optional[int]]
    parent: list[Optional[int]]


def sample_adjacency() -> list[list[int]]:
    """The six-vertex directed graph used by the searches, as neighbour lists."""
    return [[1, 3], [0, 2, 3], [], [4], [], [4]]


def sample_weights() -> list[list[Optional[int]]]:
    """The same graph with edge costs; ``None`` marks a missing edge."""
    weights: list[list[Optional[int]]] = [[None] * 6 for _ in range(6)]
    weights[0][1] = 15
    weights[0][3] = 35
    weights[1][0] = 15
    weights[1][2] = 5
    weights[1][3] = 10
    weights[3][4] = 5
    weights[5][4] = 5
    return weights


def adjacency_matrix(adjacency: Adjacency) -> list[list[bool]]:
    """Turn neighbour lists into a square matrix of booleans."""
    size = len(adjacency)
    matrix = [[False] * size for _ in range(size)]
    for here, neighbours in enumerate(adjacency):
        for there in neighbours:
            if not 0 <= there < size:
                raise IndexError(f"vertex {there} out of range")
            matrix[here][there] = True
    return matrix


def is_connected(adjacency: Adjacency, here: int, there: int) -> bool:
    """True when there is an edge from ``here`` to ``there``."""
    _check_vertex(adjacency, here)
    return there in adjacency[here]


def _check_vertex(graph: Sequence, vertex: int) -> None:
    if not 0 <= vertex < len(graph):
        raise IndexError(f"vertex {vertex} out of range")


def dfs(adjacency: Adjacency, start: int) -> list[int]:
    """Depth-first visit order from ``start``, following neighbours in list order."""
    _check_vertex(adjacency, start)
    visited = [False] * len(adjacency)
    order = [start]
    visited[start] = True
    stack = [iter(adjacency[start])]
    while stack:
        for there in stack[-1]:
            if not visited[there]:
                visited[there] = True
                order.append(there)
                stack.append(iter(adjacency[there]))
                break
        else:
            stack.pop()
    return order


def bfs(adjacency: Adjacency, start: int) -> BfsResult:
    """Breadth-first search from ``start``."""
    _check_vertex(adjacency, start)
    size = len(adjacency)
    parent: list[Optional[int]] = [None] * size
    distance: list[Optional[int]] = [None] * size
    parent[start] = start
    distance[start] = 0
    order: list[int] = []
    queue = [start]
    for here in queue:
        order.append(here)
        for there in adjacency[here]:
            if distance[there] is not None:
                continue
            queue.append(there)
            parent[there] = here
            distance[there] = distance[here] + 1
    return BfsResult(order, parent, distance)


def dijkstra(weights: Weights, start: int) -> DijkstraResult:
    """Cheapest paths from ``start`` over a weight matrix with non-negative costs."""
    _check_vertex(weights, start)
    size = len(weights)
    cost: list[Optional[int]] = [None] * size
    parent: list[Optional[int]] = [None] * size
    cost[start] = 0
    parent[start] = start
    ticket = count()
    discovered = [(0, next(ticket), start)]
    while discovered:
        here_cost, _, here = heapq.heappop(discovered)
        if cost[here] < here_cost:
            continue
        for there, weight in enumerate(weights[here]):
            if weight is None:
                continue
            if weight < 0:
                raise ValueError("edge costs must not be negative")
            next_cost = here_cost + weight
            if cost[there] is not None and next_cost >= cost[there]:
                continue
            cost[there] = next_cost
            parent[there] = here
            heapq.heappush(discovered, (next_cost, next(ticket), there))
    return DijkstraResult(cost, parent)