"""Graph algorithms: shortest paths, topological order, Hamiltonian cycles and
adjacency representations."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence


class WeightedGraph:
    """Undirected graph with non-negative integer edge weights."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must be non-negative")
        self.vertices = vertices
        self._adjacent: list[list[tuple[int, int]]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} out of range 0..{self.vertices - 1}")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Connect ``u`` and ``v`` in both directions with ``weight``."""
        self._check(u)
        self._check(v)
        self._adjacent[u].append((v, weight))
        self._adjacent[v].append((u, weight))

    def shortest_paths(self, source: int) -> list[float]:
        """Distance from ``source`` to every vertex by Dijkstra's algorithm.

        Unreachable vertices get ``math.inf``.
        """
        self._check(source)
        dist: list[float] = [math.inf] * self.vertices
        dist[source] = 0
        queue = [(0, source)]
        while queue:
            d, u = heapq.heappop(queue)
            if d > dist[u]:
                continue
            for v, weight in self._adjacent[u]:
                if dist[v] > dist[u] + weight:
                    dist[v] = dist[u] + weight
                    heapq.heappush(queue, (dist[v], v))
        return dist


class DiGraph:
    """Directed graph on vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must be non-negative")
        self.vertices = vertices
        self._adjacent: list[list[int]] = [[] for _ in range(vertices)]

    def add_edge(self, u: int, v: int) -> None:
        """Add the edge ``u -> v``."""
        for vertex in (u, v):
            if not 0 <= vertex < self.vertices:
                raise IndexError(f"vertex {vertex} out of range 0..{self.vertices - 1}")
        self._adjacent[u].append(v)

    def topological_sort(self) -> list[int]:
        """Vertices in reverse depth-first finishing order.

        Searches start from vertices in increasing order and follow edges in
        the order they were added.
        """
        finished: list[int] = []
        visited = [False] * self.vertices
        for start in range(self.vertices):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(self._adjacent[start]))]
            while stack:
                node, successors = stack[-1]
                for nxt in successors:
                    if not visited[nxt]:
                        visited[nxt] = True
                        stack.append((nxt, iter(self._adjacent[nxt])))
                        break
                else:
                    stack.pop()
                    finished.append(node)
        return finished[::-1]


def hamiltonian_cycle(adjacency: Sequence[Sequence[int | bool]]) -> list[int] | None:
    """A Hamiltonian cycle starting and ending at vertex 0, or None.

    ``adjacency`` is a square 0/1 matrix. The returned list repeats vertex 0
    at the end. Candidates are tried in increasing vertex order.
    """
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return None
    path = [0]
    used = {0}

    def _extend() -> bool:
        if len(path) == size:
            return bool(adjacency[path[-1]][path[0]])
        for v in range(1, size):
            if adjacency[path[-1]][v] and v not in used:
                path.append(v)
                used.add(v)
                if _extend():
                    return True
                path.pop()
                used.remove(v)
        return False

    if not _extend():
        return None
    return [*path, path[0]]


def adjacency_list(vertices: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Undirected adjacency lists indexed ``0 .. vertices`` so 1-based labels fit."""
    result: list[list[int]] = [[] for _ in range(vertices + 1)]
    for u, v in edges:
        result[u].append(v)
        result[v].append(u)
    return result


def adjacency_matrix(vertices: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Undirected 0/1 adjacency matrix of size ``(vertices + 1)`` squared."""
    matrix = [[0] * (vertices + 1) for _ in range(vertices + 1)]
    for u, v in edges:
        matrix[u][v] = 1
        matrix[v][u] = 1
    return matrix


def weighted_adjacency_list(
    vertices: int, edges: Iterable[tuple[int, int, int]]
) -> list[list[tuple[int, int]]]:
    """Undirected lists of ``(neighbour, weight)`` indexed ``0 .. vertices``."""
    result: list[list[tuple[int, int]]] = [[] for _ in range(vertices + 1)]
    for u, v, weight in edges:
        result[u].append((v, weight))
        result[v].append((u, weight))
    return result