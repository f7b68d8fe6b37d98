"""Weighted and unweighted graph problems on nodes numbered from 1 to n."""

from __future__ import annotations

import heapq
from collections import defaultdict, deque
from collections.abc import Hashable, Iterable

Edge = tuple[int, int, int]


class DisjointSet:
    """Union-find over a fixed set of nodes, with union by rank and path compression."""

    def __init__(self, nodes: Iterable[Hashable]) -> None:
        self._parent = {node: node for node in nodes}
        self._rank = dict.fromkeys(self._parent, 0)

    def find(self, node: Hashable) -> Hashable:
        """Return the representative of the set holding ``node``."""
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if they were already one."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_b] > self._rank[root_a]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        return True


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _adjacency(n: int, edges: Iterable[Edge], *, undirected: bool) -> dict[int, list[tuple[int, int]]]:
    graph: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for src, dest, cost in edges:
        _check_node(n, src)
        _check_node(n, dest)
        graph[src].append((dest, cost))
        if undirected:
            graph[dest].append((src, cost))
    return graph


def split_village_cost(n: int, roads: Iterable[Edge]) -> int:
    """Cheapest upkeep after splitting houses 1..n into two connected villages.

    Builds a minimum spanning forest with Kruskal's algorithm and drops its
    most expensive road.
    """
    houses = DisjointSet(range(1, n + 1))
    total = 0
    most_expensive = 0
    for src, dest, cost in sorted(roads, key=lambda road: road[2]):
        _check_node(n, src)
        _check_node(n, dest)
        if houses.union(src, dest):
            total += cost
            most_expensive = cost
    return total - most_expensive


def _dijkstra(n: int, edges: Iterable[Edge], start: int) -> tuple[dict[int, int], dict[int, int]]:
    graph = _adjacency(n, edges, undirected=False)
    _check_node(n, start)
    dist = {start: 0}
    previous: dict[int, int] = {}
    heap = [(0, start)]
    while heap:
        cost, node = heapq.heappop(heap)
        if cost > dist[node]:
            continue
        for nxt, weight in graph[node]:
            candidate = cost + weight
            if candidate >= dist.get(nxt, candidate + 1):
                continue
            dist[nxt] = candidate
            previous[nxt] = node
            heapq.heappush(heap, (candidate, nxt))
    return dist, previous


def shortest_cost(n: int, edges: Iterable[Edge], start: int, end: int) -> int | None:
    """Least total cost from ``start`` to ``end`` along directed edges, or None."""
    _check_node(n, end)
    dist, _ = _dijkstra(n, edges, start)
    return dist.get(end)


def shortest_path(n: int, edges: Iterable[Edge], start: int, end: int) -> tuple[int, list[int]] | None:
    """Least cost and one cheapest route from ``start`` to ``end``, or None."""
    _check_node(n, end)
    dist, previous = _dijkstra(n, edges, start)
    if end not in dist:
        return None
    route = [end]
    while route[-1] != start:
        route.append(previous[route[-1]])
    route.reverse()
    return dist[end], route


def count_components(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of connected components of an undirected graph on nodes 1..n."""
    graph: dict[int, list[int]] = defaultdict(list)
    for src, dest in edges:
        _check_node(n, src)
        _check_node(n, dest)
        graph[src].append(dest)
        graph[dest].append(src)

    visited: set[int] = set()
    components = 0
    for root in range(1, n + 1):
        if root in visited:
            continue
        components += 1
        visited.add(root)
        queue = deque([root])
        while queue:
            for nxt in graph[queue.popleft()]:
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(nxt)
    return components


def max_transport_weight(n: int, bridges: Iterable[Edge], start: int, end: int) -> int:
    """Heaviest load that can travel from ``start`` to ``end`` over weight-limited bridges.

    Returns 0 when ``end`` cannot be reached. When ``start`` equals ``end`` the
    answer is the largest bridge limit.
    """
    bridges = list(bridges)
    graph = _adjacency(n, bridges, undirected=True)
    _check_node(n, start)
    _check_node(n, end)
    if start == end:
        return max((limit for _, _, limit in bridges), default=0)

    capacity: dict[int, int] = {}
    heap = [(-limit, nxt) for nxt, limit in graph[start]]
    heapq.heapify(heap)
    while heap:
        negative, node = heapq.heappop(heap)
        load = -negative
        if node == start or capacity.get(node, 0) >= load:
            continue
        capacity[node] = load
        if node == end:
            return load
        for nxt, limit in graph[node]:
            carried = min(load, limit)
            if capacity.get(nxt, 0) < carried:
                heapq.heappush(heap, (-carried, nxt))
    return 0


def possible_destinations(
    n: int,
    roads: Iterable[Edge],
    start: int,
    g: int,
    h: int,
    candidates: Iterable[int],
) -> list[int]:
    """Candidates, sorted, that some shortest route from ``start`` reaches via road g-h."""
    graph = _adjacency(n, roads, undirected=True)
    _check_node(n, start)
    dist = {start: 0}
    crossed = {start: False}
    heap = [(0, 0, start)]
    while heap:
        cost, negated_flag, node = heapq.heappop(heap)
        flag = negated_flag < 0
        if cost > dist[node] or (cost == dist[node] and flag < crossed[node]):
            continue
        for nxt, weight in graph[node]:
            next_cost = cost + weight
            next_flag = flag or {node, nxt} == {g, h}
            best = dist.get(nxt)
            if best is not None and (next_cost > best or (next_cost == best and not next_flag > crossed[nxt])):
                continue
            dist[nxt] = next_cost
            crossed[nxt] = next_flag
            heapq.heappush(heap, (next_cost, -int(next_flag), nxt))

    return sorted(c for c in candidates if c in dist and crossed[c])