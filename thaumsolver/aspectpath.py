"""Shortest links between aspects in a network."""

from __future__ import annotations

import math

from thaumsolver.network import Network


class AspectPath:
    """Shortest-path search over a Network where every link costs one step."""

    def __init__(self, network: Network) -> None:
        self._network = network

    def _resolve(self, node: int | str) -> int:
        index = self._network.to_int(node) if isinstance(node, str) else node
        if not 0 <= index < len(self._network):
            raise IndexError(f"no aspect with id {index}")
        return index

    def get_path(self, start: int | str, end: int | str) -> list[list[int]]:
        """Return, for every id, the ids it is reached from on a shortest route.

        The search spreads from ``start``; ``end`` is never expanded.
        """
        sid = self._resolve(start)
        eid = self._resolve(end)
        size = len(self._network)
        times = [math.inf] * size
        times[sid] = 0
        previous: list[list[int]] = [[] for _ in range(size)]
        unvisited = [node for node in range(size) if node != eid]
        while unvisited:
            nearest = min(unvisited, key=times.__getitem__)
            if times[nearest] == math.inf:
                break
            unvisited.remove(nearest)
            reach = times[nearest] + 1
            for neighbour in self._network[nearest]:
                if reach <= times[neighbour]:
                    times[neighbour] = reach
                    previous[neighbour].append(nearest)
        return previous

    def in_path(self, previous: list[list[int]], start: int, end: int) -> set[int]:
        """Return every id on some shortest route from ``end`` back to ``start``."""
        found: set[int] = set()
        pending = [end]
        while pending:
            node = pending.pop()
            if node in found:
                continue
            found.add(node)
            if node != start:
                pending.extend(previous[node])
        return found

    def traverse_path(self, previous: list[list[int]], start: int, end: int) -> list[list[int]]:
        """List the routes walked from ``end`` back towards ``start``."""
        paths: list[list[int]] = [[]]
        self._walk(previous, start, end, paths, 0)
        return paths

    def _walk(self, previous, start, node, paths, index) -> None:
        current = paths[index]
        current.append(node)
        prefix_len = len(current)
        if node == start:
            return
        for branch, parent in enumerate(previous[node]):
            if branch:
                paths.append(paths[-1] + current[:prefix_len])
            self._walk(previous, start, parent, paths, len(paths) - 1)