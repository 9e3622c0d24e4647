"""Finding aspects shared by the shortest links between chosen aspects."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from thaumsolver.aspectpath import AspectPath
from thaumsolver.network import Network


class FindCommons:
    """Collects the aspects lying on shortest routes between chosen aspects.

    ``calculate_distances`` (or ``input_history``) fills a history mapping
    every ordered pair of aspect ids to the ids found on some shortest route
    between them.  Aspects added with ``add_node`` are then compared pairwise
    by ``calculate_commons``.
    """

    def __init__(self, network: Network) -> None:
        self._network = network
        self._search = AspectPath(network)
        self._nodes: list[int] = []
        self._commons: list[int] = []
        self._history: dict[tuple[int, int], set[int]] = {}

    def calculate_commons(self) -> None:
        """Find the aspects shared by the routes between every chosen pair.

        With exactly two chosen aspects every aspect on their routes counts.
        Raises KeyError if the history lacks a pair.
        """
        self._commons = []
        uniques: set[int] = set()
        two = len(self._nodes) == 2
        for i, first in enumerate(self._nodes):
            for second in self._nodes[i + 1:]:
                try:
                    on_route = self._history[(first, second)]
                except KeyError:
                    raise KeyError(
                        "no history for "
                        f"{self._network.to_string(first)} and "
                        f"{self._network.to_string(second)}"
                    ) from None
                for node in sorted(on_route):
                    if two or node in uniques:
                        self._commons.append(node)
                    else:
                        uniques.add(node)

    def calculate_distances(self) -> None:
        """Record the aspects on shortest routes between every pair of aspects."""
        size = len(self._network)
        for end in range(size):
            for start in range(size):
                if start == end:
                    continue
                previous = self._search.get_path(start, end)
                self._history[(end, start)] = self._search.in_path(previous, start, end)

    def display_commons(self, out: TextIO | None = None) -> None:
        """Write the names of the common aspects, each followed by a space."""
        stream = sys.stdout if out is None else out
        stream.write("".join(f"{self._network.to_string(n)} " for n in self._commons))
        stream.write("\n")

    def oracle(self, node_a: str, node_b: str) -> list[list[str]]:
        """Return the shortest routes from ``node_a`` to ``node_b`` as names."""
        a = self._network.to_int(node_a)
        b = self._network.to_int(node_b)
        previous = self._search.get_path(b, a)
        routes = self._search.traverse_path(previous, b, a)
        return [[self._network.to_string(n) for n in route] for route in routes]

    def add_node(self, name: str) -> None:
        """Choose the aspect ``name`` for the next commons calculation."""
        self._nodes.append(self._network.to_int(name))

    def clear_nodes(self) -> None:
        self._nodes.clear()

    def clear_history(self) -> None:
        self._history.clear()

    def input_history(self, path: str | Path) -> None:
        """Load a history written by ``output_history``."""
        tokens = iter(Path(path).read_text().split())

        def take() -> str:
            try:
                return next(tokens)
            except StopIteration:
                raise ValueError(f"{path}: truncated history file") from None

        def take_int() -> int:
            token = take()
            try:
                return int(token)
            except ValueError:
                raise ValueError(f"{path}: expected a number, got {token!r}") from None

        for _ in range(take_int()):
            first = self._network.to_int(take())
            second = self._network.to_int(take())
            count = take_int()
            self._history[(first, second)] = {
                self._network.to_int(take()) for _ in range(count)
            }

    def output_history(self, path: str | Path) -> None:
        """Write the history: its size, then per pair a header and its aspects."""
        lines = [str(len(self._history))]
        for (first, second) in sorted(self._history):
            on_route = sorted(self._history[(first, second)])
            lines.append(
                f"{self._network.to_string(first)} "
                f"{self._network.to_string(second)} {len(on_route)}"
            )
            if on_route:
                lines.append(" ".join(self._network.to_string(n) for n in on_route))
        Path(path).write_text("\n".join(lines) + "\n")