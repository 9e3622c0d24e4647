"""Graph of aspects linked to the two aspects they are combined from."""

from __future__ import annotations

from collections.abc import Mapping


class AspectSpellingError(LookupError):
    """Raised when an aspect name is not part of the network."""

    def __init__(self, name: str = "") -> None:
        super().__init__(f"Spelling mistake in aspect: {name!r}")
        self.name = name


class Network:
    """Undirected graph of aspects, each identified by a small integer id.

    ``nodes`` maps an aspect name to the pair of aspect names it is made
    from; primal aspects map to a pair of empty strings.  Ids are handed out
    in sorted order of the recipe names, with each recipe's parents numbered
    right after it when they have not been seen yet.  The empty name has
    id ``-1``.
    """

    def __init__(self, nodes: Mapping[str, tuple[str, str]]) -> None:
        self._ids: dict[str, int] = {"": -1}
        self._names: dict[int, str] = {-1: ""}
        self._links: list[list[int]] = []
        for name in sorted(nodes):
            first, second = nodes[name]
            node = self._add(name)
            left = self._add(first)
            right = self._add(second)
            if left > -1:
                for parent in (left, right):
                    if parent > -1:
                        self._links[node].append(parent)
                        self._links[parent].append(node)

    def _add(self, name: str) -> int:
        if name not in self._ids:
            new_id = len(self._links)
            self._ids[name] = new_id
            self._names[new_id] = name
            self._links.append([])
        return self._ids[name]

    def __getitem__(self, index: int) -> list[int]:
        """Return the ids linked to the aspect with id ``index``."""
        if index < 0:
            raise IndexError(index)
        return list(self._links[index])

    def __len__(self) -> int:
        return len(self._links)

    def to_int(self, name: str) -> int:
        """Return the id of ``name``, raising AspectSpellingError if unknown."""
        try:
            return self._ids[name]
        except KeyError:
            raise AspectSpellingError(name) from None

    def to_string(self, index: int) -> str:
        """Return the aspect name for id ``index``."""
        return self._names[index]