"""Loading and saving aspect recipes from a note folder or a network file."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_PRIMAL = ("Primal", "Aspect")


@dataclass
class NodeInfo:
    """How many of an aspect are held, and how many could be made."""

    count: int = 0
    max_count: int = 0


def _parse_recipe_line(line: str) -> tuple[str, str]:
    if not line:
        return "", ""
    bracket = line.find("]")
    if bracket < 0 or bracket + 4 > len(line):
        raise ValueError(f"malformed recipe line: {line!r}")
    first = line[2:bracket]
    rest = line[bracket + 4:]
    second = rest[:-2] if len(rest) >= 2 else rest
    return first, second


class Obsidian:
    """Aspect recipes and counts read from a network file or a note folder.

    A network file holds the number of aspects, then one ``name parent
    parent`` line per aspect (``Primal Aspect`` for primal ones), then one
    ``name count max_count`` line per aspect.  A folder holds one ``.md``
    note per aspect whose first line links its two parents.
    """

    def __init__(self, path: str | Path, is_file: bool = True) -> None:
        self._nodes: dict[str, tuple[str, str]] = {}
        self._data: dict[str, NodeInfo] = {}
        if is_file:
            self._read_file(Path(path))
        else:
            self._read_folder(Path(path))

    def _read_file(self, path: Path) -> None:
        tokens = iter(path.read_text().split())
        try:
            total = int(next(tokens))
        except StopIteration:
            raise ValueError(f"{path}: empty network file") from None
        for _ in range(total):
            try:
                name, first, second = next(tokens), next(tokens), next(tokens)
            except StopIteration:
                raise ValueError(f"{path}: truncated recipe list") from None
            if first == _PRIMAL[0]:
                first = second = ""
            self._nodes[name] = (first, second)
        for _ in range(total):
            triple = [next(tokens, None) for _ in range(3)]
            if None in triple:
                break
            name, count, max_count = triple
            self._data[name] = NodeInfo(int(count), int(max_count))

    def _read_folder(self, path: Path) -> None:
        for entry in path.iterdir():
            pos = entry.name.find(".md")
            if pos < 0:
                continue
            name = entry.name[:pos]
            line = ""
            if entry.is_file():
                with entry.open() as reader:
                    line = reader.readline().rstrip("\n")
            first, second = _parse_recipe_line(line)
            self._nodes[name] = (first, second)
            logger.info("%s = %s + %s", name, first, second)

    def input_counts(self, ask: Callable[[str], int]) -> None:
        """Set the held count of every aspect to what ``ask(name)`` returns."""
        for name in sorted(self._nodes):
            self._data.setdefault(name, NodeInfo()).count = ask(name)

    def file_output(self, path: str | Path) -> None:
        """Write recipes and counts to ``path`` in network-file form."""
        lines = [str(len(self._nodes))]
        for name in sorted(self._nodes):
            first, second = self._nodes[name]
            if first == "":
                first, second = _PRIMAL
            lines.append(f"{name} {first} {second}")
        for name in sorted(self._data):
            info = self._data[name]
            lines.append(f"{name} {info.count} {info.max_count}")
        Path(path).write_text("\n".join(lines) + "\n")

    @property
    def nodes(self) -> dict[str, tuple[str, str]]:
        """Recipes: aspect name to its pair of parents."""
        return dict(self._nodes)

    @property
    def data(self) -> dict[str, NodeInfo]:
        """Counts recorded for each aspect."""
        return {name: NodeInfo(i.count, i.max_count) for name, i in self._data.items()}