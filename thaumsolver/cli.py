"""Interactive command for finding common aspects and shortest routes."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from thaumsolver.findcommons import FindCommons
from thaumsolver.network import AspectSpellingError, Network
from thaumsolver.obsidian import Obsidian

_MENU = (
    "Forms:\n"
    "0: exits\n"
    "1 number_of_nodes node0 node1 ...: finds potential common nodes\n"
    "2 nodeA nodeB: lists fastest paths between them\n"
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int | None:
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thaumsolver",
        description="Find common aspects and shortest aspect routes.",
    )
    parser.add_argument("--notes", default="Thaumcraft", help="folder of aspect notes")
    parser.add_argument("--network", default="network.txt", help="network file")
    parser.add_argument("--history", default="history.txt", help="history file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the interactive solver; return the exit status."""
    args = _parser().parse_args(argv)
    tokens = _tokens(sys.stdin)
    out = sys.stdout

    out.write("0: Load from file\n1: Reload and save\n? ")
    out.flush()
    reload = _read_int(tokens) == 1

    try:
        if reload:
            obsidian = Obsidian(args.notes, is_file=False)
            obsidian.file_output(args.network)
        else:
            obsidian = Obsidian(args.network, is_file=True)
        finder = FindCommons(Network(obsidian.nodes))
        if reload:
            finder.calculate_distances()
            finder.output_history(args.history)
        else:
            finder.input_history(args.history)
    except (OSError, ValueError) as error:
        print(f"thaumsolver: {error}", file=sys.stderr)
        return 1

    out.write(_MENU)
    while True:
        out.write("\n? ")
        out.flush()
        option = _read_int(tokens)
        if option is None or option <= 0:
            break
        try:
            if option == 1:
                count = _read_int(tokens)
                if count is None:
                    break
                names = [next(tokens, "") for _ in range(count)]
                try:
                    for name in names:
                        finder.add_node(name)
                    finder.calculate_commons()
                    finder.display_commons(out)
                finally:
                    finder.clear_nodes()
            elif option == 2:
                node_a = next(tokens, "")
                node_b = next(tokens, "")
                for index, route in enumerate(finder.oracle(node_a, node_b)):
                    out.write(f"{index}:" + "".join(f"{name} " for name in route) + "\n")
        except AspectSpellingError:
            out.write("Spelling Error\n")
        except KeyError as error:
            out.write(f"Missing history: {error.args[0]}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())