# thaumsolver

A small solver for Thaumcraft aspect research. Aspects form a network: every
compound aspect is made of two parent aspects, and primal aspects have none.
thaumsolver finds the shortest chains between aspects and the aspects that
lie on the shortest chains between several aspects at once.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Command line

```
thaumsolver [--notes FOLDER] [--network FILE] [--history FILE]
```

| Option      | Default       | Meaning                      |
|-------------|---------------|------------------------------|
| `--notes`   | `Thaumcraft`  | folder of aspect notes       |
| `--network` | `network.txt` | saved network file           |
| `--history` | `history.txt` | saved shortest-chain history |

The command reads everything it needs from standard input. It first asks:

- `1` rebuilds the network from the notes folder, writes it to the network
  file, calculates the shortest chains between every pair of aspects and
  writes them to the history file;
- anything else loads the network file and the history file.

If a file cannot be read or is malformed, an error goes to standard error and
the command exits with status 1.

It then reads queries until it gets `0` (or any non-positive number, or the
input ends):

- `1 n aspect1 aspect2 ...` prints the aspects shared by the shortest chains
  between the `n` given aspects. With exactly two aspects, every aspect on
  their shortest chains is printed.
- `2 aspectA aspectB` prints every shortest chain from `aspectA` to
  `aspectB`, numbered from `0`.

A misspelled aspect name prints `Spelling Error` and the prompt continues. A
pair missing from a loaded history prints `Missing history: ...`.

## File formats

**Notes folder.** Every entry whose name contains `.md` is an aspect named by
the text before `.md`. The first line of the note links its two parents as
`[[Parent1]][[Parent2]]`; an empty first line marks a primal aspect. Each
recipe read is logged at INFO level through the `thaumsolver.obsidian`
logger.

**Network file.** Whitespace-separated: the number of aspects, then one
`name parent1 parent2` line per aspect (`Primal Aspect` for primal ones),
then one `name count max_count` line per aspect with recorded counts.

**History file.** The number of entries, then for each ordered pair of
aspects a line `aspectA aspectB k` followed by a line of the `k` aspects on
its shortest chains.

## Library use

```python
from thaumsolver.network import Network
from thaumsolver.aspectpath import AspectPath
from thaumsolver.findcommons import FindCommons

recipes = {
    "Aer": ("", ""),
    "Aqua": ("", ""),
    "Ignis": ("", ""),
    "Terra": ("", ""),
    "Lux": ("Aer", "Ignis"),
    "Victus": ("Aqua", "Terra"),
}
network = Network(recipes)

search = AspectPath(network)
start, end = network.to_int("Lux"), network.to_int("Victus")
previous = search.get_path(start, end)
print(search.in_path(previous, start, end))
for chain in search.traverse_path(previous, start, end):
    print([network.to_string(i) for i in chain])

commons = FindCommons(network)
commons.calculate_distances()
commons.add_node("Lux")
commons.add_node("Victus")
commons.calculate_commons()
commons.display_commons()          # writes to sys.stdout by default
print(commons.oracle("Lux", "Victus"))
```

- `Network` maps aspect names to integer ids (`to_int`, `to_string`), gives
  the linked ids of an aspect with `network[i]` and its size with `len()`.
  Unknown names raise `thaumsolver.network.AspectSpellingError`.
- `AspectPath.get_path` accepts ids or names; `in_path` returns the set of
  ids on shortest chains and `traverse_path` lists the chains as id lists.
- `FindCommons.oracle` returns the shortest chains as lists of names.
  `output_history` and `input_history` save and restore the calculated
  chains; `clear_nodes` and `clear_history` reset the chosen aspects and the
  history.
- `thaumsolver.obsidian.Obsidian(path, is_file)` reads a network file
  (`is_file=True`) or a notes folder (`is_file=False`). Its `nodes` and
  `data` properties return the recipes and the `NodeInfo` counts,
  `input_counts(ask)` sets each aspect's count from `ask(name)`, and
  `file_output(path)` writes the network file.

## What it does not do

Maximum craftable counts are read from and written to the network file but
never calculated; counts entered with `input_counts` are not used by any
search.

## Running the tests

```
pip install .[test]
pytest
```