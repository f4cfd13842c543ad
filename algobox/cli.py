"""Command line front end reading a task's input from standard input."""

import argparse
import sys
from collections.abc import Callable, Sequence

from algobox.levenshtein import levenshtein
from algobox.network import max_spanning_tree_weight
from algobox.packed import longest_common_prefix
from algobox.partition import can_split_equally
from algobox.roads import is_optimal
from algobox.traversal import topological_order
from algobox.trie import can_compose_from

NO_NETWORK = "Oops! I did it again"


class _InvalidInput(Exception):
    """The input does not have the shape the command expects."""


def _ints(text: str) -> list[int]:
    try:
        return [int(token) for token in text.split()]
    except ValueError:
        raise _InvalidInput from None


def _take(values: list[int], count: int, start: int) -> list[int]:
    if count < 0 or len(values) < start + count:
        raise _InvalidInput
    return values[start:start + count]


def _line(lines: list[str], index: int) -> str:
    return lines[index] if index < len(lines) else ""


def _count(lines: list[str], index: int) -> int:
    try:
        return int(_line(lines, index).strip())
    except ValueError:
        raise _InvalidInput from None


def _topo(text: str) -> str:
    values = _ints(text)
    vertices, count = _take(values, 2, 0)
    flat = _take(values, 2 * count, 2)
    edges = list(zip(flat[::2], flat[1::2]))
    try:
        order = topological_order(vertices, edges)
    except ValueError:
        raise _InvalidInput from None
    return " ".join(map(str, order))


def _network(text: str) -> str:
    values = _ints(text)
    vertices, count = _take(values, 2, 0)
    flat = _take(values, 3 * count, 2)
    edges = list(zip(flat[::3], flat[1::3], flat[2::3]))
    if vertices == 1:
        return "0"
    if vertices == 0 or count == 0:
        return NO_NETWORK
    try:
        weight = max_spanning_tree_weight(vertices, edges)
    except ValueError:
        return NO_NETWORK
    return str(weight) if weight != 0 else NO_NETWORK


def _roads(text: str) -> str:
    lines = text.splitlines()
    count = _count(lines, 0)
    rows = [_line(lines, index).strip() for index in range(1, count)]
    try:
        optimal = is_optimal(count, rows)
    except ValueError:
        raise _InvalidInput from None
    return "YES" if optimal else "NO"


def _levenshtein(text: str) -> str:
    lines = text.splitlines()
    return str(levenshtein(_line(lines, 0), _line(lines, 1)))


def _partition(text: str) -> str:
    values = _ints(text)
    (count,) = _take(values, 1, 0)
    numbers = _take(values, count, 1)
    return "True" if can_split_equally(numbers) else "False"


def _packed(text: str) -> str:
    lines = text.splitlines()
    count = max(_count(lines, 0), 1)
    return longest_common_prefix(_line(lines, index) for index in range(1, count + 1))


def _crib(text: str) -> str:
    lines = text.splitlines()
    count = _count(lines, 1)
    if count < 0:
        raise _InvalidInput
    words = [_line(lines, index) for index in range(2, count + 2)]
    return "YES" if can_compose_from(_line(lines, 0), words) else "NO"


_COMMANDS: dict[str, tuple[Callable[[str], str], str]] = {
    "topo": (_topo, "topological order of a directed graph"),
    "network": (_network, "weight of a maximum spanning tree"),
    "roads": (_roads, "whether a road network has no cycle"),
    "levenshtein": (_levenshtein, "edit distance between two lines"),
    "partition": (_partition, "whether numbers split into equal sums"),
    "packed": (_packed, "common prefix of packed strings"),
    "crib": (_crib, "whether a text is built from given words"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algobox", description="Solve a task whose input is read from standard input."
    )
    parser.add_argument("command", choices=sorted(_COMMANDS))
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen command on standard input and print its answer."""
    args = _parser().parse_args(argv)
    solve, _ = _COMMANDS[args.command]
    text = sys.stdin.read()
    try:
        answer = solve(text)
    except _InvalidInput:
        print("Invalid input")
        return 1
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(answer)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())