"""Fewest water-pouring actions to fill every empty cell of a strip."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence


def min_fill_actions(cells: str) -> int:
    """Fewest pours needed to fill every ``.`` cell; ``#`` cells are blocked.

    Three empty cells in a row let two pours generate unlimited water.
    """
    if "..." in cells:
        return 2
    return cells.count(".")


def _read_tokens(text: str) -> Iterator[str]:
    yield from text.split()


def run(text: str) -> str:
    """Answer every test case in ``text``, one number per line."""
    tokens = _read_tokens(text)
    try:
        count = int(next(tokens))
        answers = []
        for _ in range(count):
            int(next(tokens))
            answers.append(min_fill_actions(next(tokens)))
    except StopIteration:
        raise ValueError("input ended before all test cases were read") from None
    return "".join(f"{answer}\n" for answer in answers)


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the answers."""
    sys.stdout.write(run(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())