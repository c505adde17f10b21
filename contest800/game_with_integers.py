"""Winner of the add-or-subtract-one divisibility-by-three game."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

FIRST = "First"
SECOND = "Second"


def winner(n: int) -> str:
    """``"First"`` if the first player wins from ``n``, else ``"Second"``."""
    return SECOND if n % 3 == 0 else FIRST


def _read_ints(text: str) -> Iterator[int]:
    for token in text.split():
        yield int(token)


def run(text: str) -> str:
    """Answer every test case in ``text``, one winner per line."""
    numbers = _read_ints(text)
    try:
        count = next(numbers)
        answers = [winner(next(numbers)) for _ in range(count)]
    except StopIteration:
        raise ValueError("input ended before all test cases were read") from None
    return "".join(f"{answer}\n" for answer in answers)


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the answers."""
    sys.stdout.write(run(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())