"""Decide whether an amount can be paid with 2-coins and k-coins."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence


def can_pay(n: int, k: int) -> bool:
    """True if ``n`` is a sum of any number of 2-coins and k-coins."""
    return n % 2 == 0 or (n >= k and (n - k) % 2 == 0)


def _read_ints(text: str) -> Iterator[int]:
    for token in text.split():
        yield int(token)


def run(text: str) -> str:
    """Answer every test case in ``text`` with YES or NO, one per line."""
    numbers = _read_ints(text)
    try:
        count = next(numbers)
        answers = []
        for _ in range(count):
            n, k = next(numbers), next(numbers)
            answers.append("YES" if can_pay(n, k) else "NO")
    except StopIteration:
        raise ValueError("input ended before all test cases were read") from None
    return "".join(f"{answer}\n" for answer in answers)


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print the answers."""
    sys.stdout.write(run(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())