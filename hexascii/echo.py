"""Echo a counted list of integers back, one per line."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable


def echo_values(tokens: Iterable[str]) -> list[int]:
    """Read a count and that many integers from ``tokens`` and return the integers."""
    stream = iter(tokens)
    try:
        count = int(next(stream))
        return [int(next(stream)) for _ in range(count)]
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def main(argv: list[str] | None = None) -> None:
    """Read a count and integers from standard input and print each integer."""
    argparse.ArgumentParser(
        description="Read a count followed by integers and print them back."
    ).parse_args(argv)
    for value in echo_values(sys.stdin.read().split()):
        sys.stdout.write(f"{value}\n")
    sys.stdout.flush()


if __name__ == "__main__":
    main()