"""Text patterns drawn row by row: triangles, pyramids and a parallelogram."""

from __future__ import annotations

import argparse
import sys


def number_triangle(n: int) -> list[str]:
    """Rows counting 1 upwards, each one number shorter than the last."""
    return ["".join(str(k) for k in range(1, n - i + 2)) for i in range(1, n + 1)]


def binary_triangle(n: int) -> list[str]:
    """A triangle of alternating 1s and 0s, 1 where row plus column is even."""
    return [
        "".join("1" if (i + j) % 2 == 0 else "0" for j in range(1, i + 1))
        for i in range(1, n + 1)
    ]


def _pyramid_row(n: int, i: int) -> str:
    return " " * (n - i) + "* " * i


def pyramid(n: int) -> list[str]:
    """A pyramid of stars growing from one to ``n``."""
    return [_pyramid_row(n, i) for i in range(1, n + 1)]


def inverted_pyramid(n: int) -> list[str]:
    """A pyramid of stars shrinking from ``n`` to one."""
    return [_pyramid_row(n, i) for i in range(n, 0, -1)]


def parallelogram(n: int) -> list[str]:
    """``n`` rows of ``n`` stars, each shifted one place left of the one above."""
    return [" " * (n - i) + "* " * n for i in range(1, n + 1)]


def render_all(n: int) -> str:
    """Return every pattern for ``n``, one row per line, in the usual order."""
    lines = [
        *number_triangle(n),
        *binary_triangle(n),
        *pyramid(n),
        *inverted_pyramid(n),
        *parallelogram(n),
    ]
    return "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Print all patterns for a size taken from the arguments or standard input."""
    parser = argparse.ArgumentParser(description="Print text patterns of a given size.")
    parser.add_argument("n", nargs="?", type=int, help="pattern size; read from stdin if omitted")
    args = parser.parse_args(argv)
    n = args.n
    if n is None:
        text = sys.stdin.read().split()
        if not text:
            parser.error("no size given")
        try:
            n = int(text[0])
        except ValueError:
            parser.error(f"invalid size: {text[0]!r}")
    sys.stdout.write(render_all(n))
    return 0


if __name__ == "__main__":
    sys.exit(main())