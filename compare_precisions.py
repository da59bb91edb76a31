"""Quick comparison of the forward-difference error curve across precisions.

Run with:
    python compare_precisions.py
"""

from __future__ import annotations

from roundoff.compare import compare_precisions, format_summary_table


def main() -> None:
    """Main comparison routine."""
    line = "-" * 80
    print(line)
    print("f(x) = x**2 at x = 1/3, forward difference, h halved 80 times")
    print(line)
    print(format_summary_table(compare_precisions()))
    print()


if __name__ == "__main__":
    main()
