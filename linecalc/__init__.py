"""linecalc — line-oriented command calculator.

Reads one command per line, computes it, and prints one sentence (or an
error message) per line. Parsing, calculation and rendering are pure stages
composed by ``process``.

Usage:
    echo "sum 5 5 6 8.5" | python -m linecalc run   # the sum of 5 5 6 8.5 is 24.5
    python -m linecalc eval divide 4 5             # 4 divided by 5 is 0.8
    python -m linecalc commands                    # Show keywords
"""

from linecalc.pipeline import process

__all__ = ["process"]
