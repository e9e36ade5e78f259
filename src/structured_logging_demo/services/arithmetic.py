"""
structured_logging_demo.services.arithmetic

Exact decimal division for the `/divide` endpoint.

Division never rounds: a quotient without a finite decimal expansion is an
error, as is any division by zero.
"""

from __future__ import annotations

from decimal import Decimal, localcontext
from fractions import Fraction


def _strip_factor(value: int, factor: int) -> tuple[int, int]:
    count = 0
    while value % factor == 0:
        value //= factor
        count += 1
    return value, count


def divide(a: Decimal, b: Decimal) -> Decimal:
    if b == 0:
        raise ZeroDivisionError("Division undefined" if a == 0 else "Division by zero")

    quotient = Fraction(a) / Fraction(b)
    rest, twos = _strip_factor(quotient.denominator, 2)
    rest, fives = _strip_factor(rest, 5)
    if rest != 1:
        raise ArithmeticError(
            "Non-terminating decimal expansion; no exact representable decimal result."
        )

    # n / (2**twos * 5**fives) has at most digits(n) + max(twos, fives) significant digits.
    with localcontext() as ctx:
        ctx.prec = len(str(abs(quotient.numerator))) + max(twos, fives) + 1
        return a / b


def to_plain_string(value: Decimal) -> str:
    # Fixed-point, never scientific notation (1E+1 -> "10").
    return format(value, "f")
