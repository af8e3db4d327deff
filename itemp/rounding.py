"""Integer division helpers."""


def truncated_quotient(x: int, y: int) -> int:
    """Return x / y rounded toward zero, as C integer division does."""

    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient


def rounded_quotient(x: int, y: int) -> int:
    """Return x / y rounded to the nearest integer, ties away from zero.

    Works for any combination of signs of x and y. Only integer arithmetic
    is used, so the result is exact for arbitrarily large operands.
    """

    half = truncated_quotient(y, 2)
    if (x ^ y) >= 0:
        # signs match, non-negative quotient
        return truncated_quotient(x + half, y)

    return truncated_quotient(x - half, y)
