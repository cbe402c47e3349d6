"""Integer arithmetic on amounts held in a currency's smallest unit.

Division and remainder truncate toward zero, so the remainder always takes
the sign of the dividend.
"""

from __future__ import annotations


def add(a: int, b: int) -> int:
    """Return the sum of two amounts."""
    return a + b


def subtract(a: int, b: int) -> int:
    """Return ``a - b``."""
    return a - b


def multiply(a: int, multiplier: int) -> int:
    """Return an amount multiplied by an integer."""
    return a * multiplier


def _truncated_divmod(a: int, divisor: int) -> tuple[int, int]:
    if divisor == 0:
        raise ZeroDivisionError("division of an amount by zero")
    quotient = abs(a) // abs(divisor)
    if (a < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, a - quotient * divisor


def divide(a: int, divisor: int) -> int:
    """Return ``a / divisor`` truncated toward zero.

    Raises ZeroDivisionError when ``divisor`` is zero.
    """
    return _truncated_divmod(a, divisor)[0]


def modulus(a: int, divisor: int) -> int:
    """Return the remainder of truncating division; it has the sign of ``a``.

    Raises ZeroDivisionError when ``divisor`` is zero.
    """
    return _truncated_divmod(a, divisor)[1]


def allocate(a: int, ratio: int, shares: int) -> int:
    """Return ``a * ratio / shares`` truncated toward zero.

    Returns 0 when the amount or the number of shares is zero.
    """
    if a == 0 or shares == 0:
        return 0
    return divide(a * ratio, shares)


def absolute(a: int) -> int:
    """Return the absolute value of an amount."""
    return -a if a < 0 else a


def negative(a: int) -> int:
    """Return the amount with its sign flipped."""
    return -a


def round_to_precision(a: int, precision: int) -> int:
    """Round half up on the magnitude to a multiple of ``10 ** precision``.

    The sign of the amount is preserved.
    """
    if a == 0:
        return 0
    if precision < 0:
        raise ValueError("precision must not be negative")

    magnitude = absolute(a)
    factor = 10**precision
    if magnitude % factor >= factor // 2:
        magnitude += factor
    rounded = (magnitude // factor) * factor
    return -rounded if a < 0 else rounded