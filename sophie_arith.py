"""Modular arithmetic over a fixed-width unsigned domain.

Products are always formed with the domain's widening multiply, so no
intermediate value ever exceeds the double-width type.
"""

from __future__ import annotations

from sophie_model import U64, NumericDomain


def mulmod(x: int, y: int, p: int, domain: NumericDomain = U64) -> int:
    """(x*y) mod p, with x, y < p <= num_max."""
    if not (0 < p <= domain.num_max):
        raise ValueError(f"mulmod: modulus {p} outside the {domain.bits}-bit domain")
    if not (0 <= x < p and 0 <= y < p):
        raise ValueError(f"mulmod: operands must be reduced mod p (x={x}, y={y}, p={p})")
    return domain.widening_mul(x, y) % p


def powmod(x: int, y: int, p: int, domain: NumericDomain = U64) -> int:
    """(x**y) mod p by square-and-multiply.

    See: https://en.wikipedia.org/wiki/Modular_exponentiation
    """
    if not (0 < p <= domain.num_max):
        raise ValueError(f"powmod: modulus {p} outside the {domain.bits}-bit domain")
    if p == 1:
        return 0
    if y < 0:
        raise ValueError("powmod: exponent must be non-negative")

    result = 1
    cur_x = x % p
    cur_y = y
    while cur_y > 0:
        if cur_y % 2 == 1:
            result = mulmod(result, cur_x, p, domain)
        cur_x = mulmod(cur_x, cur_x, p, domain)
        cur_y //= 2
    return result


__all__ = ["mulmod", "powmod"]
