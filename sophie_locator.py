"""Sophie-Germain safe prime search.

A safe prime q = 2p + 1 (p also prime) with p mod 20 in {3, 9, 11} has 10 as a
primitive root, so the decimal expansion of 1/q has the maximal period q - 1.
See: https://en.wikipedia.org/wiki/Sophie_Germain_prime#Pseudorandom_number_generation
"""

from __future__ import annotations

from collections.abc import Iterator

from sophie_arith import powmod
from sophie_model import U64, NumericDomain
from sophie_primality import is_prime

# p mod 20 residues giving a maximally periodic reciprocal of q
MAX_PERIOD_RESIDUES = frozenset({3, 9, 11})


def is_sophie_germain_safe_prime(q: int, domain: NumericDomain = U64) -> bool:
    p = (q - 1) // 2
    return p % 20 in MAX_PERIOD_RESIDUES and is_prime(q, domain) and is_prime(p, domain)


def locate_safe_prime(lower_bound: int, domain: NumericDomain = U64) -> int | None:
    """First qualifying safe prime q >= lower_bound.

    Returns None when the scan reaches num_max (reserved as the "not found"
    value) without success.
    """
    if not domain.fits(lower_bound):
        raise ValueError(f"lower_bound={lower_bound} outside the {domain.bits}-bit domain")
    q = lower_bound
    while q != domain.num_max:
        if is_sophie_germain_safe_prime(q, domain):
            return q
        q += 1
    return None


def iter_safe_primes(start: int, stop: int, domain: NumericDomain = U64) -> Iterator[int]:
    """Every qualifying safe prime in [start, stop)."""
    stop = min(stop, domain.num_max)
    for q in range(max(start, 0), stop):
        if is_sophie_germain_safe_prime(q, domain):
            yield q


def has_maximal_decimal_period(q: int, domain: NumericDomain = U64) -> bool:
    """True if 1/q has decimal period q - 1, for a safe prime q = 2p + 1.

    ord_q(10) divides 2p, so it is q - 1 unless 10^2 or 10^p is 1 mod q.
    """
    if q <= 5:
        return False
    p = (q - 1) // 2
    return powmod(10, 2, q, domain) != 1 and powmod(10, p, q, domain) != 1


__all__ = [
    "MAX_PERIOD_RESIDUES",
    "has_maximal_decimal_period",
    "is_sophie_germain_safe_prime",
    "iter_safe_primes",
    "locate_safe_prime",
]
