"""Deterministic Miller-Rabin primality test.

The witness set below is known to give exact answers (no false positives) for
every candidate representable in 64 bits.
See https://en.wikipedia.org/wiki/Miller%E2%80%93Rabin_primality_test#Testing_against_small_sets_of_bases
"""

from __future__ import annotations

from bisect import bisect_left

from sophie_arith import mulmod, powmod
from sophie_model import U64, NumericDomain

RM_WITNESSES: tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def _rm_decompose(n: int) -> tuple[int, int]:
    """n-1 = d * 2^r with d odd. Returns (d, r)."""
    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1
    return d, r


def _is_witness_prime(n: int) -> bool:
    i = bisect_left(RM_WITNESSES, n)
    return i < len(RM_WITNESSES) and RM_WITNESSES[i] == n


def passes_rm_witness(candidate: int, d: int, r: int, witness: int, domain: NumericDomain = U64) -> bool:
    """One Miller-Rabin round: True if `witness` does not prove `candidate` composite.

    candidate is an odd integer > 3, and 2^r * d = candidate - 1 with d odd.
    """
    x = powmod(witness, d, candidate, domain)
    if x == 1 or x == candidate - 1:
        return True

    for _ in range(r - 1):
        x = mulmod(x, x, candidate, domain)
        if x == candidate - 1:
            return True
    return False


def is_prime(candidate: int, domain: NumericDomain = U64) -> bool:
    """Exact primality for every candidate of the domain."""
    if candidate <= RM_WITNESSES[-1]:
        return _is_witness_prime(candidate)
    if candidate % 2 == 0:
        return False

    d, r = _rm_decompose(candidate)
    return all(passes_rm_witness(candidate, d, r, a, domain) for a in RM_WITNESSES)


__all__ = ["RM_WITNESSES", "is_prime", "passes_rm_witness"]
