from __future__ import annotations

import io

from sophie_model import SophieConfig


def is_prime_naive(n: int) -> bool:
    """Trial division, only for small n (reference for the Miller-Rabin tests)."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    f = 3
    while f * f <= n:
        if n % f == 0:
            return False
        f += 2
    return True


def safe_primes_naive(stop: int) -> list[int]:
    """Qualifying safe primes q < stop: q, (q-1)/2 prime and (q-1)/2 mod 20 in {3,9,11}."""
    out: list[int] = []
    for q in range(5, stop):
        p = (q - 1) // 2
        if p % 20 in (3, 9, 11) and is_prime_naive(q) and is_prime_naive(p):
            out.append(q)
    return out


def decimal_period_naive(q: int) -> int:
    """Period of 1/q by iterating the remainder until it comes back to 1."""
    r = 10 % q
    k = 1
    while r != 1:
        r = (r * 10) % q
        k += 1
    return k


def reciprocal_digits(q: int, n: int) -> str:
    """First n decimal digits of 1/q, straight from floor(10^n / q)."""
    return str(10**n // q).zfill(n)


def run_capture(num_observations: int, seed: int, config: SophieConfig) -> tuple[list[str], str]:
    """Run the generator into in-memory streams. Returns (stdout lines, stderr text)."""
    from sophie_prng import generate_uniform_sophie

    out = io.StringIO()
    err = io.StringIO()
    generate_uniform_sophie(num_observations, seed, config, out=out, err=err)
    return out.getvalue().splitlines(), err.getvalue()
