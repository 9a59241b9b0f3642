from __future__ import annotations

import pytest

from sophie_arith import mulmod, powmod
from sophie_model import U16, U64

# largest prime below 2^64
P64 = 2**64 - 59


def test_mulmod_matches_exact_product_at_64_bits():
    cases = [(P64 - 1, P64 - 1), (P64 - 2, 12345678901234567), (2**63, 2**63 + 1), (0, P64 - 1)]
    for x, y in cases:
        assert mulmod(x, y, P64) == (x * y) % P64


def test_mulmod_in_16_bit_domain():
    p = 65521
    assert mulmod(p - 1, p - 1, p, U16) == 1
    assert mulmod(300, 400, p, U16) == (300 * 400) % p


def test_mulmod_requires_reduced_operands():
    with pytest.raises(ValueError):
        mulmod(7, 3, 7)
    with pytest.raises(ValueError):
        mulmod(1, 1, 0)
    with pytest.raises(ValueError):
        mulmod(1, 1, 70000, U16)


def test_powmod_matches_builtin_pow():
    for x, y, p in [(2, 10, 1000), (3, 200, 1_000_003), (10, P64 - 2, P64), (37, 0, 101), (123, 45, 7)]:
        assert powmod(x, y, p) == pow(x, y, p)


def test_powmod_modulus_one_collapses_to_zero():
    assert powmod(5, 0, 1) == 0
    assert powmod(12345, 678, 1) == 0


def test_powmod_rejects_modulus_outside_domain():
    with pytest.raises(ValueError):
        powmod(2, 3, 0)
    # zero exponent does not skip the modulus check
    with pytest.raises(ValueError):
        powmod(2, 0, 70000, U16)
    with pytest.raises(ValueError):
        powmod(2, 0, 2**64)


def test_powmod_reduces_base_first():
    # base larger than the modulus, as for witness 37 against small candidates
    assert powmod(37, 5, 11, U16) == pow(37, 5, 11)


def test_fermat_little_theorem_on_64_bit_prime():
    assert powmod(2, P64 - 1, P64) == 1
