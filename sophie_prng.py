#!/usr/bin/env python3
"""
sophie_prng.py: uniform samples on [0,1) from the decimal expansion of 1/q,
where q is a Sophie-Germain safe prime with maximal decimal period.

Idea (summary):
- The seed picks a search window (see sophie_window.py); the first safe prime
  q = 2p + 1 in it with p mod 20 in {3, 9, 11} is the modulus.
- 1/q then has period q - 1, and its digits, grouped in blocks of
  digits_per_observation, are the samples "0.ddd...".
- q is always larger than the total number of digits a run can ask for, so the
  expansion never wraps within a run.

NOT a cryptographic generator: the whole state is one remainder and q is
recoverable from a handful of digits.

CLI:
  python3 sophie_prng.py 20 12345
  python3 sophie_prng.py 5 0 --preset compact
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from sophie_digits import DigitStream
from sophie_locator import locate_safe_prime
from sophie_model import REFERENCE, SophieConfig, ensure_valid_config
from sophie_window import check_found_prime, min_q_for


@dataclass(frozen=True)
class SafePrimeResult:
    seed: int
    min_q: int
    q: int

    @property
    def gap(self) -> int:
        return self.q - self.min_q


def _diag(msg: str, err: TextIO | None) -> None:
    print(msg, file=sys.stderr if err is None else err)


def find_safe_prime_for_seed(
    seed: int,
    config: SophieConfig = REFERENCE,
    *,
    err: TextIO | None = None,
) -> SafePrimeResult:
    """Window mapping + search + gap assertion for one seed."""
    min_q = min_q_for(seed, config)
    _diag(f"[sophie] Looking for a Sophie-Germain safe prime q >= {min_q}", err)

    found = locate_safe_prime(min_q, config.domain)
    q = check_found_prime(found, min_q, config)
    _diag(f"[sophie] Found a Sophie-Germain safe prime q = {q}", err)
    return SafePrimeResult(seed=seed, min_q=min_q, q=q)


def generate_observations(
    num_observations: int,
    seed: int,
    config: SophieConfig = REFERENCE,
    *,
    err: TextIO | None = None,
) -> Iterator[str]:
    """Yield `num_observations` samples "0.<digits>" for `seed`.

    Configuration invariants are checked before anything else, the search runs
    eagerly (before the first sample is requested).
    """
    ensure_valid_config(config)
    if not (0 <= num_observations <= config.observations_max):
        raise ValueError(f"num_observations={num_observations} must be in [0..{config.observations_max}]")

    res = find_safe_prime_for_seed(seed, config, err=err)
    _diag(f"[sophie] Generating the decimal expansion of 1/{res.q}...", err)

    stream = DigitStream(res.q, config.domain)
    return stream.observations(num_observations, config.digits_per_observation)


def generate_uniform_sophie(
    num_observations: int,
    seed: int,
    config: SophieConfig = REFERENCE,
    *,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Write the samples one per line. Returns the number of lines written."""
    out = sys.stdout if out is None else out
    n = 0
    for obs in generate_observations(num_observations, seed, config, err=err):
        out.write(obs + "\n")
        n += 1
    return n


__all__ = [
    "SafePrimeResult",
    "find_safe_prime_for_seed",
    "generate_observations",
    "generate_uniform_sophie",
]


if __name__ == "__main__":
    from cli import main

    raise SystemExit(main())
