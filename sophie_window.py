"""Seed -> search window mapping.

Each seed s gets its own window starting at

    min_q = observations_max * digits_per_observation + 1 + s * germain_gap_max

The first term makes 1/q long enough to supply every digit of the largest run;
the second splits the range into seed_max + 1 windows of width
germain_gap_max, each holding at least one qualifying safe prime if the gap
bound is right. Distinct seeds search distinct windows.
"""

from __future__ import annotations

from sophie_model import ConfigViolation, SophieConfig, SophieConfigError


def _check_seed(seed: int, config: SophieConfig) -> None:
    if not (0 <= seed <= config.seed_max):
        raise ValueError(f"seed={seed} must be in [0..{config.seed_max}]")


def min_q_for(seed: int, config: SophieConfig) -> int:
    _check_seed(seed, config)
    return config.base_lower_bound + seed * config.germain_gap_max


def seed_window(seed: int, config: SophieConfig) -> range:
    """Admissible q values for `seed`: [min_q, min_q + germain_gap_max]."""
    lo = min_q_for(seed, config)
    return range(lo, lo + config.germain_gap_max + 1)


def check_found_prime(q: int | None, min_q: int, config: SophieConfig) -> int:
    """Gap assertion after the search. Raises SophieConfigError, never retried."""
    if q is None:
        raise SophieConfigError(
            [ConfigViolation("gap-bound", f"no safe prime found above {min_q} (numeric overflow?)")]
        )
    if q < min_q or q > min_q + config.germain_gap_max:
        raise SophieConfigError(
            [
                ConfigViolation(
                    "gap-bound",
                    f"q={q} is {q - min_q} away from {min_q}, "
                    f"germain_gap_max={config.germain_gap_max} is incorrect",
                )
            ]
        )
    return q


__all__ = ["check_found_prime", "min_q_for", "seed_window"]
