"""Sophie-Germain PRNG core data model (numeric domain + configuration).

This module contains only the dataclasses describing the fixed-width numeric
domain and the four tunable limits, plus the one-shot invariant check that must
pass before any prime search starts. No arithmetic on samples lives here.

Presets:
  - reference: 64-bit domain, 15 digits per observation
  - compact:   16-bit domain, 2 digits per observation (handy for tests)
"""

from __future__ import annotations

from dataclasses import dataclass, replace

# Widest domain for which the fixed Miller-Rabin witness set (primes <= 37)
# is known to be deterministic.
MAX_DETERMINISTIC_BITS = 64
SUPPORTED_BITS = (16, 32, 64)


class SophieConfigError(ValueError):
    """A configuration invariant does not hold. Not recoverable at runtime."""

    def __init__(self, violations: tuple[ConfigViolation, ...] | list[ConfigViolation]):
        self.violations = tuple(violations)
        msg = "; ".join(f"{v.code}: {v.message}" for v in self.violations)
        super().__init__(f"Invalid configuration: {msg}")

    @property
    def codes(self) -> list[str]:
        return [v.code for v in self.violations]


@dataclass(frozen=True)
class ConfigViolation:
    code: str
    message: str


@dataclass(frozen=True)
class NumericDomain:
    """Fixed-width unsigned domain (num_t) with a double-width product type."""

    bits: int
    wide_bits: int

    @property
    def num_max(self) -> int:
        return (1 << self.bits) - 1

    @property
    def wide_max(self) -> int:
        return (1 << self.wide_bits) - 1

    def fits(self, v: int) -> bool:
        return 0 <= v <= self.num_max

    def widening_mul(self, x: int, y: int) -> int:
        """Exact x*y in the wide type. OverflowError if it does not fit."""
        out = x * y
        if out < 0 or out > self.wide_max:
            raise OverflowError(f"widening_mul: {x}*{y} overflows {self.wide_bits}-bit product")
        return out


def make_domain(bits: int, wide_bits: int | None = None) -> NumericDomain:
    if bits not in SUPPORTED_BITS:
        raise ValueError(f"bits must be one of {SUPPORTED_BITS}, got {bits}")
    return NumericDomain(bits=bits, wide_bits=2 * bits if wide_bits is None else wide_bits)


U16 = make_domain(16)
U32 = make_domain(32)
U64 = make_domain(64)


@dataclass(frozen=True)
class SophieConfig:
    """The four tunable limits, bound to a numeric domain.

    observations_max       -> max samples per run
    seed_max               -> max seed value
    digits_per_observation -> decimal digits per sample
    germain_gap_max        -> upper bound on the distance between qualifying
                              safe primes below the usable range (asserted
                              after every search, never derived)
    """

    name: str
    domain: NumericDomain
    observations_max: int
    seed_max: int
    digits_per_observation: int
    germain_gap_max: int

    @property
    def base_lower_bound(self) -> int:
        """Smallest admissible q: enough digits for the largest run."""
        return self.observations_max * self.digits_per_observation + 1

    @property
    def max_lower_bound(self) -> int:
        return self.base_lower_bound + self.seed_max * self.germain_gap_max

    def with_overrides(self, **changes: object) -> SophieConfig:
        changes = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **changes)


REFERENCE = SophieConfig(
    name="reference",
    domain=U64,
    observations_max=(1 << 32) - 1,
    seed_max=(1 << 16) - 1,
    digits_per_observation=15,
    # max distance between qualifying safe primes below 2*(observations_max + seed_max)
    germain_gap_max=17904,
)

COMPACT = SophieConfig(
    name="compact",
    domain=U16,
    observations_max=255,
    seed_max=15,
    digits_per_observation=2,
    germain_gap_max=616,
)

PRESETS: dict[str, SophieConfig] = {c.name: c for c in (REFERENCE, COMPACT)}


def check_config(config: SophieConfig) -> list[ConfigViolation]:
    """Evaluate every configuration invariant. Empty list means valid."""
    dom = config.domain
    out: list[ConfigViolation] = []

    if dom.wide_bits < 2 * dom.bits:
        out.append(
            ConfigViolation(
                "wide-width",
                f"product width {dom.wide_bits} must be >= 2 * {dom.bits}",
            )
        )
    if dom.bits > MAX_DETERMINISTIC_BITS:
        out.append(
            ConfigViolation(
                "witness-range",
                f"witness set is deterministic only up to {MAX_DETERMINISTIC_BITS} bits",
            )
        )

    limits = {
        "observations_max": (config.observations_max, 0),
        "seed_max": (config.seed_max, 0),
        "digits_per_observation": (config.digits_per_observation, 1),
        "germain_gap_max": (config.germain_gap_max, 1),
    }
    bad_limits = False
    for field, (value, lo) in limits.items():
        if value < lo or not dom.fits(value):
            bad_limits = True
            out.append(
                ConfigViolation(
                    "positive-limits",
                    f"{field}={value} must be in [{lo}..{dom.num_max}]",
                )
            )
    if bad_limits:
        # the overflow checks below are meaningless on broken limits
        return out

    seed_span = config.seed_max * config.germain_gap_max
    digit_span = config.observations_max * config.digits_per_observation

    if seed_span > dom.num_max:
        out.append(ConfigViolation("seed-gap-overflow", "(seed_max * germain_gap_max) overflows"))
    if digit_span > dom.num_max:
        out.append(
            ConfigViolation(
                "observation-digits-overflow",
                "(observations_max * digits_per_observation) overflows",
            )
        )
    if out:
        return out

    if seed_span + digit_span + 1 > dom.num_max:
        out.append(
            ConfigViolation(
                "lower-bound-overflow",
                "(seed_max * germain_gap_max + observations_max * digits_per_observation + 1) overflows",
            )
        )
        return out

    # num_max is the "not found" sentinel, the last window must end below it
    window_end = config.max_lower_bound + config.germain_gap_max
    if window_end >= dom.num_max:
        out.append(
            ConfigViolation(
                "window-overflow",
                f"last search window ends at {window_end}, beyond {dom.num_max - 1}",
            )
        )
    # backstop: with wide_bits >= 2*bits and window_end < num_max this cannot fire
    if window_end * 10 > dom.wide_max:
        out.append(
            ConfigViolation(
                "digit-step-overflow",
                f"long division step 10*{window_end} overflows {dom.wide_bits}-bit product",
            )
        )

    return out


def ensure_valid_config(config: SophieConfig) -> SophieConfig:
    violations = check_config(config)
    if violations:
        raise SophieConfigError(violations)
    return config


__all__ = [
    "COMPACT",
    "ConfigViolation",
    "NumericDomain",
    "PRESETS",
    "REFERENCE",
    "SophieConfig",
    "SophieConfigError",
    "U16",
    "U32",
    "U64",
    "check_config",
    "ensure_valid_config",
    "make_domain",
]
