#!/usr/bin/env python3
"""CLI for the Sophie-Germain PRNG.

Usage examples:
  - 20 samples for seed 12345 (reference 64-bit configuration):
      python3 sophie_prng.py 20 12345

  - Small 16-bit configuration (2 digits per sample):
      python3 sophie_prng.py 10 3 --preset compact

  - Override one limit on top of a preset:
      python3 sophie_prng.py 10 3 --preset compact --digits 3

Only the samples go to stdout; every status line goes to stderr.

Exit status:
  0  all samples written
  2  usage error (argument count, malformed or out-of-range numbers)
  3  invalid configuration (overflowing limits or wrong germain gap bound)
"""

from __future__ import annotations

import argparse
import sys

from sophie_model import PRESETS, SophieConfig, SophieConfigError, check_config, make_domain
from sophie_prng import generate_uniform_sophie

EXIT_CONFIG_ERROR = 3


def parse_num(s: str) -> int:
    """Strict non-negative decimal: ASCII digits only, no sign, no trailing noise."""
    if not s or not s.isascii() or not s.isdigit():
        raise argparse.ArgumentTypeError(f"not a non-negative decimal integer: {s!r}")
    return int(s)


def resolve_config(
    *,
    preset: str | None,
    bits: int | None = None,
    observations_max: int | None = None,
    seed_max: int | None = None,
    digits: int | None = None,
    gap_max: int | None = None,
) -> SophieConfig:
    """Resolve preset + overrides. Explicit overrides always win.

    The result is NOT validated here: see sophie_model.check_config.
    """
    preset_eff = "reference" if preset is None else preset
    if preset_eff not in PRESETS:
        raise ValueError(f"Unknown preset: {preset_eff!r}")

    cfg = PRESETS[preset_eff]
    return cfg.with_overrides(
        domain=None if bits is None else make_domain(int(bits)),
        observations_max=observations_max,
        seed_max=seed_max,
        digits_per_observation=digits,
        germain_gap_max=gap_max,
    )


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="sophie-prng",
        description="PRNG based on Sophie-Germain safe primes (NOT cryptographically secure).",
    )
    ap.add_argument("num_observations", type=parse_num, help="Number of samples to print.")
    ap.add_argument("seed", type=parse_num, help="Seed, selects the safe prime search window.")
    ap.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="reference",
        help=(
            "Limits preset: reference (64-bit, 15 digits/sample) or "
            "compact (16-bit, 2 digits/sample). The override flags always win."
        ),
    )
    ap.add_argument("--bits", type=int, choices=[16, 32, 64], default=None, help="Override: domain width.")
    ap.add_argument("--observations-max", type=parse_num, default=None, help="Override: max samples per run.")
    ap.add_argument("--seed-max", type=parse_num, default=None, help="Override: max seed.")
    ap.add_argument("--digits", type=parse_num, default=None, help="Override: digits per sample.")
    ap.add_argument(
        "--gap-max",
        type=parse_num,
        default=None,
        help="Override: max distance between qualifying safe primes (checked after the search).",
    )
    return ap


def _print_banner() -> None:
    title = "PRNG Based on Sophie-Germain primes"
    print(title, file=sys.stderr)
    print("-" * len(title), file=sys.stderr)


def _print_violations(err: SophieConfigError | list) -> None:
    violations = err.violations if isinstance(err, SophieConfigError) else err
    for v in violations:
        print(f"[config] invalid configuration ({v.code}): {v.message}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    config = resolve_config(
        preset=args.preset,
        bits=args.bits,
        observations_max=args.observations_max,
        seed_max=args.seed_max,
        digits=args.digits,
        gap_max=args.gap_max,
    )

    _print_banner()

    # configuration first: nothing is searched with broken limits
    violations = check_config(config)
    if violations:
        _print_violations(violations)
        return EXIT_CONFIG_ERROR

    if args.num_observations > config.observations_max or args.seed > config.seed_max:
        ap.error(
            f"num_observations must be <= {config.observations_max} "
            f"and seed must be <= {config.seed_max}"
        )

    try:
        generate_uniform_sophie(args.num_observations, args.seed, config)
    except SophieConfigError as e:
        _print_violations(e)
        return EXIT_CONFIG_ERROR
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
