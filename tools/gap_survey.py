#!/usr/bin/env python3
"""Germain gap survey: empirical support for germain_gap_max.

germain_gap_max is asserted after every search, never derived. This script
measures it for a configuration:

  A) Per-seed search distance (what the gap assertion actually checks):
      python3 tools/gap_survey.py --preset compact
      python3 tools/gap_survey.py --preset reference --seeds 0-255 --tsv out/gaps.tsv

  B) Largest distance between consecutive qualifying safe primes over the
     whole admissible range (slow on the reference preset):
      python3 tools/gap_survey.py --preset compact --consecutive

Exit status is 1 when some seed exceeds the configured bound.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from sophie_locator import iter_safe_primes, locate_safe_prime  # noqa: E402
from sophie_model import PRESETS, NumericDomain, SophieConfig  # noqa: E402
from sophie_window import min_q_for  # noqa: E402


@dataclass(frozen=True)
class SeedGap:
    seed: int
    min_q: int
    q: int | None

    @property
    def gap(self) -> int | None:
        return None if self.q is None else self.q - self.min_q


@dataclass(frozen=True)
class SurveyResult:
    rows: list[SeedGap]
    bound: int

    @property
    def max_gap(self) -> int | None:
        gaps = [r.gap for r in self.rows if r.gap is not None]
        return max(gaps) if gaps else None

    @property
    def failing_seeds(self) -> list[int]:
        return [r.seed for r in self.rows if r.gap is None or r.gap > self.bound]


def survey_seeds(config: SophieConfig, seeds: Iterable[int]) -> SurveyResult:
    rows: list[SeedGap] = []
    for s in seeds:
        min_q = min_q_for(s, config)
        rows.append(SeedGap(seed=s, min_q=min_q, q=locate_safe_prime(min_q, config.domain)))
    return SurveyResult(rows=rows, bound=config.germain_gap_max)


def max_consecutive_gap(start: int, stop: int, domain: NumericDomain) -> int | None:
    """Largest distance between consecutive qualifying safe primes in [start, stop)."""
    best: int | None = None
    prev: int | None = None
    for q in iter_safe_primes(start, stop, domain):
        if prev is not None and (best is None or q - prev > best):
            best = q - prev
        prev = q
    return best


def _parse_seed_range(s: str, seed_max: int) -> range:
    if s == "all":
        return range(0, seed_max + 1)
    lo, sep, hi = s.partition("-")
    out = range(int(lo), int(hi if sep else lo) + 1)
    if out.start < 0 or out.stop - 1 > seed_max or not out:
        raise ValueError(f"seed range must be within [0..{seed_max}]: {s!r}")
    return out


def write_tsv(rows: list[SeedGap], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    cols = ["seed", "min_q", "q", "gap"]
    with path.open("w", encoding="utf-8") as f:
        f.write("\t".join(cols) + "\n")
        for r in rows:
            f.write("\t".join(str(v) for v in (r.seed, r.min_q, r.q, r.gap)) + "\n")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Survey Sophie-Germain safe prime gaps for a preset.")
    ap.add_argument("--preset", choices=sorted(PRESETS), default="compact")
    ap.add_argument("--seeds", default="all", help="'all', a seed, or an inclusive range like 0-255.")
    ap.add_argument("--consecutive", action="store_true", help="Also scan consecutive gaps over the range.")
    ap.add_argument("--tsv", default=None, help="Write per-seed rows to this TSV file.")
    args = ap.parse_args(argv)

    config = PRESETS[args.preset]
    try:
        seeds = _parse_seed_range(args.seeds, config.seed_max)
    except ValueError as e:
        ap.error(str(e))

    res = survey_seeds(config, seeds)
    print(f"[gap] preset={config.name}  seeds={len(res.rows)}  bound={res.bound}  max_gap={res.max_gap}")

    if args.consecutive:
        stop = config.max_lower_bound + config.germain_gap_max + 1
        cg = max_consecutive_gap(config.base_lower_bound, stop, config.domain)
        print(f"[gap] consecutive max_gap={cg}  range=[{config.base_lower_bound}..{stop})")

    if args.tsv:
        write_tsv(res.rows, Path(args.tsv))
        print(f"[io] wrote {args.tsv}")

    if res.failing_seeds:
        print(f"[gap] bound exceeded for seeds: {res.failing_seeds}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
