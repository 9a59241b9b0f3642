from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

from sophie_model import COMPACT, U16
from tests._helpers import safe_primes_naive

ROOT = Path(__file__).resolve().parents[1]


def _load_tool():
    spec = importlib.util.spec_from_file_location("gap_survey", ROOT / "tools" / "gap_survey.py")
    mod = importlib.util.module_from_spec(spec)
    sys.modules["gap_survey"] = mod
    spec.loader.exec_module(mod)
    return mod


gap_survey = _load_tool()


def test_compact_bound_holds_for_every_seed():
    res = gap_survey.survey_seeds(COMPACT, range(COMPACT.seed_max + 1))
    assert len(res.rows) == 16
    assert res.max_gap == 608
    assert res.failing_seeds == []


def test_too_small_bound_reports_failing_seeds():
    # seed 0 needs 352 (q = 863 from min_q = 511)
    res = gap_survey.survey_seeds(COMPACT.with_overrides(germain_gap_max=100), range(1))
    assert res.failing_seeds == [0]
    assert res.max_gap == 352


def test_max_consecutive_gap_matches_naive():
    qs = safe_primes_naive(3000)
    expected = max(b - a for a, b in zip(qs, qs[1:]))
    assert gap_survey.max_consecutive_gap(0, 3000, U16) == expected


def test_cli_writes_tsv(tmp_path, capsys):
    out = tmp_path / "gaps.tsv"
    rc = gap_survey.main(["--preset", "compact", "--seeds", "0-3", "--tsv", str(out)])
    assert rc == 0
    rows = out.read_text(encoding="utf-8").splitlines()
    assert rows[0] == "seed\tmin_q\tq\tgap"
    assert rows[1] == "0\t511\t863\t352"
    assert len(rows) == 5
    assert "[gap] preset=compact" in capsys.readouterr().out
