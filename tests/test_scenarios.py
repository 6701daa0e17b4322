# tests/test_scenarios.py — Three-tier scenario simulation

import random

import numpy as np
import pytest

from config import RISK_PROFILES, RISK_TIERS
from planning.scenarios import (
    run_scenarios, simulate_tier, summarize_tier, run_trials,
    projections_to_frame, format_scenario_report,
)
from planning.validation import InvalidInputError


class FixedDraw:
    """Generator stub: every draw returns the same value."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value


def test_assumption_table_is_monotonic():
    returns = [RISK_PROFILES[t]["annual_return"] for t in RISK_TIERS]
    vols    = [RISK_PROFILES[t]["volatility"] for t in RISK_TIERS]
    assert returns == sorted(returns) and len(set(returns)) == 3
    assert vols == sorted(vols) and len(set(vols)) == 3


@pytest.mark.parametrize("years", [0, 1, 5, 30])
def test_series_length_and_year_zero(years):
    comparison = run_scenarios(10000, years, rng=np.random.default_rng(1))
    assert len(comparison.projections) == years + 1
    first = comparison.projections[0]
    assert first.year == 0
    assert first.conservative == first.moderate == first.aggressive == 10000
    assert [p.year for p in comparison.projections] == list(range(years + 1))


def test_midpoint_draw_gives_pure_compounding():
    yearly = simulate_tier(10000, 2, "conservative", rng=FixedDraw(0.5))
    growth = (1 + 0.05 / 12) ** 12
    assert yearly[1] == round(10000 * growth, 0)
    assert yearly[2] == round(10000 * growth ** 2, 0)


def test_contribution_added_before_growth():
    yearly = simulate_tier(1000, 1, "moderate", monthly_contribution=100, rng=FixedDraw(0.5))
    balance = 1000.0
    for _ in range(12):
        balance = (balance + 100) * (1 + 0.08 / 12)
    assert yearly[1] == round(balance, 0)


def test_shock_bounds():
    low  = simulate_tier(10000, 1, "aggressive", rng=FixedDraw(0.0))[-1]
    high = simulate_tier(10000, 1, "aggressive", rng=FixedDraw(0.999999))[-1]
    mid  = simulate_tier(10000, 1, "aggressive", rng=FixedDraw(0.5))[-1]
    assert low < mid < high
    shock = 0.5 * (0.18 / np.sqrt(12)) * 0.5
    assert low == round(10000 * (1 + 0.11 / 12 - shock) ** 12, 0)


def test_each_tier_draws_its_own_randomness():
    stub = FixedDraw(0.5)
    run_scenarios(10000, 3, rng=stub)
    assert stub.calls == 3 * 3 * 12


def test_summary_uses_duration_plus_one_exponent():
    yearly = [10000, 11000, 12100]
    result = summarize_tier(10000, yearly, "moderate")
    assert result.final_value == 12100
    assert result.total_return == 2100
    assert result.annualized_return == pytest.approx(((12100 / 10000) ** (1 / 3) - 1) * 100)
    assert result.max_drawdown == pytest.approx(25.0)
    assert result.volatility == pytest.approx(12.0)


def test_results_match_projection_tail():
    comparison = run_scenarios(5000, 4, 50, rng=np.random.default_rng(7))
    last = comparison.projections[-1]
    for tier in RISK_TIERS:
        assert comparison.result_for(tier).final_value == getattr(last, tier)
        assert comparison.result_for(tier).total_return == getattr(last, tier) - 5000


def test_seeded_runs_are_reproducible():
    a = run_scenarios(10000, 10, 100, rng=np.random.default_rng(42))
    b = run_scenarios(10000, 10, 100, rng=np.random.default_rng(42))
    assert a == b


def test_accepts_stdlib_random():
    comparison = run_scenarios(10000, 2, rng=random.Random(3))
    assert len(comparison.projections) == 3


def test_unseeded_default_still_well_formed():
    comparison = run_scenarios(10000, 5)
    assert len(comparison.projections) == 6
    assert comparison.aggressive.volatility == pytest.approx(18.0)


def test_expected_final_value_ordered_by_tier():
    trials = run_trials(10000, 20, 100, n_trials=50, seed=0)
    assert list(trials.index) == list(RISK_TIERS)
    means = trials["mean"]
    assert means["conservative"] < means["moderate"] < means["aggressive"]
    assert (trials["p10"] <= trials["median"]).all()
    assert (trials["median"] <= trials["p90"]).all()


@pytest.mark.parametrize("kwargs", [
    dict(initial_amount=0, duration_years=5),
    dict(initial_amount=1000, duration_years=-1),
    dict(initial_amount=1000, duration_years=2.5),
    dict(initial_amount=1000, duration_years=51),
    dict(initial_amount=1000, duration_years=10**9),
    dict(initial_amount=1000, duration_years=5, monthly_contribution=-10),
])
def test_invalid_inputs_rejected(kwargs):
    with pytest.raises(InvalidInputError):
        run_scenarios(**kwargs)


def test_unknown_tier_rejected():
    with pytest.raises(InvalidInputError):
        simulate_tier(1000, 1, "reckless")


@pytest.mark.parametrize("args", [
    (1000, 2.5, "moderate"),
    (1000, "1e9", "moderate"),
    (0, 3, "moderate"),
    (-500, 3, "aggressive"),
])
def test_single_tier_validates_inputs(args):
    rng = FixedDraw(0.5)
    with pytest.raises(InvalidInputError):
        simulate_tier(*args, rng=rng)
    assert rng.calls == 0


def test_single_tier_accepts_form_strings():
    yearly = simulate_tier("1,000", "2", "conservative", monthly_contribution="50",
                           rng=FixedDraw(0.5))
    assert len(yearly) == 3
    assert yearly[0] == 1000.0


def test_frame_and_report():
    comparison = run_scenarios(10000, 3, rng=np.random.default_rng(5))
    df = projections_to_frame(comparison)
    assert list(df.columns) == list(RISK_TIERS)
    assert df.index.tolist() == [0, 1, 2, 3]

    report = format_scenario_report(comparison, 10000)
    assert "INVESTMENT SCENARIO COMPARISON" in report
    for tier in RISK_TIERS:
        assert tier in report
