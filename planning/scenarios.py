# planning/scenarios.py — Multi-Scenario Investment Projection
#
# Runs the same contribution schedule through three risk tiers
# (conservative / moderate / aggressive). Each month:
#   balance += contribution
#   r = annual_return/12 + (U - 0.5) * (volatility/√12) * VOLATILITY_DAMPING
#   balance *= 1 + r
# with U drawn uniformly from [0, 1). Every tier draws its own values.
#
# Drawdown and volatility in the summary are the tier ASSUMPTIONS, not
# statistics of the simulated path.

import math
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from config import (
    RISK_PROFILES, RISK_TIERS, VOLATILITY_DAMPING, N_TRIALS, RANDOM_STATE, MAX_HORIZON_YEARS,
)
from planning.validation import InvalidInputError, parse_amount, parse_int


@dataclass
class ScenarioResult:
    final_value: float
    total_return: float
    annualized_return: float      # %
    max_drawdown: float           # %
    volatility: float             # %


@dataclass
class ProjectionPoint:
    year: int
    conservative: float
    moderate: float
    aggressive: float


@dataclass
class ScenarioComparison:
    conservative: ScenarioResult
    moderate: ScenarioResult
    aggressive: ScenarioResult
    projections: list = field(default_factory=list)

    def result_for(self, tier: str) -> ScenarioResult:
        return getattr(self, tier)


# ─────────────────────────────────────────────────────────────────────────────
# SIMULATION
# ─────────────────────────────────────────────────────────────────────────────

def _check_inputs(initial_amount, duration_years, monthly_contribution):
    initial_amount       = parse_amount("initial_amount", initial_amount, strictly_positive=True)
    duration_years       = parse_int("duration_years", duration_years, minimum=0,
                                     maximum=MAX_HORIZON_YEARS)
    monthly_contribution = parse_amount("monthly_contribution", monthly_contribution)
    return initial_amount, duration_years, monthly_contribution


def simulate_tier(
    initial_amount: float,
    duration_years: int,
    tier: str,
    monthly_contribution: float = 0.0,
    rng=None,
) -> list:
    """
    Year-end balances for one tier, year 0 first.

    rng: anything with a random() method returning floats in [0, 1).
    """
    if tier not in RISK_PROFILES:
        raise InvalidInputError("tier", f"expected one of {list(RISK_PROFILES)}, got {tier!r}")
    initial_amount, duration_years, monthly_contribution = _check_inputs(
        initial_amount, duration_years, monthly_contribution
    )
    if rng is None:
        rng = np.random.default_rng()

    assumptions        = RISK_PROFILES[tier]
    monthly_return     = assumptions["annual_return"] / 12
    monthly_volatility = assumptions["volatility"] / math.sqrt(12)

    balance = initial_amount
    yearly  = [initial_amount]
    for _ in range(duration_years):
        for _ in range(12):
            balance += monthly_contribution
            shock    = (float(rng.random()) - 0.5) * monthly_volatility * VOLATILITY_DAMPING
            balance *= 1 + monthly_return + shock
        yearly.append(round(balance, 0))
    return yearly


def summarize_tier(initial_amount: float, yearly: list, tier: str) -> ScenarioResult:
    """
    Summary statistics for one simulated tier.

    The annualized-return exponent counts every yearly point INCLUDING
    year 0, i.e. 1/(duration + 1).
    """
    assumptions = RISK_PROFILES[tier]
    final_value = yearly[-1]
    return ScenarioResult(
        final_value       = final_value,
        total_return      = final_value - initial_amount,
        annualized_return = ((final_value / initial_amount) ** (1 / len(yearly)) - 1) * 100,
        max_drawdown      = assumptions["max_drawdown"] * 100,
        volatility        = assumptions["volatility"] * 100,
    )


def run_scenarios(
    initial_amount: float,
    duration_years: int,
    monthly_contribution: float = 0.0,
    rng=None,
) -> ScenarioComparison:
    """
    Simulate all three tiers independently and combine them by year.

    Pass a seeded generator (np.random.default_rng(seed)) for repeatable
    results; the default is an unseeded one.
    """
    initial_amount, duration_years, monthly_contribution = _check_inputs(
        initial_amount, duration_years, monthly_contribution
    )
    if rng is None:
        rng = np.random.default_rng()

    series  = {}
    results = {}
    for tier in RISK_TIERS:
        series[tier]  = simulate_tier(initial_amount, duration_years, tier,
                                      monthly_contribution, rng)
        results[tier] = summarize_tier(initial_amount, series[tier], tier)

    projections = [
        ProjectionPoint(
            year         = year,
            conservative = series["conservative"][year],
            moderate     = series["moderate"][year],
            aggressive   = series["aggressive"][year],
        )
        for year in range(duration_years + 1)
    ]

    return ScenarioComparison(projections=projections, **results)


def projections_to_frame(comparison: ScenarioComparison) -> pd.DataFrame:
    df = pd.DataFrame(
        [
            {"year": p.year, "conservative": p.conservative,
             "moderate": p.moderate, "aggressive": p.aggressive}
            for p in comparison.projections
        ],
        columns=["year", *RISK_TIERS],
    )
    return df.set_index("year")


# ─────────────────────────────────────────────────────────────────────────────
# REPEATED TRIALS
# ─────────────────────────────────────────────────────────────────────────────

def run_trials(
    initial_amount: float,
    duration_years: int,
    monthly_contribution: float = 0.0,
    n_trials: int = N_TRIALS,
    seed: int = RANDOM_STATE,
) -> pd.DataFrame:
    """
    Repeat the simulation n_trials times and describe the final values.
    Returns DataFrame indexed by tier: mean | median | p10 | p90
    """
    initial_amount, duration_years, monthly_contribution = _check_inputs(
        initial_amount, duration_years, monthly_contribution
    )
    n_trials = parse_int("n_trials", n_trials, minimum=1)
    rng = np.random.default_rng(seed)

    finals = {tier: np.empty(n_trials) for tier in RISK_TIERS}
    for i in range(n_trials):
        for tier in RISK_TIERS:
            finals[tier][i] = simulate_tier(initial_amount, duration_years, tier,
                                            monthly_contribution, rng)[-1]

    rows = []
    for tier in RISK_TIERS:
        values = finals[tier]
        rows.append({
            "tier":   tier,
            "mean":   float(values.mean()),
            "median": float(np.median(values)),
            "p10":    float(np.percentile(values, 10)),
            "p90":    float(np.percentile(values, 90)),
        })
    return pd.DataFrame(rows).set_index("tier")


# ─────────────────────────────────────────────────────────────────────────────
# REPORT
# ─────────────────────────────────────────────────────────────────────────────

def format_scenario_report(
    comparison: ScenarioComparison,
    initial_amount: float,
    monthly_contribution: float = 0.0,
) -> str:
    duration = len(comparison.projections) - 1
    lines = []
    lines.append("=" * 62)
    lines.append(f"  INVESTMENT SCENARIO COMPARISON")
    lines.append(f"  Initial       : ${initial_amount:,.0f}")
    lines.append(f"  Monthly add   : ${monthly_contribution:,.0f}")
    lines.append(f"  Duration      : {duration} years")
    lines.append("=" * 62)
    lines.append(f"  {'Tier':<14} {'Final':>12} {'Gain':>12} {'Ann.%':>7} {'DD%':>6} {'Vol%':>6}")
    lines.append("─" * 62)
    for tier in RISK_TIERS:
        r = comparison.result_for(tier)
        lines.append(
            f"  {tier:<14} ${r.final_value:>11,.0f} "
            f"${r.total_return:>11,.0f} "
            f"{r.annualized_return:>6.2f}% "
            f"{r.max_drawdown:>5.1f}% "
            f"{r.volatility:>5.1f}%"
        )
    lines.append("─" * 62)

    lines.append("\n  ASSUMPTIONS")
    for tier in RISK_TIERS:
        a = RISK_PROFILES[tier]
        lines.append(
            f"  {tier:<14} {a['annual_return']*100:>4.1f}% return  "
            f"{a['volatility']*100:>4.1f}% vol  ({a['description']})"
        )

    lines.append(f"\n  ⚠  Past performance is not indicative of future results.")
    return "\n".join(lines)
