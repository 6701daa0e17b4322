# planning/wealth.py — Retirement Projection & Wealth Summary
#
# The net-worth balance (assets − liabilities) grows month by month:
#   balance += monthly_savings
#   balance += balance * monthly_return
# Year 0 already includes its twelve months of growth.
#
# The 60/40 savings/investments split on each row is a display convention
# over ONE balance, not two separately compounding pools.

from dataclasses import dataclass, field

import pandas as pd

from config import (
    RISK_TIERS, ALLOCATION_BY_RISK, MAX_HORIZON_YEARS,
    RETIREMENT_SAVINGS_SHARE, RETIREMENT_INVESTMENT_SHARE,
    WITHDRAWAL_RATE, LIMIT_401K, LIMIT_ROTH_IRA,
)
from planning.validation import InvalidInputError, parse_amount, parse_int, parse_choice


@dataclass
class WealthProfile:
    age: int
    retirement_age: int
    current_income: float
    current_assets: float
    current_liabilities: float
    monthly_savings: float
    investment_return_pct: float           # e.g. 7 for 7%
    tax_bracket_pct: float = 0.0
    estate_value: float = 0.0
    risk_tolerance: str = "moderate"       # conservative | moderate | aggressive

    def __post_init__(self):
        self.age                   = parse_int("age", self.age, minimum=0)
        self.retirement_age        = parse_int("retirement_age", self.retirement_age, minimum=0)
        self.current_income        = parse_amount("current_income", self.current_income)
        self.current_assets        = parse_amount("current_assets", self.current_assets)
        self.current_liabilities   = parse_amount("current_liabilities", self.current_liabilities)
        self.monthly_savings       = parse_amount("monthly_savings", self.monthly_savings)
        self.investment_return_pct = parse_amount("investment_return_pct",
                                                  self.investment_return_pct, minimum=None)
        self.tax_bracket_pct       = parse_amount("tax_bracket_pct", self.tax_bracket_pct)
        self.estate_value          = parse_amount("estate_value", self.estate_value)
        self.risk_tolerance        = parse_choice("risk_tolerance", self.risk_tolerance, RISK_TIERS)

        if self.retirement_age <= self.age:
            raise InvalidInputError(
                "retirement_age",
                f"must be greater than age ({self.age}), got {self.retirement_age}",
            )
        if self.retirement_age - self.age > MAX_HORIZON_YEARS:
            raise InvalidInputError(
                "retirement_age",
                f"must be within {MAX_HORIZON_YEARS} years of age ({self.age}), got {self.retirement_age}",
            )
        if self.tax_bracket_pct > 100:
            raise InvalidInputError("tax_bracket_pct", f"must be at most 100, got {self.tax_bracket_pct:g}")

    @property
    def net_worth(self) -> float:
        return self.current_assets - self.current_liabilities

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.age


@dataclass
class RetirementProjectionPoint:
    age: int
    savings: float
    investments: float
    total: float


@dataclass
class AllocationSlice:
    category: str
    percentage: float
    value: float


@dataclass
class RetirementPlan:
    projections: list = field(default_factory=list)
    allocation: list = field(default_factory=list)


# ─────────────────────────────────────────────────────────────────────────────
# PROJECTION
# ─────────────────────────────────────────────────────────────────────────────

def recommend_allocation(risk_tolerance: str, net_worth: float) -> list:
    """Stocks / Bonds / Real Estate split of today's net worth."""
    return [
        AllocationSlice(category=category, percentage=pct, value=pct / 100 * net_worth)
        for category, pct in ALLOCATION_BY_RISK[risk_tolerance].items()
    ]


def project_retirement(profile: WealthProfile) -> RetirementPlan:
    """
    Year-by-year balance from current age to retirement age inclusive,
    plus the recommended allocation for the profile's risk tier.
    """
    monthly_return = profile.investment_return_pct / 100 / 12
    balance = profile.net_worth

    projections = []
    for year in range(profile.years_to_retirement + 1):
        for _ in range(12):
            balance += profile.monthly_savings
            balance += balance * monthly_return
        projections.append(RetirementProjectionPoint(
            age         = profile.age + year,
            savings     = balance * RETIREMENT_SAVINGS_SHARE,
            investments = balance * RETIREMENT_INVESTMENT_SHARE,
            total       = balance,
        ))

    return RetirementPlan(
        projections = projections,
        allocation  = recommend_allocation(profile.risk_tolerance, profile.net_worth),
    )


def retirement_to_frame(plan: RetirementPlan) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"age": p.age, "savings": p.savings,
             "investments": p.investments, "total": p.total}
            for p in plan.projections
        ],
        columns=["age", "savings", "investments", "total"],
    ).set_index("age")


# ─────────────────────────────────────────────────────────────────────────────
# WEALTH SUMMARY (tax & estate guidance)
# ─────────────────────────────────────────────────────────────────────────────

def summarize_wealth(profile: WealthProfile, plan: RetirementPlan) -> dict:
    """Headline numbers and fixed guidance shown next to the projection."""
    retirement_savings = plan.projections[-1].total if plan.projections else 0.0
    bracket = f"{profile.tax_bracket_pct:g}"

    tax_suggestions = [
        f"Maximize 401(k) contributions: contribute up to ${LIMIT_401K:,} annually "
        f"to reduce taxable income by {bracket}%.",
        f"Roth IRA: contribute for tax-free withdrawals in retirement. "
        f"Current limit: ${LIMIT_ROTH_IRA:,} annually.",
        "Tax-loss harvesting: offset capital gains with losses to reduce tax "
        "liability. Review portfolio quarterly.",
    ]
    estate_recommendations = [
        f"Estate value of ${profile.estate_value:,.0f}: consider establishing a "
        f"trust to minimize estate taxes",
        "Review beneficiary designations on all accounts annually",
        "Consult with an estate attorney for comprehensive planning",
        "Consider gifting strategies to reduce taxable estate",
    ]

    return {
        "net_worth":                 profile.net_worth,
        "retirement_savings":        retirement_savings,
        "annual_retirement_income":  retirement_savings * WITHDRAWAL_RATE,
        "years_to_retirement":       profile.years_to_retirement,
        "tax_suggestions":           tax_suggestions,
        "estate_recommendations":    estate_recommendations,
    }


# ─────────────────────────────────────────────────────────────────────────────
# REPORT
# ─────────────────────────────────────────────────────────────────────────────

def format_retirement_report(profile: WealthProfile, plan: RetirementPlan, summary: dict) -> str:
    lines = []
    lines.append("╔" + "═" * 63 + "╗")
    lines.append(f"║  RETIREMENT & WEALTH PLAN" + " " * 37 + "║")
    lines.append("╠" + "═" * 63 + "╣")
    age_span = f"{profile.age} → {profile.retirement_age}"
    lines.append(f"║  Age         : {age_span:<47}║")
    lines.append(f"║  Net Worth   : ${summary['net_worth']:>14,.0f}" + " " * 32 + "║")
    lines.append(f"║  Monthly add : ${profile.monthly_savings:>14,.0f}" + " " * 32 + "║")
    lines.append(f"║  Return      : {str(profile.investment_return_pct) + '%':<47}║")
    lines.append(f"║  Risk        : {profile.risk_tolerance:<47}║")
    lines.append("╚" + "═" * 63 + "╝")

    lines.append(f"\n  Projected savings at {profile.retirement_age} : ${summary['retirement_savings']:>14,.0f}")
    lines.append(f"  Annual income (4% rule)      : ${summary['annual_retirement_income']:>14,.0f}")

    lines.append(f"\n  📊 RECOMMENDED ASSET ALLOCATION")
    for s in plan.allocation:
        lines.append(f"  {s.category:<14} {s.percentage:>3.0f}%  ${s.value:>12,.0f}  {'█' * int(s.percentage / 5)}")

    lines.append(f"\n  📅 PROJECTION")
    lines.append(f"  {'Age':<6} {'Savings':>14} {'Investments':>14} {'Total':>14}")
    lines.append(f"  {'─'*52}")
    last_age = plan.projections[-1].age if plan.projections else profile.age
    for p in plan.projections:
        if (p.age - profile.age) % 5 == 0 or p.age == last_age:
            lines.append(
                f"  {p.age:<6} ${p.savings:>13,.0f} "
                f"${p.investments:>13,.0f} "
                f"${p.total:>13,.0f}"
            )

    lines.append(f"\n  💡 TAX OPTIMIZATION")
    for s in summary["tax_suggestions"]:
        lines.append(f"  • {s}")
    lines.append(f"\n  🏛  ESTATE PLANNING")
    for s in summary["estate_recommendations"]:
        lines.append(f"  • {s}")

    lines.append("─" * 64)
    return "\n".join(lines)
