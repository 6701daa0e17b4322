# planning/goals.py — Goal-Based Savings Plan
#
# Goals: Retirement, Home, Education, Wealth
# Horizon: whole years, 1 to MAX_HORIZON_YEARS
#
# The plan spreads the gap between current savings and the target evenly
# over the horizon, then splits each month's amount 60/40 between savings
# and investments. Growth is LINEAR in the month index: the investment leg
# gets a flat risk-based uplift, there is no compounding.

from dataclasses import dataclass, field
from typing import Optional

import pandas as pd

from config import (
    GOAL_TYPES, RISK_TIERS, MAX_HORIZON_YEARS,
    PLAN_SAVINGS_SHARE, PLAN_INVESTMENT_SHARE,
    PLAN_BONUS_AGGRESSIVE, PLAN_BONUS_DEFAULT,
    PLAN_CHECKPOINT_MONTHS, PLAN_RECOMMENDATIONS,
)
from planning.validation import parse_amount, parse_int, parse_choice


# ─────────────────────────────────────────────────────────────────────────────
# GOAL REQUEST DATACLASS
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class GoalRequest:
    """User-defined goal."""
    age: int
    income: float
    current_savings: float
    target_goal: str                       # retirement | home | education | wealth
    target_amount: float
    time_horizon_years: int
    risk_tolerance: str = "moderate"       # conservative | moderate | aggressive

    def __post_init__(self):
        self.age                = parse_int("age", self.age, minimum=0)
        self.income             = parse_amount("income", self.income)
        self.current_savings    = parse_amount("current_savings", self.current_savings)
        self.target_goal        = parse_choice("target_goal", self.target_goal, GOAL_TYPES)
        self.target_amount      = parse_amount("target_amount", self.target_amount,
                                               strictly_positive=True)
        self.time_horizon_years = parse_int("time_horizon_years", self.time_horizon_years,
                                            minimum=1, maximum=MAX_HORIZON_YEARS)
        self.risk_tolerance     = parse_choice("risk_tolerance", self.risk_tolerance, RISK_TIERS)


@dataclass
class MonthlyPlanPoint:
    month: int
    savings: float
    investments: float
    total: float
    milestone_label: Optional[str] = None


@dataclass
class FinancialPlan:
    summary: str
    monthly_savings: float
    monthly_plans: list = field(default_factory=list)
    recommendations: list = field(default_factory=list)
    milestones: list = field(default_factory=list)


# ─────────────────────────────────────────────────────────────────────────────
# PLAN GENERATION
# ─────────────────────────────────────────────────────────────────────────────

def investment_bonus(risk_tolerance: str) -> float:
    return PLAN_BONUS_AGGRESSIVE if risk_tolerance == "aggressive" else PLAN_BONUS_DEFAULT


def required_monthly_savings(request: GoalRequest) -> float:
    """
    Even monthly amount that closes the gap to the target.
    Negative when current savings already exceed the target.
    """
    months = request.time_horizon_years * 12
    return (request.target_amount - request.current_savings) / months


def project_month(request: GoalRequest, month: int) -> MonthlyPlanPoint:
    """Plan point for any month index, including months past the horizon."""
    monthly     = required_monthly_savings(request)
    savings     = monthly * PLAN_SAVINGS_SHARE * month
    bonus       = investment_bonus(request.risk_tolerance)
    investments = monthly * PLAN_INVESTMENT_SHARE * month * (1 + bonus)
    return MonthlyPlanPoint(
        month           = month,
        savings         = savings,
        investments     = investments,
        total           = request.current_savings + savings + investments,
        milestone_label = f"Year {month // 12} milestone" if month % 12 == 0 else None,
    )


def project_monthly_plan(request: GoalRequest) -> list:
    """One MonthlyPlanPoint per month of the horizon, month 1 first."""
    months = request.time_horizon_years * 12
    return [project_month(request, month) for month in range(1, months + 1)]


def _checkpoints(request: GoalRequest, final: MonthlyPlanPoint) -> list:
    # fixed checkpoints follow the same linear formula even past the horizon
    lines = []
    for month in PLAN_CHECKPOINT_MONTHS:
        point = project_month(request, month)
        lines.append(f"Month {month}: Reach ${point.total:,.0f}")
    lines.append(f"Month {final.month}: Achieve projected total of ${final.total:,.0f}")
    return lines


def generate_plan(request: GoalRequest) -> FinancialPlan:
    """Build the month-by-month plan, summary and milestone checkpoints."""
    monthly = required_monthly_savings(request)
    monthly_plans = project_monthly_plan(request)

    summary = (
        f"Based on your goal to {request.target_goal} with a target of "
        f"${request.target_amount:,.0f} in {request.time_horizon_years} years, "
        f"we recommend a {request.risk_tolerance} investment strategy with "
        f"monthly savings of ${monthly:,.2f}."
    )

    return FinancialPlan(
        summary         = summary,
        monthly_savings = monthly,
        monthly_plans   = monthly_plans,
        recommendations = list(PLAN_RECOMMENDATIONS),
        milestones      = _checkpoints(request, monthly_plans[-1]),
    )


def plan_to_frame(plan: FinancialPlan) -> pd.DataFrame:
    """Monthly plan as a DataFrame indexed by month."""
    df = pd.DataFrame(
        [
            {
                "month":       p.month,
                "savings":     p.savings,
                "investments": p.investments,
                "total":       p.total,
                "milestone":   p.milestone_label or "",
            }
            for p in plan.monthly_plans
        ],
        columns=["month", "savings", "investments", "total", "milestone"],
    )
    return df.set_index("month")


# ─────────────────────────────────────────────────────────────────────────────
# GOAL REPORT FORMATTER
# ─────────────────────────────────────────────────────────────────────────────

def format_goal_report(request: GoalRequest, plan: FinancialPlan) -> str:
    """Generate a goal-based planning report."""
    lines = []
    lines.append("╔" + "═" * 63 + "╗")
    lines.append(f"║  GOAL-BASED SAVINGS PLAN" + " " * 38 + "║")
    lines.append("╠" + "═" * 63 + "╣")
    lines.append(f"║  Goal        : {request.target_goal.title():<47}║")
    lines.append(f"║  Target      : ${request.target_amount:>14,.0f}" + " " * 32 + "║")
    lines.append(f"║  Saved today : ${request.current_savings:>14,.0f}" + " " * 32 + "║")
    lines.append(f"║  Horizon     : {str(request.time_horizon_years) + ' years':<47}║")
    lines.append(f"║  Risk        : {request.risk_tolerance:<47}║")
    lines.append("╚" + "═" * 63 + "╝")

    lines.append(f"\n  {plan.summary}")
    if plan.monthly_savings < 0:
        lines.append("  ⚠ Current savings already exceed the target; the plan draws down.")

    # ── Year-end rows only ────────────────────────────────────────────────
    lines.append(f"\n  📅 YEAR-BY-YEAR MILESTONES")
    lines.append(f"  {'Month':<6} {'Savings':>14} {'Investments':>14} {'Total':>14}")
    lines.append(f"  {'─'*52}")
    for p in plan.monthly_plans:
        if p.milestone_label:
            lines.append(
                f"  {p.month:<6} ${p.savings:>13,.0f} "
                f"${p.investments:>13,.0f} "
                f"${p.total:>13,.0f}"
            )

    lines.append(f"\n  🎯 CHECKPOINTS")
    for m in plan.milestones:
        lines.append(f"  • {m}")

    lines.append(f"\n  💡 RECOMMENDATIONS")
    for rec in plan.recommendations:
        lines.append(f"  • {rec}")

    lines.append("─" * 64)
    return "\n".join(lines)
