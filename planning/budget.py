# planning/budget.py — Budget Analyzer
#
# Per-category 10% reduction targets plus a 50/30/20 split of income
# (needs / wants / savings).

from dataclasses import dataclass, field

import pandas as pd

from config import BUDGET_REDUCTION, BUDGET_RULE, BUDGET_RECOMMENDATIONS
from planning.validation import InvalidInputError, parse_amount, parse_text


@dataclass
class ExpenseItem:
    category: str
    amount: float

    def __post_init__(self):
        self.category = parse_text("category", self.category)
        if not self.category:
            raise InvalidInputError("category", "value is required")
        self.amount = parse_amount(f"amount[{self.category}]", self.amount)


@dataclass
class BudgetAnalysis:
    total_income: float
    total_expenses: float
    savings: float
    category_breakdown: list = field(default_factory=list)
    recommendations: list = field(default_factory=list)
    potential_savings: float = 0.0
    rule_targets: dict = field(default_factory=dict)


def analyze_budget(expenses: list, income: float) -> BudgetAnalysis:
    """
    expenses: list of ExpenseItem (or (category, amount) pairs)
    income  : monthly income, > 0
    """
    income = parse_amount("income", income, strictly_positive=True)
    items  = [e if isinstance(e, ExpenseItem) else ExpenseItem(*e) for e in expenses]

    total_expenses = sum(e.amount for e in items)

    breakdown = []
    for e in items:
        recommended = e.amount * (1 - BUDGET_REDUCTION)
        breakdown.append({
            "category":    e.category,
            "current":     e.amount,
            "recommended": recommended,
            "difference":  e.amount - recommended,
        })

    return BudgetAnalysis(
        total_income       = income,
        total_expenses     = total_expenses,
        savings            = income - total_expenses,
        category_breakdown = breakdown,
        recommendations    = list(BUDGET_RECOMMENDATIONS),
        potential_savings  = total_expenses * BUDGET_REDUCTION,
        rule_targets       = {k: income * share for k, share in BUDGET_RULE.items()},
    )


def budget_to_frame(analysis: BudgetAnalysis) -> pd.DataFrame:
    return pd.DataFrame(
        analysis.category_breakdown,
        columns=["category", "current", "recommended", "difference"],
    ).set_index("category")


def format_budget_report(analysis: BudgetAnalysis) -> str:
    lines = []
    lines.append("=" * 62)
    lines.append(f"  BUDGET ANALYSIS")
    lines.append(f"  Income          : ${analysis.total_income:>12,.0f}")
    lines.append(f"  Expenses        : ${analysis.total_expenses:>12,.0f}")
    lines.append(f"  Savings         : ${analysis.savings:>12,.0f}")
    lines.append(f"  Potential saving: ${analysis.potential_savings:>12,.0f}")
    lines.append("=" * 62)
    lines.append(f"  {'Category':<20} {'Current':>12} {'Suggested':>12} {'Cut':>10}")
    lines.append("─" * 62)
    for row in analysis.category_breakdown:
        lines.append(
            f"  {row['category']:<20} ${row['current']:>11,.0f} "
            f"${row['recommended']:>11,.0f} ${row['difference']:>9,.0f}"
        )
    lines.append("─" * 62)

    lines.append("\n  50/30/20 TARGETS")
    for bucket, amount in analysis.rule_targets.items():
        lines.append(f"  {bucket.title():<10} ${amount:>12,.0f}")

    lines.append("\n  RECOMMENDATIONS")
    for rec in analysis.recommendations:
        lines.append(f"  • {rec}")
    return "\n".join(lines)
