# planning/assessment.py — Financial Health Score
#
# Five weighted sub-scores summed to a 0–100 health score:
#   Savings rate       0–25
#   Debt management    0–25
#   Emergency fund     0–20
#   Expense ratio      0–15
#   Goal planning      0–15
#
# The same ratios drive the risk areas, strengths and recommendations.

from dataclasses import dataclass, field

from config import (
    SAVINGS_RATE_TIERS, SAVINGS_RATE_POSITIVE_POINTS,
    DEBT_RATIO_TIERS, DEBT_RATIO_FLOOR_POINTS,
    EMERGENCY_FUND_TIERS, EMERGENCY_FUND_POSITIVE_POINTS,
    EXPENSE_RATIO_TIERS, EXPENSE_RATIO_FLOOR_POINTS,
    GOAL_POINTS_BOTH, GOAL_POINTS_SINGLE,
    SCORE_CATEGORIES, SCORE_CATEGORY_FLOOR,
    ASSESSMENT_RISK_TOLERANCES,
)
from planning.validation import parse_amount, parse_choice, parse_text


# ─────────────────────────────────────────────────────────────────────────────
# INPUT / OUTPUT RECORDS
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class FinancialSnapshot:
    """Household snapshot as entered on the assessment form."""
    monthly_income: float
    monthly_expenses: float
    total_debt: float = 0.0
    savings_amount: float = 0.0
    emergency_fund_months: float = 0.0
    short_term_goals: str = ""
    long_term_goals: str = ""
    risk_tolerance: str = "medium"         # low | medium | high

    def __post_init__(self):
        self.monthly_income        = parse_amount("monthly_income", self.monthly_income,
                                                  strictly_positive=True)
        self.monthly_expenses      = parse_amount("monthly_expenses", self.monthly_expenses)
        self.total_debt            = parse_amount("total_debt", self.total_debt)
        self.savings_amount        = parse_amount("savings_amount", self.savings_amount)
        self.emergency_fund_months = parse_amount("emergency_fund_months", self.emergency_fund_months)
        self.short_term_goals      = parse_text("short_term_goals", self.short_term_goals)
        self.long_term_goals       = parse_text("long_term_goals", self.long_term_goals)
        self.risk_tolerance        = parse_choice("risk_tolerance", self.risk_tolerance,
                                                  ASSESSMENT_RISK_TOLERANCES)


@dataclass
class HealthAssessment:
    score: int
    category: str                          # poor | fair | good | excellent
    risk_areas: list = field(default_factory=list)
    strengths: list = field(default_factory=list)
    recommendations: list = field(default_factory=list)
    breakdown: dict = field(default_factory=dict)


# ─────────────────────────────────────────────────────────────────────────────
# SUB-SCORES
# ─────────────────────────────────────────────────────────────────────────────

def _score_at_least(value: float, tiers: list, positive_points: int) -> int:
    for threshold, points in tiers:
        if value >= threshold:
            return points
    return positive_points if value > 0 else 0


def _score_at_most(value: float, tiers: list, floor_points: int) -> int:
    for threshold, points in tiers:
        if value <= threshold:
            return points
    return floor_points


def score_savings_rate(savings_rate: float) -> int:
    return _score_at_least(savings_rate, SAVINGS_RATE_TIERS, SAVINGS_RATE_POSITIVE_POINTS)


def score_debt_ratio(debt_ratio: float) -> int:
    return _score_at_most(debt_ratio, DEBT_RATIO_TIERS, DEBT_RATIO_FLOOR_POINTS)


def score_emergency_fund(months: float) -> int:
    return _score_at_least(months, EMERGENCY_FUND_TIERS, EMERGENCY_FUND_POSITIVE_POINTS)


def score_expense_ratio(expense_ratio: float) -> int:
    return _score_at_most(expense_ratio, EXPENSE_RATIO_TIERS, EXPENSE_RATIO_FLOOR_POINTS)


def score_goal_planning(short_term: str, long_term: str) -> int:
    if short_term and long_term:
        return GOAL_POINTS_BOTH
    if short_term or long_term:
        return GOAL_POINTS_SINGLE
    return 0


def categorize(score: int) -> str:
    for threshold, category in SCORE_CATEGORIES:
        if score >= threshold:
            return category
    return SCORE_CATEGORY_FLOOR


# ─────────────────────────────────────────────────────────────────────────────
# HEALTH SCORE
# ─────────────────────────────────────────────────────────────────────────────

def compute_health_score(snapshot: FinancialSnapshot) -> HealthAssessment:
    """
    Score a household snapshot and explain the result.

    Income is guaranteed > 0 by FinancialSnapshot, so all ratios are finite.
    """
    income   = snapshot.monthly_income
    expenses = snapshot.monthly_expenses

    savings_rate  = (income - expenses) / income
    debt_ratio    = snapshot.total_debt / (income * 12)
    expense_ratio = expenses / income
    fund_months   = snapshot.emergency_fund_months
    has_short     = bool(snapshot.short_term_goals)
    has_long      = bool(snapshot.long_term_goals)

    breakdown = {
        "savings_rate":       score_savings_rate(savings_rate),
        "debt_management":    score_debt_ratio(debt_ratio),
        "emergency_fund":     score_emergency_fund(fund_months),
        "expense_management": score_expense_ratio(expense_ratio),
        "goal_planning":      score_goal_planning(snapshot.short_term_goals,
                                                  snapshot.long_term_goals),
    }
    score = int(round(sum(breakdown.values())))

    risk_areas, strengths, recommendations = [], [], []

    # ── Risk areas & strengths ────────────────────────────────────────────
    if savings_rate < 0.05:
        risk_areas.append("Very low savings rate - you're spending most or all of your income")
    elif savings_rate < 0.10:
        risk_areas.append("Low savings rate - consider increasing your monthly savings")
    else:
        strengths.append(f"Healthy savings rate of {savings_rate * 100:.1f}%")

    if debt_ratio > 1.0:
        risk_areas.append(
            f"High debt-to-income ratio of {debt_ratio * 100:.1f}% - debt exceeds annual income"
        )
    elif debt_ratio > 0.7:
        risk_areas.append(
            f"Elevated debt-to-income ratio of {debt_ratio * 100:.1f}% - consider debt reduction strategy"
        )
    elif debt_ratio <= 0.3:
        strengths.append(
            f"Excellent debt management with a {debt_ratio * 100:.1f}% debt-to-income ratio"
        )

    if fund_months < 3:
        risk_areas.append(
            f"Insufficient emergency fund - you have coverage for only {fund_months:.1f} months of expenses"
        )
    elif fund_months >= 6:
        strengths.append(f"Strong emergency fund with {fund_months:.1f} months of coverage")

    if expenses > income:
        risk_areas.append("Monthly expenses exceed income - you're running a deficit")
    elif expense_ratio > 0.85:
        risk_areas.append("Expenses are consuming over 85% of income - limited flexibility for emergencies")

    # ── Recommendations (fixed order, not exclusive) ──────────────────────
    if savings_rate < 0.10:
        recommendations.append(
            "Increase your monthly savings to at least 10% of income. "
            "Review expenses and identify areas to reduce."
        )
    if debt_ratio > 0.5:
        recommendations.append(
            "Create a debt reduction strategy. Focus on paying down high-interest debt "
            "first (credit cards, personal loans)."
        )
    if fund_months < 3:
        recommendations.append(
            "Build an emergency fund covering 3-6 months of expenses. "
            "Set up automatic monthly transfers to savings."
        )
    if expenses > income * 0.85:
        recommendations.append(
            "Review and reduce discretionary spending. "
            "Create a detailed budget tracking each expense category."
        )
    if has_short or has_long:
        recommendations.append(
            "Create a timeline and savings plan for your goals. "
            "Break long-term goals into smaller milestones."
        )
    else:
        recommendations.append(
            "Define clear short and long-term financial goals. "
            "Having specific targets helps motivate saving and investing."
        )
    if snapshot.savings_amount > 0:
        recommendations.append(
            "Consider diversifying your savings across high-yield savings accounts "
            "and appropriate investments based on your risk tolerance."
        )

    return HealthAssessment(
        score           = score,
        category        = categorize(score),
        risk_areas      = risk_areas,
        strengths       = strengths,
        recommendations = recommendations,
        breakdown       = breakdown,
    )


# ─────────────────────────────────────────────────────────────────────────────
# REPORT
# ─────────────────────────────────────────────────────────────────────────────

_BREAKDOWN_LABELS = [
    ("savings_rate",       "Savings Rate",       25),
    ("debt_management",    "Debt Management",    25),
    ("emergency_fund",     "Emergency Fund",     20),
    ("expense_management", "Expense Management", 15),
    ("goal_planning",      "Goal Planning",      15),
]


def format_assessment_report(assessment: HealthAssessment) -> str:
    """Plain-text health report."""
    lines = []
    lines.append("=" * 62)
    lines.append(f"  FINANCIAL HEALTH ASSESSMENT")
    lines.append(f"  Score     : {assessment.score}/100")
    lines.append(f"  Category  : {assessment.category.upper()}")
    lines.append("=" * 62)
    for key, label, max_points in _BREAKDOWN_LABELS:
        points = assessment.breakdown.get(key, 0)
        lines.append(f"  {label:<22} {points:>3}/{max_points:<3} {'█' * points}")
    lines.append("─" * 62)

    if assessment.strengths:
        lines.append("\n  STRENGTHS")
        for s in assessment.strengths:
            lines.append(f"  ✓ {s}")
    if assessment.risk_areas:
        lines.append("\n  RISK AREAS")
        for r in assessment.risk_areas:
            lines.append(f"  ⚠ {r}")
    lines.append("\n  RECOMMENDATIONS")
    for i, rec in enumerate(assessment.recommendations, 1):
        lines.append(f"  {i}. {rec}")

    return "\n".join(lines)
