# tests/test_assessment.py — Health score tiers, category thresholds, messages

import pytest

from planning.assessment import (
    FinancialSnapshot, compute_health_score, categorize,
    score_savings_rate, score_debt_ratio, score_emergency_fund,
    score_expense_ratio, score_goal_planning, format_assessment_report,
)
from planning.validation import InvalidInputError


def make_snapshot(**overrides):
    base = dict(
        monthly_income=5000, monthly_expenses=3000, total_debt=10000,
        savings_amount=5000, emergency_fund_months=4,
        short_term_goals="x", long_term_goals="y", risk_tolerance="medium",
    )
    base.update(overrides)
    return FinancialSnapshot(**base)


def test_worked_example_scores_93_excellent():
    a = compute_health_score(make_snapshot())
    assert a.breakdown == {
        "savings_rate": 25, "debt_management": 25, "emergency_fund": 16,
        "expense_management": 12, "goal_planning": 15,
    }
    assert a.score == 93
    assert a.category == "excellent"


@pytest.mark.parametrize("rate, points", [
    (0.40, 25), (0.25, 25), (0.24, 22), (0.20, 22), (0.15, 20),
    (0.10, 15), (0.05, 10), (0.01, 5), (0.0, 0), (-0.5, 0),
])
def test_savings_rate_tiers(rate, points):
    assert score_savings_rate(rate) == points


@pytest.mark.parametrize("ratio, points", [
    (0.0, 25), (0.3, 25), (0.31, 20), (0.5, 20), (0.7, 15), (1.0, 10), (1.01, 5),
])
def test_debt_ratio_tiers(ratio, points):
    assert score_debt_ratio(ratio) == points


@pytest.mark.parametrize("months, points", [
    (12, 20), (6, 20), (4, 16), (3, 12), (1, 8), (0.5, 4), (0, 0),
])
def test_emergency_fund_tiers(months, points):
    assert score_emergency_fund(months) == points


@pytest.mark.parametrize("ratio, points", [
    (0.5, 15), (0.65, 12), (0.75, 10), (0.85, 7), (0.9, 3), (1.5, 3),
])
def test_expense_ratio_tiers(ratio, points):
    assert score_expense_ratio(ratio) == points


def test_goal_planning_points():
    assert score_goal_planning("a", "b") == 15
    assert score_goal_planning("a", "") == 8
    assert score_goal_planning("", "b") == 8
    assert score_goal_planning("", "") == 0


@pytest.mark.parametrize("score, category", [
    (100, "excellent"), (80, "excellent"), (79, "good"), (60, "good"),
    (59, "fair"), (40, "fair"), (39, "poor"), (0, "poor"),
])
def test_category_thresholds(score, category):
    assert categorize(score) == category


def test_score_stays_in_range_for_worst_case():
    a = compute_health_score(make_snapshot(
        monthly_expenses=9000, total_debt=500000, savings_amount=0,
        emergency_fund_months=0, short_term_goals="", long_term_goals="",
    ))
    # 0 + 5 + 0 + 3 + 0
    assert a.score == 8
    assert a.category == "poor"
    assert 0 <= a.score <= 100


def test_deficit_household_messages():
    a = compute_health_score(make_snapshot(
        monthly_expenses=6000, total_debt=70000, emergency_fund_months=1,
        savings_amount=0, short_term_goals="", long_term_goals="",
    ))
    assert a.risk_areas[0].startswith("Very low savings rate")
    assert any("debt exceeds annual income" in r for r in a.risk_areas)
    assert any("only 1.0 months" in r for r in a.risk_areas)
    assert a.risk_areas[-1] == "Monthly expenses exceed income - you're running a deficit"
    assert a.strengths == []
    assert [r.split(".")[0] for r in a.recommendations] == [
        "Increase your monthly savings to at least 10% of income",
        "Create a debt reduction strategy",
        "Build an emergency fund covering 3-6 months of expenses",
        "Review and reduce discretionary spending",
        "Define clear short and long-term financial goals",
    ]


def test_healthy_household_strengths():
    a = compute_health_score(make_snapshot(emergency_fund_months=6))
    assert a.strengths == [
        "Healthy savings rate of 40.0%",
        "Excellent debt management with a 16.7% debt-to-income ratio",
        "Strong emergency fund with 6.0 months of coverage",
    ]
    assert a.risk_areas == []
    assert a.recommendations[-1].startswith("Consider diversifying your savings")
    assert a.recommendations[0].startswith("Create a timeline and savings plan")


def test_high_expense_ratio_flagged_without_deficit():
    a = compute_health_score(make_snapshot(monthly_expenses=4500))
    assert "Expenses are consuming over 85% of income - limited flexibility for emergencies" in a.risk_areas
    assert "Low savings rate - consider increasing your monthly savings" not in a.risk_areas


def test_elevated_debt_between_70_and_100_percent():
    a = compute_health_score(make_snapshot(total_debt=48000))  # 0.8 of 60000
    assert any(r.startswith("Elevated debt-to-income ratio of 80.0%") for r in a.risk_areas)


def test_idempotent():
    snap = make_snapshot()
    assert compute_health_score(snap) == compute_health_score(snap)


def test_string_form_values_are_parsed():
    snap = make_snapshot(monthly_income="5,000", monthly_expenses="3000", risk_tolerance="Medium")
    assert snap.monthly_income == 5000.0
    assert snap.risk_tolerance == "medium"
    assert compute_health_score(snap).score == 93


@pytest.mark.parametrize("income", [0, -100, "0", "abc", ""])
def test_non_positive_or_invalid_income_rejected(income):
    with pytest.raises(InvalidInputError) as exc:
        make_snapshot(monthly_income=income)
    assert exc.value.field == "monthly_income"


def test_negative_debt_rejected():
    with pytest.raises(InvalidInputError):
        make_snapshot(total_debt=-1)


def test_unknown_risk_tolerance_rejected():
    with pytest.raises(InvalidInputError):
        make_snapshot(risk_tolerance="extreme")


def test_report_mentions_score_and_category():
    report = format_assessment_report(compute_health_score(make_snapshot()))
    assert "93/100" in report
    assert "EXCELLENT" in report
    assert "RECOMMENDATIONS" in report
