#!/usr/bin/env python3
"""
main.py — Financial Planning Engine (command line)

Usage:
  python main.py score     --income 5000 --expenses 3000 --debt 10000 --savings 5000 --fund-months 4 --short-goal "Car" --long-goal "House"
  python main.py plan      --age 30 --income 75000 --saved 10000 --goal retirement --target 1000000 --years 30 --risk moderate
  python main.py scenarios --initial 10000 --years 10 --monthly 200 --seed 42
  python main.py retire    --age 35 --retire-at 65 --assets 250000 --liabilities 50000 --monthly 2000 --return 7
  python main.py budget    --income 5000 --expense Rent=1500 --expense Food=600 --expense Travel=300
"""

import argparse
import os

import numpy as np

from planning.assessment import FinancialSnapshot, compute_health_score, format_assessment_report
from planning.goals      import GoalRequest, generate_plan, plan_to_frame, format_goal_report
from planning.scenarios  import (
    run_scenarios, run_trials, projections_to_frame, format_scenario_report,
)
from planning.wealth     import (
    WealthProfile, project_retirement, summarize_wealth,
    retirement_to_frame, format_retirement_report,
)
from planning.budget     import ExpenseItem, analyze_budget, budget_to_frame, format_budget_report
from planning.validation import InvalidInputError, parse_amount
from config import GOAL_TYPES, RISK_TIERS, ASSESSMENT_RISK_TOLERANCES, N_TRIALS


# ─────────────────────────────────────────────────────────────────────────────
# RUNNERS
# ─────────────────────────────────────────────────────────────────────────────

def run_score(args) -> dict:
    snapshot = FinancialSnapshot(
        monthly_income        = args.income,
        monthly_expenses      = args.expenses,
        total_debt            = args.debt,
        savings_amount        = args.savings,
        emergency_fund_months = args.fund_months,
        short_term_goals      = args.short_goal,
        long_term_goals       = args.long_goal,
        risk_tolerance        = args.risk,
    )
    assessment = compute_health_score(snapshot)
    report = format_assessment_report(assessment)
    print(report)
    return {"assessment": assessment, "report": report, "table": None}


def run_plan(args) -> dict:
    request = GoalRequest(
        age                = args.age,
        income             = args.income,
        current_savings    = args.saved,
        target_goal        = args.goal,
        target_amount      = args.target,
        time_horizon_years = args.years,
        risk_tolerance     = args.risk,
    )
    plan = generate_plan(request)
    report = format_goal_report(request, plan)
    print(report)
    return {"plan": plan, "report": report, "table": plan_to_frame(plan)}


def run_scenario_comparison(args) -> dict:
    initial = parse_amount("initial_amount", args.initial, strictly_positive=True)
    monthly = parse_amount("monthly_contribution", args.monthly)
    rng = np.random.default_rng(args.seed)
    comparison = run_scenarios(initial, args.years, monthly, rng=rng)
    report = format_scenario_report(comparison, initial, monthly)
    print(report)

    trials = None
    if args.trials:
        print(f"\n[TRIALS] Repeating simulation {args.trials} times")
        trials = run_trials(initial, args.years, monthly,
                            n_trials=args.trials, seed=args.seed)
        print(trials.round(0).to_string())
    return {"comparison": comparison, "trials": trials, "report": report,
            "table": projections_to_frame(comparison)}


def run_retirement(args) -> dict:
    profile = WealthProfile(
        age                   = args.age,
        retirement_age        = args.retire_at,
        current_income        = args.income,
        current_assets        = args.assets,
        current_liabilities   = args.liabilities,
        monthly_savings       = args.monthly,
        investment_return_pct = args.expected_return,
        tax_bracket_pct       = args.tax_bracket,
        estate_value          = args.estate,
        risk_tolerance        = args.risk,
    )
    plan = project_retirement(profile)
    summary = summarize_wealth(profile, plan)
    report = format_retirement_report(profile, plan, summary)
    print(report)
    return {"plan": plan, "summary": summary, "report": report,
            "table": retirement_to_frame(plan)}


def run_budget(args) -> dict:
    items = [_parse_expense(raw) for raw in args.expense]
    analysis = analyze_budget(items, args.income)
    report = format_budget_report(analysis)
    print(report)
    return {"analysis": analysis, "report": report, "table": budget_to_frame(analysis)}


RUNNERS = {
    "score":     run_score,
    "plan":      run_plan,
    "scenarios": run_scenario_comparison,
    "retire":    run_retirement,
    "budget":    run_budget,
}


# ─────────────────────────────────────────────────────────────────────────────
# HELPERS
# ─────────────────────────────────────────────────────────────────────────────

def _parse_expense(raw: str) -> ExpenseItem:
    """'Rent=1500' → ExpenseItem('Rent', 1500.0)"""
    category, sep, amount = raw.partition("=")
    if not sep:
        raise InvalidInputError("expense", f"expected CATEGORY=AMOUNT, got {raw!r}")
    return ExpenseItem(category, parse_amount(f"amount[{category.strip()}]", amount))


def save_outputs(command: str, results: dict, out_dir: str) -> None:
    os.makedirs(out_dir, exist_ok=True)
    with open(os.path.join(out_dir, f"{command}_report.txt"), "w", encoding="utf-8") as f:
        f.write(results["report"])
    if results.get("table") is not None:
        results["table"].to_csv(os.path.join(out_dir, f"{command}_table.csv"))
    print(f"\n  Reports saved -> {out_dir}")


# ─────────────────────────────────────────────────────────────────────────────
# CLI
# ─────────────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Financial Planning Engine: health score, goal plans, scenarios, retirement",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--out", type=str, default=None,
                        help="Write the report and projection table to this directory")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("score", help="Financial health score (0-100)")
    p.add_argument("--income",      type=str, required=True, help="Monthly income")
    p.add_argument("--expenses",    type=str, required=True, help="Monthly expenses")
    p.add_argument("--debt",        type=str, default="0",   help="Total outstanding debt")
    p.add_argument("--savings",     type=str, default="0",   help="Current savings")
    p.add_argument("--fund-months", type=str, default="0",   help="Emergency fund, months of expenses")
    p.add_argument("--short-goal",  type=str, default="",    help="Short-term goals (free text)")
    p.add_argument("--long-goal",   type=str, default="",    help="Long-term goals (free text)")
    p.add_argument("--risk",        type=str, default="medium", choices=list(ASSESSMENT_RISK_TOLERANCES))

    p = sub.add_parser("plan", help="Goal-based monthly savings plan")
    p.add_argument("--age",    type=str, required=True)
    p.add_argument("--income", type=str, required=True, help="Annual income")
    p.add_argument("--saved",  type=str, default="0",   help="Current savings")
    p.add_argument("--goal",   type=str, default="retirement", choices=list(GOAL_TYPES))
    p.add_argument("--target", type=str, required=True, help="Target amount")
    p.add_argument("--years",  type=str, required=True, help="Time horizon in years")
    p.add_argument("--risk",   type=str, default="moderate", choices=list(RISK_TIERS))

    p = sub.add_parser("scenarios", help="Conservative / moderate / aggressive comparison")
    p.add_argument("--initial", type=str, required=True, help="Initial investment")
    p.add_argument("--years",   type=str, default="10",  help="Duration in years")
    p.add_argument("--monthly", type=str, default="0",   help="Monthly contribution")
    p.add_argument("--seed",    type=int, default=None,  help="Seed for repeatable draws")
    p.add_argument("--trials",  type=int, default=0,
                   help=f"Also summarise N repeated runs (e.g. {N_TRIALS})")

    p = sub.add_parser("retire", help="Retirement projection and asset allocation")
    p.add_argument("--age",         type=str, required=True)
    p.add_argument("--retire-at",   type=str, required=True)
    p.add_argument("--income",      type=str, default="0", help="Annual income")
    p.add_argument("--assets",      type=str, default="0")
    p.add_argument("--liabilities", type=str, default="0")
    p.add_argument("--monthly",     type=str, default="0", help="Monthly savings")
    p.add_argument("--return",      type=str, default="7", dest="expected_return",
                   help="Expected annual return in %%")
    p.add_argument("--tax-bracket", type=str, default="22", help="Marginal tax bracket in %%")
    p.add_argument("--estate",      type=str, default="0",  help="Estate value")
    p.add_argument("--risk",        type=str, default="moderate", choices=list(RISK_TIERS))

    p = sub.add_parser("budget", help="Budget analysis with 10%% reduction targets")
    p.add_argument("--income",  type=str, required=True, help="Monthly income")
    p.add_argument("--expense", type=str, action="append", default=[],
                   help="CATEGORY=AMOUNT, repeatable")

    return parser


def main(argv=None) -> dict:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        results = RUNNERS[args.command](args)
    except InvalidInputError as e:
        parser.error(str(e))
    if args.out:
        save_outputs(args.command, results, args.out)
    return results


if __name__ == "__main__":
    main()
