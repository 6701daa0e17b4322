# config.py — Central configuration for the financial planning engine

# ─────────────────────────────────────────────
# HEALTH SCORE TIERS
# Each table: (threshold, points), checked top to bottom
# ─────────────────────────────────────────────
SAVINGS_RATE_TIERS = [           # savings rate >= threshold
    (0.25, 25),
    (0.20, 22),
    (0.15, 20),
    (0.10, 15),
    (0.05, 10),
]
SAVINGS_RATE_POSITIVE_POINTS = 5  # any rate > 0 below the last tier

DEBT_RATIO_TIERS = [             # debt / annual income <= threshold
    (0.3, 25),
    (0.5, 20),
    (0.7, 15),
    (1.0, 10),
]
DEBT_RATIO_FLOOR_POINTS = 5

EMERGENCY_FUND_TIERS = [         # months of cover >= threshold
    (6, 20),
    (4, 16),
    (3, 12),
    (1, 8),
]
EMERGENCY_FUND_POSITIVE_POINTS = 4

EXPENSE_RATIO_TIERS = [          # expenses / income <= threshold
    (0.50, 15),
    (0.65, 12),
    (0.75, 10),
    (0.85, 7),
]
EXPENSE_RATIO_FLOOR_POINTS = 3

GOAL_POINTS_BOTH   = 15
GOAL_POINTS_SINGLE = 8

SCORE_CATEGORIES = [             # score >= threshold → category
    (80, "excellent"),
    (60, "good"),
    (40, "fair"),
]
SCORE_CATEGORY_FLOOR = "poor"

ASSESSMENT_RISK_TOLERANCES = ("low", "medium", "high")

# ─────────────────────────────────────────────
# GOAL PLANNING
# ─────────────────────────────────────────────
GOAL_TYPES            = ("retirement", "home", "education", "wealth")
RISK_TIERS            = ("conservative", "moderate", "aggressive")
MAX_HORIZON_YEARS     = 50       # upper bound on plan, scenario and retirement spans
PLAN_SAVINGS_SHARE    = 0.6      # share of the monthly amount kept in savings
PLAN_INVESTMENT_SHARE = 0.4      # share routed to investments
PLAN_BONUS_AGGRESSIVE = 0.01     # flat uplift on the investment leg
PLAN_BONUS_DEFAULT    = 0.005
PLAN_CHECKPOINT_MONTHS = (12, 24)  # plus the final month
PLAN_RECOMMENDATIONS = [
    "Automate monthly savings transfers",
    "Diversify investments based on risk tolerance",
    "Review and adjust plan quarterly",
    "Consider tax-advantaged accounts",
]

# ─────────────────────────────────────────────
# SCENARIO ASSUMPTIONS (historical averages)
# annual_return and volatility rise conservative → aggressive
# ─────────────────────────────────────────────
RISK_PROFILES = {
    "conservative": {
        "annual_return": 0.05,
        "volatility":    0.08,
        "max_drawdown":  0.15,
        "description":   "Bonds, CDs, Money Market Funds",
    },
    "moderate": {
        "annual_return": 0.08,
        "volatility":    0.12,
        "max_drawdown":  0.25,
        "description":   "Balanced Portfolio (60% Stocks, 40% Bonds)",
    },
    "aggressive": {
        "annual_return": 0.11,
        "volatility":    0.18,
        "max_drawdown":  0.40,
        "description":   "Growth Stocks, Equity Funds, Real Estate",
    },
}
VOLATILITY_DAMPING = 0.5         # scales the uniform monthly shock
N_TRIALS           = 200         # default repeats for run_trials
RANDOM_STATE       = 42

# ─────────────────────────────────────────────
# RETIREMENT / WEALTH
# ─────────────────────────────────────────────
RETIREMENT_SAVINGS_SHARE    = 0.6   # display split of the single balance
RETIREMENT_INVESTMENT_SHARE = 0.4
ALLOCATION_BY_RISK = {              # Stocks / Bonds / Real Estate (%)
    "aggressive":   {"Stocks": 80, "Bonds": 10, "Real Estate": 10},
    "moderate":     {"Stocks": 60, "Bonds": 30, "Real Estate": 10},
    "conservative": {"Stocks": 40, "Bonds": 50, "Real Estate": 10},
}
WITHDRAWAL_RATE     = 0.04          # 4% rule
LIMIT_401K          = 22_500        # annual employee deferral quoted in guidance
LIMIT_ROTH_IRA      = 6_500

# ─────────────────────────────────────────────
# BUDGET
# ─────────────────────────────────────────────
BUDGET_REDUCTION    = 0.10          # suggested cut per category
BUDGET_RULE         = {"needs": 0.50, "wants": 0.30, "savings": 0.20}
BUDGET_RECOMMENDATIONS = [
    "Reduce discretionary spending by 10%",
    "Consider negotiating bills and subscriptions",
    "Build emergency fund with savings",
]

# ─────────────────────────────────────────────
# OUTPUT
# ─────────────────────────────────────────────
OUTPUT_DIR = "outputs/"
