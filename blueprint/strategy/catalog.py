"""Static lookup tables keyed by profile, session and automation level.

Read-only. Every enum member has exactly one entry in each table.
"""

from types import MappingProxyType

from blueprint.strategy.models import AutomationLevel, Profile, Session


# ── Indicators ───────────────────────────────────────────────────────────

INDICATOR_CATALOG: tuple[str, ...] = (
    "Exponential Moving Average (EMA)",
    "Relative Strength Index (RSI)",
    "Bollinger Bands",
    "Parabolic SAR",
    "MACD",
)


# ── Profile constants ────────────────────────────────────────────────────

STOP_LOSS_PIPS = MappingProxyType({
    Profile.SCALPING: 8,
    Profile.DAY_TRADE: 20,
    Profile.SWING: 45,
})

TAKE_PROFIT_MULTIPLIERS = MappingProxyType({
    Profile.SCALPING: 1.2,
    Profile.DAY_TRADE: 2.0,
    Profile.SWING: 2.8,
})


# ── Advisory text ────────────────────────────────────────────────────────

RISK_NOTES = MappingProxyType({
    Profile.SCALPING: "Take advantage of tight spreads and favour execution on ECN accounts.",
    Profile.DAY_TRADE: "Combine trend confirmation with a volatility filter.",
    Profile.SWING: "Look for confluence on H4 and D1, validating support/resistance.",
})

AUTOMATION_TIPS = MappingProxyType({
    AutomationLevel.MANUAL: "Ideal for discretionary traders who want to validate their rules.",
    AutomationLevel.SEMI_AUTONOMOUS: (
        "Automate entries/exits and keep human supervision for adjustments."
    ),
    AutomationLevel.FULL: (
        "Make sure backtests on M1/M5 are robust and monitor weekly drawdown metrics."
    ),
})

SESSION_CHARACTERISTICS = MappingProxyType({
    Session.LONDON: "High liquidity in EUR/GBP pairs, consistent volatility.",
    Session.NEW_YORK: "Highest USD volume, ideal for continuations or post-London reversals.",
    Session.TOKYO: "More technical market, wider spreads, responsive JPY pairs.",
})
