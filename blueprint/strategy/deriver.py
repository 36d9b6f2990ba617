"""Strategy deriver — validates a form and renders the strategy blueprint.

Pure: reads only its argument and the static tables in
``blueprint.strategy.catalog``.  Same input = same output, always.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from blueprint.risk.position_sizer import calculate_lot_size, calculate_risk_amount
from blueprint.risk.rounding import format_fixed
from blueprint.risk.sl_tp import risk_levels_for
from blueprint.strategy.catalog import (
    AUTOMATION_TIPS,
    RISK_NOTES,
    SESSION_CHARACTERISTICS,
)
from blueprint.strategy.models import DerivedPlan, StrategyInput
from blueprint.strategy.validation import StrategyValidationError, validate_input

DEFAULT_CURRENCY = "USD"
LOT_UNIT = "mini lots"


@dataclass(frozen=True)
class DeriveResult:
    """Outcome of ``derive``: either a plan or a validation error.

    Exactly one of ``plan`` and ``error`` is set.
    """

    input: Optional[StrategyInput] = None
    plan: Optional[DerivedPlan] = None
    error: Optional[StrategyValidationError] = None

    @property
    def ok(self) -> bool:
        return self.plan is not None

    @property
    def report(self) -> Optional[str]:
        return self.plan.report_text if self.plan else None

    @property
    def message(self) -> str:
        """Report text on success, the validation message on failure."""
        if self.plan is not None:
            return self.plan.report_text
        return str(self.error)


def render_report(
    strategy: StrategyInput,
    risk_amount: float,
    stop_loss_pips: int,
    take_profit_pips: int,
    lot_size: float,
    currency: str = DEFAULT_CURRENCY,
) -> str:
    """Format the multi-line blueprint text.

    Line order: title, indicators, session, risk, SL/TP, lot size, note.
    """
    lines = [
        f"Strategy {strategy.profile.value} {strategy.session.value}",
        f"- Core indicators: {', '.join(strategy.indicators)}",
        f"- Session: {SESSION_CHARACTERISTICS[strategy.session]}",
        f"- Risk per trade: {format_fixed(strategy.risk_per_trade)}% "
        f"({format_fixed(risk_amount)} {currency})",
        f"- Average stop loss: {stop_loss_pips} pips | "
        f"Take profit: {take_profit_pips} pips",
        f"- Suggested lot size: {format_fixed(lot_size)} {LOT_UNIT}",
        f"- Note: {RISK_NOTES[strategy.profile]} "
        f"{AUTOMATION_TIPS[strategy.automation_level]}",
    ]
    return "\n".join(lines)


def build_plan(strategy: StrategyInput, currency: str = DEFAULT_CURRENCY) -> DerivedPlan:
    """Compute the derived figures and report for a validated input."""
    risk_amount = calculate_risk_amount(strategy.capital, strategy.risk_per_trade)
    levels = risk_levels_for(strategy.profile)
    lot_size = calculate_lot_size(risk_amount, levels.stop_loss_pips)

    return DerivedPlan(
        risk_capital_amount=risk_amount,
        stop_loss_pips=levels.stop_loss_pips,
        take_profit_multiplier=levels.take_profit_multiplier,
        take_profit_pips=levels.take_profit_pips,
        lot_size=lot_size,
        report_text=render_report(
            strategy,
            risk_amount=risk_amount,
            stop_loss_pips=levels.stop_loss_pips,
            take_profit_pips=levels.take_profit_pips,
            lot_size=lot_size,
            currency=currency,
        ),
    )


def derive(payload: Any, currency: str = DEFAULT_CURRENCY) -> DeriveResult:
    """Validate *payload* and, if valid, derive the strategy blueprint.

    Never raises for bad input: a validation failure comes back as a
    ``DeriveResult`` with ``error`` set and no plan.

    Args:
        payload: Form mapping (snake_case or camelCase keys) or a
            ``StrategyInput``.
        currency: Currency label used in the risk line.
    """
    try:
        strategy = validate_input(payload)
    except StrategyValidationError as exc:
        return DeriveResult(error=exc)
    return DeriveResult(input=strategy, plan=build_plan(strategy, currency))
