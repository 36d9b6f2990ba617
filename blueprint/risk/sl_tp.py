"""Stop-loss and take-profit distances per profile — pure math, no I/O.

Each profile carries a fixed stop-loss distance in pips and a reward
multiplier; the take-profit distance is their product rounded to a
whole pip.
"""

from dataclasses import dataclass

from blueprint.risk.rounding import round_half_up
from blueprint.strategy.catalog import STOP_LOSS_PIPS, TAKE_PROFIT_MULTIPLIERS
from blueprint.strategy.models import Profile


@dataclass(frozen=True)
class RiskLevels:
    """Stop-loss and take-profit distances for a profile."""
    stop_loss_pips: int
    take_profit_multiplier: float
    take_profit_pips: int


def calculate_tp_pips(stop_loss_pips: float, multiplier: float) -> int:
    """Return ``stop_loss_pips × multiplier`` rounded half away from zero.

    >>> calculate_tp_pips(8, 1.2)
    10

    Raises:
        ValueError: If either argument is non-positive.
    """
    if stop_loss_pips <= 0:
        raise ValueError(f"stop_loss_pips must be positive, got {stop_loss_pips}")
    if multiplier <= 0:
        raise ValueError(f"multiplier must be positive, got {multiplier}")
    return int(round_half_up(stop_loss_pips * multiplier))


def risk_levels_for(profile: Profile) -> RiskLevels:
    """Look up the fixed SL distance and TP multiplier for *profile*."""
    sl = STOP_LOSS_PIPS[profile]
    multiplier = TAKE_PROFIT_MULTIPLIERS[profile]
    return RiskLevels(
        stop_loss_pips=sl,
        take_profit_multiplier=multiplier,
        take_profit_pips=calculate_tp_pips(sl, multiplier),
    )
