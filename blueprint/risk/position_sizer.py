"""Position sizing — pure math, no I/O.

Derives the capital at risk and a suggested lot size from account
capital, risk percentage and stop-loss distance.
"""

from blueprint.risk.rounding import round_half_up

# Divisor applied per stop-loss pip when converting risk into lots.
PIP_COST_PER_LOT = 1.5


def calculate_risk_amount(capital: float, risk_pct: float) -> float:
    """Return the capital risked on one trade.

    ``risk_amount = capital × risk_pct / 100``

    Raises:
        ValueError: If *capital* or *risk_pct* is non-positive.
    """
    if capital <= 0:
        raise ValueError(f"capital must be positive, got {capital}")
    if risk_pct <= 0:
        raise ValueError(f"risk_pct must be positive, got {risk_pct}")
    return capital * risk_pct / 100.0


def calculate_lot_size(
    risk_amount: float,
    sl_distance_pips: float,
    pip_cost: float = PIP_COST_PER_LOT,
) -> float:
    """Calculate the suggested lot size.

    Formula::

        lots = risk_amount / (sl_distance_pips × pip_cost)

    rounded half up to 2 decimals.

    Args:
        risk_amount: Capital at risk on the trade (e.g. 10.0).
        sl_distance_pips: Stop-loss distance in pips (e.g. 20).
        pip_cost: Cost of one pip per lot.  Default 1.5.

    Returns:
        Lot size rounded to 2 decimal places.

    Raises:
        ValueError: If *sl_distance_pips* or *pip_cost* is non-positive,
            or *risk_amount* is negative.
    """
    if risk_amount < 0:
        raise ValueError(f"risk_amount must not be negative, got {risk_amount}")
    if sl_distance_pips <= 0:
        raise ValueError(f"sl_distance_pips must be positive, got {sl_distance_pips}")
    if pip_cost <= 0:
        raise ValueError(f"pip_cost must be positive, got {pip_cost}")

    return round_half_up(risk_amount / (sl_distance_pips * pip_cost), 2)
