"""Half-away-from-zero rounding for display and derived figures."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int = 0) -> float:
    """Round *value* to *places* decimals, ties away from zero.

    Works on the shortest decimal repr of the float, so ``9.6`` rounds
    to ``10`` and ``0.125`` to ``0.13`` (the builtin ``round`` gives
    ``0.12`` for the latter).
    """
    exact = Decimal(repr(value))
    if not exact.is_finite():
        return value
    # Nothing below the target precision to round.
    if exact.as_tuple().exponent >= -places:
        return float(exact)
    quantum = Decimal(1).scaleb(-places)
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def format_fixed(value: float, places: int = 2) -> str:
    """Format *value* with exactly *places* decimals, rounding half up."""
    return f"{round_half_up(value, places):.{places}f}"
