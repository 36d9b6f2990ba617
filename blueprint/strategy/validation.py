"""Strategy form validation.

Rules are checked in a fixed order and the first failure is the one
reported:

    1. profile            — one of the ``Profile`` values
    2. capital            — a number ≥ 100
    3. risk_per_trade     — a number in [0.1, 5]
    4. indicators         — a list of strings with at least one item
    5. session            — one of the ``Session`` values
    6. automation_level   — one of the ``AutomationLevel`` values
"""

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any

from blueprint.strategy.models import AutomationLevel, Profile, Session, StrategyInput

MIN_CAPITAL = 100
MIN_RISK_PCT = 0.1
MAX_RISK_PCT = 5
MIN_INDICATORS = 1

# snake_case field → camelCase key accepted from form payloads
_WIRE_ALIASES = {
    "risk_per_trade": "riskPerTrade",
    "automation_level": "automationLevel",
}

_MISSING = object()


class StrategyValidationError(ValueError):
    """Raised when a strategy form violates one of the validation rules.

    ``field`` names the offending field; ``str(exc)`` is the message
    shown to the user.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


def _read(payload: Mapping, name: str) -> Any:
    if name in payload:
        return payload[name]
    alias = _WIRE_ALIASES.get(name)
    if alias is not None and alias in payload:
        return payload[alias]
    return _MISSING


def _is_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large for a float
        return False


def _check_enum(payload: Mapping, name: str, enum_cls: type[Enum]) -> Enum:
    value = _read(payload, name)
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    allowed = ", ".join(member.value for member in enum_cls)
    raise StrategyValidationError(name, f"{name} must be one of: {allowed}")


def _check_capital(payload: Mapping) -> float:
    value = _read(payload, "capital")
    if not _is_number(value):
        raise StrategyValidationError("capital", "capital must be a number")
    if value < MIN_CAPITAL:
        raise StrategyValidationError(
            "capital", f"capital must be at least {MIN_CAPITAL}"
        )
    return value


def _check_risk(payload: Mapping) -> float:
    value = _read(payload, "risk_per_trade")
    if not _is_number(value):
        raise StrategyValidationError("risk_per_trade", "risk_per_trade must be a number")
    if not MIN_RISK_PCT <= value <= MAX_RISK_PCT:
        raise StrategyValidationError(
            "risk_per_trade",
            f"risk_per_trade must be between {MIN_RISK_PCT} and {MAX_RISK_PCT}",
        )
    return value


def _check_indicators(payload: Mapping) -> tuple[str, ...]:
    value = _read(payload, "indicators")
    if not isinstance(value, (list, tuple)) or not all(
        isinstance(item, str) for item in value
    ):
        raise StrategyValidationError(
            "indicators", "indicators must be a list of strings"
        )
    if len(value) < MIN_INDICATORS:
        raise StrategyValidationError(
            "indicators", f"indicators must contain at least {MIN_INDICATORS} item"
        )
    return tuple(value)


def validate_input(payload: Any) -> StrategyInput:
    """Validate a raw form payload and return a ``StrategyInput``.

    Accepts a mapping with snake_case or camelCase keys, or an existing
    ``StrategyInput`` (which is re-checked field by field).

    Raises:
        StrategyValidationError: For the first rule the payload violates.
    """
    if isinstance(payload, StrategyInput):
        payload = payload.to_form()
    if not isinstance(payload, Mapping):
        raise StrategyValidationError("payload", "strategy input must be a mapping")

    profile = _check_enum(payload, "profile", Profile)
    capital = _check_capital(payload)
    risk = _check_risk(payload)
    if not math.isfinite(capital * risk / 100):
        raise StrategyValidationError("capital", "capital is too large")
    indicators = _check_indicators(payload)
    session = _check_enum(payload, "session", Session)
    automation = _check_enum(payload, "automation_level", AutomationLevel)

    return StrategyInput(
        profile=profile,
        capital=capital,
        risk_per_trade=risk,
        indicators=indicators,
        session=session,
        automation_level=automation,
    )
