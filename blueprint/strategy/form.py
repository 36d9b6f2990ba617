"""Form state helpers — default values, partial updates, indicator toggling.

Forms are plain dicts with wire (camelCase) keys.  Nothing here
validates; that happens in ``derive``.
"""

import math
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Optional

from blueprint.strategy.catalog import INDICATOR_CATALOG
from blueprint.strategy.models import AutomationLevel, Profile, Session

DEFAULT_FORM: Mapping[str, Any] = MappingProxyType({
    "profile": Profile.DAY_TRADE.value,
    "capital": 1000,
    "riskPerTrade": 1,
    "indicators": (INDICATOR_CATALOG[0], INDICATOR_CATALOG[1]),
    "session": Session.LONDON.value,
    "automationLevel": AutomationLevel.SEMI_AUTONOMOUS.value,
})


def default_form() -> dict:
    """Return a fresh copy of the default form."""
    form = dict(DEFAULT_FORM)
    form["indicators"] = list(DEFAULT_FORM["indicators"])
    return form


def reset_form() -> dict:
    """Discard all edits and start again from the defaults."""
    return default_form()


def merge_form(current: Optional[Mapping], changes: Mapping) -> dict:
    """Apply a partial update on top of *current* (or the defaults)."""
    base = dict(current) if current is not None else default_form()
    base.update(changes)
    return base


def toggle_indicator(indicators: Sequence[str], option: str) -> list[str]:
    """Remove *option* if selected, otherwise append it."""
    if option in indicators:
        return [item for item in indicators if item != option]
    return [*indicators, option]


def parse_number(value: Any, fallback: float) -> float:
    """Parse a numeric form field, returning *fallback* when it is not a finite number."""
    if isinstance(value, bool):
        return fallback
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return fallback
    return parsed if math.isfinite(parsed) else fallback
