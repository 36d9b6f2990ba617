"""Strategy data models — typed representations for blueprint inputs and outputs."""

from dataclasses import asdict, dataclass
from enum import Enum


class Profile(str, Enum):
    """Trading style. Fixes stop-loss distance and take-profit multiplier."""

    SCALPING = "Scalping"
    DAY_TRADE = "DayTrade"
    SWING = "Swing"


class Session(str, Enum):
    """Reference trading session."""

    LONDON = "London"
    NEW_YORK = "NewYork"
    TOKYO = "Tokyo"


class AutomationLevel(str, Enum):
    """Degree of automated execution. Only selects advisory text."""

    MANUAL = "Manual"
    SEMI_AUTONOMOUS = "SemiAutonomous"
    FULL = "Full"


@dataclass(frozen=True)
class StrategyInput:
    """A validated strategy form.

    Only produced by ``validate_input`` so every field already satisfies
    its constraint.
    """

    profile: Profile
    capital: float
    risk_per_trade: float  # percent of capital, 0.1 – 5
    indicators: tuple[str, ...]
    session: Session
    automation_level: AutomationLevel

    def to_form(self) -> dict:
        """Return the input as a form dict with wire (camelCase) keys."""
        return {
            "profile": self.profile.value,
            "capital": self.capital,
            "riskPerTrade": self.risk_per_trade,
            "indicators": list(self.indicators),
            "session": self.session.value,
            "automationLevel": self.automation_level.value,
        }


@dataclass(frozen=True)
class DerivedPlan:
    """Numbers and report text computed from a ``StrategyInput``."""

    risk_capital_amount: float
    stop_loss_pips: int
    take_profit_multiplier: float
    take_profit_pips: int
    lot_size: float
    report_text: str

    def to_dict(self) -> dict:
        return asdict(self)
