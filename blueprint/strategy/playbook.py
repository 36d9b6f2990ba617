"""Static playbook content shown next to a generated blueprint."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlaybookSection:
    title: str
    items: tuple[str, ...]


NEXT_STEPS = PlaybookSection(
    title="Next steps",
    items=(
        "Validate the strategy with multi-parameter backtests (forward testing).",
        "Generate the MT5 report and review drawdown, profit factor and average trade time.",
        "Deploy the EA on a VPS with Telegram/Discord monitoring.",
    ),
)

ROBOT_CHECKLIST = PlaybookSection(
    title="Robot checklist",
    items=(
        "Risk control with dynamic ATR and progressive break-even.",
        "Detailed CSV logs for auditing and machine learning.",
        "Feature toggle to switch filters off during news.",
    ),
)

BEST_PRACTICES = PlaybookSection(
    title="Best practices",
    items=(
        "Run Monte Carlo tests to validate resilience.",
        "Use a low-latency VPS with power redundancy.",
        "Rebalance parameters every 90 days with walk-forward analysis.",
    ),
)

EA_EXPORT = PlaybookSection(
    title="EA export",
    items=(
        "Generate a JSON document with the inputs (lot, magic number, filters).",
        "Use OnTick and OnTimer to split the execution logic.",
        "Integrate alerts with MetaTrader Signals or WebRequest APIs.",
    ),
)

PLAYBOOK: tuple[PlaybookSection, ...] = (
    NEXT_STEPS,
    ROBOT_CHECKLIST,
    BEST_PRACTICES,
    EA_EXPORT,
)


def playbook_as_dict() -> dict[str, list[str]]:
    """Return the playbook as ``{section title: [items]}``."""
    return {section.title: list(section.items) for section in PLAYBOOK}
