"""CLI report — prints a derived blueprint or its validation error to the console."""

from blueprint.strategy.deriver import DeriveResult
from blueprint.strategy.playbook import PLAYBOOK

_RULE = "──────────────────────────────────────────────────"


def print_result(result: DeriveResult) -> str:
    """Format and print a derive outcome.

    Returns:
        The formatted string (also printed to stdout).
    """
    if result.ok:
        lines = [
            "─────────────── EA Strategy Blueprint ───────────────",
            *(f"  {line}" for line in result.report.splitlines()),
            _RULE,
        ]
    else:
        lines = [f"Invalid strategy: {result.error}"]
    output = "\n".join(lines)
    print(output)
    return output


def print_playbook() -> str:
    """Format and print every playbook section as a bullet list."""
    lines = []
    for section in PLAYBOOK:
        lines.append(f"{section.title}:")
        lines.extend(f"  • {item}" for item in section.items)
    output = "\n".join(lines)
    print(output)
    return output
