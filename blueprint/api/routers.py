"""Internal API routers — /strategy/options, /strategy/defaults, /strategy/derive,
/strategy/playbook endpoints.

No business logic. Delegates to the deriver and the static catalogs.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body

from blueprint.strategy.catalog import INDICATOR_CATALOG
from blueprint.strategy.deriver import DEFAULT_CURRENCY, derive
from blueprint.strategy.form import default_form
from blueprint.strategy.models import AutomationLevel, Profile, Session
from blueprint.strategy.playbook import playbook_as_dict

logger = logging.getLogger("blueprint")
router = APIRouter()

# ── Shared state (set during app startup) ────────────────────────────────

_currency: str = DEFAULT_CURRENCY


def configure_routers(currency: str = DEFAULT_CURRENCY) -> None:
    """Inject settings from the application startup.

    Args:
        currency: Currency label used in generated reports.
    """
    global _currency  # noqa: PLW0603
    _currency = currency


# ── Strategy ─────────────────────────────────────────────────────────────


@router.get("/strategy/options")
async def get_options():
    """Return the selectable values for every form field."""
    return {
        "profiles": [p.value for p in Profile],
        "sessions": [s.value for s in Session],
        "automation_levels": [a.value for a in AutomationLevel],
        "indicators": list(INDICATOR_CATALOG),
    }


@router.get("/strategy/defaults")
async def get_defaults():
    """Return the default form used before the user edits anything."""
    return {"form": default_form()}


@router.post("/strategy/derive")
async def post_derive(body: Any = Body(...)):
    """Validate a strategy form and return the generated blueprint.

    A validation failure is an expected outcome and comes back as
    ``{"status": "error", "errors": [...]}`` with HTTP 200.
    """
    result = derive(body, currency=_currency)
    if not result.ok:
        logger.info("Strategy rejected: %s", result.error)
        return {
            "status": "error",
            "field": result.error.field,
            "errors": [str(result.error)],
        }

    logger.info(
        "Strategy derived: %s %s, lot size %.2f",
        result.input.profile.value,
        result.input.session.value,
        result.plan.lot_size,
    )
    return {
        "status": "ok",
        "report": result.report,
        "plan": result.plan.to_dict(),
    }


@router.get("/strategy/playbook")
async def get_playbook():
    """Return the static next-step and checklist content."""
    return {"playbook": playbook_as_dict()}
