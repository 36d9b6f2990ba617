"""EA Blueprint — application entry point.

Boots the FastAPI internal server and provides the CLI entry point for
generating a strategy blueprint from the command line.
"""

import logging
import sys

from fastapi import FastAPI

from blueprint.api.routers import router

app = FastAPI(title="EA Blueprint Internal API", version="0.1.0")
app.include_router(router)

logger = logging.getLogger("blueprint")


@app.get("/health")
async def health():
    """Liveness check."""
    return {"status": "ok"}


# ── CLI ──────────────────────────────────────────────────────────────────


def build_parser():
    """Return the argument parser for the ``blueprint`` command."""
    import argparse

    from blueprint.strategy.models import AutomationLevel, Profile, Session

    parser = argparse.ArgumentParser(description="MT5 strategy blueprint generator")
    parser.add_argument("--profile", choices=[p.value for p in Profile])
    parser.add_argument("--capital", help="Account capital (default: 1000)")
    parser.add_argument("--risk", help="Risk per trade in percent (default: 1)")
    parser.add_argument(
        "--indicator",
        action="append",
        dest="indicators",
        help="Indicator to include (repeatable; default: EMA and RSI)",
    )
    parser.add_argument("--session", choices=[s.value for s in Session])
    parser.add_argument("--automation", choices=[a.value for a in AutomationLevel])
    parser.add_argument(
        "--playbook",
        action="store_true",
        help="Print the next-step playbook and exit",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the internal API server instead of printing a blueprint",
    )
    return parser


def form_from_args(args) -> dict:
    """Overlay the CLI options that were given on top of the default form."""
    from blueprint.strategy.form import DEFAULT_FORM, merge_form, parse_number

    changes = {}
    if args.profile is not None:
        changes["profile"] = args.profile
    if args.capital is not None:
        changes["capital"] = parse_number(args.capital, DEFAULT_FORM["capital"])
    if args.risk is not None:
        changes["riskPerTrade"] = parse_number(args.risk, DEFAULT_FORM["riskPerTrade"])
    if args.indicators:
        changes["indicators"] = args.indicators
    if args.session is not None:
        changes["session"] = args.session
    if args.automation is not None:
        changes["automationLevel"] = args.automation
    return merge_form(None, changes)


def _run_cli(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and dispatch. Returns the process exit status."""
    from blueprint.cli.report import print_playbook, print_result
    from blueprint.config import load_config
    from blueprint.strategy.deriver import derive

    args = build_parser().parse_args(argv)
    config = load_config()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.serve:
        _run_server(config)
        return 0

    if args.playbook:
        print_playbook()
        return 0

    result = derive(form_from_args(args), currency=config.currency)
    print_result(result)
    if not result.ok:
        logger.debug("Validation failed on field '%s'.", result.error.field)
        return 1
    return 0


def _run_server(config) -> None:
    """Serve the internal API with uvicorn."""
    import uvicorn

    from blueprint.api.routers import configure_routers

    configure_routers(currency=config.currency)
    logger.info("API available at http://%s:%d", config.api_host, config.api_port)
    uvicorn.run(
        app,
        host=config.api_host,
        port=config.api_port,
        log_level=config.log_level.lower(),
    )


def main() -> None:
    sys.exit(_run_cli())


if __name__ == "__main__":
    main()
