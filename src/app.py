"""Application entry point for the guild panel dashboard."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from client import build_transport
from frontend.app import GuildPanelApp
from logging_setup import configure_logging
from settings import load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guild-panel",
        description="Edit per-guild bot configuration against the dashboard backend.",
    )
    parser.add_argument("--api-base", help="Backend base URL (overrides GUILD_PANEL_API_BASE)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level (overrides GUILD_PANEL_LOG_LEVEL)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(api_base=args.api_base, log_level=args.log_level)
    except ValueError as exc:
        sys.exit(f"guild-panel: {exc}")

    configure_logging(settings)
    logging.getLogger(__name__).info("Starting guild panel against %s", settings.api_base)

    transport = build_transport(settings)
    GuildPanelApp(transport, login_url=settings.login_url).run()


if __name__ == "__main__":
    main()
