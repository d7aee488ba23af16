"""Command-line check that the configured client credentials yield a token."""

import argparse
import asyncio
import logging
import sys

from spotify_proxy.auth import get_access_token
from spotify_proxy.exceptions import ApiError
from spotify_proxy.logging.setup import configure_logging
from spotify_proxy.settings import ProxySettings

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spotify-proxy-token",
        description="Exchange SPOTIFY_CLIENT_ID/SPOTIFY_CLIENT_SECRET for an access token.",
    )
    parser.add_argument("--show-token", action="store_true", help="print the access token to stdout")
    return parser


async def main(settings: ProxySettings, *, show_token: bool = False) -> int:
    """Request a token and report the outcome. Returns the process exit code."""
    try:
        access_token = await get_access_token(
            settings.SPOTIFY_CLIENT_ID,
            settings.SPOTIFY_CLIENT_SECRET,
            token_url=settings.SPOTIFY_TOKEN_URL,
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
        )
    except (ApiError, ValueError) as exc:
        logger.error("Could not obtain an access token: %s", exc)
        return 1

    logger.info("Access token obtained (%d characters)", len(access_token))
    if show_token:
        print(access_token)
    return 0


def run(argv: list[str] | None = None) -> None:
    """Console-script entry point."""
    args = _build_parser().parse_args(argv)
    settings = ProxySettings()
    configure_logging(settings.LOG_LEVEL, json_output=settings.LOG_JSON)
    sys.exit(asyncio.run(main(settings, show_token=args.show_token)))


if __name__ == "__main__":
    run()
