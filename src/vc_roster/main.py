"""Main entry point for the voice channel roster bot."""

import asyncio
import logging
import sys

import aiohttp
import discord
from pydantic import ValidationError

from vc_roster.adapters.config import AppConfig
from vc_roster.adapters.discord_bot import DiscordPresenceSource, RosterBot
from vc_roster.adapters.sheets import RosterSheet, ServiceAccountTokenProvider, SheetsHttpClient
from vc_roster.application.services import EventReconciler, MembershipStore, WriteSerializer

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def load_config() -> AppConfig:
    """Load configuration, exiting if settings are missing or invalid."""
    try:
        config = AppConfig()
    except ValidationError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    configure_logging(config.log_level)

    missing = config.missing_required_settings()
    if missing:
        logger.error(f"Missing required environment variables: {', '.join(missing)}")
        sys.exit(1)
    return config


async def main() -> None:
    """Main application entry point."""
    config = load_config()

    try:
        token_provider = ServiceAccountTokenProvider.from_file(config.google_creds_path)
    except (OSError, ValueError) as e:
        logger.error(f"Could not load Google credentials from {config.google_creds_path}: {e}")
        sys.exit(1)

    logger.info(
        f"Tracking {len(config.target_channel_ids)} channel(s) into sheet '{config.sheet_name}'"
    )

    timeout = aiohttp.ClientTimeout(total=config.sheets_api_timeout)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        transport = SheetsHttpClient(session, config.spreadsheet_id, token_provider)
        roster = RosterSheet(transport, sheet_name=config.sheet_name)
        store = MembershipStore()
        serializer = WriteSerializer(store, roster)

        bot = RosterBot()
        bot.attach_handler(
            EventReconciler(
                DiscordPresenceSource(bot), store, serializer, config.target_channel_ids
            )
        )

        async with serializer, bot:
            try:
                await bot.start(config.bot_token)
            except discord.LoginFailure as e:
                logger.error(f"Discord login failed: {e}")
                sys.exit(1)


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
