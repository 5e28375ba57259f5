"""Discord client forwarding voice events to a membership event handler."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import discord

from vc_roster.adapters.discord_bot.mapping import voice_state_to_event

if TYPE_CHECKING:
    from vc_roster.domain.contracts.membership_event_handler import (
        MembershipEventHandlerProtocol,
    )

logger = logging.getLogger(__name__)


def build_intents() -> discord.Intents:
    """Gateway intents needed to see guilds, voice states and member names."""
    intents = discord.Intents.none()
    intents.guilds = True
    intents.voice_states = True
    intents.members = True
    return intents


class RosterBot(discord.Client):
    """Discord client that drives roster reconciliation."""

    def __init__(self, **options: Any) -> None:
        """Initialize the bot with the intents the roster needs.

        Args:
            **options: Passed through to discord.Client.
        """
        super().__init__(intents=build_intents(), **options)
        self._handler: MembershipEventHandlerProtocol | None = None
        self._initial_sync_done = False

    def attach_handler(self, handler: MembershipEventHandlerProtocol) -> None:
        """Set the handler that receives membership events."""
        self._handler = handler

    async def on_ready(self) -> None:
        """Run the snapshot sync the first time the gateway session is ready."""
        logger.info(f"Logged in as {self.user}.")
        if self._handler is None:
            logger.warning("No membership handler attached, skipping initial sync")
            return
        if self._initial_sync_done:
            logger.info("Gateway session ready again, keeping current membership")
            return
        await self._handler.snapshot_sync()
        # Only after success, so a failed startup sync runs again on the next ready
        self._initial_sync_done = True

    async def on_voice_state_update(
        self,
        member: discord.Member,
        before: discord.VoiceState,
        after: discord.VoiceState,
    ) -> None:
        """Forward voice channel changes to the handler."""
        if self._handler is None:
            return
        await self._handler.member_event(voice_state_to_event(member, before, after))
