import discord

from raidbot.config import core
from raidbot.raids import RaidRegistry

import logging

logger = logging.getLogger(__name__)


async def handle(client: discord.Client):
    """Log the session once the gateway is ready."""
    logger.info(f"Logged in as {client.user.name} (ID: {client.user.id})")

    if core.CHANNEL_IDS:
        logger.info("Accepting raid commands in channel IDs: %s", core.CHANNEL_IDS)
    else:
        logger.info("Accepting raid commands in every channel")

    # on_ready fires again after reconnects; raids survive those.
    active = sum(
        len(RaidRegistry().list_raids(channel.id)) for channel in client.get_all_channels()
    )
    logger.info("%d active raid(s) in memory", active)
