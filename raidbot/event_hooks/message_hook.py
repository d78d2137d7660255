import logging

import discord
from discord.ext import commands

from raidbot.config import core

logger = logging.getLogger(__name__)


async def handle(bot: commands.Bot, message: discord.Message):
    """Route incoming Discord messages to the command dispatcher."""

    if message.author.bot:
        return

    # Raids are channel-scoped; DMs have no raid map to act on.
    if message.guild is None:
        logger.debug("Skipping non-guild message %s", message.id)
        return

    # 1) Ignore channels that are not configured for processing
    if not core.channel_allowed(message.channel.id):
        return

    # 2) Dispatch prefix commands
    await bot.process_commands(message)
