"""Raid bot command cogs, attached to the bot from ``RaidBot.setup_hook``."""

from __future__ import annotations

import logging

from discord.ext import commands as commands_ext

from .handlers.help import Help
from .handlers.raids import Raids

logger = logging.getLogger(__name__)

COGS = (Raids, Help)


async def setup(bot: commands_ext.Bot) -> None:
    """
    Add the raid and help cogs to ``bot``, skipping any already attached.

    The bot must be created with ``help_command=None`` so :class:`Help` can
    own ``help``.
    """

    added = 0
    for cog_cls in COGS:
        if bot.get_cog(cog_cls.__name__):
            continue
        await bot.add_cog(cog_cls(bot))
        added += 1

    logger.info("Attached %d of %d raid bot cog(s)", added, len(COGS))


__all__ = ["COGS", "Help", "Raids", "setup"]
