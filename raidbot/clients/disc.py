"""Discord bot bootstrap utilities."""

from __future__ import annotations

import logging

import discord
from discord.ext import commands as discord_commands

from raidbot import commands as raid_commands
from raidbot.config import core
from raidbot.event_hooks import message_hook, ready_hook
from raidbot.raids import scheduler

logger = logging.getLogger(__name__)

# --- Intents --------------------------------------------------------------- #
intents = discord.Intents.default()
intents.message_content = True
intents.members = True


class RaidBot(discord_commands.Bot):
    """Discord bot exposing the raid commands."""

    def __init__(self) -> None:
        super().__init__(
            command_prefix=core.COMMAND_PREFIX,
            intents=intents,
            help_command=None,
        )

    async def setup_hook(self) -> None:
        """Register command cogs and start the expiry sweep."""

        await raid_commands.setup(self)
        await scheduler.start()

    async def close(self) -> None:
        await scheduler.stop()
        await super().close()


bot = RaidBot()


@bot.event
async def on_ready() -> None:
    await ready_hook.handle(bot)


@bot.event
async def on_message(message: discord.Message) -> None:
    await message_hook.handle(bot, message)


def run() -> None:
    """Start the Discord bot using configuration from the environment."""

    if not core.DISCORD_API_TOKEN:
        logger.error("No DISCORD_API_TOKEN configured. Cannot run client.")
        return

    try:
        bot.run(core.DISCORD_API_TOKEN, log_handler=None)
    except discord.LoginFailure as exc:
        logger.error("Login failed: %s", exc)
    except Exception as exc:  # pragma: no cover - defensive guard
        logger.exception("Unexpected error while running client: %s", exc)
