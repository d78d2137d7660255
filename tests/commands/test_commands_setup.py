import asyncio

import discord
from discord.ext import commands as discord_commands

from raidbot import commands as raid_commands


async def _collect():
    bot = discord_commands.Bot(
        command_prefix="!", intents=discord.Intents.none(), help_command=None
    )
    try:
        await raid_commands.setup(bot)
        await raid_commands.setup(bot)
        return set(bot.cogs.keys()), {cmd.name for cmd in bot.commands}
    finally:
        await bot.close()


def test_setup_registers_known_cogs():
    cogs, names = asyncio.run(_collect())

    assert cogs == {"Help", "Raids"}
    assert {"help", "raid", "raids", "info", "join", "leave", "here", "notHere", "start", "end", "gym"} <= names


def test_cog_list_is_raids_then_help():
    assert [cog.__name__ for cog in raid_commands.COGS] == ["Raids", "Help"]
