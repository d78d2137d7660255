from __future__ import annotations

from discord.ext import commands

from raidbot.config import core


class Help(commands.Cog):
    """List available commands."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @commands.command(name="help")
    async def help(self, ctx: commands.Context) -> None:
        """Send a comma-separated list of registered commands."""

        names = sorted(f"{core.COMMAND_PREFIX}{cmd.name}" for cmd in self.bot.commands)
        listing = ", ".join(names) if names else "None registered"
        await ctx.send(f"Available commands: {listing}")
