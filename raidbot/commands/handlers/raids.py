from __future__ import annotations

import logging
import re

import discord
from discord.ext import commands

from raidbot.config import core, raids as raids_cfg
from raidbot.formatter import raid_embed, short_listing
from raidbot.raids import RaidRecord, RaidRegistry, RaidResult
from raidbot.raids.gyms import Gym, GymDirectory
from raidbot.raids.roles import TeamRoles

logger = logging.getLogger(__name__)

_GUESTS_RE = re.compile(r"^\+?(\d{1,2})$")


def _split_guests(tokens: list[str]) -> tuple[int, list[str]]:
    """Pull a ``+N`` guest count out of ``tokens``; return it with the rest."""

    guests = 0
    found = False
    rest: list[str] = []
    for token in tokens:
        match = _GUESTS_RE.match(token)
        if match and not found:
            guests = int(match.group(1))
            found = True
        else:
            rest.append(token)
    return guests, rest


class Raids(commands.Cog):
    """
    Raid coordination commands.

    Commands that act on a raid take the raid id as an optional argument in
    any position; without one the caller's last raid is used.
    """

    def __init__(self, bot: commands.Bot):
        self.bot = bot
        self.registry = RaidRegistry()
        self.gyms = GymDirectory.from_file(raids_cfg.GYMS_FILE)
        self.teams = TeamRoles(raids_cfg.TEAM_ROLE_NAMES)

    async def cog_before_invoke(self, ctx: commands.Context) -> None:
        logger.info(
            "Dispatching command '%s' from %s with args: %s",
            ctx.command.qualified_name if ctx.command else "?",
            ctx.author.id,
            ctx.args[2:],
        )

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _embed(self, raid: RaidRecord) -> discord.Embed:
        return raid_embed(raid, prefix=core.COMMAND_PREFIX, team_lookup=self.teams.team_of)

    async def _refresh(self, raid: RaidRecord) -> None:
        """Re-render the raid's posted card, if there is one."""

        if raid.message is None:
            return
        try:
            await raid.message.edit(embed=self._embed(raid))
        except discord.HTTPException:
            logger.warning("Failed to edit message for raid %s", raid.id, exc_info=True)

    async def _reply(self, ctx: commands.Context, result: RaidResult) -> bool:
        """Send ``result.error`` if set; return ``True`` when the result is usable."""

        if result.error:
            await ctx.send(result.error)
            return False
        await self._refresh(result.raid)
        return True

    async def _post(self, ctx: commands.Context, raid: RaidRecord) -> None:
        message = await ctx.send(embed=self._embed(raid))
        self.registry.set_message(ctx.channel.id, ctx.author, raid.id, message)

    # ------------------------------------------------------------------ #
    # Commands
    # ------------------------------------------------------------------ #

    @commands.command(name="raid")
    async def raid(self, ctx: commands.Context, subject: str | None = None, *end_time: str) -> None:
        """Start a raid: ``raid <pokemon> [time remaining until]``."""

        if not subject:
            await ctx.send(f"<@{ctx.author.id}> Usage: {core.COMMAND_PREFIX}raid <pokemon> [end time]")
            return

        self.teams.resolve(ctx.guild)

        raid_data: dict = {"subject": subject.lower()}
        if end_time:
            raid_data["end_time"] = " ".join(end_time)

        result = self.registry.create_raid(ctx.channel.id, ctx.author, raid_data)
        await self._post(ctx, result.raid)

    @commands.command(name="raids")
    async def raids(self, ctx: commands.Context) -> None:
        """List this channel's active raids."""

        await ctx.send(short_listing(self.registry.list_raids(ctx.channel.id)))

    @commands.command(name="info")
    async def info(self, ctx: commands.Context, *tokens: str) -> None:
        """Post a fresh card for a raid."""

        result = self.registry.find_raid(ctx.channel.id, ctx.author, list(tokens))
        if result.error:
            await ctx.send(result.error)
            return
        await self._post(ctx, result.raid)

    @commands.command(name="join")
    async def join(self, ctx: commands.Context, *tokens: str) -> None:
        """Join a raid, optionally bringing ``+N`` guests."""

        found = self.registry.find_raid(ctx.channel.id, ctx.author, list(tokens))
        if found.error:
            await ctx.send(found.error)
            return

        guests, _ = _split_guests(found.args)
        result = self.registry.add_attendee(ctx.channel.id, ctx.author, found.raid.id, guests)
        if await self._reply(ctx, result):
            await ctx.send(
                f"<@{ctx.author.id}> joined **{result.raid.id}**. "
                f"{result.raid.attendee_count()} trainer(s) so far."
            )

    @commands.command(name="leave")
    async def leave(self, ctx: commands.Context, *tokens: str) -> None:
        """Leave a raid."""

        found = self.registry.find_raid(ctx.channel.id, ctx.author, list(tokens))
        if found.error:
            await ctx.send(found.error)
            return

        result = self.registry.remove_attendee(ctx.channel.id, ctx.author, found.raid.id)
        if await self._reply(ctx, result):
            await ctx.send(f"<@{ctx.author.id}> left **{result.raid.id}**.")

    async def _set_arrival(self, ctx: commands.Context, tokens: tuple[str, ...], status: bool) -> None:
        found = self.registry.find_raid(ctx.channel.id, ctx.author, list(tokens))
        if found.error:
            await ctx.send(found.error)
            return

        result = self.registry.set_arrival_status(ctx.channel.id, ctx.author, found.raid.id, status)
        await self._reply(ctx, result)

    @commands.command(name="here")
    async def here(self, ctx: commands.Context, *tokens: str) -> None:
        """Mark yourself as arrived at the raid."""

        await self._set_arrival(ctx, tokens, True)

    @commands.command(name="notHere")
    async def not_here(self, ctx: commands.Context, *tokens: str) -> None:
        """Mark yourself as not yet arrived."""

        await self._set_arrival(ctx, tokens, False)

    async def _set_time(self, ctx: commands.Context, tokens: tuple[str, ...], which: str) -> None:
        found = self.registry.find_raid(ctx.channel.id, ctx.author, list(tokens))
        if found.error:
            await ctx.send(found.error)
            return

        value = " ".join(found.args).strip()
        if not value:
            await ctx.send(f"<@{ctx.author.id}> Please provide a {which} time.")
            return

        if which == "start":
            result = self.registry.set_raid_time(ctx.channel.id, ctx.author, found.raid.id, value)
        else:
            result = self.registry.set_end_time(ctx.channel.id, ctx.author, found.raid.id, value)
        if await self._reply(ctx, result):
            await ctx.send(f"**{result.raid.id}** {which} time set to {value}.")

    @commands.command(name="start")
    async def start(self, ctx: commands.Context, *tokens: str) -> None:
        """Set when the raid group starts."""

        await self._set_time(ctx, tokens, "start")

    @commands.command(name="end")
    async def end(self, ctx: commands.Context, *tokens: str) -> None:
        """Set when the raid disappears."""

        await self._set_time(ctx, tokens, "end")

    @commands.command(name="gym")
    async def gym(self, ctx: commands.Context, *tokens: str) -> None:
        """Set the raid's gym by (approximate) name."""

        found = self.registry.find_raid(ctx.channel.id, ctx.author, list(tokens))
        if found.error:
            await ctx.send(found.error)
            return

        query = " ".join(found.args).strip()
        if not query:
            await ctx.send(f"<@{ctx.author.id}> Please provide a gym name.")
            return

        location = self.gyms.lookup(query) or Gym(name=query)
        result = self.registry.set_raid_location(ctx.channel.id, ctx.author, found.raid.id, location)
        if await self._reply(ctx, result):
            await ctx.send(f"**{result.raid.id}** location set to {location.name}.")
