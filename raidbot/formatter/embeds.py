"""Detail card for a single raid."""

from __future__ import annotations

from typing import Callable, Optional

import discord

from raidbot.config import emojis, raids as raids_cfg
from raidbot.raids.models import AttendeeRef, RaidRecord

from .listing import _location_name, _title

RAID_COLOR = 4437377
UNKNOWN = "????"

TeamLookup = Callable[[object], Optional[str]]


def _marker(index: int, attendee: AttendeeRef) -> str:
    if attendee.has_arrived and index == 0:
        return emojis.LEADER_ARRIVED
    if attendee.has_arrived:
        return emojis.ARRIVED
    return emojis.PENDING


def roster_lines(raid: RaidRecord, team_lookup: TeamLookup | None = None) -> list[str]:
    """One line per attendee: arrival marker, name, guests, and team emoji."""

    lines = []
    for index, attendee in enumerate(raid.attendees):
        line = f"{_marker(index, attendee)}  {attendee.display_name}"
        if attendee.additional_attendees > 0:
            line += f" +{attendee.additional_attendees}"
        if team_lookup is not None:
            team = emojis.team(team_lookup(attendee.member))
            if team:
                line += f" {team}"
        lines.append(line)
    return lines


def raid_embed(
    raid: RaidRecord,
    prefix: str = "!",
    team_lookup: TeamLookup | None = None,
) -> discord.Embed:
    """
    Build the embed posted (and later edited) for ``raid``.

    :param raid: Raid to render.
    :param prefix: Command prefix shown in the join instruction.
    :param team_lookup: Optional callable mapping a member to a team name.
    """

    subject = _title(raid.subject)
    end_time = raid.end_time or UNKNOWN
    start_time = raid.start_time or UNKNOWN
    location_name = _location_name(raid.location) or UNKNOWN
    url = getattr(raid.location, "directions_url", None) or raids_cfg.FALLBACK_URL

    roster = "\n".join(roster_lines(raid, team_lookup))
    description = (
        f"Raid available until {end_time}\n"
        f"Location **{location_name}**\n\n"
        f"Join this raid by typing the command ```{prefix}join {raid.id}```\n\n"
        f"Potential Trainers:\n"
        f"{roster}\n\n"
        f"Trainers: **{raid.attendee_count()} total**\n"
        f"Starting @ **{start_time}**\n"
    )

    embed = discord.Embed(
        title=f"Level {raids_cfg.RAID_LEVEL} Raid against {subject}",
        description=description,
        url=url,
        color=RAID_COLOR,
    )
    embed.set_thumbnail(url=raids_cfg.THUMBNAIL_URL.format(subject=subject))
    return embed
