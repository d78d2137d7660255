from __future__ import annotations

from typing import Mapping

from raidbot.raids.models import RaidRecord


def _title(subject: str) -> str:
    return subject[:1].upper() + subject[1:]


def _location_name(location) -> str:
    if location is None:
        return ""
    return getattr(location, "name", None) or str(location)


def short_listing(raids: Mapping[str, RaidRecord]) -> str:
    """
    Summarize every raid in a channel, two lines per raid.

    :param raids: Channel raid map as returned by ``RaidRegistry.list_raids``.
    :returns: Text ready to send; empty raids yield a one-line notice.
    """

    if not raids:
        return "No active raids in this channel."

    lines: list[str] = []
    for raid in raids.values():
        start = f"starting at {raid.start_time}" if raid.start_time else "start time to be announced"
        location = _location_name(raid.location)
        located = f"Located at {location}" if location else ""

        lines.append(f"**__{_title(raid.subject)}__**")
        lines.append(
            f"{raid.id} raid {start}. {raid.attendee_count()} potential trainer(s). {located}".rstrip()
            + "\n"
        )

    return " " + "\n".join(lines)
