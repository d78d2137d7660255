"""
Dataclass models for raid state.

A :class:`RaidRecord` owns its roster of :class:`AttendeeRef` entries. The
member object inside an attendee is shared with discord.py (the same member
can sit in several raids at once), so anything that only holds for one raid,
like the arrival flag or the guest count, is stored on the ``AttendeeRef``.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(slots=True)
class AttendeeRef:
    """A member attending one raid."""

    member: Any
    additional_attendees: int = 0
    has_arrived: bool = False

    @property
    def id(self) -> int:
        return self.member.id

    @property
    def display_name(self) -> str:
        return getattr(self.member, "display_name", None) or str(self.member.id)


@dataclass(slots=True)
class RaidRecord:
    """One active raid in a channel."""

    id: str
    subject: str
    creation_time: datetime.datetime
    default_end_time: datetime.datetime
    attendees: List[AttendeeRef] = field(default_factory=list)
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    location: Any = None
    message: Any = None
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def key(self) -> str:
        """Lookup key inside a channel map."""
        return self.id.lower()

    @property
    def leader(self) -> AttendeeRef | None:
        return self.attendees[0] if self.attendees else None

    def find_attendee(self, member_id: int) -> AttendeeRef | None:
        """Return the attendee whose identity matches ``member_id``."""

        for attendee in self.attendees:
            if attendee.id == member_id:
                return attendee
        return None

    def attendee_count(self) -> int:
        """Members on the roster plus the guests they bring."""

        return len(self.attendees) + sum(a.additional_attendees for a in self.attendees)


@dataclass(slots=True)
class RaidResult:
    """
    Outcome of a registry operation.

    Exactly one of ``raid`` and ``error`` is set. ``args`` carries the input
    tokens that did not resolve to a raid id (see
    :meth:`~raidbot.raids.registry.RaidRegistry.find_raid`).
    """

    raid: RaidRecord | None = None
    error: str | None = None
    args: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None and self.raid is not None


__all__ = ["AttendeeRef", "RaidRecord", "RaidResult"]
