"""Raid registry coordinating channel raid maps, rosters, and expiry."""

from __future__ import annotations

import datetime
import logging
from typing import Any, Callable, Dict, Mapping, Sequence

from raidbot.config import raids as raids_cfg

from .models import AttendeeRef, RaidRecord, RaidResult
from .timeparse import parse_time_of_day

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime.datetime]

_RECORD_FIELDS = ("start_time", "end_time", "location")


def _mention(user) -> str:
    return f"<@{user.id}>"


class RaidRegistry:
    """
    Singleton store of active raids, keyed by channel.

    All operations are synchronous. Command handlers and the expiry sweep
    share one event loop, so nothing here awaits or locks.
    """

    _instance: "RaidRegistry" | None = None

    def __new__(cls) -> "RaidRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._channels: dict[int, dict[str, RaidRecord]] = {}
            cls._instance._last_raid: dict[int, str] = {}
            cls._instance._counter = 0
            cls._instance._default_length = datetime.timedelta(
                seconds=raids_cfg.DEFAULT_RAID_LENGTH
            )
            cls._instance._clock: Clock = datetime.datetime.now
        return cls._instance

    def now(self) -> datetime.datetime:
        return self._clock()

    # ------------------------------------------------------------------ #
    # LAST-RAID INDEX
    # ------------------------------------------------------------------ #

    def _remember(self, user, raid_id: str | None) -> None:
        # Keyed by the immutable user id; display names can change or collide.
        if raid_id:
            self._last_raid[user.id] = raid_id

    def last_raid_id(self, user) -> str | None:
        return self._last_raid.get(user.id)

    # ------------------------------------------------------------------ #
    # CREATE / RESOLVE
    # ------------------------------------------------------------------ #

    def create_raid(
        self, channel_id: int, creator, raid_data: Mapping[str, Any]
    ) -> RaidResult:
        """Register a new raid led by ``creator`` and return it."""

        data = dict(raid_data)
        subject = str(data.pop("subject"))
        raid_id = f"{subject}-{self._counter}"
        self._counter += 1

        created = self.now()
        record = RaidRecord(
            id=raid_id,
            subject=subject,
            creation_time=created,
            default_end_time=created + self._default_length,
            attendees=[AttendeeRef(creator)],
        )
        for name in _RECORD_FIELDS:
            if name in data:
                setattr(record, name, data.pop(name))
        record.payload = data

        self._channels.setdefault(channel_id, {})[record.key] = record
        self._remember(creator, raid_id)

        logger.info(
            "Created raid %s in channel %s by %s", raid_id, channel_id, creator.id
        )
        return RaidResult(raid=record)

    def get_raid(
        self, channel_id: int, user, raw_id: str | None = None
    ) -> RaidRecord | None:
        """
        Return the raid ``raw_id`` in ``channel_id`` (case-insensitive).

        Without ``raw_id`` the user's most recently touched raid is used.
        Returns ``None`` when nothing matches.
        """

        channel_raids = self._channels.get(channel_id)
        if channel_raids is None:
            return None

        if not raw_id:
            raw_id = self.last_raid_id(user)
            if not raw_id:
                return None

        return channel_raids.get(raw_id.lower())

    def find_raid(
        self, channel_id: int, user, tokens: Sequence[str]
    ) -> RaidResult:
        """
        Pick a raid out of free-form command arguments.

        The first token naming an active raid wins; otherwise the user's last
        raid is used. Tokens that are not raid ids come back in ``args`` so the
        caller can treat them as the rest of the command.
        """

        raid = None
        leftover: list[str] = []
        for token in tokens:
            found = self.get_raid(channel_id, user, token)
            if found is None:
                leftover.append(token)
            elif raid is None:
                raid = found

        if raid is None:
            raid = self.get_raid(channel_id, user)

        if raid is None:
            return RaidResult(
                error=f"{_mention(user)} No raid exists for {' '.join(tokens)}."
            )

        return RaidResult(raid=raid, args=leftover)

    def list_raids(self, channel_id: int) -> Dict[str, RaidRecord]:
        return self._channels.get(channel_id, {})

    def attendee_count(
        self,
        raid: RaidRecord | None = None,
        *,
        channel_id: int | None = None,
        user=None,
        raid_id: str | None = None,
    ) -> int:
        """
        Total trainers for a raid, guests included.

        Pass either ``raid`` or the full ``channel_id``/``user``/``raid_id``
        lookup. Missing lookup fields raise :class:`ValueError`.
        """

        if raid is None:
            if channel_id is None or user is None or not raid_id:
                raise ValueError("Need raid data in order to get attendee count.")
            raid = self.get_raid(channel_id, user, raid_id)
            if raid is None:
                raise LookupError(f"Raid {raid_id} not found in channel {channel_id}.")

        return raid.attendee_count()

    # ------------------------------------------------------------------ #
    # MESSAGE HANDLE
    # ------------------------------------------------------------------ #

    def get_message(self, channel_id: int, user, raid_id: str | None = None):
        raid = self.get_raid(channel_id, user, raid_id)
        return raid.message if raid else None

    def set_message(self, channel_id: int, user, raid_id: str | None, message) -> None:
        raid = self.get_raid(channel_id, user, raid_id)
        if raid is not None:
            raid.message = message

    # ------------------------------------------------------------------ #
    # ROSTER
    # ------------------------------------------------------------------ #

    def _not_found(self, user, raid_id: str | None) -> RaidResult:
        return RaidResult(
            error=f"{_mention(user)} The raid you entered ({raid_id}) was not found."
        )

    def add_attendee(
        self,
        channel_id: int,
        user,
        raid_id: str | None,
        additional_attendees: int = 0,
    ) -> RaidResult:
        raid = self.get_raid(channel_id, user, raid_id)
        if raid is None:
            return self._not_found(user, raid_id)

        if raid.find_attendee(user.id) is not None:
            return RaidResult(error=f"{_mention(user)} You've already joined this raid.")

        raid.attendees.append(
            AttendeeRef(user, additional_attendees=max(0, int(additional_attendees)))
        )
        self._remember(user, raid.id)
        return RaidResult(raid=raid)

    def remove_attendee(self, channel_id: int, user, raid_id: str | None) -> RaidResult:
        raid = self.get_raid(channel_id, user, raid_id)
        if raid is None:
            return self._not_found(user, raid_id)

        self._remember(user, raid.id)

        attendee = raid.find_attendee(user.id)
        if attendee is None:
            return RaidResult(error=f"{_mention(user)} You're not attending this raid.")

        raid.attendees.remove(attendee)
        return RaidResult(raid=raid)

    def set_arrival_status(
        self, channel_id: int, user, raid_id: str | None, status: bool
    ) -> RaidResult:
        raid = self.get_raid(channel_id, user, raid_id)
        if raid is None:
            return self._not_found(user, raid_id)

        attendee = raid.find_attendee(user.id)
        if attendee is not None:
            attendee.has_arrived = bool(status)

        self._remember(user, raid.id)
        return RaidResult(raid=raid)

    def _set_field(
        self, channel_id: int, user, raid_id: str | None, name: str, value
    ) -> RaidResult:
        raid = self.get_raid(channel_id, user, raid_id)
        if raid is None:
            return self._not_found(user, raid_id)

        setattr(raid, name, value)
        self._remember(user, raid.id)
        return RaidResult(raid=raid)

    def set_raid_time(
        self, channel_id: int, user, raid_id: str | None, start_time: str | None
    ) -> RaidResult:
        return self._set_field(channel_id, user, raid_id, "start_time", start_time)

    def set_end_time(
        self, channel_id: int, user, raid_id: str | None, end_time: str | None
    ) -> RaidResult:
        return self._set_field(channel_id, user, raid_id, "end_time", end_time)

    def set_raid_location(
        self, channel_id: int, user, raid_id: str | None, location
    ) -> RaidResult:
        return self._set_field(channel_id, user, raid_id, "location", location)

    # ------------------------------------------------------------------ #
    # EXPIRY
    # ------------------------------------------------------------------ #

    def is_expired(self, raid: RaidRecord, now: datetime.datetime) -> bool:
        end = parse_time_of_day(raid.end_time, now)
        start = parse_time_of_day(raid.start_time, now)

        if end is not None and now > end:
            return True
        if raids_cfg.EVICT_ON_START_TIME:
            if start is not None and now > start:
                return True
        else:
            # start_time plays no part in expiry when the rule is off
            start = None
        if end is None and start is None and now > raid.default_end_time:
            return True
        return False

    def sweep(self, now: datetime.datetime | None = None) -> list[str]:
        """Evict every expired raid and return the evicted ids."""

        now = now or self.now()
        evicted: list[str] = []
        for channel_id, channel_raids in self._channels.items():
            expired = [key for key, raid in channel_raids.items() if self.is_expired(raid, now)]
            for key in expired:
                raid = channel_raids.pop(key)
                evicted.append(raid.id)
                logger.info("Raid %s in channel %s expired", raid.id, channel_id)
        return evicted

    def clear(self) -> None:
        """Drop all raids and last-raid entries; the id counter keeps counting."""

        self._channels.clear()
        self._last_raid.clear()


__all__ = ["RaidRegistry"]
