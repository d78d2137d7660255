"""
In-memory raid coordination package.

Modules
=======

``registry``
    Defines :class:`~raidbot.raids.registry.RaidRegistry`, the singleton
    holding every channel's raids, the last-raid index, and expiry rules.
``models``
    Dataclasses for raids, attendees, and operation results.
``scheduler``
    Starts and stops the periodic expiry sweep on the running event loop.
``timeparse``
    Time-of-day parsing for the start/end times people type.
``gyms``
    Gym locations and the fuzzy :class:`~raidbot.raids.gyms.GymDirectory`.
``roles``
    Lazily cached team role lookup used to decorate rosters.
"""

from .models import AttendeeRef, RaidRecord, RaidResult
from .registry import RaidRegistry

__all__ = ["AttendeeRef", "RaidRecord", "RaidResult", "RaidRegistry"]
