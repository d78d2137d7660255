"""
Gym (raid location) lookup.

Gyms are loaded from a JSON file holding a list of entries in either the
legacy shape::

    {"gymName": "Town Fountain", "gymInfo": {"latitude": 1.0, "longitude": 2.0}}

or the flat shape::

    {"name": "Town Fountain", "latitude": 1.0, "longitude": 2.0}
"""

from __future__ import annotations

import difflib
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

logger = logging.getLogger(__name__)

_DIRECTIONS_URL = "https://www.google.com/maps/dir/Current+Location/{lat},{lng}"


@dataclass(frozen=True, slots=True)
class Gym:
    """A named place a raid happens at."""

    name: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def directions_url(self) -> str | None:
        if not self.has_coordinates:
            return None
        return _DIRECTIONS_URL.format(lat=self.latitude, lng=self.longitude)

    def __str__(self) -> str:
        return self.name


def _gym_from_entry(entry: Dict[str, Any]) -> Gym | None:
    name = entry.get("gymName") or entry.get("name")
    if not name:
        return None
    info = entry.get("gymInfo") or entry
    lat = info.get("latitude")
    lng = info.get("longitude")
    return Gym(
        name=str(name),
        latitude=float(lat) if lat is not None else None,
        longitude=float(lng) if lng is not None else None,
    )


class GymDirectory:
    """Case-insensitive, typo-tolerant gym name lookup."""

    def __init__(self, gyms: Iterable[Gym] = ()) -> None:
        self._gyms: Dict[str, Gym] = {}
        for gym in gyms:
            self._gyms[gym.name.lower()] = gym

    @classmethod
    def from_file(cls, path: str | Path) -> "GymDirectory":
        """Load gyms from ``path``; a missing file yields an empty directory."""

        target = Path(path)
        if not target.is_file():
            logger.warning("Gym file %s not found; gym lookup disabled.", target)
            return cls()

        with target.open("r", encoding="utf-8") as handle:
            entries = json.load(handle)

        gyms = [g for g in (_gym_from_entry(e) for e in entries) if g is not None]
        logger.info("Loaded %d gym(s) from %s", len(gyms), target)
        return cls(gyms)

    def __len__(self) -> int:
        return len(self._gyms)

    def lookup(self, query: str) -> Gym | None:
        """
        Resolve ``query`` to a gym.

        Tries an exact (case-insensitive) name, then a unique substring hit,
        then the closest fuzzy match.
        """

        needle = (query or "").strip().lower()
        if not needle:
            return None

        exact = self._gyms.get(needle)
        if exact:
            return exact

        partial = [gym for key, gym in self._gyms.items() if needle in key]
        if len(partial) == 1:
            return partial[0]

        close = difflib.get_close_matches(needle, list(self._gyms), n=1, cutoff=0.6)
        if close:
            return self._gyms[close[0]]

        if partial:
            return min(partial, key=lambda gym: len(gym.name))
        return None


__all__ = ["Gym", "GymDirectory"]
