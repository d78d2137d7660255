"""Team (faction) role lookup for roster decoration."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

import discord

logger = logging.getLogger(__name__)


class TeamRoles:
    """
    Resolve team roles by name, once per guild per process.

    Roles are looked up lazily the first time a guild is seen and cached
    under ``(guild id, team name)`` without expiry. Call :meth:`refresh`
    after renaming or recreating team roles.
    """

    def __init__(self, names: Iterable[str]) -> None:
        self._names: List[str] = list(names)
        self._roles: Dict[Tuple[int, str], discord.Role | None] = {}

    def resolve(self, guild: discord.Guild | None) -> Dict[str, discord.Role | None]:
        """Fill ``guild``'s entries for any team not yet resolved and return them."""

        if guild is None:
            return {}

        resolved: Dict[str, discord.Role | None] = {}
        for name in self._names:
            key = (guild.id, name)
            role = self._roles.get(key)
            if role is None:
                role = discord.utils.get(guild.roles, name=name)
                if role is None:
                    logger.info("Team role %r not found in guild %s", name, guild.id)
                self._roles[key] = role
            resolved[name] = role
        return resolved

    def team_of(self, member) -> str | None:
        """Return the first configured team whose role ``member`` holds in its guild."""

        member_role_ids = {role.id for role in getattr(member, "roles", None) or []}
        if not member_role_ids:
            return None

        roles = self.resolve(getattr(member, "guild", None))
        for name in self._names:
            role = roles.get(name)
            if role is not None and role.id in member_role_ids:
                return name
        return None

    def refresh(self, guild: discord.Guild | None = None) -> None:
        """Drop cached roles for ``guild``, or for every guild when omitted."""

        if guild is None:
            self._roles.clear()
            return
        for key in [key for key in self._roles if key[0] == guild.id]:
            del self._roles[key]


__all__ = ["TeamRoles"]
