import os
from typing import Dict


class Emojis:
    def __init__(self, config: dict | None = None) -> None:
        emoji_cfg = (config or {}).get("raidbot", {}).get("emojis", {})
        self.LEADER_ARRIVED: str = str(emoji_cfg.get("leader_arrived", os.getenv("EMOJI_LEADER_ARRIVED", "👑")))
        self.ARRIVED: str = str(emoji_cfg.get("arrived", os.getenv("EMOJI_ARRIVED", "✅")))
        self.PENDING: str = str(emoji_cfg.get("pending", os.getenv("EMOJI_PENDING", "⬜")))

        teams_cfg = emoji_cfg.get("teams", {})
        self.TEAMS: Dict[str, str] = {
            "mystic": "🔵",
            "valor": "🔴",
            "instinct": "🟡",
        }
        self.TEAMS.update({str(name).lower(): str(token) for name, token in teams_cfg.items()})

    def team(self, team_name: str | None) -> str:
        """Return the emoji configured for ``team_name`` or an empty string."""

        if not team_name:
            return ""
        return self.TEAMS.get(team_name.lower(), "")
