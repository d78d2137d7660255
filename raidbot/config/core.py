import logging
import os
from typing import List

logger = logging.getLogger(__name__)


def _split_ids(raw: str) -> List[int]:
    return [int(cid.strip()) for cid in raw.split(",") if cid.strip()]


class Core:
    def __init__(self, config: dict | None = None) -> None:
        cfg = (config or {}).get("raidbot", {})
        discord_cfg = cfg.get("discord", {})

        token_env = str(discord_cfg.get("token_env", "DISCORD_API_TOKEN"))
        self.DISCORD_API_TOKEN: str | None = os.getenv(token_env)

        channel_ids_cfg = discord_cfg.get("channel_ids")
        if channel_ids_cfg:
            self.CHANNEL_IDS: List[int] = [int(cid) for cid in channel_ids_cfg]
        else:
            self.CHANNEL_IDS = _split_ids(os.getenv("CHANNEL_IDS", ""))

        self.COMMAND_PREFIX: str = str(
            discord_cfg.get("command_prefix", os.getenv("COMMAND_PREFIX", "!"))
        )

        required = [
            ("DISCORD_API_TOKEN", self.DISCORD_API_TOKEN),
        ]
        missing = [name for name, val in required if not val]
        if missing:
            raise ValueError(f"Missing environment variables: {', '.join(missing)}")

        if not self.CHANNEL_IDS:
            logger.info("No CHANNEL_IDS configured; raid commands are accepted in every channel.")

    def channel_allowed(self, channel_id: int) -> bool:
        """Return ``True`` when commands from ``channel_id`` should be handled."""

        return not self.CHANNEL_IDS or channel_id in self.CHANNEL_IDS
