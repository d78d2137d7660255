import os
from pathlib import Path
from typing import List

_DEFAULT_GYMS_FILE = Path(__file__).resolve().parent.parent.parent / "data" / "gyms.json"


def _split_names(raw: str) -> List[str]:
    return [token.strip() for token in raw.split(",") if token.strip()]


def _as_bool(raw) -> bool:
    return str(raw).lower() in ("1", "true", "yes")


class Raids:
    def __init__(self, config: dict | None = None) -> None:
        raids_cfg = (config or {}).get("raidbot", {}).get("raids", {})

        # Lifetime of a raid with no parseable start/end time, in seconds.
        self.DEFAULT_RAID_LENGTH: int = int(
            raids_cfg.get("default_raid_length", os.getenv("DEFAULT_RAID_LENGTH", "7200"))
        )
        self.SWEEP_INTERVAL: float = float(
            raids_cfg.get("sweep_interval", os.getenv("RAID_SWEEP_INTERVAL", "6"))
        )
        # A raid whose start time has passed is evicted, not kept as "in progress".
        self.EVICT_ON_START_TIME: bool = _as_bool(
            raids_cfg.get("evict_on_start_time", os.getenv("EVICT_ON_START_TIME", "1"))
        )

        names_raw = raids_cfg.get("team_role_names", os.getenv("TEAM_ROLE_NAMES", "Mystic,Valor,Instinct"))
        if isinstance(names_raw, str):
            self.TEAM_ROLE_NAMES: List[str] = _split_names(names_raw)
        else:
            self.TEAM_ROLE_NAMES = [str(name) for name in names_raw]

        self.GYMS_FILE: str = str(raids_cfg.get("gyms_file", os.getenv("GYMS_FILE", str(_DEFAULT_GYMS_FILE))))
        self.RAID_LEVEL: int = int(raids_cfg.get("raid_level", os.getenv("RAID_LEVEL", "5")))
        self.THUMBNAIL_URL: str = str(
            raids_cfg.get(
                "thumbnail_url",
                os.getenv(
                    "RAID_THUMBNAIL_URL",
                    "https://rankedboost.com/wp-content/plugins/ice/pokemon-go/{subject}-Pokemon-Go.png",
                ),
            )
        )
        self.FALLBACK_URL: str = str(raids_cfg.get("fallback_url", os.getenv("RAID_FALLBACK_URL", "https://discord.com")))
