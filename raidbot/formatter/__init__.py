from __future__ import annotations

from .embeds import raid_embed, roster_lines
from .listing import short_listing

__all__ = [
    "raid_embed",
    "roster_lines",
    "short_listing",
]
