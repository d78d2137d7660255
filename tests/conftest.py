import datetime
import os, sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

# Ensure required environment variables for config validation
os.environ.setdefault("DISCORD_API_TOKEN", "test-token")

from raidbot.raids import RaidRegistry  # noqa: E402


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, current: datetime.datetime) -> None:
        self.current = current

    def __call__(self) -> datetime.datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += datetime.timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime.datetime(2026, 10, 19, 15, 0, 0))


@pytest.fixture
def registry(monkeypatch, clock):
    monkeypatch.setattr(RaidRegistry, "_instance", None)
    reg = RaidRegistry()
    reg._clock = clock
    return reg
