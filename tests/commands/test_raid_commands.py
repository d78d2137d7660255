import asyncio
from types import SimpleNamespace

import pytest

from raidbot.commands.handlers.raids import Raids, _split_guests
from raidbot.raids import RaidRegistry
from raidbot.raids.gyms import Gym, GymDirectory


class FakeMessage:
    def __init__(self, content=None, embed=None):
        self.content = content
        self.embed = embed
        self.edits = []

    async def edit(self, *, embed=None):
        self.edits.append(embed)
        self.embed = embed


class FakeContext:
    def __init__(self, author, channel_id=10):
        self.author = author
        self.channel = SimpleNamespace(id=channel_id)
        self.guild = None
        self.sent = []

    async def send(self, content=None, *, embed=None):
        message = FakeMessage(content, embed)
        self.sent.append(message)
        return message

    @property
    def texts(self):
        return [m.content for m in self.sent if m.content is not None]


def _member(member_id, name=""):
    return SimpleNamespace(id=member_id, display_name=name or f"user{member_id}", roles=[])


@pytest.fixture
def cog(monkeypatch, clock):
    monkeypatch.setattr(RaidRegistry, "_instance", None)
    cog = Raids(SimpleNamespace())
    cog.registry._clock = clock
    cog.gyms = GymDirectory([Gym("Town Hall Fountain", 40.7, -74.0)])
    return cog


def _run(command, cog, ctx, *args):
    asyncio.run(command.callback(cog, ctx, *args))


def test_split_guests():
    assert _split_guests(["+2", "please"]) == (2, ["please"])
    assert _split_guests(["3"]) == (3, [])
    assert _split_guests(["plus", "two"]) == (0, ["plus", "two"])


def test_split_guests_keeps_first_count_even_when_zero():
    assert _split_guests(["+0", "+2"]) == (0, ["+2"])
    assert _split_guests(["+1", "+3"]) == (1, ["+3"])


def test_raid_command_posts_card_and_stores_message(cog):
    ctx = FakeContext(_member(1, "Ash"))

    _run(cog.raid, cog, ctx, "Mewtwo", "4:15", "pm")

    raid = cog.registry.get_raid(10, ctx.author, "mewtwo-0")
    assert raid.end_time == "4:15 pm"
    assert raid.message is ctx.sent[-1]
    assert cog.registry.get_message(10, ctx.author) is ctx.sent[-1]
    assert ctx.sent[-1].embed.title.endswith("Raid against Mewtwo")


def test_raid_command_requires_subject(cog):
    ctx = FakeContext(_member(1))

    _run(cog.raid, cog, ctx, None)

    assert "Usage" in ctx.texts[0]
    assert cog.registry.list_raids(10) == {}


def test_join_with_guests_edits_card(cog):
    leader = FakeContext(_member(1, "Ash"))
    _run(cog.raid, cog, leader, "mewtwo")
    card = leader.sent[-1]

    ctx = FakeContext(_member(2, "Misty"))
    _run(cog.join, cog, ctx, "MEWTWO-0", "+2")

    raid = cog.registry.get_raid(10, ctx.author, "mewtwo-0")
    assert raid.attendee_count() == 4
    assert len(card.edits) == 1
    assert "Misty +2" in card.edits[0].description
    assert ctx.texts == ["<@2> joined **mewtwo-0**. 4 trainer(s) so far."]


def test_join_twice_reports_error(cog):
    leader = FakeContext(_member(1))
    _run(cog.raid, cog, leader, "mewtwo")

    _run(cog.join, cog, leader, "mewtwo-0")

    assert leader.texts == ["<@1> You've already joined this raid."]
    assert len(cog.registry.get_raid(10, leader.author, "mewtwo-0").attendees) == 1


def test_join_unknown_raid_without_history(cog):
    ctx = FakeContext(_member(3))

    _run(cog.join, cog, ctx, "lugia-9")

    assert ctx.texts == ["<@3> No raid exists for lugia-9."]


def test_leave_and_not_attending(cog):
    leader = FakeContext(_member(1))
    _run(cog.raid, cog, leader, "mewtwo")
    trainer = FakeContext(_member(2))
    _run(cog.join, cog, trainer, "mewtwo-0")

    _run(cog.leave, cog, trainer)
    _run(cog.leave, cog, trainer)

    assert trainer.texts[-2:] == [
        "<@2> left **mewtwo-0**.",
        "<@2> You're not attending this raid.",
    ]


def test_gym_uses_leftover_tokens(cog):
    leader = FakeContext(_member(1))
    _run(cog.raid, cog, leader, "mewtwo")

    _run(cog.gym, cog, leader, "town", "mewtwo-0", "hall", "fountain")

    raid = cog.registry.get_raid(10, leader.author, "mewtwo-0")
    assert raid.location == Gym("Town Hall Fountain", 40.7, -74.0)
    assert leader.texts[-1] == "**mewtwo-0** location set to Town Hall Fountain."


def test_gym_unknown_name_is_kept_verbatim(cog):
    leader = FakeContext(_member(1))
    _run(cog.raid, cog, leader, "mewtwo")

    _run(cog.gym, cog, leader, "Corner", "Store")

    assert cog.registry.get_raid(10, leader.author).location == Gym("Corner Store")


def test_start_and_end_times(cog):
    leader = FakeContext(_member(1))
    _run(cog.raid, cog, leader, "mewtwo")

    _run(cog.start, cog, leader, "3:30pm")
    _run(cog.end, cog, leader, "mewtwo-0", "4pm")
    _run(cog.start, cog, leader, "mewtwo-0")

    raid = cog.registry.get_raid(10, leader.author)
    assert raid.start_time == "3:30pm"
    assert raid.end_time == "4pm"
    assert leader.texts[-1] == "<@1> Please provide a start time."


def test_here_marks_arrival(cog):
    leader = FakeContext(_member(1, "Ash"))
    _run(cog.raid, cog, leader, "mewtwo")

    _run(cog.here, cog, leader)
    assert cog.registry.get_raid(10, leader.author).leader.has_arrived is True

    _run(cog.not_here, cog, leader, "mewtwo-0")
    assert cog.registry.get_raid(10, leader.author).leader.has_arrived is False


def test_raids_and_info(cog):
    leader = FakeContext(_member(1))
    _run(cog.raid, cog, leader, "mewtwo")

    _run(cog.raids, cog, leader)
    assert "mewtwo-0 raid start time to be announced" in leader.texts[-1]

    _run(cog.info, cog, leader)
    assert cog.registry.get_raid(10, leader.author).message is leader.sent[-1]
