"""Root conftest for path setup and shared fixtures.

This file is loaded first by pytest and ensures the project root
is on sys.path before any test modules are imported.
"""

import sys
from pathlib import Path

# Add project root to path IMMEDIATELY
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import random
from typing import Optional

import pytest

from cardsbot.game.player import Player
from cardsbot.game.roster import RosterHub
from cardsbot.game.session import GameSession
from cardsbot.messaging import BufferedSink
from cardsbot.models.game import Card, GameConfig

CHANNEL = "#cards"


# =============================================================================
# Helpers
# =============================================================================


class FakeClock:
    """Manually advanced clock for timer tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_player(nick: str) -> Player:
    """Player whose user and host derive from the nick."""
    return Player(nick, f"~{nick}", f"{nick}.example.org")


async def start_round(session: GameSession, nicks=("alice", "bob", "carol")) -> list[Player]:
    """Start the session, join players and run the start delay."""
    await session.start()
    players = []
    for nick in nicks:
        players.append(await session.add_player(make_player(nick)))
    await session.on_start_delay_elapsed()
    return players


def non_judges(session: GameSession) -> list[Player]:
    return [p for p in session.players if not p.is_judge]


async def play_all(session: GameSession) -> None:
    """Every non-judge plays the first ``pick`` cards of their hand."""
    pick = session.table_prompt.pick
    for player in non_judges(session):
        await session.play_card(player, list(range(pick)))


# =============================================================================
# Card Fixtures
# =============================================================================


@pytest.fixture
def prompts() -> list[Card]:
    """Single-blank prompts."""
    return [Card.prompt(f"Prompt {i}: %s.") for i in range(20)]


@pytest.fixture
def responses() -> list[Card]:
    """Plenty of responses for a few rounds."""
    return [Card.response(f"Response {i}") for i in range(120)]


# =============================================================================
# Session Fixtures
# =============================================================================


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sink() -> BufferedSink:
    return BufferedSink()


@pytest.fixture
def roster_hub() -> RosterHub:
    return RosterHub()


@pytest.fixture
def game_config() -> GameConfig:
    """Long timers so nothing fires unless a test drives it."""
    return GameConfig(
        round_minutes=3,
        idle_limit=2,
        point_limit=0,
        seconds_before_start=30,
        min_players=3,
        hand_size=10,
        timer_interval_seconds=10,
        set_topic=True,
        topic_base="| cards",
    )


@pytest.fixture
def session(prompts, responses, sink, game_config, roster_hub, clock) -> GameSession:
    """A fresh session on CHANNEL with a seeded RNG and a fake clock."""
    return GameSession(
        CHANNEL,
        prompts,
        responses,
        sink,
        config=game_config,
        roster_hub=roster_hub,
        rng=random.Random(1234),
        clock=clock,
    )


def channel_texts(sink: BufferedSink) -> list[str]:
    return sink.texts(CHANNEL)


def last_channel_text(sink: BufferedSink) -> Optional[str]:
    texts = channel_texts(sink)
    return texts[-1] if texts else None
