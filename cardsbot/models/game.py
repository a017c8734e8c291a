"""Game state models."""

from enum import Enum
from typing import NamedTuple, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..config import settings

BLANK = "%s"


class CardKind(str, Enum):
    """Deck a card belongs to."""

    PROMPT = "prompt"
    RESPONSE = "response"


class GameState(str, Enum):
    """Session lifecycle state."""

    STOPPED = "Stopped"
    STARTED = "Started"
    PLAYABLE = "Playable"
    PLAYED = "Played"
    ROUND_END = "RoundEnd"
    WAITING = "Waiting"
    PAUSED = "Paused"


class Card(BaseModel):
    """A prompt or response card."""

    model_config = ConfigDict(frozen=True)

    kind: CardKind
    text: str  # prompts mark blanks with %s
    pick: int = Field(default=1, ge=1)
    draw: int = Field(default=0, ge=0)

    def __str__(self) -> str:
        return self.text

    @classmethod
    def prompt(cls, text: str, pick: int = 1, draw: int = 0) -> "Card":
        return cls(kind=CardKind.PROMPT, text=text, pick=pick, draw=draw)

    @classmethod
    def response(cls, text: str) -> "Card":
        return cls(kind=CardKind.RESPONSE, text=text)


class PlayerKey(NamedTuple):
    """Identity used for roster de-duplication, scores and idle bans."""

    nick: str
    user: str
    hostname: str


class Entry(BaseModel):
    """Response cards one player put on the table this round."""

    owner: PlayerKey
    cards: list[Card]


class GameConfig(BaseModel):
    """Per-session game configuration."""

    round_minutes: float = settings.round_minutes
    idle_limit: int = settings.idle_limit
    point_limit: int = settings.point_limit
    seconds_before_start: float = settings.seconds_before_start
    min_players: int = settings.min_players
    hand_size: int = settings.hand_size
    timer_interval_seconds: float = settings.timer_interval_seconds
    set_topic: bool = settings.set_topic
    topic_base: str = settings.topic_base
    notify_users: bool = settings.notify_users
    bot_nick: str = settings.bot_nick

    @property
    def time_limit_seconds(self) -> float:
        return self.round_minutes * 60


def display_prompt(card: Card) -> str:
    """Render a prompt for the channel, e.g. ``___ is great [PICK 2]``."""
    value = card.text.replace(BLANK, "___")
    if card.pick > 1:
        value += f" [PICK {card.pick}]"
    if card.draw > 0:
        value += f" [DRAW {card.draw}]"
    return value


def format_entry(prompt: Card, responses: list[Card]) -> str:
    """Fill the prompt's blanks with responses, in order.

    Responses without a matching blank are appended, separated by spaces.
    """
    parts = prompt.text.split(BLANK)
    out = [parts[0]]
    extra = []
    for i, response in enumerate(responses):
        if i + 1 < len(parts):
            out.append(response.text)
            out.append(parts[i + 1])
        else:
            extra.append(response.text)
    # unfilled blanks stay as-is
    for part in parts[len(responses) + 1:]:
        out.append(BLANK)
        out.append(part)
    return " ".join(["".join(out)] + extra)


def pluralize(word: str, count: int) -> str:
    """Naive English plural for announcement text."""
    return word if count == 1 else f"{word}s"
