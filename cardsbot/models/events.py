"""Roster event and outbound message models."""

import time
from enum import Enum
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field


# =============================================================================
# Roster events (chat transport -> session)
# =============================================================================


class PlayerLeftEvent(BaseModel):
    """A user parted the channel."""

    type: Literal["player_left"] = "player_left"
    nick: str
    reason: Optional[str] = None


class PlayerKickedEvent(BaseModel):
    """A user was kicked from the channel."""

    type: Literal["player_kicked"] = "player_kicked"
    nick: str
    by: Optional[str] = None
    reason: Optional[str] = None


class PlayerQuitEvent(BaseModel):
    """A user disconnected from the network."""

    type: Literal["player_quit"] = "player_quit"
    nick: str
    reason: Optional[str] = None


class PlayerRenamedEvent(BaseModel):
    """A user changed nickname."""

    type: Literal["player_renamed"] = "player_renamed"
    old_nick: str
    new_nick: str


class ChannelNamesEvent(BaseModel):
    """Reply to a NAMES request: channel nicks mapped to their mode prefix."""

    type: Literal["channel_names"] = "channel_names"
    names: dict[str, str]


RosterEvent = Annotated[
    Union[
        PlayerLeftEvent,
        PlayerKickedEvent,
        PlayerQuitEvent,
        PlayerRenamedEvent,
        ChannelNamesEvent,
    ],
    Field(discriminator="type"),
]


# =============================================================================
# Outbound messages (session -> chat transport)
# =============================================================================


class MessageKind(str, Enum):
    """How a message is delivered."""

    SAY = "say"
    NOTICE = "notice"
    TOPIC = "topic"


class OutboundMessage(BaseModel):
    """A single line the session sent to the channel or a player."""

    kind: MessageKind
    target: str
    text: str
    timestamp: float = Field(default_factory=time.time)
