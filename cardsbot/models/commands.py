"""Player command models.

The chat transport parses ``!command args`` and decodes it into one of these
before anything reaches a session.
"""

from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field

from .game import PlayerKey


class Caller(BaseModel):
    """Who issued a command."""

    nick: str
    user: str
    hostname: str

    @property
    def key(self) -> PlayerKey:
        return PlayerKey(self.nick, self.user, self.hostname)


class StartCommand(BaseModel):
    type: Literal["start"] = "start"
    point_limit: Optional[int] = Field(default=None, ge=0)


class StopCommand(BaseModel):
    type: Literal["stop"] = "stop"


class PauseCommand(BaseModel):
    type: Literal["pause"] = "pause"


class ResumeCommand(BaseModel):
    type: Literal["resume"] = "resume"


class JoinCommand(BaseModel):
    type: Literal["join"] = "join"


class QuitCommand(BaseModel):
    type: Literal["quit"] = "quit"


class PlayCommand(BaseModel):
    type: Literal["play"] = "play"
    indices: list[int]


class DiscardCommand(BaseModel):
    """Empty ``indices`` discards the whole hand."""

    type: Literal["discard"] = "discard"
    indices: list[int] = Field(default_factory=list)


class PickCommand(BaseModel):
    """Play cards or select the winner, depending on the round state."""

    type: Literal["pick"] = "pick"
    indices: list[int] = Field(min_length=1)


class WinnerCommand(BaseModel):
    type: Literal["winner"] = "winner"
    index: int


class ListPlayersCommand(BaseModel):
    type: Literal["players"] = "players"


class PointsCommand(BaseModel):
    type: Literal["points"] = "points"


class StatusCommand(BaseModel):
    type: Literal["status"] = "status"


class CardsCommand(BaseModel):
    type: Literal["cards"] = "cards"


Command = Annotated[
    Union[
        StartCommand,
        StopCommand,
        PauseCommand,
        ResumeCommand,
        JoinCommand,
        QuitCommand,
        PlayCommand,
        DiscardCommand,
        PickCommand,
        WinnerCommand,
        ListPlayersCommand,
        PointsCommand,
        StatusCommand,
        CardsCommand,
    ],
    Field(discriminator="type"),
]


class CommandRequest(BaseModel):
    """A decoded command together with its caller."""

    caller: Caller
    command: Command
