"""API request/response models."""

from typing import Optional
from pydantic import BaseModel, Field

from .commands import Caller
from .events import OutboundMessage
from .game import Card, GameState


class SessionCreateRequest(BaseModel):
    """Request to start a game on a channel."""

    channel: str
    caller: Caller  # joins the game right away
    point_limit: Optional[int] = Field(default=None, ge=0)
    cards: Optional[list[Card]] = None  # default: cards the server was started with


class PlayerInfo(BaseModel):
    """Player information in session responses."""

    nick: str
    points: int
    is_judge: bool
    has_played: bool
    hand_size: int


class SessionResponse(BaseModel):
    """Response after creating a session."""

    channel: str
    state: GameState


class SessionStatusResponse(BaseModel):
    """Current session status."""

    channel: str
    state: GameState
    round: int
    judge: Optional[str] = None
    prompt: Optional[str] = None
    entries: int
    players: list[PlayerInfo]
    points: dict[str, int]
    time_remaining: Optional[float] = None
    notify_pending: bool = False  # transport should send NAMES and post the reply as a roster event


class MessagesResponse(BaseModel):
    """Messages the bot sent for a channel."""

    messages: list[OutboundMessage]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    active_sessions: int
    cards_loaded: int
