"""Pydantic models for cards, commands and events."""

from .game import (
    Card,
    CardKind,
    GameState,
    PlayerKey,
    Entry,
    GameConfig,
    display_prompt,
    format_entry,
)
from .events import (
    # Roster (transport to session)
    PlayerLeftEvent,
    PlayerKickedEvent,
    PlayerQuitEvent,
    PlayerRenamedEvent,
    ChannelNamesEvent,
    RosterEvent,
    # Session to transport
    MessageKind,
    OutboundMessage,
)
from .commands import (
    Caller,
    Command,
    CommandRequest,
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
)
from .api import (
    SessionCreateRequest,
    PlayerInfo,
    SessionResponse,
    SessionStatusResponse,
    MessagesResponse,
    HealthResponse,
)

__all__ = [
    # Game models
    "Card",
    "CardKind",
    "GameState",
    "PlayerKey",
    "Entry",
    "GameConfig",
    "display_prompt",
    "format_entry",
    # Events
    "PlayerLeftEvent",
    "PlayerKickedEvent",
    "PlayerQuitEvent",
    "PlayerRenamedEvent",
    "ChannelNamesEvent",
    "RosterEvent",
    "MessageKind",
    "OutboundMessage",
    # Commands
    "Caller",
    "Command",
    "CommandRequest",
    "StartCommand",
    "StopCommand",
    "PauseCommand",
    "ResumeCommand",
    "JoinCommand",
    "QuitCommand",
    "PlayCommand",
    "DiscardCommand",
    "PickCommand",
    "WinnerCommand",
    "ListPlayersCommand",
    "PointsCommand",
    "StatusCommand",
    "CardsCommand",
    # API
    "SessionCreateRequest",
    "PlayerInfo",
    "SessionResponse",
    "SessionStatusResponse",
    "MessagesResponse",
    "HealthResponse",
]
