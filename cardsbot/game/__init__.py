"""Game session components."""

from .cards import CardPool, Hand, CardError, EmptyPool, InvalidIndex, PoolExhausted
from .player import Player
from .session import GameSession
from .manager import GameSessionManager
from .timer import Scheduler, TimerPurpose

__all__ = [
    "CardPool",
    "Hand",
    "CardError",
    "EmptyPool",
    "InvalidIndex",
    "PoolExhausted",
    "Player",
    "GameSession",
    "GameSessionManager",
    "Scheduler",
    "TimerPurpose",
]
