"""Player model."""

from dataclasses import dataclass, field

from ..models.game import PlayerKey
from .cards import Hand


@dataclass(eq=False)
class Player:
    """A roster member of a game session."""

    nick: str
    user: str
    hostname: str
    hand: Hand = field(default_factory=Hand)
    points: int = 0
    is_judge: bool = False
    has_played: bool = False
    has_discarded: bool = False
    inactive_rounds: int = 0
    dealt: bool = False  # False until first dealt into a round

    @property
    def key(self) -> PlayerKey:
        return PlayerKey(self.nick, self.user, self.hostname)

    # Unhashable: the key changes when the nick does
    def __eq__(self, other) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.key == other.key

    def reset_round(self) -> None:
        self.has_played = False
        self.has_discarded = False
        self.is_judge = False
