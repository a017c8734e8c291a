"""Card pools and hands."""

import logging
import random
from typing import Iterable, Optional

from ..models.game import Card

logger = logging.getLogger(__name__)


class CardError(Exception):
    """Base class for card container errors."""


class EmptyPool(CardError):
    """Tried to draw from a pool with no cards left."""


class PoolExhausted(CardError):
    """Both a pool and its discard pile are empty."""


class InvalidIndex(CardError, ValueError):
    """A hand index was out of range."""


class CardPool:
    """A shuffleable draw pile with its own discard pile."""

    def __init__(
        self,
        cards: Optional[Iterable[Card]] = None,
        name: str = "cards",
        rng: Optional[random.Random] = None,
    ):
        self.name = name
        self.cards: list[Card] = list(cards or [])
        self.discards: list[Card] = []
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self) -> None:
        """Randomize draw order."""
        self._rng.shuffle(self.cards)

    def draw(self) -> Card:
        """Remove and return the top card."""
        if not self.cards:
            raise EmptyPool(f"{self.name} pool is empty")
        return self.cards.pop(0)

    def add_to_discard(self, card: Card) -> None:
        self.discards.append(card)

    def recycle(self) -> None:
        """Turn the discard pile into the new draw pile and shuffle it."""
        self.cards.extend(self.discards)
        self.discards = []
        self.shuffle()

    def ensure_non_empty(self) -> None:
        """Refill from the discard pile if the draw pile ran out.

        Raises:
            PoolExhausted: if the discard pile is empty as well
        """
        if self.cards:
            return
        if not self.discards:
            raise PoolExhausted(f"{self.name} pool and discard pile are both empty")
        logger.info("%s pool is empty, reset from %d discards", self.name, len(self.discards))
        self.recycle()


class Hand:
    """Cards held by a single player."""

    def __init__(self):
        self.cards: list[Card] = []

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    @property
    def size(self) -> int:
        return len(self.cards)

    def add(self, card: Card) -> None:
        self.cards.append(card)

    def pick(self, indices: Iterable[int]) -> list[Card]:
        """Remove and return the cards at ``indices``.

        Duplicate indices count once. Either every card is removed or, on an
        invalid index, none are.

        Raises:
            InvalidIndex: if any index is outside the hand
        """
        unique = list(dict.fromkeys(indices))
        if not unique:
            raise InvalidIndex("no card index given")
        for index in unique:
            if not 0 <= index < len(self.cards):
                raise InvalidIndex(f"card index {index} out of range")

        picked = [self.cards[i] for i in unique]
        drop = set(unique)
        self.cards = [card for i, card in enumerate(self.cards) if i not in drop]
        return picked

    def clear(self) -> list[Card]:
        """Empty the hand and return what it held."""
        cards, self.cards = self.cards, []
        return cards
