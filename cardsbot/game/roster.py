"""Roster change event source."""

import logging
from typing import Awaitable, Callable, Optional

from ..models.events import ChannelNamesEvent, PlayerKickedEvent, PlayerLeftEvent, RosterEvent

logger = logging.getLogger(__name__)

RosterHandler = Callable[[RosterEvent], Awaitable[None]]

# Parts, kicks and NAMES replies are tied to a channel; quits and renames are network-wide.
CHANNEL_EVENTS = (PlayerLeftEvent, PlayerKickedEvent, ChannelNamesEvent)


class RosterHub:
    """Fans roster events from the chat transport out to subscribed sessions."""

    def __init__(self):
        self._handlers: dict[str, list[RosterHandler]] = {}

    def subscribe(self, channel: str, handler: RosterHandler) -> Callable[[], None]:
        """Register ``handler`` for ``channel``. Returns the unsubscribe callable."""
        self._handlers.setdefault(channel, []).append(handler)

        def unsubscribe() -> None:
            handlers = self._handlers.get(channel, [])
            if handler in handlers:
                handlers.remove(handler)
            if not handlers:
                self._handlers.pop(channel, None)

        return unsubscribe

    def subscriber_count(self, channel: str) -> int:
        return len(self._handlers.get(channel, []))

    async def publish(self, event: RosterEvent, channel: Optional[str] = None) -> None:
        """Deliver ``event``.

        Part, kick and names events go to ``channel`` only; quits and renames go to
        every channel.
        """
        if isinstance(event, CHANNEL_EVENTS):
            if channel is None:
                raise ValueError(f"{event.type} event needs a channel")
            targets = list(self._handlers.get(channel, []))
        else:
            targets = [h for handlers in self._handlers.values() for h in handlers]

        logger.debug("Publishing %s to %d handlers", event.type, len(targets))
        for handler in targets:
            await handler(event)
