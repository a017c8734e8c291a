"""Outbound messaging for game sessions."""

import logging
from collections import deque
from typing import Optional, Protocol

from .models.events import MessageKind, OutboundMessage

logger = logging.getLogger(__name__)


class MessageSink(Protocol):
    """What the chat transport must provide to a session."""

    async def say(self, target: str, text: str) -> None:
        ...

    async def notice(self, target: str, text: str) -> None:
        ...

    async def set_topic(self, channel: str, topic: str) -> None:
        ...


class BufferedSink:
    """In-memory sink that keeps the most recent outbound messages."""

    def __init__(self, maxlen: int = 500):
        self.messages: deque[OutboundMessage] = deque(maxlen=maxlen)

    async def say(self, target: str, text: str) -> None:
        self.messages.append(OutboundMessage(kind=MessageKind.SAY, target=target, text=text))

    async def notice(self, target: str, text: str) -> None:
        self.messages.append(OutboundMessage(kind=MessageKind.NOTICE, target=target, text=text))

    async def set_topic(self, channel: str, topic: str) -> None:
        self.messages.append(OutboundMessage(kind=MessageKind.TOPIC, target=channel, text=topic))

    def for_target(self, target: str) -> list[OutboundMessage]:
        return [m for m in self.messages if m.target == target]

    def texts(self, target: Optional[str] = None) -> list[str]:
        return [m.text for m in self.messages if target is None or m.target == target]

    def clear(self) -> None:
        self.messages.clear()


class ChannelMessenger:
    """Queues a session's output and delivers it once a transition completes.

    Session code never awaits while it mutates state; it queues lines here
    and the session flushes them afterwards, in order.
    """

    def __init__(
        self,
        sink: MessageSink,
        channel: str,
        set_topic: bool = False,
        topic_base: str = "",
    ):
        self.sink = sink
        self.channel = channel
        self.set_topic_enabled = set_topic
        self.topic_base = topic_base
        self._outbox: list[OutboundMessage] = []

    @property
    def pending(self) -> list[OutboundMessage]:
        return list(self._outbox)

    def say(self, text: str) -> None:
        """Message the game channel."""
        self._outbox.append(OutboundMessage(kind=MessageKind.SAY, target=self.channel, text=text))

    def pm(self, nick: str, text: str) -> None:
        """Private message a player."""
        self._outbox.append(OutboundMessage(kind=MessageKind.SAY, target=nick, text=text))

    def notice(self, nick: str, text: str) -> None:
        self._outbox.append(OutboundMessage(kind=MessageKind.NOTICE, target=nick, text=text))

    def topic(self, text: str) -> None:
        """Set the channel topic, if enabled in config."""
        if not self.set_topic_enabled:
            return
        if self.topic_base:
            text = f"{text} {self.topic_base}"
        self._outbox.append(OutboundMessage(kind=MessageKind.TOPIC, target=self.channel, text=text))

    async def flush(self) -> None:
        """Deliver queued messages to the sink."""
        outbox, self._outbox = self._outbox, []
        for message in outbox:
            try:
                if message.kind == MessageKind.TOPIC:
                    await self.sink.set_topic(message.target, message.text)
                elif message.kind == MessageKind.NOTICE:
                    await self.sink.notice(message.target, message.text)
                else:
                    await self.sink.say(message.target, message.text)
            except Exception:
                logger.exception("Failed to deliver %s to %s", message.kind.value, message.target)
