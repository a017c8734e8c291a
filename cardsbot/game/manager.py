"""Channel -> session registry and command dispatch."""

import asyncio
import logging
import random
from typing import Callable, Optional

from ..messaging import MessageSink
from ..models.commands import (
    Caller,
    CardsCommand,
    Command,
    DiscardCommand,
    JoinCommand,
    ListPlayersCommand,
    PauseCommand,
    PickCommand,
    PlayCommand,
    PointsCommand,
    QuitCommand,
    ResumeCommand,
    StartCommand,
    StatusCommand,
    StopCommand,
    WinnerCommand,
)
from ..models.game import Card, CardKind, GameConfig, GameState
from .player import Player
from .roster import RosterHub
from .session import GameSession

logger = logging.getLogger(__name__)

NO_GAME = "No game running. Start the game by typing !start."


class GameSessionManager:
    """Owns the one-session-per-channel rule and routes decoded commands."""

    def __init__(
        self,
        sink: MessageSink,
        cards: Optional[list[Card]] = None,
        config: Optional[GameConfig] = None,
        roster_hub: Optional[RosterHub] = None,
        rng_factory: Callable[[], random.Random] = random.Random,
    ):
        self.sink = sink
        self.cards: list[Card] = list(cards or [])
        self.config = config or GameConfig()
        self.roster_hub = roster_hub or RosterHub()
        self._rng_factory = rng_factory
        self._sessions: dict[str, GameSession] = {}
        self._lock = asyncio.Lock()

    @property
    def active_session_count(self) -> int:
        """Number of active sessions."""
        return len(self._sessions)

    @property
    def channels(self) -> list[str]:
        return list(self._sessions)

    def get_session(self, channel: str) -> Optional[GameSession]:
        return self._sessions.get(channel)

    async def create_session(
        self,
        channel: str,
        cards: Optional[list[Card]] = None,
        point_limit: Optional[int] = None,
    ) -> Optional[GameSession]:
        """Create and start a session. Returns None if one is already running."""
        async with self._lock:
            if channel in self._sessions:
                return None
            cards = self.cards if cards is None else cards
            config = self.config
            if point_limit is not None:
                logger.info("Set game point limit to %d from arguments", point_limit)
                config = config.model_copy(update={"point_limit": point_limit})

            session = GameSession(
                channel,
                prompts=[c for c in cards if c.kind == CardKind.PROMPT],
                responses=[c for c in cards if c.kind == CardKind.RESPONSE],
                sink=self.sink,
                config=config,
                roster_hub=self.roster_hub,
                rng=self._rng_factory(),
                on_stopped=self._forget,
            )
            self._sessions[channel] = session

        await session.start()
        return session

    def _forget(self, session: GameSession) -> None:
        if self._sessions.get(session.channel) is session:
            del self._sessions[session.channel]
            logger.info("Session on %s removed", session.channel)

    async def remove_session(self, channel: str) -> None:
        """Stop and forget a session."""
        session = self._sessions.get(channel)
        if session is not None:
            await session.stop()
        self._sessions.pop(channel, None)

    async def cleanup_all(self) -> None:
        """Stop every session."""
        for channel in list(self._sessions):
            await self.remove_session(channel)

    # =========================================================================
    # Dispatch
    # =========================================================================

    async def dispatch(self, channel: str, caller: Caller, command: Command) -> None:
        """Run a decoded command from ``caller`` on ``channel``."""
        logger.debug("command %s from %s on %s", command.type, caller.nick, channel)

        if isinstance(command, StartCommand):
            session = await self.create_session(channel, point_limit=command.point_limit)
            if session is None:
                await self.sink.say(channel, "A game is already running. Type !join to join the game.")
            else:
                await session.add_player(Player(caller.nick, caller.user, caller.hostname))
            return

        session = self._sessions.get(channel)
        if session is None:
            await self.sink.say(channel, NO_GAME)
            return

        if isinstance(command, JoinCommand):
            await session.add_player(Player(caller.nick, caller.user, caller.hostname))
            return
        if isinstance(command, ListPlayersCommand):
            await session.list_players()
            return
        if isinstance(command, PointsCommand):
            await session.show_points()
            return
        if isinstance(command, StatusCommand):
            await session.show_status()
            return

        # Everything below needs the caller on the roster
        player = session.get_player(caller.key)
        if player is None:
            logger.debug("%s is not playing on %s, ignoring %s", caller.nick, channel, command.type)
            return

        if isinstance(command, StopCommand):
            await session.stop(player)
        elif isinstance(command, PauseCommand):
            await session.pause()
        elif isinstance(command, ResumeCommand):
            await session.resume()
        elif isinstance(command, QuitCommand):
            await session.remove_player(player)
        elif isinstance(command, CardsCommand):
            await session.show_cards(player)
        elif isinstance(command, PlayCommand):
            await session.play_card(player, command.indices)
        elif isinstance(command, WinnerCommand):
            await session.select_winner(command.index, player)
        elif isinstance(command, PickCommand):
            if session.state == GameState.PLAYED:
                await session.select_winner(command.indices[0], player)
            elif session.state == GameState.PLAYABLE:
                await session.play_card(player, command.indices)
            else:
                await self.sink.say(channel, "!pick command not available in current state.")
        elif isinstance(command, DiscardCommand):
            if session.state == GameState.PLAYABLE:
                await session.discard(player, command.indices)
            else:
                await self.sink.say(channel, "!discard command not available in current state.")
