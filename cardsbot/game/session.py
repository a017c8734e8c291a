"""Game session management."""

import asyncio
import logging
import random
import time
from contextlib import ExitStack, asynccontextmanager
from typing import Callable, Iterable, Optional

from ..messaging import ChannelMessenger, MessageSink
from ..models.events import ChannelNamesEvent, PlayerRenamedEvent, RosterEvent
from ..models.game import (
    Card,
    Entry,
    GameConfig,
    GameState,
    PlayerKey,
    display_prompt,
    format_entry,
    pluralize,
)
from .cards import CardPool, InvalidIndex, PoolExhausted
from .player import Player
from .roster import RosterHub
from .timer import Scheduler, TimerPurpose

logger = logging.getLogger(__name__)

# Seconds remaining at which timers warn the channel
WARNING_THRESHOLDS = (60, 30, 10)

# Cards shown on the first line of a hand listing
FIRST_LINE_CARDS = 7

# Channel modes never sent a new game notice
NOTIFY_EXEMPT_MODES = ("~", "&")


def _seconds(value: float) -> str:
    return f"{value:g}"


class GameSession:
    """A single game running on one channel.

    All public coroutines are serialized through one lock. Each one mutates
    state without awaiting and then flushes the queued channel output, so
    every event runs to completion before the next is handled.
    """

    def __init__(
        self,
        channel: str,
        prompts: Iterable[Card],
        responses: Iterable[Card],
        sink: MessageSink,
        config: Optional[GameConfig] = None,
        roster_hub: Optional[RosterHub] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        on_stopped: Optional[Callable[["GameSession"], None]] = None,
    ):
        self.channel = channel
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.clock = clock
        self.messenger = ChannelMessenger(
            sink, channel, set_topic=self.config.set_topic, topic_base=self.config.topic_base
        )
        self.scheduler = Scheduler()
        self.roster_hub = roster_hub
        self._on_stopped = on_stopped
        self._subscriptions = ExitStack()
        self._lock = asyncio.Lock()

        self.state = GameState.STARTED
        self.round = 0
        self.players: list[Player] = []
        self.judge: Optional[Player] = None
        self._judge_slot: Optional[int] = None

        # Score ledger and idle bans outlive roster membership
        self.points: dict[PlayerKey, int] = {}
        self.idle_counts: dict[PlayerKey, int] = {}

        self.prompts = CardPool(prompts, name="prompt", rng=self.rng)
        self.responses = CardPool(responses, name="response", rng=self.rng)
        self.prompts.shuffle()
        self.responses.shuffle()
        logger.info(
            "Session for %s loaded %d prompts, %d responses",
            channel, len(self.prompts), len(self.responses),
        )

        # Table
        self.table_prompt: Optional[Card] = None
        self.table_entries: list[Entry] = []

        # Timing
        self.start_time: Optional[float] = None
        self.round_started: Optional[float] = None
        self._paused_state: Optional[GameState] = None
        self._paused_elapsed = 0.0

        # Set on start when channel members should be told; cleared by the NAMES reply
        self.notify_pending = False

    # =========================================================================
    # Event plumbing
    # =========================================================================

    @asynccontextmanager
    async def _transition(self):
        """Serialize one event and flush its output afterwards."""
        async with self._lock:
            try:
                yield
            except PoolExhausted as e:
                logger.exception("Session on %s ran out of cards", self.channel)
                self.messenger.say(f"Not enough cards to continue ({e}). Stopping the game.")
                self.state = GameState.STOPPED
                self._teardown()
                self.messenger.topic("No game is running. Type !start to begin one!")
            finally:
                await self.messenger.flush()

    @property
    def is_stopped(self) -> bool:
        return self.state == GameState.STOPPED

    def _teardown(self) -> None:
        """Release timers and subscriptions. Safe to call more than once."""
        self.scheduler.cancel_all()
        self._subscriptions.close()
        self.players = []
        self.judge = None
        callback, self._on_stopped = self._on_stopped, None
        if callback is not None:
            callback(self)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def start(self) -> None:
        """Announce the game and wait for players before the first round."""
        async with self._transition():
            if self.roster_hub is not None:
                self._subscriptions.callback(
                    self.roster_hub.subscribe(self.channel, self.handle_roster_event)
                )
            delay = self.config.seconds_before_start
            self.messenger.topic("A game is running. Type !join to get in on it!")
            self.messenger.say(
                f"A new game of cards is starting. The game starts in {_seconds(delay)} "
                f"{pluralize('second', delay)}. Type !join to join the game any time."
            )
            self.start_time = self.clock()
            self.scheduler.call_later(TimerPurpose.START, delay, self.on_start_delay_elapsed)
            if self.config.notify_users:
                logger.info("Waiting for names on %s to notify users", self.channel)
                self.notify_pending = True

    async def on_start_delay_elapsed(self) -> None:
        async with self._transition():
            if self.state == GameState.STARTED:
                self._next_round()

    async def on_stop_delay_elapsed(self) -> None:
        async with self._transition():
            if self.state == GameState.WAITING and len(self.players) < self.config.min_players:
                self._stop()

    async def stop(self, player: Optional[Player] = None) -> None:
        async with self._transition():
            if not self.is_stopped:
                self._stop(player)

    async def pause(self) -> bool:
        async with self._transition():
            return not self.is_stopped and self._pause()

    async def resume(self) -> bool:
        async with self._transition():
            return not self.is_stopped and self._resume()

    def _stop(self, player: Optional[Player] = None, point_limit_reached: bool = False) -> None:
        self.state = GameState.STOPPED
        if player is not None:
            self.messenger.say(f"{player.nick} stopped the game.")
        elif not point_limit_reached:
            self.messenger.say("Game has been stopped.")
        if self.round > 1:
            self._show_points()
        logger.info("Game on %s stopped after %d rounds", self.channel, self.round)
        self._teardown()
        self.messenger.topic("No game is running. Type !start to begin one!")

    def _pause(self) -> bool:
        if self.state == GameState.PAUSED:
            self.messenger.say("Game is already paused. Type !resume to begin playing again.")
            return False
        if self.state not in (GameState.PLAYABLE, GameState.PLAYED):
            self.messenger.say("The game cannot be paused right now.")
            return False

        self._paused_state = self.state
        self._paused_elapsed = self.clock() - self.round_started
        self.state = GameState.PAUSED
        self.scheduler.cancel(TimerPurpose.ROUND)
        self.scheduler.cancel(TimerPurpose.WINNER)
        self.messenger.say("Game is now paused. Type !resume to begin playing again.")
        return True

    def _resume(self) -> bool:
        if self.state != GameState.PAUSED:
            self.messenger.say("The game is not paused.")
            return False

        self.round_started = self.clock() - self._paused_elapsed
        self.state = self._paused_state
        self._paused_state = None
        self.messenger.say("Game has been resumed.")

        if self.state == GameState.PLAYED:
            if self.judge is None:
                self.messenger.say(
                    "The judge quit the game during pause. I will pick the winner on this round."
                )
                self._select_winner(self._random_entry())
            else:
                self._arm(TimerPurpose.WINNER, self.check_winner_timer)
        elif self.state == GameState.PLAYABLE:
            if self._all_played():
                self._show_entries()
            else:
                self._arm(TimerPurpose.ROUND, self.check_round_timer)
        return True

    def _arm(self, purpose: TimerPurpose, callback) -> None:
        self.scheduler.call_every(purpose, self.config.timer_interval_seconds, callback)

    # =========================================================================
    # Rounds
    # =========================================================================

    def _next_round(self) -> bool:
        self.scheduler.cancel(TimerPurpose.START)
        self.scheduler.cancel(TimerPurpose.STOP)

        limit = self.config.point_limit
        if limit > 0:
            winner = next((p for p in self.players if p.points >= limit), None)
            if winner is not None:
                self.messenger.say(
                    f"{winner.nick} has the limit of {limit} awesome {pluralize('point', limit)} "
                    f"and is the winner of the game! Congratulations!"
                )
                self._stop(point_limit_reached=True)
                return False

        needed = self.config.min_players
        if len(self.players) < needed:
            minutes = self.config.round_minutes
            self.messenger.say(
                f"Not enough players to start a round (need at least {needed}). "
                f"Waiting for others to join. Stopping in {_seconds(minutes)} "
                f"{pluralize('minute', minutes)} if not enough players."
            )
            self.state = GameState.WAITING
            self.scheduler.call_later(
                TimerPurpose.STOP, self.config.time_limit_seconds, self.on_stop_delay_elapsed
            )
            return False

        self.round += 1
        logger.info("Starting round %d on %s", self.round, self.channel)
        self._set_judge()
        self._deal_all()
        self.messenger.say(f"Round {self.round}! {self.judge.nick} is the judge.")
        self._play_prompt()
        for player in self.players:
            if not player.is_judge:
                self._show_cards(player)
        self.state = GameState.PLAYABLE
        return True

    def _set_judge(self) -> Player:
        if self.judge is not None:
            index = self._index_of(self.judge) + 1
        elif self._judge_slot is not None:
            # previous judge left; whoever moved into their seat is next
            index = self._judge_slot
        else:
            index = 0
        if index >= len(self.players):
            index = 0

        old = self.judge.nick if self.judge is not None else None
        self.judge = self.players[index]
        self.judge.is_judge = True
        self._judge_slot = index
        logger.debug("Judge %s -> %s", old, self.judge.nick)
        return self.judge

    def _deal(self, player: Player, target: int) -> None:
        """Draw response cards into ``player``'s hand until it holds ``target``."""
        while player.hand.size < target:
            self.responses.ensure_non_empty()
            player.hand.add(self.responses.draw())
        player.dealt = True

    def _deal_all(self) -> None:
        for player in self.players:
            logger.debug(
                "%s has %d cards, dealing up to %d", player.nick, player.hand.size, self.config.hand_size
            )
            self._deal(player, self.config.hand_size)

    def _play_prompt(self) -> None:
        self.prompts.ensure_non_empty()
        card = self.prompts.draw()
        self.table_prompt = card
        value = display_prompt(card)
        self.messenger.say(f"CARD: {value}")
        for player in self._non_judges():
            self.messenger.pm(player.nick, f"CARD: {value}")

        if card.draw > 0:
            for player in self._non_judges():
                self._deal(player, player.hand.size + card.draw)

        self.round_started = self.clock()
        self._arm(TimerPurpose.ROUND, self.check_round_timer)

    def _show_entries(self) -> None:
        self.scheduler.cancel(TimerPurpose.ROUND)
        self.state = GameState.PLAYED

        if not self.table_entries:
            self.messenger.say("No one played on this round.")
            self._clean()
            self._next_round()
        elif len(self.table_entries) == 1:
            self.messenger.say("Only one player played and is the winner by default.")
            self._select_winner(0)
        else:
            self.messenger.say("Everyone has played. Here are the entries:")
            # submission order must not leak
            self.rng.shuffle(self.table_entries)
            for i, entry in enumerate(self.table_entries):
                self.messenger.say(f"{i}: {format_entry(self.table_prompt, entry.cards)}")

            if self.judge is None:
                self.messenger.say(
                    "The judge has fled the scene. So I will pick the winner on this round."
                )
                self._select_winner(self._random_entry())
            else:
                self.messenger.say(f"{self.judge.nick}: Select the winner (!winner <entry number>)")
                self.round_started = self.clock()
                self._arm(TimerPurpose.WINNER, self.check_winner_timer)

    def _random_entry(self) -> int:
        return self.rng.randrange(len(self.table_entries))

    def _select_winner(self, index: int, player: Optional[Player] = None) -> bool:
        if self.state == GameState.PAUSED:
            self.messenger.say("Game is currently paused.")
            return False
        if self.state != GameState.PLAYED:
            return False
        if player is not None and player is not self.judge:
            self.messenger.say(
                f"{player.nick}: You are not the judge. Only the judge can select the winner."
            )
            return False
        if not 0 <= index < len(self.table_entries):
            self.messenger.say("Invalid winner")
            return False

        self.scheduler.cancel(TimerPurpose.WINNER)
        self.state = GameState.ROUND_END
        entry = self.table_entries[index]
        points = self.points.get(entry.owner, 0) + 1
        self.points[entry.owner] = points
        owner = self._find(entry.owner)
        if owner is not None:
            owner.points = points

        nick = entry.owner.nick
        self.messenger.say(
            f'Winner is: {nick} with "{format_entry(self.table_prompt, entry.cards)}" '
            f"and gets one awesome point! {nick} has {points} awesome {pluralize('point', points)}."
        )
        self._clean()
        self._next_round()
        return True

    def _clean(self) -> None:
        self.state = GameState.ROUND_END
        if self.table_prompt is not None:
            self.prompts.add_to_discard(self.table_prompt)
            self.table_prompt = None
        for entry in self.table_entries:
            for card in entry.cards:
                self.responses.add_to_discard(card)
            entry.cards.clear()
        self.table_entries = []

        removed = []
        for player in list(self.players):
            player.reset_round()
            if player.inactive_rounds >= 1:
                self._remove_player(player, silent=True)
                removed.append(player.nick)
                self.idle_counts[player.key] = self.idle_counts.get(player.key, 0) + 1
        if removed:
            logger.info("Removed idle players from %s: %s", self.channel, removed)
            self.messenger.say(
                f"Removed inactive {pluralize('player', len(removed))}: {', '.join(removed)}"
            )
        self.state = GameState.STARTED

    # =========================================================================
    # Timers
    # =========================================================================

    def _warning_due(self, remaining: float) -> Optional[int]:
        window = self.config.timer_interval_seconds
        for threshold in WARNING_THRESHOLDS:
            if threshold - window < remaining <= threshold:
                return threshold
        return None

    @staticmethod
    def _warning_text(threshold: int) -> str:
        if threshold == 60:
            return "Hurry up, 1 minute left!"
        return f"{threshold} seconds left!"

    def time_remaining(self) -> Optional[float]:
        """Seconds left before the current round or winner timer forces an action."""
        limit = self.config.time_limit_seconds
        if self.state == GameState.PAUSED:
            return limit - self._paused_elapsed
        if self.state in (GameState.PLAYABLE, GameState.PLAYED) and self.round_started is not None:
            return limit - (self.clock() - self.round_started)
        return None

    async def check_round_timer(self) -> None:
        """Round timer poll: warn, or reveal entries once time is up."""
        async with self._transition():
            if self.state != GameState.PLAYABLE:
                return
            remaining = self.time_remaining()
            logger.debug("Round on %s has %.1fs remaining", self.channel, remaining)
            if remaining <= 0:
                self.messenger.say("Time is up!")
                self._mark_inactive_players()
                self._show_entries()
                return
            threshold = self._warning_due(remaining)
            if threshold is not None:
                self.messenger.say(self._warning_text(threshold))
                if threshold == 60:
                    self._show_status()

    async def check_winner_timer(self) -> None:
        """Winner timer poll: warn the judge, or pick a random winner."""
        async with self._transition():
            if self.state != GameState.PLAYED:
                return
            remaining = self.time_remaining()
            if remaining <= 0:
                logger.info("Judge on %s is inactive, selecting winner", self.channel)
                self.messenger.say("Time is up. I will pick the winner on this round.")
                if self.judge is not None:
                    self.judge.inactive_rounds += 1
                self._select_winner(self._random_entry())
                return
            threshold = self._warning_due(remaining)
            if threshold is not None and self.judge is not None:
                self.messenger.say(f"{self.judge.nick}: {self._warning_text(threshold)}")

    def _mark_inactive_players(self) -> None:
        for player in self._not_played():
            player.inactive_rounds += 1

    # =========================================================================
    # Player actions
    # =========================================================================

    async def play_card(self, player: Player, indices: list[int]) -> bool:
        async with self._transition():
            return not self.is_stopped and self._play_card(player, indices)

    async def discard(self, player: Player, indices: list[int]) -> bool:
        async with self._transition():
            return not self.is_stopped and self._discard(player, indices)

    async def select_winner(self, index: int, player: Optional[Player] = None) -> bool:
        """Pick the winning entry. ``player=None`` skips the judge check."""
        async with self._transition():
            return not self.is_stopped and self._select_winner(index, player)

    def _play_card(self, player: Player, indices: list[int]) -> bool:
        if self.state == GameState.PAUSED:
            self.messenger.say("Game is currently paused.")
            return False

        logger.info("%s played cards %s", player.nick, indices)
        indices = list(dict.fromkeys(indices))
        if self.state != GameState.PLAYABLE or player.hand.size == 0:
            self.messenger.say(f"{player.nick}: Can't play at the moment.")
            return False
        if player.is_judge:
            self.messenger.say(
                f"{player.nick}: You are the judge. The judge does not play. "
                "The judge makes other people do their dirty work."
            )
            return False
        if player.has_played:
            self.messenger.say(f"{player.nick}: You have already played on this round.")
            return False

        pick = self.table_prompt.pick
        if len(indices) != pick:
            wanted = "1 card" if pick == 1 else f"{pick} different cards"
            self.messenger.say(f"{player.nick}: You must pick {wanted}.")
            return False

        try:
            cards = player.hand.pick(indices)
        except InvalidIndex:
            self.messenger.pm(player.nick, "Invalid card index")
            return False

        self.table_entries.append(Entry(owner=player.key, cards=cards))
        player.has_played = True
        player.inactive_rounds = 0
        self.messenger.pm(player.nick, f"You played: {format_entry(self.table_prompt, cards)}")

        if self._all_played():
            self._show_entries()
        return True

    def _discard(self, player: Player, indices: list[int]) -> bool:
        if self.state == GameState.PAUSED:
            self.messenger.say("Game is currently paused.")
            return False

        logger.info("%s discarded %s", player.nick, indices)
        indices = list(dict.fromkeys(indices))
        if self.state != GameState.PLAYABLE or player.hand.size == 0:
            self.messenger.say(f"{player.nick}: Can't discard at the moment.")
            return False
        if player.is_judge:
            self.messenger.say(
                f"{player.nick}: You are the judge. "
                "You cannot discard cards until you are a regular player."
            )
            return False
        if player.has_discarded:
            self.messenger.say(f"{player.nick}: You may only discard once per turn.")
            return False
        if player.points < 1:
            self.messenger.say(f"{player.nick}: You must have at least one awesome point to discard.")
            return False

        if not indices:
            indices = list(range(player.hand.size))
        try:
            cards = player.hand.pick(indices)
        except InvalidIndex:
            self.messenger.pm(player.nick, "Invalid card index.")
            return False

        # refill before discarding so the same cards can't come straight back
        self._deal(player, player.hand.size + len(cards))
        for card in cards:
            self.responses.add_to_discard(card)

        player.has_discarded = True
        self._set_points(player, player.points - 1)
        self.messenger.pm(
            player.nick,
            f"You have discarded, and have {player.points} "
            f"{pluralize('point', player.points)} remaining",
        )
        self._show_cards(player)
        return True

    def _set_points(self, player: Player, points: int) -> None:
        player.points = points
        self.points[player.key] = points

    # =========================================================================
    # Roster
    # =========================================================================

    async def add_player(self, player: Player) -> Optional[Player]:
        async with self._transition():
            if self.is_stopped:
                return None
            return self._add_player(player)

    async def remove_player(self, player: Player, silent: bool = False) -> bool:
        async with self._transition():
            return not self.is_stopped and self._remove_player(player, silent=silent)

    async def notify_users(self, names: dict[str, str]) -> bool:
        """Send a new game notice to channel members from a NAMES reply (nick -> mode)."""
        async with self._transition():
            return not self.is_stopped and self._notify_users(names)

    async def handle_roster_event(self, event: RosterEvent) -> None:
        """React to parts, kicks, quits, nick changes and NAMES replies."""
        async with self._transition():
            if self.is_stopped:
                return
            if isinstance(event, PlayerRenamedEvent):
                logger.info("Player changed nick from %s to %s", event.old_nick, event.new_nick)
                self._rename(event.old_nick, event.new_nick)
                return
            if isinstance(event, ChannelNamesEvent):
                self._notify_users(event.names)
                return
            logger.info("Player %s gone (%s)", event.nick, event.type)
            player = self.find_by_nick(event.nick)
            if player is not None:
                self._remove_player(player)

    def _add_player(self, player: Player) -> Optional[Player]:
        key = player.key
        if self._find(key) is not None:
            return None

        if key not in self.points:
            self.points[key] = 0
            self.idle_counts[key] = 0
        elif self.idle_counts.get(key, 0) >= self.config.idle_limit:
            self.messenger.say(
                f"{player.nick}: You have idled too much and have been banned from this game."
            )
            return None
        else:
            # returning player
            player.points = self.points[key]

        self.players.append(player)
        self.messenger.say(f"{player.nick} has joined the game")

        if self.state == GameState.WAITING and len(self.players) >= self.config.min_players:
            self._next_round()
        return player

    def _remove_player(self, player: Player, silent: bool = False) -> bool:
        index = self._index_of(player)
        if index is None:
            return False

        logger.info("Removing %s from the game on %s", player.nick, self.channel)
        for card in player.hand.clear():
            self.responses.add_to_discard(card)
        del self.players[index]
        if self._judge_slot is not None and index < self._judge_slot:
            self._judge_slot -= 1
        was_judge = player is self.judge
        if was_judge:
            self.judge = None

        if not silent:
            self.messenger.say(f"{player.nick} has left the game")

        if self.state == GameState.PLAYABLE and self._all_played():
            self._show_entries()
        if self.state == GameState.PLAYED and was_judge:
            self.messenger.say("The judge has fled the scene. So I will pick the winner on this round.")
            self._select_winner(self._random_entry())
        return True

    def _rename(self, old_nick: str, new_nick: str) -> None:
        player = self.find_by_nick(old_nick)
        if player is None:
            return
        old_key = player.key
        player.nick = new_nick
        new_key = player.key
        if new_key == old_key:
            return
        if new_key in self.points or new_key in self.idle_counts:
            # the new identity played here before; keep the higher of both records
            logger.warning("Nick change %s -> %s merges two ledger entries", old_nick, new_nick)
        if old_key in self.points:
            points = max(self.points.pop(old_key), self.points.get(new_key, 0))
            self._set_points(player, points)
        if old_key in self.idle_counts:
            self.idle_counts[new_key] = max(
                self.idle_counts.pop(old_key), self.idle_counts.get(new_key, 0)
            )
        for entry in self.table_entries:
            if entry.owner == old_key:
                entry.owner = new_key

    def _notify_users(self, names: dict[str, str]) -> bool:
        if not self.notify_pending:
            return False
        self.notify_pending = False
        for nick, mode in names.items():
            if mode in NOTIFY_EXEMPT_MODES or nick == self.config.bot_nick:
                continue
            self.messenger.notice(
                nick,
                f"{nick}: A new game of cards just began in {self.channel}. "
                "Head over and !join if you'd like to get in on the fun!",
            )
        return True

    # =========================================================================
    # Queries
    # =========================================================================

    def _index_of(self, player: Player) -> Optional[int]:
        for i, p in enumerate(self.players):
            if p is player:
                return i
        return None

    def _find(self, key: PlayerKey) -> Optional[Player]:
        return next((p for p in self.players if p.key == key), None)

    def get_player(self, key: PlayerKey) -> Optional[Player]:
        return self._find(key)

    def find_by_nick(self, nick: str) -> Optional[Player]:
        return next((p for p in self.players if p.nick == nick), None)

    def _non_judges(self) -> list[Player]:
        return [p for p in self.players if not p.is_judge]

    def _not_played(self) -> list[Player]:
        # players who joined mid-round have not been dealt and are not waited for
        return [p for p in self.players if p.dealt and not p.is_judge and not p.has_played]

    def _all_played(self) -> bool:
        return not self._not_played()

    # =========================================================================
    # Informational commands
    # =========================================================================

    async def show_cards(self, player: Player) -> None:
        async with self._transition():
            self._show_cards(player)

    async def show_points(self) -> None:
        async with self._transition():
            self._show_points()

    async def show_status(self) -> None:
        async with self._transition():
            self._show_status()

    async def list_players(self) -> None:
        async with self._transition():
            nicks = ", ".join(p.nick for p in self.players)
            self.messenger.say(f"Players currently in the game: {nicks}")

    def _show_cards(self, player: Player) -> None:
        first = "Your cards are:"
        rest = []
        for index, card in enumerate(player.hand):
            if index < FIRST_LINE_CARDS:
                first += f" [{index}] {card.text}"
            else:
                rest.append(f"[{index}] {card.text}")
        self.messenger.pm(player.nick, first)
        if rest:
            self.messenger.pm(player.nick, " ".join(rest))

    def _show_points(self) -> None:
        ranked = sorted(self.points.items(), key=lambda item: -item[1])
        scores = ", ".join(
            f"{key.nick} {points} awesome {pluralize('point', points)}" for key, points in ranked
        )
        self.messenger.say(f"Scores: {scores}")

    def _show_status(self) -> None:
        needed = max(0, self.config.min_players - len(self.players))
        if self.state == GameState.PLAYABLE:
            waiting = [p.nick for p in self._not_played()]
            judge = self.judge.nick if self.judge is not None else "Nobody"
            self.messenger.say(
                f"Status: {judge} is the judge. Waiting for "
                f"{pluralize('player', len(waiting))} to play: {', '.join(waiting)}"
            )
        elif self.state == GameState.PLAYED:
            judge = self.judge.nick if self.judge is not None else "the judge"
            self.messenger.say(f"Status: Waiting for {judge} to select the winner.")
        elif self.state == GameState.ROUND_END:
            self.messenger.say("Status: Round has ended and next one is starting.")
        elif self.state == GameState.STARTED:
            elapsed = self.clock() - self.start_time if self.start_time is not None else 0
            left = max(0, round(self.config.seconds_before_start - elapsed))
            self.messenger.say(
                f"Status: Game starts in {left} {pluralize('second', left)}. "
                f"Need {needed} more {pluralize('player', needed)} to start."
            )
        elif self.state == GameState.STOPPED:
            self.messenger.say("Status: Game has been stopped.")
        elif self.state == GameState.WAITING:
            self.messenger.say(
                f"Status: Not enough players to start. Need {needed} more "
                f"{pluralize('player', needed)} to start."
            )
        elif self.state == GameState.PAUSED:
            self.messenger.say("Status: Game is paused.")
