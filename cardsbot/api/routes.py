"""REST API routes."""

from typing import Optional
from fastapi import APIRouter, Body, HTTPException

from ..game import GameSession, GameSessionManager
from ..game.player import Player
from ..messaging import BufferedSink
from ..models.api import (
    HealthResponse,
    MessagesResponse,
    PlayerInfo,
    SessionCreateRequest,
    SessionResponse,
    SessionStatusResponse,
)
from ..models.commands import CommandRequest
from ..models.events import RosterEvent
from ..models.game import CardKind, display_prompt

router = APIRouter()

# Global instances (will be initialized in main.py)
session_manager: GameSessionManager = None
message_sink: BufferedSink = None


def init_dependencies(sm: GameSessionManager, sink: BufferedSink):
    """Initialize route dependencies."""
    global session_manager, message_sink
    session_manager = sm
    message_sink = sink


def _require_manager() -> GameSessionManager:
    if session_manager is None:
        raise HTTPException(status_code=500, detail="Server not initialized")
    return session_manager


def _build_status(session: GameSession) -> SessionStatusResponse:
    return SessionStatusResponse(
        channel=session.channel,
        state=session.state,
        round=session.round,
        judge=session.judge.nick if session.judge is not None else None,
        prompt=display_prompt(session.table_prompt) if session.table_prompt is not None else None,
        entries=len(session.table_entries),
        players=[
            PlayerInfo(
                nick=p.nick,
                points=p.points,
                is_judge=p.is_judge,
                has_played=p.has_played,
                hand_size=p.hand.size,
            )
            for p in session.players
        ],
        points={key.nick: points for key, points in session.points.items()},
        time_remaining=session.time_remaining(),
        notify_pending=session.notify_pending,
    )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    if session_manager is None:
        return HealthResponse(status="initializing", active_sessions=0, cards_loaded=0)
    return HealthResponse(
        status="ok",
        active_sessions=session_manager.active_session_count,
        cards_loaded=len(session_manager.cards),
    )


@router.post("/sessions", response_model=SessionResponse)
async def create_session(request: SessionCreateRequest):
    """Start a game on a channel; the caller joins it."""
    manager = _require_manager()

    cards = request.cards if request.cards is not None else manager.cards
    kinds = {card.kind for card in cards}
    if kinds != {CardKind.PROMPT, CardKind.RESPONSE}:
        raise HTTPException(status_code=400, detail="Need both prompt and response cards")

    session = await manager.create_session(request.channel, cards, request.point_limit)
    if session is None:
        raise HTTPException(status_code=409, detail="A game is already running on this channel")

    caller = request.caller
    await session.add_player(Player(caller.nick, caller.user, caller.hostname))
    return SessionResponse(channel=session.channel, state=session.state)


@router.get("/sessions/{channel}", response_model=SessionStatusResponse)
async def get_session(channel: str):
    """Get current session status."""
    manager = _require_manager()
    session = manager.get_session(channel)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return _build_status(session)


@router.delete("/sessions/{channel}")
async def delete_session(channel: str):
    """Stop a session."""
    manager = _require_manager()
    if manager.get_session(channel) is None:
        raise HTTPException(status_code=404, detail="Session not found")
    await manager.remove_session(channel)
    return {"status": "stopped"}


@router.post("/sessions/{channel}/commands")
async def run_command(channel: str, request: CommandRequest):
    """Run a player command on a channel."""
    manager = _require_manager()
    await manager.dispatch(channel, request.caller, request.command)
    session = manager.get_session(channel)
    if session is None:
        return {"status": "no_session"}
    return _build_status(session)


@router.post("/sessions/{channel}/roster")
async def roster_event(channel: str, event: RosterEvent = Body(...)):
    """Deliver a part/kick/quit/nick change from the chat transport."""
    manager = _require_manager()
    await manager.roster_hub.publish(event, channel=channel)
    return {"status": "delivered"}


@router.get("/messages", response_model=MessagesResponse)
async def get_messages(target: Optional[str] = None):
    """Messages sent by the bot, optionally for a single channel or nick."""
    if message_sink is None:
        raise HTTPException(status_code=500, detail="Server not initialized")
    messages = list(message_sink.messages)
    if target is not None:
        messages = message_sink.for_target(target)
    return MessagesResponse(messages=messages)
