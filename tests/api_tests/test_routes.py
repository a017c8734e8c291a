"""Tests for API routes."""

# Add project root to path for imports BEFORE other imports
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from cardsbot.api.routes import router, init_dependencies
from cardsbot.game.manager import GameSessionManager
from cardsbot.game.roster import RosterHub
from cardsbot.game.session import GameSession
from cardsbot.messaging import BufferedSink
from cardsbot.models.commands import Caller, PlayCommand
from cardsbot.models.events import MessageKind, OutboundMessage, PlayerLeftEvent
from cardsbot.models.game import GameState

from conftest import CHANNEL, make_player

CHANNEL_PATH = "/sessions/%23cards"
ALICE = {"nick": "alice", "user": "~alice", "hostname": "alice.example.org"}


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def app():
    """Create a FastAPI app with routes."""
    app = FastAPI()
    app.include_router(router)
    return app


@pytest.fixture
def client(app):
    """Create a test client."""
    return TestClient(app)


@pytest.fixture
def mock_session_manager(prompts, responses):
    """Create a mock session manager."""
    manager = MagicMock(spec=GameSessionManager)
    manager.active_session_count = 0
    manager.cards = prompts + responses
    manager.roster_hub = MagicMock(spec=RosterHub)
    return manager


@pytest.fixture
def message_sink():
    return BufferedSink()


@pytest.fixture
def initialized_client(app, mock_session_manager, message_sink):
    """Create a test client with initialized dependencies."""
    init_dependencies(mock_session_manager, message_sink)
    yield TestClient(app)
    init_dependencies(None, None)


# =============================================================================
# Health Check Tests
# =============================================================================


class TestHealthCheck:
    """Tests for health check endpoint."""

    def test_health_check_not_initialized(self, client):
        """Test health check when not initialized."""
        # Reset global state
        init_dependencies(None, None)

        response = client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "initializing"
        assert data["active_sessions"] == 0

    def test_health_check(self, initialized_client, mock_session_manager):
        mock_session_manager.active_session_count = 2

        response = initialized_client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "ok"
        assert data["active_sessions"] == 2
        assert data["cards_loaded"] == 140


# =============================================================================
# Session Endpoint Tests
# =============================================================================


class TestCreateSession:
    """Tests for POST /sessions."""

    def test_create_session(self, initialized_client, mock_session_manager):
        session = MagicMock(spec=GameSession)
        session.channel = CHANNEL
        session.state = GameState.STARTED
        mock_session_manager.create_session.return_value = session

        response = initialized_client.post(
            "/sessions", json={"channel": CHANNEL, "caller": ALICE, "point_limit": 5}
        )

        assert response.status_code == 200
        assert response.json() == {"channel": CHANNEL, "state": "Started"}
        mock_session_manager.create_session.assert_awaited_once_with(
            CHANNEL, mock_session_manager.cards, 5
        )
        player = session.add_player.await_args.args[0]
        assert player.key == ("alice", "~alice", "alice.example.org")

    def test_create_session_already_running(self, initialized_client, mock_session_manager):
        mock_session_manager.create_session.return_value = None

        response = initialized_client.post("/sessions", json={"channel": CHANNEL, "caller": ALICE})

        assert response.status_code == 409

    def test_create_session_needs_both_card_kinds(self, initialized_client, mock_session_manager):
        cards = [{"kind": "prompt", "text": "%s?"}]

        response = initialized_client.post(
            "/sessions", json={"channel": CHANNEL, "caller": ALICE, "cards": cards}
        )

        assert response.status_code == 400
        mock_session_manager.create_session.assert_not_called()

    def test_create_session_invalid_body(self, initialized_client):
        response = initialized_client.post("/sessions", json={"channel": CHANNEL})
        assert response.status_code == 422

    def test_not_initialized(self, client):
        init_dependencies(None, None)
        response = client.post("/sessions", json={"channel": CHANNEL, "caller": ALICE})
        assert response.status_code == 500


class TestSessionStatus:
    """Tests for GET and DELETE /sessions/{channel}."""

    def test_get_session_not_found(self, initialized_client, mock_session_manager):
        mock_session_manager.get_session.return_value = None

        response = initialized_client.get(CHANNEL_PATH)

        assert response.status_code == 404
        mock_session_manager.get_session.assert_called_once_with(CHANNEL)

    def test_get_session(self, initialized_client, mock_session_manager, prompts, responses, sink):
        session = GameSession(CHANNEL, prompts, responses, sink)
        alice = make_player("alice")
        session.players.append(alice)
        session.points[alice.key] = 0
        mock_session_manager.get_session.return_value = session

        response = initialized_client.get(CHANNEL_PATH)

        assert response.status_code == 200
        data = response.json()
        assert data["channel"] == CHANNEL
        assert data["state"] == "Started"
        assert data["round"] == 0
        assert data["judge"] is None
        assert data["points"] == {"alice": 0}
        assert data["players"][0]["nick"] == "alice"
        assert data["players"][0]["hand_size"] == 0
        assert data["notify_pending"] is False

    def test_delete_session(self, initialized_client, mock_session_manager):
        mock_session_manager.get_session.return_value = MagicMock(spec=GameSession)

        response = initialized_client.delete(CHANNEL_PATH)

        assert response.status_code == 200
        mock_session_manager.remove_session.assert_awaited_once_with(CHANNEL)

    def test_delete_session_not_found(self, initialized_client, mock_session_manager):
        mock_session_manager.get_session.return_value = None

        response = initialized_client.delete(CHANNEL_PATH)

        assert response.status_code == 404
        mock_session_manager.remove_session.assert_not_called()


# =============================================================================
# Command and Roster Tests
# =============================================================================


class TestCommands:
    """Tests for POST /sessions/{channel}/commands."""

    def test_dispatches_command(self, initialized_client, mock_session_manager):
        mock_session_manager.get_session.return_value = None

        response = initialized_client.post(
            f"{CHANNEL_PATH}/commands",
            json={"caller": ALICE, "command": {"type": "play", "indices": [1]}},
        )

        assert response.status_code == 200
        assert response.json() == {"status": "no_session"}
        channel, caller, command = mock_session_manager.dispatch.await_args.args
        assert channel == CHANNEL
        assert caller == Caller(**ALICE)
        assert command == PlayCommand(indices=[1])

    def test_unknown_command_rejected(self, initialized_client, mock_session_manager):
        response = initialized_client.post(
            f"{CHANNEL_PATH}/commands",
            json={"caller": ALICE, "command": {"type": "shuffle"}},
        )

        assert response.status_code == 422
        mock_session_manager.dispatch.assert_not_called()


class TestRoster:
    """Tests for POST /sessions/{channel}/roster."""

    def test_publishes_event(self, initialized_client, mock_session_manager):
        response = initialized_client.post(
            f"{CHANNEL_PATH}/roster", json={"type": "player_left", "nick": "bob"}
        )

        assert response.status_code == 200
        mock_session_manager.roster_hub.publish.assert_awaited_once_with(
            PlayerLeftEvent(nick="bob"), channel=CHANNEL
        )

    def test_bad_event_rejected(self, initialized_client):
        response = initialized_client.post(f"{CHANNEL_PATH}/roster", json={"type": "player_joined"})
        assert response.status_code == 422


# =============================================================================
# Message Log Tests
# =============================================================================


class TestMessages:
    """Tests for GET /messages."""

    def test_filter_by_target(self, initialized_client, message_sink):
        message_sink.messages.append(
            OutboundMessage(kind=MessageKind.SAY, target=CHANNEL, text="Round 1!")
        )
        message_sink.messages.append(
            OutboundMessage(kind=MessageKind.SAY, target="bob", text="Your cards are:")
        )

        everything = initialized_client.get("/messages").json()["messages"]
        for_bob = initialized_client.get("/messages", params={"target": "bob"}).json()["messages"]

        assert [m["text"] for m in everything] == ["Round 1!", "Your cards are:"]
        assert [m["text"] for m in for_bob] == ["Your cards are:"]
