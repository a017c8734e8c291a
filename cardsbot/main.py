"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from .config import settings
from .api.routes import router as api_router, init_dependencies
from .game import GameSessionManager
from .game.roster import RosterHub
from .messaging import BufferedSink
from .models.game import GameConfig

logger = logging.getLogger(__name__)

# Global instances
session_manager: GameSessionManager = None
message_sink: BufferedSink = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global session_manager, message_sink

    # Startup
    message_sink = BufferedSink()
    session_manager = GameSessionManager(
        message_sink,
        config=GameConfig(),
        roster_hub=RosterHub(),
    )
    init_dependencies(session_manager, message_sink)
    logger.info(
        "Ready: %s minute rounds, idle limit %d, point limit %d",
        settings.round_minutes, settings.idle_limit, settings.point_limit,
    )

    yield

    # Shutdown
    await session_manager.cleanup_all()


# Create FastAPI app
app = FastAPI(
    title="Cards Bot API",
    description="Turn-based fill-in-the-blank card game sessions for chat channels",
    version="1.0.0",
    lifespan=lifespan,
)

# API routes
app.include_router(api_router, prefix="/api")


def main():
    """Run the server."""
    import uvicorn

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "cardsbot.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
