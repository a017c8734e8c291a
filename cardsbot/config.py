"""Bot configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True

    # Game defaults
    round_minutes: float = 3
    idle_limit: int = 2
    point_limit: int = 0  # 0 == no limit
    seconds_before_start: float = 30
    min_players: int = 3
    hand_size: int = 10

    # Round / winner timers poll on this interval
    timer_interval_seconds: float = 10

    # Channel topic
    set_topic: bool = False
    topic_base: str = ""

    # NOTICE channel members when a game starts
    notify_users: bool = False
    bot_nick: str = "cardsbot"

    class Config:
        env_prefix = "CARDS_"


settings = Settings()
