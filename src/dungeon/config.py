"""Configuration for Dungeon."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """Application configuration."""

    log_level: str = "WARNING"
    log_file: Path | None = None
    json_logs: bool = False
    player_name: str = "Fred"
    player_health: int = 100
    player_weight_capacity: int = 20

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        log_file = os.getenv("DUNGEON_LOG_FILE")

        return cls(
            log_level=os.getenv("DUNGEON_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("DUNGEON_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
            player_name=os.getenv("DUNGEON_PLAYER_NAME", cls.player_name),
            player_health=int(
                os.getenv("DUNGEON_PLAYER_HEALTH", str(cls.player_health))
            ),
            player_weight_capacity=int(
                os.getenv("DUNGEON_PLAYER_CAPACITY", str(cls.player_weight_capacity))
            ),
        )
