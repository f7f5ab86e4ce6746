"""A turn-based text adventure rules engine."""

from .config import Config
from .console import ConsoleIO
from .engine.scenario import build_demo_world
from .engine.turns import TurnEngine
from .logging import configure_logging, get_logger

__all__ = ["main", "Config"]


def main() -> None:
    """Entry point for the console game."""
    config = Config.from_env()

    configure_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )

    logger = get_logger(__name__)
    logger.info(
        "application_starting",
        player=config.player_name,
        log_level=config.log_level,
    )

    state = build_demo_world(
        player_name=config.player_name,
        health=config.player_health,
        weight_capacity=config.player_weight_capacity,
    )
    engine = TurnEngine(state, ConsoleIO())
    try:
        final = engine.run()
    except KeyboardInterrupt:
        logger.info("interrupted", turns=engine.turns)
        return

    logger.info(
        "application_stopping",
        turns=engine.turns,
        health=final.player.health,
        carried=len(final.player.inventory),
    )
