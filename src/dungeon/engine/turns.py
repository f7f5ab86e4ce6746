"""The turn loop.

Each turn the engine offers the current state's choices through a GameIO,
reads a selection and replaces the state with the result of performing
the selected action. Selecting 0 quits.
"""

from enum import Enum, auto
from typing import Protocol

from ..exceptions import InvalidChoice
from ..logging import get_logger
from .actions import perform
from .state import QUIT_LABEL, Choice, GameState

logger = get_logger(__name__)


class TurnPhase(Enum):
    AWAITING_CHOICE = auto()
    APPLYING_ACTION = auto()
    TERMINATED = auto()


class GameIO(Protocol):
    """What the engine needs from whoever is talking to the player."""

    def display_choices(self, choices: list[tuple[int, str]]) -> None: ...

    def read_selection(self) -> int: ...

    def display_message(self, message: str) -> None: ...


def numbered(choices: list[Choice]) -> list[tuple[int, str]]:
    """Pair each choice with its selection index, quit first."""
    return [(0, QUIT_LABEL)] + [
        (index, choice.description) for index, choice in enumerate(choices, start=1)
    ]


def select(choices: list[Choice], selection: int) -> Choice | None:
    """Return the chosen Choice, or None when the player quits."""
    if selection == 0:
        return None
    if not 1 <= selection <= len(choices):
        raise InvalidChoice(selection, len(choices))
    return choices[selection - 1]


def apply_choice(state: GameState, choice: Choice) -> GameState:
    """Perform a choice's action against ``state``."""
    return perform(choice.action, choice.item, state)


class TurnEngine:
    """Drives a GameState through turns until the player quits."""

    def __init__(self, state: GameState, io: GameIO):
        self.state = state
        self.io = io
        self.phase = TurnPhase.AWAITING_CHOICE
        self.turns = 0

    def step(self) -> TurnPhase:
        """Play one turn and return the phase the engine ends up in."""
        if self.phase is TurnPhase.TERMINATED:
            return self.phase

        choices = self.state.choices()
        self.io.display_choices(numbered(choices))
        choice = select(choices, self.io.read_selection())

        if choice is None:
            self.phase = TurnPhase.TERMINATED
            logger.info("game_terminated", turns=self.turns)
            return self.phase

        self.phase = TurnPhase.APPLYING_ACTION
        logger.debug(
            "choice_selected",
            turn=self.turns,
            description=choice.description,
            action=type(choice.action).__name__,
        )
        state = apply_choice(self.state, choice)
        if state.message is not None:
            self.io.display_message(state.message)
            state = state.with_message(None)

        self.state = state
        self.turns += 1
        self.phase = TurnPhase.AWAITING_CHOICE
        return self.phase

    def run(self) -> GameState:
        """Play turns until the player quits and return the final state."""
        logger.info("game_started", player=self.state.player.name)
        while self.step() is not TurnPhase.TERMINATED:
            pass
        return self.state


def run(state: GameState, io: GameIO) -> GameState:
    return TurnEngine(state, io).run()
