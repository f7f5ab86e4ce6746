"""Shared test fixtures for Dungeon."""

import pytest
import structlog

from dungeon.engine.characters import Character
from dungeon.engine.items import Armor, Key, Potion, Weapon
from dungeon.engine.state import GameState
from dungeon.engine.values import MonetaryValue
from dungeon.engine.world import Area, Door, GameMap


class ScriptedIO:
    """GameIO fake that replays selections and records what it was shown."""

    def __init__(self, selections: list[int]):
        self.selections = list(selections)
        self.shown: list[list[tuple[int, str]]] = []
        self.messages: list[str] = []

    def display_choices(self, choices: list[tuple[int, str]]) -> None:
        self.shown.append(choices)

    def read_selection(self) -> int:
        return self.selections.pop(0) if self.selections else 0

    def display_message(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any logging configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def axe() -> Weapon:
    return Weapon("Axe", 5, 10, "Cuts things", MonetaryValue(10))


@pytest.fixture
def cyanide() -> Potion:
    return Potion("cyanide", -1000, 6, "causes death", MonetaryValue(3))


@pytest.fixture
def elixir() -> Potion:
    return Potion("elixir", 25, 1, "restores health", MonetaryValue(20))


@pytest.fixture
def chain_mail(axe: Weapon) -> Armor:
    return Armor("chain mail", frozenset({axe}), 7, "protects from axes", MonetaryValue(1))


@pytest.fixture
def ogre() -> Character:
    return Character("ogre", weight_capacity=10)


@pytest.fixture
def den(ogre: Character) -> Area:
    return Area("den", characters=(ogre,))


@pytest.fixture
def door(den: Area) -> Door:
    return Area("hall").connect(den)


@pytest.fixture
def key(door: Door) -> Key:
    return Key("door key", door, 5, "", MonetaryValue(4))


@pytest.fixture
def hall(axe: Weapon, key: Key) -> Area:
    return Area("hall", items=(axe, key))


@pytest.fixture
def game_map(hall: Area, den: Area) -> GameMap:
    return GameMap().add_door(hall.connect(den))


@pytest.fixture
def player() -> Character:
    return Character("Fred", weight_capacity=20)


@pytest.fixture
def state(player: Character, game_map: GameMap, hall: Area) -> GameState:
    return GameState(player, game_map, hall)


@pytest.fixture
def scripted_io() -> type[ScriptedIO]:
    return ScriptedIO
