"""Tests for the turn engine."""

import pytest

from dungeon.engine.actions import Drop, PickUp
from dungeon.engine.items import Weapon
from dungeon.engine.scenario import build_demo_world
from dungeon.engine.state import Choice, GameState
from dungeon.engine.turns import (
    TurnEngine,
    TurnPhase,
    numbered,
    run,
    select,
)
from dungeon.engine.world import Area
from dungeon.exceptions import InvalidChoice


def test_numbered_puts_quit_first(state: GameState):
    """Quit is always index 0 and choices count from 1."""
    assert numbered(state.choices()) == [
        (0, "Quit"),
        (1, "Open door"),
        (2, "Pick up Axe"),
        (3, "Pick up door key"),
    ]


def test_select(axe: Weapon):
    """0 quits, 1..N pick a choice, anything else is an error."""
    choices = [Choice(PickUp(), axe, "Pick up Axe")]
    assert select(choices, 0) is None
    assert select(choices, 1) is choices[0]
    with pytest.raises(InvalidChoice):
        select(choices, 2)
    with pytest.raises(InvalidChoice):
        select(choices, -1)


def test_quit_immediately(state: GameState, scripted_io):
    """Selecting 0 ends the game with the state untouched."""
    io = scripted_io([0])
    engine = TurnEngine(state, io)

    assert engine.step() is TurnPhase.TERMINATED
    assert engine.state == state
    assert engine.turns == 0
    assert len(io.shown) == 1


def test_step_after_termination(state: GameState, scripted_io):
    """A terminated engine does not ask for more input."""
    io = scripted_io([0])
    engine = TurnEngine(state, io)
    engine.step()
    assert engine.step() is TurnPhase.TERMINATED
    assert len(io.shown) == 1


def test_step_adopts_new_state(state: GameState, axe: Weapon, scripted_io):
    """A selected action's result becomes the current state."""
    engine = TurnEngine(state, scripted_io([2]))

    assert engine.step() is TurnPhase.AWAITING_CHOICE
    assert axe in engine.state.player.inventory
    assert engine.turns == 1


def test_message_is_shown_and_cleared(state: GameState, scripted_io):
    """A locked door message reaches the player and is not kept."""
    io = scripted_io([1])
    engine = TurnEngine(state, io)
    engine.step()

    assert io.messages == ["Door is locked"]
    assert engine.state.message is None
    assert engine.state == state


def test_invalid_selection_raises(state: GameState, scripted_io):
    """An index beyond the offered choices is a programmer error."""
    engine = TurnEngine(state, scripted_io([9]))
    with pytest.raises(InvalidChoice):
        engine.step()


def test_full_game(state: GameState, scripted_io):
    """Pick up axe and key, open the door, walk in, attack, quit."""
    # 1) Open door 2) Pick up Axe 3) Pick up door key
    # once the door is open: 4) Go to den; in the den: 4) Attack with Axe
    io = scripted_io([2, 3, 1, 4, 4, 0])
    final = run(state, io)

    assert final.current_area == Area("den")
    assert final.current_area.characters[0].health == 95
    assert final.message is None
    assert io.messages == []
    assert [d for _, d in io.shown[3]][:5] == [
        "Quit",
        "Open door",
        "Pick up Axe",
        "Pick up door key",
        "Go to den",
    ]


def test_drop_missing_item_message(state: GameState, axe: Weapon, scripted_io):
    """A drop choice for an item no longer carried reports it."""
    choice = Choice(Drop(state.player), axe, "Drop Axe")

    class OneChoice(GameState):
        def choices(self):
            return [choice]

    custom = OneChoice(state.player, state.game_map, state.current_area)
    io = scripted_io([1, 0])
    run(custom, io)

    assert io.messages == ["Fred's inventory does not contain Axe"]


def test_pick_up_choices_ignore_capacity(scripted_io):
    """Capacity only guards Character.pick_up_item, not the pick-up choices."""
    state = build_demo_world(weight_capacity=0)
    # 2..5) Pick up each of the four armory items; they stay in the area.
    final = run(state, scripted_io([2, 3, 4, 5, 0]))

    assert len(final.player.inventory) == 4
    assert final.player.current_weight == 28
    assert final.player.weight_capacity == 0
