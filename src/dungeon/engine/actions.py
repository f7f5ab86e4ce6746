"""Actions: the closed set of ways an item can transform a game state.

perform(action, item, state) -> GameState is the single dispatch point.
Every action is total: a policy failure (locked door, missing item) comes
back as a state carrying a message, never as an exception.

Item-intrinsic actions (Attack, Drink, Unlock) are obtained through
``item.action``. The rest are built by the engine for the current turn and
carry the context they need (the character dropping, the door to open).
"""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Union

from ..logging import get_logger
from .world import Door

if TYPE_CHECKING:
    from .characters import Character
    from .items import Item
    from .state import GameState

logger = get_logger(__name__)


@dataclass(frozen=True)
class Attack:
    """Weapon action: damage everyone standing in the current area."""

    label = "Attack with"


@dataclass(frozen=True)
class Drink:
    """Potion action: change the player's health by the potency."""

    label = "Drink"


@dataclass(frozen=True)
class Unlock:
    """Key action: unlock the door the key was cut for."""

    label = "Use"


@dataclass(frozen=True)
class PickUp:
    label = "Pick up"


@dataclass(frozen=True)
class Drop:
    """Remove an item from a specific character's inventory."""

    character: "Character"
    label = "Drop"


@dataclass(frozen=True)
class OpenDoor:
    door: Door
    label = "Open door"


@dataclass(frozen=True)
class Enter:
    """Walk through a door to the area on its other side."""

    door: Door
    label = "Go to"


Action = Union[Attack, Drink, Unlock, PickUp, Drop, OpenDoor, Enter]


def perform(action: Action, item: "Item | None", state: "GameState") -> "GameState":
    """Apply an action to a state and return the resulting state."""
    match action:
        case Attack():
            return _attack(item, state)
        case Drink():
            return _drink(item, state)
        case Unlock():
            return _unlock(item, state)
        case PickUp():
            return _pick_up(item, state)
        case Drop(character=character):
            return _drop(character, item, state)
        case OpenDoor(door=door):
            return _open_door(door, state)
        case Enter(door=door):
            return state.enter(door)
        case _:
            return state


def _attack(weapon, state: "GameState") -> "GameState":
    characters = tuple(c.damage(weapon) for c in state.current_area.characters)
    area = replace(state.current_area, characters=characters)
    logger.debug(
        "characters_attacked",
        weapon=weapon.name,
        attack=weapon.attack,
        targets=[c.name for c in characters],
    )
    return replace(
        state,
        current_area=area,
        game_map=state.game_map.replace_area(area),
    )


def _drink(potion, state: "GameState") -> "GameState":
    player = state.player.drink_potion(potion)
    logger.debug("potion_drunk", potion=potion.name, health=player.health)
    return replace(state, player=player)


def _unlock(key, state: "GameState") -> "GameState":
    if not isinstance(key.opens, Door):
        return state
    return replace(state, game_map=state.game_map.unlock_door(key))


def _pick_up(item: "Item", state: "GameState") -> "GameState":
    # Goes straight onto the inventory; weight_capacity is only enforced by
    # Character.pick_up_item.
    inventory = state.player.inventory.prepend(item)
    logger.debug("item_picked_up", item=item.name, carried=len(inventory))
    return replace(state, player=replace(state.player, inventory=inventory))


def _drop(character: "Character", item: "Item", state: "GameState") -> "GameState":
    if item not in character.inventory:
        return replace(
            state,
            message=f"{character.name}'s inventory does not contain {item}",
        )
    dropped = replace(character, inventory=character.inventory - item)
    return replace(state, player=dropped)


def _open_door(door: Door, state: "GameState") -> "GameState":
    key = state.player.key_for(door)
    if key is None:
        return replace(state, message="Door is locked")
    logger.debug("door_unlocked", key=key.name)
    return replace(state, game_map=state.game_map.unlock_door(key))
