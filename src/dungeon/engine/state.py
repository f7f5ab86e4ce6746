"""Immutable game state and the choices it offers.

A GameState is a snapshot. Actions never modify it; they return a new
one built with dataclasses.replace. The optional message is transient:
the turn engine shows it and clears it before the next turn.
"""

from dataclasses import dataclass, replace

from .actions import Action, Drop, Enter, OpenDoor, PickUp
from .characters import Character
from .items import Item
from .world import Area, Door, GameMap

QUIT_LABEL = "Quit"


@dataclass(frozen=True)
class Choice:
    """One option offered to the player this turn."""

    action: Action
    item: Item | None
    description: str


@dataclass(frozen=True)
class GameState:
    player: Character
    game_map: GameMap
    current_area: Area
    message: str | None = None

    @property
    def current_doors(self) -> tuple[Door, ...]:
        return self.game_map.doors_in(self.current_area)

    def with_message(self, message: str | None) -> "GameState":
        return replace(self, message=message)

    def enter(self, door: Door) -> "GameState":
        """Walk through ``door`` if it leads out of the current area.

        A locked door is unlocked on the way when the player carries its
        key. A door that does not touch the current area is ignored.
        """
        if not door.opens_to(self.current_area):
            return self

        game_map = self.game_map
        key = self.player.key_for(door)
        if key is not None and door.locked:
            game_map = game_map.unlock_door(key)

        destination = door.other(self.current_area)
        # Prefer the map's copy, which reflects anything done there since.
        destination = next(
            (area for area in game_map.areas if area == destination), destination
        )
        return replace(self, game_map=game_map, current_area=destination)

    def choices(self) -> list[Choice]:
        """Everything the player may do from here, in display order."""
        choices = [
            Choice(OpenDoor(door), None, OpenDoor.label) for door in self.current_doors
        ]
        choices += [
            Choice(PickUp(), item, f"{PickUp.label} {item.name}")
            for item in self.current_area.items
        ]
        choices += [
            Choice(Enter(door), None, _enter_label(door, self.current_area))
            for door in self.current_doors
            if not door.locked
        ]
        for item in self.player.inventory:
            if item.action is not None:
                choices.append(
                    Choice(item.action, item, f"{item.action.label} {item.name}")
                )
        choices += [
            Choice(Drop(self.player), item, f"{Drop.label} {item.name}")
            for item in self.player.inventory
        ]
        return choices


def _enter_label(door: Door, area: Area) -> str:
    return f"{Enter.label} {door.other(area).name}"
