"""The world graph: areas joined by lockable doors.

Everything here is an immutable value. A Door is compared by its two
endpoints and its lock flag, so it doubles as its own identity inside a
GameMap and inside the Key that opens it. "Changing" a door means
building a new map with the door replaced.
"""

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Protocol

from ..exceptions import InvalidEndpoint

if TYPE_CHECKING:
    from .characters import Character
    from .items import Item, Key


class Lockable(Protocol):
    """Anything with a lock flag and an unlock transition."""

    @property
    def locked(self) -> bool: ...

    def unlock(self) -> "Lockable": ...


@dataclass(frozen=True)
class Area:
    """A place holding items and characters.

    An area is identified by its name: two values with the same name are
    the same place seen at different moments, whatever they contain. This
    lets a key lying in an area refer to a door of that very area.

    As a consequence ``==`` on areas, doors, maps and game states ignores
    what the areas hold: a state after an attack still equals the state
    before it. Compare ``items`` or ``characters`` to detect such changes.
    """

    name: str
    items: tuple["Item", ...] = field(default=(), compare=False)
    characters: tuple["Character", ...] = field(default=(), compare=False)

    def connect(self, other: "Area") -> "Door":
        """Build a new, locked door between this area and another."""
        return Door(self, other)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Door:
    """An edge between two areas. Doors start out locked."""

    first: Area
    second: Area
    locked: bool = True

    def unlock(self) -> "Door":
        return replace(self, locked=False)

    def opens_to(self, area: Area) -> bool:
        return self.first == area or self.second == area

    def other(self, area: Area) -> Area:
        """Return the endpoint opposite to ``area``."""
        if area == self.first:
            return self.second
        if area == self.second:
            return self.first
        raise InvalidEndpoint(self, area)


@dataclass(frozen=True)
class GameMap:
    """The set of doors making up the world.

    Doors keep insertion order so the choices built from them are stable
    from one turn to the next.
    """

    doors: tuple[Door, ...] = ()

    @property
    def areas(self) -> tuple[Area, ...]:
        """Every area referenced by a door, without duplicates."""
        endpoints = (area for door in self.doors for area in (door.first, door.second))
        return tuple(dict.fromkeys(endpoints))

    def add_door(self, door: Door) -> "GameMap":
        if door in self.doors:
            return self
        return replace(self, doors=self.doors + (door,))

    def doors_in(self, area: Area) -> tuple[Door, ...]:
        """All doors with ``area`` as one of their endpoints."""
        return tuple(door for door in self.doors if door.opens_to(area))

    def replace_area(self, area: Area) -> "GameMap":
        """Swap in a newer version of ``area`` wherever a door touches it."""
        doors = []
        for door in self.doors:
            if door.first == area:
                door = replace(door, first=area)
            if door.second == area:
                door = replace(door, second=area)
            doors.append(door)
        return replace(self, doors=tuple(doors))

    def unlock_door(self, key: "Key") -> "GameMap":
        """Unlock the door ``key`` opens, leaving every other door as is."""
        doors = (door.unlock() if door == key.opens else door for door in self.doors)
        return replace(self, doors=tuple(dict.fromkeys(doors)))
