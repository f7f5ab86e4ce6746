"""Exceptions for programmer errors in the Dungeon engine.

Expected in-game outcomes (a locked door, a full backpack, dropping
something you are not carrying) are never raised; they come back as data
on the game state.
"""


class DungeonError(Exception):
    """Base exception for the Dungeon engine."""


class InvalidChoice(DungeonError, ValueError):
    """Raised when a selection index does not name an offered choice."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Choice {index} is not between 0 and {count}")


class InvalidEndpoint(DungeonError, ValueError):
    """Raised when a door is asked about an area it does not connect."""

    def __init__(self, door, area):
        self.door = door
        self.area = area
        super().__init__(f"Area {area} is not an endpoint of this door")
