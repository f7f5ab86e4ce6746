"""Characters and the inventories they carry."""

from collections.abc import Iterator
from dataclasses import dataclass, field, replace

from ..logging import get_logger
from .items import Armor, Item, Key, Potion, Weapon
from .world import Door

logger = get_logger(__name__)


@dataclass(frozen=True)
class Inventory:
    """An ordered bag of items. The same item may appear more than once."""

    items: tuple[Item, ...] = ()

    def prepend(self, item: Item) -> "Inventory":
        return Inventory((item,) + self.items)

    def append(self, item: Item) -> "Inventory":
        return Inventory(self.items + (item,))

    def remove(self, item: Item) -> "Inventory":
        """Remove the first item equal to ``item``; other copies stay."""
        if item not in self.items:
            return self
        index = self.items.index(item)
        return Inventory(self.items[:index] + self.items[index + 1 :])

    __sub__ = remove

    @property
    def weight(self) -> int:
        return sum(item.weight for item in self.items)

    def __contains__(self, item: object) -> bool:
        return item in self.items

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class Character:
    """A player or monster. Health may drop below zero."""

    name: str
    health: int = 100
    weight_capacity: int = 0
    inventory: Inventory = field(default_factory=Inventory)

    @property
    def weapons(self) -> list[Weapon]:
        return [item for item in self.inventory if isinstance(item, Weapon)]

    @property
    def armors(self) -> list[Armor]:
        return [item for item in self.inventory if isinstance(item, Armor)]

    @property
    def current_weight(self) -> int:
        return self.inventory.weight

    @property
    def is_dead(self) -> bool:
        return self.health <= 0

    @property
    def has_armor(self) -> bool:
        return any(isinstance(item, Armor) for item in self.inventory)

    def pick_up_item(self, item: Item) -> "Character":
        """Carry ``item`` if it fits, otherwise return this character as is."""
        if self.current_weight + item.weight > self.weight_capacity:
            logger.debug(
                "pick_up_refused",
                character=self.name,
                item=item.name,
                weight=self.current_weight,
                capacity=self.weight_capacity,
            )
            return self
        return replace(self, inventory=self.inventory.prepend(item))

    def drink_potion(self, potion: Potion) -> "Character":
        return replace(self, health=self.health + potion.potency)

    def damage(self, weapon: Weapon) -> "Character":
        # Armor is carried but never consulted here.
        return replace(self, health=self.health - weapon.attack)

    def key_for(self, door: Door) -> Key | None:
        """Return the first carried key cut for ``door``."""
        for item in self.inventory:
            if isinstance(item, Key) and item.opens == door:
                return item
        return None

    def has_key_for(self, door: Door) -> bool:
        return self.key_for(door) is not None
