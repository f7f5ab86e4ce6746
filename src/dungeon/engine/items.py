"""The item family: weapons, potions, armor and keys.

Items are frozen dataclasses compared field by field, so two identical
axes are the same axe as far as an inventory is concerned. Each kind
except Armor carries one bound action, reached through ``item.action``.
"""

from dataclasses import dataclass, replace
from typing import Union

from .actions import Attack, Drink, Unlock
from .values import MonetaryValue
from .world import Lockable


@dataclass(frozen=True)
class Weapon:
    name: str
    attack: int
    weight: int
    description: str
    value: MonetaryValue

    @property
    def action(self) -> Attack:
        return Attack()

    def change_attack_force(self, amount: int) -> "Weapon":
        """Return a copy of this weapon with its attack shifted by ``amount``."""
        return replace(self, attack=self.attack + amount)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Potion:
    name: str
    potency: int
    weight: int
    description: str
    value: MonetaryValue

    @property
    def action(self) -> Drink:
        return Drink()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Armor:
    """Protective gear. It can be carried but not used."""

    name: str
    defends_against: frozenset[Weapon]
    weight: int
    description: str
    value: MonetaryValue

    @property
    def action(self) -> None:
        return None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Key:
    """Opens exactly one lockable, matched by value."""

    name: str
    opens: Lockable
    weight: int
    description: str
    value: MonetaryValue

    @property
    def action(self) -> Unlock:
        return Unlock()

    def __str__(self) -> str:
        return self.name


Item = Union[Weapon, Potion, Armor, Key]
