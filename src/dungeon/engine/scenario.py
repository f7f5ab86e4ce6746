"""The demo world: an armory, an ogre's den and a locked door between them."""

from .characters import Character
from .items import Armor, Key, Potion, Weapon
from .state import GameState
from .values import MonetaryValue
from .world import Area, GameMap

ARMORY = "armory"
DEN = "ogre's den"


def build_demo_world(
    player_name: str = "Fred",
    health: int = 100,
    weight_capacity: int = 20,
) -> GameState:
    """Create the starting state of the demo game.

    The player starts in the armory, where an axe, a set of chain mail, a
    vial of cyanide and the key to the den are lying around. The ogre waits
    behind the locked door.
    """
    axe = Weapon("Axe", 5, 10, "Cuts things", MonetaryValue(10))
    chain_mail = Armor(
        "chain mail", frozenset({axe}), 7, "protects from axes", MonetaryValue(1)
    )
    cyanide = Potion("cyanide", -1000, 6, "causes death", MonetaryValue(3))
    ogre = Character("ogre", weight_capacity=10)

    den = Area(DEN, characters=(ogre,))
    door = Area(ARMORY).connect(den)
    key = Key("door key", door, 5, "opens the den", MonetaryValue(4))
    armory = Area(ARMORY, items=(axe, key, chain_mail, cyanide))

    game_map = GameMap().add_door(armory.connect(den))
    player = Character(player_name, health=health, weight_capacity=weight_capacity)
    return GameState(player, game_map, armory)
