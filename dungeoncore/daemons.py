"""Turn-by-turn effects on the hero: healing, digestion and wandering monsters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .constants import MORETIME, STARVETIME
from .rng import Rng


class Hunger(IntEnum):
    """How hungry the hero is."""

    NONE = 0
    HUNGRY = 1
    WEAK = 2
    FAINT = 3


class Starved(Exception):
    """Raised when the hero has gone too long without food."""


@dataclass
class PlayerVitals:
    """The parts of the hero's state that healing and digestion change."""

    level: int = 1
    hp: int = 12
    max_hp: int = 12
    quiet: int = 0
    food_left: int = 1300
    hunger: Hunger = Hunger.NONE
    no_command: int = 0
    terse: bool = False
    hallucinating: bool = False

    def choose(self, tripping: str, normal: str) -> str:
        """Pick the hallucinating or the normal wording of a message."""
        return tripping if self.hallucinating else normal


def doctor(vitals: PlayerVitals, rng: Rng, regen_rings: int = 0) -> None:
    """Restore hit points after quiet turns; each regeneration ring worn adds one."""
    lv = vitals.level
    ohp = vitals.hp
    vitals.quiet += 1
    if lv < 8:
        if vitals.quiet + (lv << 1) > 20:
            vitals.hp += 1
    elif vitals.quiet >= 3:
        vitals.hp += rng.rnd(lv - 7) + 1
    vitals.hp += regen_rings
    if ohp != vitals.hp:
        vitals.hp = min(vitals.hp, vitals.max_hp)
        vitals.quiet = 0


def stomach(vitals: PlayerVitals, rng: Rng, ring_drain: int = 0, amulet: bool = False) -> Optional[str]:
    """Digest one turn of food and return the message to show, if any.

    Raises Starved when the hero has been without food too long. The caller
    should stop running and repeated commands when `vitals.hunger` changes.
    """
    if vitals.food_left <= 0:
        starving = vitals.food_left < -STARVETIME
        vitals.food_left -= 1
        if starving:
            raise Starved("starvation")
        if vitals.no_command or rng.rnd(5) != 0:
            return None
        vitals.no_command += rng.rnd(8) + 4
        vitals.hunger = Hunger.FAINT
        text = ""
        if not vitals.terse:
            text = vitals.choose(
                "the munchies overpower your motor capabilities.  ",
                "you feel too weak from lack of food.  ",
            )
        return text + vitals.choose("You freak out", "You faint")

    oldfood = vitals.food_left
    vitals.food_left -= ring_drain + 1 - int(amulet)
    if vitals.food_left < MORETIME <= oldfood:
        vitals.hunger = Hunger.WEAK
        return vitals.choose(
            "the munchies are interfering with your motor capabilites",
            "you are starting to feel weak",
        )
    if vitals.food_left < 2 * MORETIME <= oldfood:
        vitals.hunger = Hunger.HUNGRY
        if vitals.terse:
            return vitals.choose("getting the munchies", "getting hungry")
        return vitals.choose("you are getting the munchies", "you are starting to get hungry")
    return None


@dataclass
class WanderRoller:
    """Every fourth turn, rolls to see whether a wandering monster appears."""

    between: int = 0

    def roll(self, rng: Rng) -> bool:
        """Count a turn; return True when a wandering monster should start up."""
        self.between += 1
        if self.between < 4:
            return False
        self.between = 0
        return rng.roll(1, 6) == 4