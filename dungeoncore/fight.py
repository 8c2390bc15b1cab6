"""Attack rolls, damage and the messages that report hits and misses."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from .constants import Ring
from .data import Stats
from .level import Item
from .rng import Rng

H_NAMES: tuple[str, ...] = (
    " scored an excellent hit on ",
    " hit ",
    " have injured ",
    " swing and hit ",
    " scored an excellent hit on ",
    " hit ",
    " has injured ",
    " swings and hits ",
)

M_NAMES: tuple[str, ...] = (
    " miss",
    " swing and miss",
    " barely miss",
    " don't hit",
    " misses",
    " swings and misses",
    " barely misses",
    " doesn't hit",
)

_STR_PLUS: tuple[int, ...] = (
    -7, -6, -5, -4, -3, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1,
    1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 3,
)

_ADD_DAM: tuple[int, ...] = (
    -7, -6, -5, -4, -3, -2, -1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 2, 3,
    3, 4, 5, 5, 5, 5, 5, 5, 5, 5, 5, 6,
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _strength_index(strength: int) -> int:
    if not 0 <= strength < len(_STR_PLUS):
        raise ValueError(f"strength {strength} is out of range")
    return strength


def str_plus(strength: int) -> int:
    """Return the bonus to hit that comes from strength."""
    return _STR_PLUS[_strength_index(strength)]


def add_dam(strength: int) -> int:
    """Return the bonus to damage that comes from strength."""
    return _ADD_DAM[_strength_index(strength)]


def swing(rng: Rng, at_lvl: int, op_arm: int, wplus: int) -> bool:
    """Return True if a swing by an attacker of level `at_lvl` hits armor class `op_arm`."""
    res = rng.rnd(20)
    need = (20 - at_lvl) - op_arm
    return res + wplus >= need


def defender_armor(base: int, armor: Optional[int], rings: Iterable[Optional[Item]]) -> int:
    """Return the hero's armor class: worn armor replaces `base`, protection rings lower it."""
    def_arm = base if armor is None else armor
    for ring in rings:
        if ring is not None and ring.which == Ring.PROTECT:
            def_arm -= ring.arm
    return def_arm


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def roll_em(
    rng: Rng,
    attacker: Stats,
    defender: Stats,
    damage: str,
    hplus: int = 0,
    dplus: int = 0,
    def_arm: Optional[int] = None,
    defender_running: bool = True,
) -> bool:
    """Roll each attack in a damage string such as "1x8/2x6" and take hits off the defender.

    Returns True if any attack hit. A defender that is not running is easier to hit.
    """
    if not defender_running:
        hplus += 4
    if def_arm is None:
        def_arm = defender.armor
    to_hit = hplus + str_plus(attacker.strength)
    did_hit = False
    cp = damage
    while cp:
        ndice = _atoi(cp)
        x = cp.find("x")
        if x < 0:
            break
        cp = cp[x + 1:]
        nsides = _atoi(cp)
        if swing(rng, attacker.level, def_arm, to_hit):
            dealt = dplus + rng.roll(ndice, nsides) + add_dam(attacker.strength)
            defender.hp -= max(0, dealt)
            did_hit = True
        slash = cp.find("/")
        if slash < 0:
            break
        cp = cp[slash + 1:]
    return did_hit


def prname(name: Optional[str], upper: bool) -> str:
    """Return the name of a combatant, "you" for the hero, capitalised if asked."""
    text = "you" if name is None else name
    if upper and text:
        text = text[0].upper() + text[1:]
    return text


def hit_message(rng: Rng, attacker: Optional[str], defender: Optional[str], terse: bool) -> str:
    """Describe a successful hit; None stands for the hero."""
    if terse:
        verb = " hit"
    else:
        i = rng.rnd(4)
        if attacker is not None:
            i += 4
        verb = H_NAMES[i]
    text = prname(attacker, True) + verb
    if not terse:
        text += prname(defender, False)
    return text


def miss_message(rng: Rng, attacker: Optional[str], defender: Optional[str], terse: bool) -> str:
    """Describe a missed swing; None stands for the hero."""
    i = 0 if terse else rng.rnd(4)
    if attacker is not None:
        i += 4
    text = prname(attacker, True) + M_NAMES[i]
    if not terse:
        text += " " + prname(defender, False)
    return text


def thunk_message(weapon_name: Optional[str], monster: str) -> str:
    """Describe a missile hitting a monster; without a weapon name the hero threw something else."""
    if weapon_name is not None:
        return f"the {weapon_name} hits {monster}"
    return f"you hit {monster}"


def bounce_message(weapon_name: Optional[str], monster: str) -> str:
    """Describe a missile missing a monster."""
    if weapon_name is not None:
        return f"the {weapon_name} misses {monster}"
    return f"you missed {monster}"