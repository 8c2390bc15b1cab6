"""Randomised appearances of potions, scrolls, rings and sticks, and item probability tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, MutableSequence

from .constants import MAXPOTIONS, MAXRINGS, MAXSCROLLS, MAXSTICKS
from .data import TABLE_SIZES, ObjInfo
from .rng import Rng

MAXNAME = 40  # longest a scroll name may grow before syllables stop being added

RAINBOW: tuple[str, ...] = (
    "amber", "aquamarine", "black", "blue", "brown", "clear", "crimson",
    "cyan", "ecru", "gold", "green", "grey", "magenta", "orange", "pink",
    "plaid", "purple", "red", "silver", "tan", "tangerine", "topaz",
    "turquoise", "vermilion", "violet", "white", "yellow",
)

SYLLABLES: tuple[str, ...] = (
    "a", "ab", "ag", "aks", "ala", "an", "app", "arg", "arze", "ash",
    "bek", "bie", "bit", "bjor", "blu", "bot", "bu", "byt", "comp",
    "con", "cos", "cre", "dalf", "dan", "den", "do", "e", "eep", "el",
    "eng", "er", "ere", "erk", "esh", "evs", "fa", "fid", "fri", "fu",
    "gan", "gar", "glen", "gop", "gre", "ha", "hyd", "i", "ing", "ip",
    "ish", "it", "ite", "iv", "jo", "kho", "kli", "klis", "la", "lech",
    "mar", "me", "mi", "mic", "mik", "mon", "mung", "mur", "nej",
    "nelg", "nep", "ner", "nes", "nes", "nih", "nin", "o", "od", "ood",
    "org", "orn", "ox", "oxy", "pay", "ple", "plu", "po", "pot",
    "prok", "re", "rea", "rhov", "ri", "ro", "rog", "rok", "rol", "sa",
    "san", "sat", "sef", "seh", "shu", "ski", "sna", "sne", "snik",
    "sno", "so", "sol", "sri", "sta", "sun", "ta", "tab", "tem",
    "ther", "ti", "tox", "trol", "tue", "turs", "u", "ulk", "um", "un",
    "uni", "ur", "val", "viv", "vly", "vom", "wah", "wed", "werg",
    "wex", "whon", "wun", "xo", "y", "yot", "yu", "zant", "zeb", "zim",
    "zok", "zon", "zum",
)


@dataclass(frozen=True)
class Stone:
    """A gem that may be set in a ring, and what it adds to the ring's worth."""

    name: str
    value: int


STONES: tuple[Stone, ...] = (
    Stone("agate", 25),
    Stone("alexandrite", 40),
    Stone("amethyst", 50),
    Stone("carnelian", 40),
    Stone("diamond", 300),
    Stone("emerald", 300),
    Stone("germanium", 225),
    Stone("granite", 5),
    Stone("garnet", 50),
    Stone("jade", 150),
    Stone("kryptonite", 300),
    Stone("lapis lazuli", 50),
    Stone("moonstone", 50),
    Stone("obsidian", 15),
    Stone("onyx", 60),
    Stone("opal", 200),
    Stone("pearl", 220),
    Stone("peridot", 63),
    Stone("ruby", 350),
    Stone("sapphire", 285),
    Stone("stibotantalite", 200),
    Stone("tiger eye", 50),
    Stone("topaz", 60),
    Stone("turquoise", 70),
    Stone("taaffeite", 300),
    Stone("zircon", 80),
)

WOOD: tuple[str, ...] = (
    "avocado wood", "balsa", "bamboo", "banyan", "birch", "cedar", "cherry",
    "cinnibar", "cypress", "dogwood", "driftwood", "ebony", "elm",
    "eucalyptus", "fall", "hemlock", "holly", "ironwood", "kukui wood",
    "mahogany", "manzanita", "maple", "oaken", "persimmon wood", "pecan",
    "pine", "poplar", "redwood", "rosewood", "spruce", "teak", "walnut",
    "zebrawood",
)

METAL: tuple[str, ...] = (
    "aluminum", "beryllium", "bone", "brass", "bronze", "copper", "electrum",
    "gold", "iron", "lead", "magnesium", "mercury", "nickel", "pewter",
    "platinum", "steel", "silver", "silicon", "tin", "titanium", "tungsten",
    "zinc",
)


def _distinct_picks(rng: Rng, pool_size: int, count: int) -> list[int]:
    used: set[int] = set()
    picks = []
    for _ in range(count):
        while (j := rng.rnd(pool_size)) in used:
            pass
        used.add(j)
        picks.append(j)
    return picks


def init_colors(rng: Rng) -> list[str]:
    """Give each potion kind a different colour."""
    return [RAINBOW[j] for j in _distinct_picks(rng, len(RAINBOW), MAXPOTIONS)]


def init_names(rng: Rng) -> list[str]:
    """Make up a nonsense title for each scroll kind."""
    names = []
    for _ in range(MAXSCROLLS):
        buf = ""
        for _ in range(rng.rnd(3) + 2):
            for _ in range(rng.rnd(3) + 1):
                syllable = SYLLABLES[rng.rnd(len(SYLLABLES))]
                if len(buf) + len(syllable) > MAXNAME:
                    break
                buf += syllable
            buf += " "
        names.append(buf[:-1])
    return names


def init_stones(rng: Rng, ring_info: MutableSequence[ObjInfo]) -> list[str]:
    """Set a different stone in each ring kind, adding the stone's value to the ring's worth."""
    stones = []
    for i, j in enumerate(_distinct_picks(rng, len(STONES), MAXRINGS)):
        stone = STONES[j]
        stones.append(stone.name)
        ring_info[i].worth += stone.value
    return stones


def init_materials(rng: Rng) -> tuple[list[str], list[str]]:
    """Choose wand or staff and a distinct material for each stick kind.

    Returns the list of kinds ("wand" or "staff") and the list of materials.
    """
    kinds: list[str] = []
    materials: list[str] = []
    used_wood: set[int] = set()
    used_metal: set[int] = set()
    for _ in range(MAXSTICKS):
        while True:
            if rng.rnd(2) == 0:
                j = rng.rnd(len(METAL))
                if j not in used_metal:
                    used_metal.add(j)
                    kinds.append("wand")
                    materials.append(METAL[j])
                    break
            else:
                j = rng.rnd(len(WOOD))
                if j not in used_wood:
                    used_wood.add(j)
                    kinds.append("staff")
                    materials.append(WOOD[j])
                    break
    return kinds, materials


def sumprobs(info: Iterable[ObjInfo]) -> int:
    """Turn the probabilities of a table into running totals, in place; return the last total."""
    total = 0
    for entry in info:
        total += entry.prob
        entry.prob = total
    return total


def init_probs(tables: Mapping[str, MutableSequence[ObjInfo]]) -> None:
    """Sum the probabilities of every item table over the entries that can appear."""
    for key, size in TABLE_SIZES.items():
        sumprobs(tables[key][:size])


def pick_color(rng: Rng, color: str, hallucinating: bool) -> str:
    """Return `color`, or a random colour name while hallucinating."""
    return RAINBOW[rng.rnd(len(RAINBOW))] if hallucinating else color