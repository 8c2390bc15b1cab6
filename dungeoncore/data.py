"""Static game tables: object kinds, monsters, traps, armor classes and help text."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .constants import (
    ESCAPE,
    MAXARMORS,
    MAXPOTIONS,
    MAXRINGS,
    MAXSCROLLS,
    MAXSTICKS,
    MAXWEAPONS,
    NTRAPS,
    NUMTHINGS,
    MonsterFlag,
    ctrl,
)


@dataclass
class ObjInfo:
    """What is known about one kind of object: name, probability, worth and the player's guess."""

    name: str | None
    prob: int
    worth: int = 0
    guess: str | None = None
    know: bool = False


@dataclass
class Stats:
    """Fighting statistics of a creature."""

    strength: int
    exp: int
    level: int
    armor: int
    hp: int
    damage: str
    max_hp: int = 0


@dataclass(frozen=True)
class MonsterKind:
    """Description of one kind of monster."""

    name: str
    carry: int
    flags: MonsterFlag
    stats: Stats


@dataclass(frozen=True)
class HelpEntry:
    """One line of command help; an empty key marks a line with no command."""

    key: str
    description: str
    printed: bool


TRAP_NAMES: tuple[str, ...] = (
    "a trapdoor",
    "an arrow trap",
    "a sleeping gas trap",
    "a beartrap",
    "a teleport trap",
    "a poison dart trap",
    "a rust trap",
    "a mysterious trap",
)

ARMOR_CLASSES: tuple[int, ...] = (8, 7, 7, 6, 5, 4, 4, 3)

INV_TYPE_NAMES: tuple[str, ...] = ("Overwrite", "Slow", "Clear")

DEFAULT_FRUIT = "slime-mold"

# Experience needed to reach each level after the first.
EXPERIENCE_LEVELS: tuple[int, ...] = (
    10, 20, 40, 80, 160, 320, 640, 1300, 2600, 5200,
    13000, 26000, 50000, 100000, 200000, 400000, 800000,
    2000000, 4000000, 8000000,
)

INITIAL_STATS = Stats(strength=16, exp=0, level=1, armor=10, hp=12, damage="1x4", max_hp=12)

_MEAN = MonsterFlag.ISMEAN
_NONE = MonsterFlag(0)

# name, carry, flags, experience, level, armor, damage
_MONSTERS = (
    ("aquator", 0, _MEAN, 20, 5, 2, "0x0/0x0"),
    ("bat", 0, MonsterFlag.ISFLY, 1, 1, 3, "1x2"),
    ("centaur", 15, _NONE, 17, 4, 4, "1x2/1x5/1x5"),
    ("dragon", 100, _MEAN, 5000, 10, -1, "1x8/1x8/3x10"),
    ("emu", 0, _MEAN, 2, 1, 7, "1x2"),
    ("venus flytrap", 0, _MEAN, 80, 8, 3, "%%%x0"),
    ("griffin", 20, _MEAN | MonsterFlag.ISFLY | MonsterFlag.ISREGEN, 2000, 13, 2, "4x3/3x5"),
    ("hobgoblin", 0, _MEAN, 3, 1, 5, "1x8"),
    ("ice monster", 0, _NONE, 5, 1, 9, "0x0"),
    ("jabberwock", 70, _NONE, 3000, 15, 6, "2x12/2x4"),
    ("kestrel", 0, _MEAN | MonsterFlag.ISFLY, 1, 1, 7, "1x4"),
    ("leprechaun", 0, _NONE, 10, 3, 8, "1x1"),
    ("medusa", 40, _MEAN, 200, 8, 2, "3x4/3x4/2x5"),
    ("nymph", 100, _NONE, 37, 3, 9, "0x0"),
    ("orc", 15, MonsterFlag.ISGREED, 5, 1, 6, "1x8"),
    ("phantom", 0, MonsterFlag.ISINVIS, 120, 8, 3, "4x4"),
    ("quagga", 0, _MEAN, 15, 3, 3, "1x5/1x5"),
    ("rattlesnake", 0, _MEAN, 9, 2, 3, "1x6"),
    ("snake", 0, _MEAN, 2, 1, 5, "1x3"),
    ("troll", 50, MonsterFlag.ISREGEN | _MEAN, 120, 6, 4, "1x8/1x8/2x6"),
    ("black unicorn", 0, _MEAN, 190, 7, -2, "1x9/1x9/2x9"),
    ("vampire", 20, MonsterFlag.ISREGEN | _MEAN, 350, 8, 1, "1x10"),
    ("wraith", 0, _NONE, 55, 5, 4, "1x6"),
    ("xeroc", 30, _NONE, 100, 7, 7, "4x4"),
    ("yeti", 30, _NONE, 50, 4, 6, "1x6/1x6"),
    ("zombie", 0, _MEAN, 6, 2, 8, "1x8"),
)

MONSTERS: tuple[MonsterKind, ...] = tuple(
    MonsterKind(
        name=name,
        carry=carry,
        flags=flags,
        stats=Stats(strength=10, exp=exp, level=lvl, armor=arm, hp=1, damage=dmg),
    )
    for name, carry, flags, exp, lvl, arm, dmg in _MONSTERS
)

_THINGS = ((None, 26), (None, 36), (None, 16), (None, 7), (None, 7), (None, 4), (None, 4))

_ARMORS = (
    ("leather armor", 20, 20),
    ("ring mail", 15, 25),
    ("studded leather armor", 15, 20),
    ("scale mail", 13, 30),
    ("chain mail", 12, 75),
    ("splint mail", 10, 80),
    ("banded mail", 10, 90),
    ("plate mail", 5, 150),
)

_POTIONS = (
    ("confusion", 7, 5),
    ("hallucination", 8, 5),
    ("poison", 8, 5),
    ("gain strength", 13, 150),
    ("see invisible", 3, 100),
    ("healing", 13, 130),
    ("monster detection", 6, 130),
    ("magic detection", 6, 105),
    ("raise level", 2, 250),
    ("extra healing", 5, 200),
    ("haste self", 5, 190),
    ("restore strength", 13, 130),
    ("blindness", 5, 5),
    ("levitation", 6, 75),
)

_RINGS = (
    ("protection", 9, 400),
    ("add strength", 9, 400),
    ("sustain strength", 5, 280),
    ("searching", 10, 420),
    ("see invisible", 10, 310),
    ("adornment", 1, 10),
    ("aggravate monster", 10, 10),
    ("dexterity", 8, 440),
    ("increase damage", 8, 400),
    ("regeneration", 4, 460),
    ("slow digestion", 9, 240),
    ("teleportation", 5, 30),
    ("stealth", 7, 470),
    ("maintain armor", 5, 380),
)

_SCROLLS = (
    ("monster confusion", 7, 140),
    ("magic mapping", 4, 150),
    ("hold monster", 2, 180),
    ("sleep", 3, 5),
    ("enchant armor", 7, 160),
    ("identify potion", 10, 80),
    ("identify scroll", 10, 80),
    ("identify weapon", 6, 80),
    ("identify armor", 7, 100),
    ("identify ring, wand or staff", 10, 115),
    ("scare monster", 3, 200),
    ("food detection", 2, 60),
    ("teleportation", 5, 165),
    ("enchant weapon", 8, 150),
    ("create monster", 4, 75),
    ("remove curse", 7, 105),
    ("aggravate monsters", 3, 20),
    ("protect armor", 2, 250),
)

# The last entry stands for dragon breath and never appears as an item.
_WEAPONS = (
    ("mace", 11, 8),
    ("long sword", 11, 15),
    ("short bow", 12, 15),
    ("arrow", 12, 1),
    ("dagger", 8, 3),
    ("two handed sword", 10, 75),
    ("dart", 12, 2),
    ("shuriken", 12, 5),
    ("spear", 12, 5),
    (None, 0, 0),
)

_STICKS = (
    ("light", 12, 250),
    ("invisibility", 6, 5),
    ("lightning", 3, 330),
    ("fire", 3, 330),
    ("cold", 3, 330),
    ("polymorph", 15, 310),
    ("magic missile", 10, 170),
    ("haste monster", 10, 5),
    ("slow monster", 11, 350),
    ("drain life", 9, 300),
    ("nothing", 1, 5),
    ("teleport away", 6, 340),
    ("teleport to", 6, 50),
    ("cancellation", 5, 280),
)

# Number of entries of each table that take part in probability sums.
TABLE_SIZES: dict[str, int] = {
    "things": NUMTHINGS,
    "potions": MAXPOTIONS,
    "scrolls": MAXSCROLLS,
    "rings": MAXRINGS,
    "sticks": MAXSTICKS,
    "weapons": MAXWEAPONS,
    "armor": MAXARMORS,
}


def _help(key: str, description: str, printed: bool) -> HelpEntry:
    return HelpEntry(key, description, printed)


HELP: tuple[HelpEntry, ...] = (
    _help("?", "\tprints help", True),
    _help("/", "\tidentify object", True),
    _help("h", "\tleft", True),
    _help("j", "\tdown", True),
    _help("k", "\tup", True),
    _help("l", "\tright", True),
    _help("y", "\tup & left", True),
    _help("u", "\tup & right", True),
    _help("b", "\tdown & left", True),
    _help("n", "\tdown & right", True),
    _help("H", "\trun left", False),
    _help("J", "\trun down", False),
    _help("K", "\trun up", False),
    _help("L", "\trun right", False),
    _help("Y", "\trun up & left", False),
    _help("U", "\trun up & right", False),
    _help("B", "\trun down & left", False),
    _help("N", "\trun down & right", False),
    _help(ctrl("H"), "\trun left until adjacent", False),
    _help(ctrl("J"), "\trun down until adjacent", False),
    _help(ctrl("K"), "\trun up until adjacent", False),
    _help(ctrl("L"), "\trun right until adjacent", False),
    _help(ctrl("Y"), "\trun up & left until adjacent", False),
    _help(ctrl("U"), "\trun up & right until adjacent", False),
    _help(ctrl("B"), "\trun down & left until adjacent", False),
    _help(ctrl("N"), "\trun down & right until adjacent", False),
    _help("", "\t<SHIFT><dir>: run that way", True),
    _help("", "\t<CTRL><dir>: run till adjacent", True),
    _help("f", "<dir>\tfight till death or near death", True),
    _help("t", "<dir>\tthrow something", True),
    _help("m", "<dir>\tmove onto without picking up", True),
    _help("z", "<dir>\tzap a wand in a direction", True),
    _help("^", "<dir>\tidentify trap type", True),
    _help("s", "\tsearch for trap/secret door", True),
    _help(">", "\tgo down a staircase", True),
    _help("<", "\tgo up a staircase", True),
    _help(".", "\trest for a turn", True),
    _help(",", "\tpick something up", True),
    _help("i", "\tinventory", True),
    _help("I", "\tinventory single item", True),
    _help("q", "\tquaff potion", True),
    _help("r", "\tread scroll", True),
    _help("e", "\teat food", True),
    _help("w", "\twield a weapon", True),
    _help("W", "\twear armor", True),
    _help("T", "\ttake armor off", True),
    _help("P", "\tput on ring", True),
    _help("R", "\tremove ring", True),
    _help("d", "\tdrop object", True),
    _help("c", "\tcall object", True),
    _help("a", "\trepeat last command", True),
    _help(")", "\tprint current weapon", True),
    _help("]", "\tprint current armor", True),
    _help("=", "\tprint current rings", True),
    _help("@", "\tprint current stats", True),
    _help("D", "\trecall what's been discovered", True),
    _help("o", "\texamine/set options", True),
    _help(ctrl("R"), "\tredraw screen", True),
    _help(ctrl("P"), "\trepeat last message", True),
    _help(chr(ESCAPE), "\tcancel command", True),
    _help("S", "\tsave game", True),
    _help("Q", "\tquit", True),
    _help("!", "\tshell escape", True),
    _help("F", "<dir>\tfight till either of you dies", True),
    _help("v", "\tprint version number", True),
)


def monster_info(letter: str) -> MonsterKind:
    """Return the description of the monster shown as `letter` ('A' to 'Z'), with its own stats."""
    if not isinstance(letter, str) or len(letter) != 1 or not "A" <= letter <= "Z":
        raise ValueError(f"no monster is shown as {letter!r}")
    kind = MONSTERS[ord(letter) - ord("A")]
    return replace(kind, stats=replace(kind.stats))


def trap_name(kind: int) -> str:
    """Return the name of a trap kind."""
    if not 0 <= kind < NTRAPS:
        raise ValueError(f"unknown trap kind {kind}")
    return TRAP_NAMES[kind]


def armor_class(kind: int) -> int:
    """Return the base armor class of an armor kind."""
    if not 0 <= kind < MAXARMORS:
        raise ValueError(f"unknown armor kind {kind}")
    return ARMOR_CLASSES[kind]


def fresh_info_tables() -> dict[str, list[ObjInfo]]:
    """Return new, independent copies of every object-information table."""
    sources = {
        "things": _THINGS,
        "armor": _ARMORS,
        "potions": _POTIONS,
        "rings": _RINGS,
        "scrolls": _SCROLLS,
        "weapons": _WEAPONS,
        "sticks": _STICKS,
    }
    return {key: [ObjInfo(*row) for row in rows] for key, rows in sources.items()}