"""Dimensions, limits, map symbols, flag bits and item kinds of the dungeon."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag

MAXSTR = 1024
MAXLINES = 32
MAXCOLS = 80

MAXROOMS = 9
MAXTHINGS = 9
MAXOBJ = 9
MAXPACK = 23
MAXTRAPS = 10
AMULETLEVEL = 26
NUMTHINGS = 7
MAXPASS = 13
NUMLINES = 24
NUMCOLS = 80
STATLINE = NUMLINES - 1
BORE_LEVEL = 50

# Results of the option-editing prompts.
NORM = 0
QUIT = 1
MINUS = 2

# Inventory display styles.
INV_OVER = 0
INV_SLOW = 1
INV_CLEAR = 2

# Item-type selectors used when asking the player for an item.
CALLABLE = -1
R_OR_S = -2

HEALTIME = 30
HUHDURATION = 20
SEEDURATION = 850
HUNGERTIME = 1300
MORETIME = 150
STOMACHSIZE = 2000
STARVETIME = 850
ESCAPE = 27
LEFT = 0
RIGHT = 1
BOLT_LENGTH = 6
LAMPDIST = 3

# Saving throws.
VS_POISON = 0
VS_PARALYZATION = 0
VS_DEATH = 0
VS_BREATH = 2
VS_MAGIC = 3

NTRAPS = 8
MAXPOTIONS = 14
MAXSCROLLS = 18
MAXWEAPONS = 9
MAXARMORS = 8
MAXRINGS = 14
MAXSTICKS = 14


class Tile(str, Enum):
    """Characters that appear on the map."""

    PASSAGE = "#"
    DOOR = "+"
    FLOOR = "."
    PLAYER = "@"
    TRAP = "^"
    STAIRS = "%"
    GOLD = "*"
    POTION = "!"
    SCROLL = "?"
    MAGIC = "$"
    FOOD = ":"
    WEAPON = ")"
    ARMOR = "]"
    AMULET = ","
    RING = "="
    STICK = "/"


class RoomFlag(IntFlag):
    """State bits of a room."""

    ISDARK = 0o1
    ISGONE = 0o2
    ISMAZE = 0o4


class ObjectFlag(IntFlag):
    """State bits of an object."""

    ISCURSED = 0o1
    ISKNOW = 0o2
    ISMISL = 0o4
    ISMANY = 0o10
    ISFOUND = 0o20
    ISPROT = 0o40


class MonsterFlag(IntFlag):
    """State bits of a creature; some bits mean different things for the hero."""

    CANHUH = 0o1
    CANSEE = 0o2
    ISBLIND = 0o4
    ISCANC = 0o10
    ISLEVIT = 0o10
    ISFOUND = 0o20
    ISGREED = 0o40
    ISHASTE = 0o100
    ISTARGET = 0o200
    ISHELD = 0o400
    ISHUH = 0o1000
    ISINVIS = 0o2000
    ISMEAN = 0o4000
    ISHALU = 0o4000
    ISREGEN = 0o10000
    ISRUN = 0o20000
    SEEMONST = 0o40000
    ISFLY = 0o40000
    ISSLOW = 0o100000


class MapFlag(IntFlag):
    """Bits stored for each square of the level map."""

    PASS = 0x80
    SEEN = 0x40
    DROPPED = 0x20
    LOCKED = 0x20
    REAL = 0x10
    PNUM = 0x0F
    TMASK = 0x07


class Trap(IntEnum):
    DOOR = 0
    ARROW = 1
    SLEEP = 2
    BEAR = 3
    TELEP = 4
    DART = 5
    RUST = 6
    MYST = 7


class Potion(IntEnum):
    CONFUSE = 0
    LSD = 1
    POISON = 2
    STRENGTH = 3
    SEEINVIS = 4
    HEALING = 5
    MFIND = 6
    TFIND = 7
    RAISE = 8
    XHEAL = 9
    HASTE = 10
    RESTORE = 11
    BLIND = 12
    LEVIT = 13


class Scroll(IntEnum):
    CONFUSE = 0
    MAP = 1
    HOLD = 2
    SLEEP = 3
    ARMOR = 4
    ID_POTION = 5
    ID_SCROLL = 6
    ID_WEAPON = 7
    ID_ARMOR = 8
    ID_R_OR_S = 9
    SCARE = 10
    FDET = 11
    TELEP = 12
    ENCH = 13
    CREATE = 14
    REMOVE = 15
    AGGR = 16
    PROTECT = 17


class Weapon(IntEnum):
    """Weapon kinds; FLAME stands for dragon breath and is not a real weapon."""

    MACE = 0
    SWORD = 1
    BOW = 2
    ARROW = 3
    DAGGER = 4
    TWOSWORD = 5
    DART = 6
    SHIRAKEN = 7
    SPEAR = 8
    FLAME = 9


class Armor(IntEnum):
    LEATHER = 0
    RING_MAIL = 1
    STUDDED_LEATHER = 2
    SCALE_MAIL = 3
    CHAIN_MAIL = 4
    SPLINT_MAIL = 5
    BANDED_MAIL = 6
    PLATE_MAIL = 7


class Ring(IntEnum):
    PROTECT = 0
    ADDSTR = 1
    SUSTSTR = 2
    SEARCH = 3
    SEEINVIS = 4
    NOP = 5
    AGGR = 6
    ADDHIT = 7
    ADDDAM = 8
    REGEN = 9
    DIGEST = 10
    TELEPORT = 11
    STEALTH = 12
    SUSTARM = 13


class Stick(IntEnum):
    LIGHT = 0
    INVIS = 1
    ELECT = 2
    FIRE = 3
    COLD = 4
    POLYMORPH = 5
    MISSILE = 6
    HASTE_M = 7
    SLOW_M = 8
    DRAIN = 9
    NOP = 10
    TELAWAY = 11
    TELTO = 12
    CANCEL = 13


def ctrl(c: str | int) -> str | int:
    """Return the control-key form of a key: a character for a character, a code for a code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return chr(ord(c) & 0o37)
    return c & 0o37