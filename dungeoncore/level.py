"""The level map, the rooms and passages on it, and the creatures and items that fill it."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from .constants import MAXCOLS, MAXLINES, MAXPASS, MAXROOMS, MapFlag, MonsterFlag, ObjectFlag, RoomFlag, Tile
from .data import INITIAL_STATS, Stats


@dataclass
class Coord:
    """A position on the map: row `y`, column `x`."""

    y: int = 0
    x: int = 0


@dataclass(eq=False)
class Room:
    """A room, or a passage treated as a room that is gone and dark."""

    pos: Coord = field(default_factory=Coord)
    max: Coord = field(default_factory=Coord)
    gold: Coord = field(default_factory=Coord)
    goldval: int = 0
    flags: RoomFlag = RoomFlag(0)
    exits: list[Coord] = field(default_factory=list)


@dataclass(eq=False)
class Place:
    """One square of the map: what is drawn there, its flag bits and any monster on it."""

    ch: str = " "
    flags: MapFlag = MapFlag(0)
    monster: Optional[Creature] = None


@dataclass(eq=False)
class Item:
    """An object lying on the level or carried in a pack."""

    type: str
    pos: Coord = field(default_factory=Coord)
    which: int = 0
    count: int = 1
    text: Optional[str] = None
    launch: int = -1
    packch: str = ""
    damage: str = "0x0"
    hurldmg: str = "0x0"
    hplus: int = 0
    dplus: int = 0
    arm: int = 0
    flags: ObjectFlag = ObjectFlag(0)
    group: int = 0
    label: Optional[str] = None


@dataclass(eq=False)
class Creature:
    """A monster; the hero is a creature too."""

    type: str = "A"
    pos: Coord = field(default_factory=Coord)
    turn: bool = False
    disguise: str = ""
    oldch: str = " "
    dest: Optional[Coord] = None
    flags: MonsterFlag = MonsterFlag(0)
    stats: Optional[Stats] = None
    room: Optional[Room] = None
    pack: list[Item] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.disguise:
            self.disguise = self.type


@dataclass(eq=False)
class Hero(Creature):
    """The player's own creature, starting with the initial statistics."""

    type: str = Tile.PLAYER.value
    stats: Optional[Stats] = field(default_factory=lambda: replace(INITIAL_STATS))


def _plain(ch: str) -> str:
    if isinstance(ch, Enum):
        ch = ch.value
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


class Level:
    """The map of one dungeon level with its rooms, passages, objects and monsters."""

    def __init__(self) -> None:
        self.places = [Place() for _ in range(MAXLINES * MAXCOLS)]
        self.rooms = [Room() for _ in range(MAXROOMS)]
        self.passages = [Room(flags=RoomFlag.ISGONE | RoomFlag.ISDARK) for _ in range(MAXPASS)]
        self.objects: list[Item] = []
        self.monsters: list[Creature] = []

    def place(self, y: int, x: int) -> Place:
        """Return the square at row `y`, column `x`."""
        if not (0 <= y < MAXLINES and 0 <= x < MAXCOLS):
            raise IndexError(f"position ({y}, {x}) is off the map")
        return self.places[x * MAXLINES + y]

    def char_at(self, y: int, x: int) -> str:
        """Return the map character of a square, ignoring monsters."""
        return self.place(y, x).ch

    def set_char(self, y: int, x: int, ch: str) -> None:
        """Set the map character of a square."""
        self.place(y, x).ch = _plain(ch)

    def monster_at(self, y: int, x: int) -> Optional[Creature]:
        """Return the monster on a square, or None."""
        return self.place(y, x).monster

    def winat(self, y: int, x: int) -> str:
        """Return what is seen on a square: a monster's disguise, else the map character."""
        square = self.place(y, x)
        return square.monster.disguise if square.monster is not None else square.ch

    def roomin(self, cp: Coord) -> Optional[Room]:
        """Return the passage or room holding `cp`, or None if it is in neither."""
        flags = self.place(cp.y, cp.x).flags
        if flags & MapFlag.PASS:
            return self.passages[flags & MapFlag.PNUM]
        for room in self.rooms:
            if (
                room.pos.x <= cp.x <= room.pos.x + room.max.x
                and room.pos.y <= cp.y <= room.pos.y + room.max.y
            ):
                return room
        return None


def dist(y1: int, x1: int, y2: int, x2: int) -> int:
    """Return the squared distance between two points."""
    return (x2 - x1) * (x2 - x1) + (y2 - y1) * (y2 - y1)


def dist_cp(c1: Coord, c2: Coord) -> int:
    """Return the squared distance between two coordinates."""
    return dist(c1.y, c1.x, c2.y, c2.x)