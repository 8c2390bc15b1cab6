"""How monsters chase their goals and what the hero can see."""

from __future__ import annotations

from typing import Callable, Optional

from .constants import LAMPDIST, NUMCOLS, NUMLINES, MapFlag, MonsterFlag, RoomFlag, Scroll, Tile
from .data import monster_info
from .level import Coord, Creature, Hero, Level, dist, dist_cp
from .messages import step_ok
from .rng import Rng


def diag_ok(level: Level, sp: Coord, ep: Coord) -> bool:
    """Return True if moving from `sp` to `ep` is legal, checking diagonal corners."""
    if ep.x < 0 or ep.x >= NUMCOLS or ep.y <= 0 or ep.y >= NUMLINES - 1:
        return False
    if ep.x == sp.x or ep.y == sp.y:
        return True
    return step_ok(level.char_at(ep.y, sp.x)) and step_ok(level.char_at(sp.y, ep.x))


def _corner_blocked(level: Level, hero: Hero, y: int, x: int) -> bool:
    return (
        y != hero.pos.y
        and x != hero.pos.x
        and not step_ok(level.char_at(y, hero.pos.x))
        and not step_ok(level.char_at(hero.pos.y, x))
    )


def see_monst(level: Level, hero: Hero, monster: Creature) -> bool:
    """Return True if the hero can see the monster."""
    if hero.flags & MonsterFlag.ISBLIND:
        return False
    if monster.flags & MonsterFlag.ISINVIS and not hero.flags & MonsterFlag.CANSEE:
        return False
    y, x = monster.pos.y, monster.pos.x
    if dist(y, x, hero.pos.y, hero.pos.x) < LAMPDIST:
        return not _corner_blocked(level, hero, y, x)
    if monster.room is not hero.room or monster.room is None:
        return False
    return not monster.room.flags & RoomFlag.ISDARK


def cansee(level: Level, hero: Hero, y: int, x: int) -> bool:
    """Return True if the hero can see the square at row `y`, column `x`."""
    if hero.flags & MonsterFlag.ISBLIND:
        return False
    if dist(y, x, hero.pos.y, hero.pos.x) < LAMPDIST:
        if level.place(y, x).flags & MapFlag.PASS and _corner_blocked(level, hero, y, x):
            return False
        return True
    room = level.roomin(Coord(y, x))
    return room is not None and room is hero.room and not room.flags & RoomFlag.ISDARK


def _acts_randomly(rng: Rng, monster: Creature) -> bool:
    if monster.flags & MonsterFlag.ISHUH and rng.rnd(5) != 0:
        return True
    if monster.type == "P" and rng.rnd(5) == 0:
        return True
    return monster.type == "B" and rng.rnd(2) == 0


def _scare_scroll_at(level: Level, y: int, x: int) -> bool:
    here = Coord(y, x)
    obj = next((o for o in level.objects if o.pos == here), None)
    return obj is not None and obj.which == Scroll.SCARE


def chase(
    level: Level,
    rng: Rng,
    monster: Creature,
    goal: Coord,
    hero: Hero,
    random_move: Callable[[Creature], Coord],
) -> tuple[bool, Coord]:
    """Find where the monster steps to get closer to `goal`.

    Returns whether it should keep chasing afterwards, and the square to move to.
    Confused monsters, phantoms and bats sometimes take `random_move(monster)` instead.
    """
    if _acts_randomly(rng, monster):
        step = random_move(monster)
        best = Coord(step.y, step.x)
        curdist = dist_cp(best, goal)
        if rng.rnd(20) == 0:
            monster.flags &= ~MonsterFlag.ISHUH
    else:
        er = monster.pos
        curdist = dist_cp(er, goal)
        best = Coord(er.y, er.x)
        ey = min(er.y + 1, NUMLINES - 2)
        ex = min(er.x + 1, NUMCOLS - 1)
        plcnt = 1
        for x in range(er.x - 1, ex + 1):
            if x < 0:
                continue
            for y in range(er.y - 1, ey + 1):
                tryp = Coord(y, x)
                if not diag_ok(level, er, tryp):
                    continue
                ch = level.winat(y, x)
                if not step_ok(ch):
                    continue
                if ch == Tile.SCROLL.value and _scare_scroll_at(level, y, x):
                    continue
                occupant = level.monster_at(y, x)
                if occupant is not None and occupant.type == "X":
                    continue
                thisdist = dist(y, x, goal.y, goal.x)
                if thisdist < curdist:
                    plcnt = 1
                    best = tryp
                    curdist = thisdist
                elif thisdist == curdist:
                    plcnt += 1
                    if rng.rnd(plcnt) == 0:
                        best = tryp
                        curdist = thisdist
    return curdist != 0 and best != hero.pos, best


def find_dest(level: Level, rng: Rng, monster: Creature, hero: Hero) -> Coord:
    """Choose what the monster runs after: an unclaimed object in its room, or the hero."""
    prob = monster_info(monster.type).carry
    if prob <= 0 or monster.room is hero.room or see_monst(level, hero, monster):
        return hero.pos
    for obj in level.objects:
        if obj.type == Tile.SCROLL.value and obj.which == Scroll.SCARE:
            continue
        if level.roomin(obj.pos) is monster.room and rng.rnd(100) < prob:
            if not any(other.dest is obj.pos for other in level.monsters):
                return obj.pos
    return hero.pos