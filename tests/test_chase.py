from dungeoncore.chase import cansee, chase, diag_ok, find_dest, see_monst
from dungeoncore.constants import MapFlag, MonsterFlag, RoomFlag, Scroll
from dungeoncore.level import Coord, Creature, Hero, Item, Level, dist_cp
from dungeoncore.rng import Rng


def _level():
    level = Level()
    for room in level.rooms:
        room.pos = Coord(20, 70)
    a, b = level.rooms[0], level.rooms[1]
    a.pos, a.max = Coord(1, 1), Coord(10, 20)
    b.pos, b.max = Coord(1, 40), Coord(10, 20)
    for y in range(1, 12):
        for x in list(range(1, 22)) + list(range(40, 61)):
            level.set_char(y, x, ".")
    return level


def _put(level, monster):
    level.place(monster.pos.y, monster.pos.x).monster = monster
    level.monsters.insert(0, monster)
    monster.room = level.roomin(monster.pos)
    return monster


def _no_random(monster):
    raise AssertionError("random move not expected")


def test_diag_ok_edges():
    level = _level()
    assert not diag_ok(level, Coord(1, 5), Coord(0, 5))
    assert not diag_ok(level, Coord(5, 0), Coord(5, -1))
    assert diag_ok(level, Coord(5, 5), Coord(5, 6))


def test_diag_ok_corners():
    level = _level()
    assert diag_ok(level, Coord(5, 5), Coord(6, 6))
    level.set_char(6, 5, "|")
    assert diag_ok(level, Coord(5, 5), Coord(6, 6)) is False


def test_see_monst_lit_room_and_blindness():
    level = _level()
    hero = Hero(pos=Coord(2, 2))
    hero.room = level.roomin(hero.pos)
    mon = _put(level, Creature(type="K", pos=Coord(8, 15)))
    assert see_monst(level, hero, mon)
    hero.flags |= MonsterFlag.ISBLIND
    assert not see_monst(level, hero, mon)


def test_see_monst_invisible_and_dark():
    level = _level()
    hero = Hero(pos=Coord(2, 2))
    hero.room = level.roomin(hero.pos)
    mon = _put(level, Creature(type="P", pos=Coord(8, 15), flags=MonsterFlag.ISINVIS))
    assert not see_monst(level, hero, mon)
    hero.flags |= MonsterFlag.CANSEE
    assert see_monst(level, hero, mon)
    level.rooms[0].flags |= RoomFlag.ISDARK
    assert not see_monst(level, hero, mon)


def test_see_monst_other_room():
    level = _level()
    hero = Hero(pos=Coord(2, 2))
    hero.room = level.roomin(hero.pos)
    mon = _put(level, Creature(type="K", pos=Coord(5, 45)))
    assert not see_monst(level, hero, mon)


def test_cansee():
    level = _level()
    hero = Hero(pos=Coord(2, 2))
    hero.room = level.roomin(hero.pos)
    assert cansee(level, hero, 9, 18)
    assert not cansee(level, hero, 5, 45)
    level.rooms[0].flags |= RoomFlag.ISDARK
    assert not cansee(level, hero, 9, 18)
    assert cansee(level, hero, 3, 3)


def test_cansee_passage_corner():
    level = _level()
    hero = Hero(pos=Coord(2, 2))
    hero.room = level.roomin(hero.pos)
    level.place(3, 3).flags = MapFlag.PASS
    level.set_char(2, 3, "-")
    level.set_char(3, 2, "|")
    assert not cansee(level, hero, 3, 3)


def test_chase_steps_straight_toward_goal():
    level = _level()
    hero = Hero(pos=Coord(5, 10))
    mon = _put(level, Creature(type="K", pos=Coord(5, 5)))
    keep, step = chase(level, Rng(1), mon, hero.pos, hero, _no_random)
    assert step == Coord(5, 6)
    assert keep is True


def test_chase_reaches_hero():
    level = _level()
    hero = Hero(pos=Coord(5, 6))
    mon = _put(level, Creature(type="K", pos=Coord(5, 5)))
    keep, step = chase(level, Rng(1), mon, hero.pos, hero, _no_random)
    assert step == hero.pos
    assert keep is False


def test_chase_avoids_scare_scroll():
    level = _level()
    hero = Hero(pos=Coord(5, 10))
    mon = _put(level, Creature(type="K", pos=Coord(5, 5)))
    level.set_char(5, 6, "?")
    level.objects.append(Item(type="?", pos=Coord(5, 6), which=Scroll.SCARE))
    for seed in range(10):
        _, step = chase(level, Rng(seed), mon, hero.pos, hero, _no_random)
        assert step != Coord(5, 6)
        assert step.x == 6
        assert dist_cp(step, hero.pos) < dist_cp(mon.pos, hero.pos)


def test_chase_avoids_xeroc():
    level = _level()
    hero = Hero(pos=Coord(5, 10))
    mon = _put(level, Creature(type="K", pos=Coord(5, 5)))
    _put(level, Creature(type="X", pos=Coord(5, 6), disguise="!"))
    _, step = chase(level, Rng(3), mon, hero.pos, hero, _no_random)
    assert step != Coord(5, 6)
    assert dist_cp(step, hero.pos) < dist_cp(mon.pos, hero.pos)


def test_chase_confused_uses_random_move():
    level = _level()
    hero = Hero(pos=Coord(5, 10))
    target = Coord(4, 4)
    calls = []

    def wander(monster):
        calls.append(monster)
        return target

    for seed in range(30):
        mon = Creature(type="K", pos=Coord(5, 5), flags=MonsterFlag.ISHUH)
        before = len(calls)
        _, step = chase(level, Rng(seed), mon, hero.pos, hero, wander)
        if len(calls) > before:
            assert step == target
        else:
            assert step.x == 6
    assert calls


def test_find_dest_no_carry_goes_for_hero():
    level = _level()
    hero = Hero(pos=Coord(2, 2), flags=MonsterFlag.ISBLIND)
    hero.room = level.roomin(hero.pos)
    mon = _put(level, Creature(type="A", pos=Coord(5, 45)))
    level.objects.append(Item(type="!", pos=Coord(6, 46)))
    assert find_dest(level, Rng(1), mon, hero) is hero.pos


def test_find_dest_dragon_takes_object():
    level = _level()
    hero = Hero(pos=Coord(2, 2), flags=MonsterFlag.ISBLIND)
    hero.room = level.roomin(hero.pos)
    mon = _put(level, Creature(type="D", pos=Coord(5, 45)))
    obj = Item(type="!", pos=Coord(6, 46))
    level.objects.append(obj)
    assert find_dest(level, Rng(1), mon, hero) is obj.pos


def test_find_dest_skips_scare_and_claimed():
    level = _level()
    hero = Hero(pos=Coord(2, 2), flags=MonsterFlag.ISBLIND)
    hero.room = level.roomin(hero.pos)
    mon = _put(level, Creature(type="D", pos=Coord(5, 45)))
    level.objects.append(Item(type="?", pos=Coord(6, 46), which=Scroll.SCARE))
    assert find_dest(level, Rng(1), mon, hero) is hero.pos
    obj = Item(type="!", pos=Coord(7, 47))
    level.objects.append(obj)
    other = _put(level, Creature(type="N", pos=Coord(8, 48)))
    other.dest = obj.pos
    assert find_dest(level, Rng(1), mon, hero) is hero.pos


def test_find_dest_same_room_as_hero():
    level = _level()
    hero = Hero(pos=Coord(2, 42), flags=MonsterFlag.ISBLIND)
    hero.room = level.roomin(hero.pos)
    mon = _put(level, Creature(type="D", pos=Coord(5, 45)))
    level.objects.append(Item(type="!", pos=Coord(6, 46)))
    assert find_dest(level, Rng(1), mon, hero) is hero.pos