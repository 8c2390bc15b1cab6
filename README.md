# dungeoncore

The rules behind a classic turn-based dungeon crawl, as a plain Python
library with no third-party dependencies.

## What is in it

- `dungeoncore.rng` – `Rng`, the game's deterministic linear congruential
  generator: `next()`, `rnd(limit)` and `roll(number, sides)`.
- `dungeoncore.constants` – map characters (`Tile`), flag bits
  (`MonsterFlag`, `ObjectFlag`, `RoomFlag`, `MapFlag`), item kinds
  (`Trap`, `Potion`, `Scroll`, `Weapon`, `Armor`, `Ring`, `Stick`), the
  screen and game limits, and `ctrl()` for control keys.
- `dungeoncore.data` – the monster, item, trap, armor-class and help
  tables: `monster_info`, `trap_name`, `armor_class`, and
  `fresh_info_tables()` for independent copies of the item tables.
- `dungeoncore.daemon` – `Scheduler`, a fixed set of slots holding daemons
  that run every turn and fuses that go off after a number of turns;
  `SchedulerFull` is raised when no slot is free.
- `dungeoncore.names` – per-game shuffles: potion colours
  (`init_colors`), scroll titles (`init_names`), ring stones
  (`init_stones`), wand and staff materials (`init_materials`), plus
  `sumprobs` / `init_probs` to turn item probabilities into running
  totals and `pick_color` for hallucinated colours.
- `dungeoncore.messages` – `MessageLine`, the top-line message buffer
  with its `--More--` pause, driven by a key-reading and a display
  callback; `status_line` formats the bottom status line; `step_ok`
  says whether a square can be stepped on.
- `dungeoncore.level` – `Level` (the map with its rooms, passages,
  objects and monsters), `Coord`, `Room`, `Place`, `Item`, `Creature`,
  `Hero`, and the squared distances `dist` and `dist_cp`.
- `dungeoncore.chase` – `chase` picks the square a monster steps to,
  `find_dest` picks what it runs after, and `diag_ok`, `see_monst` and
  `cansee` answer movement and visibility questions.
- `dungeoncore.fight` – strength bonuses (`str_plus`, `add_dam`),
  `swing`, `roll_em` for damage strings such as `"1x8/2x6"`,
  `defender_armor`, and the hit, miss, thunk and bounce messages.
- `dungeoncore.daemons` – `doctor` (healing while resting), `stomach`
  (digestion, raising `Starved`), `PlayerVitals`, `Hunger` and
  `WanderRoller` for wandering-monster rolls.
- `dungeoncore.commands` – repeat counts (`parse_count`,
  `is_repeatable`), key names (`unctrl`), help lines (`help_text`,
  `help_columns`), `identify` and `describe_current`.
- `dungeoncore.scores` – `open_score` opens or creates the score file,
  `ScoreLock` guards it with a lock file (breaking stale locks, raising
  `ScoreLockBusy`), and `is_symlink` checks the path.

## Examples

```python
from dungeoncore.rng import Rng
from dungeoncore.data import monster_info, trap_name

rng = Rng(12345)
damage = rng.roll(1, 8)            # one eight-sided die
print(monster_info("D").name)      # "dragon"
print(trap_name(0))                # "a trapdoor"
```

Timed effects:

```python
from dungeoncore.daemon import Scheduler, Phase

def wake_up(arg):
    print("you can move again")

scheduler = Scheduler(20)
scheduler.fuse(wake_up, 0, 3, Phase.AFTER)
for _ in range(3):
    scheduler.do_fuses(Phase.AFTER)   # prints on the third turn
```

Commands:

```python
from dungeoncore.commands import parse_count, identify

parse_count("12s")     # (12, "s")
identify("D")          # "'D': dragon"
```

The same seed always gives the same sequence of decisions, so games and
tests are reproducible.

## What it does not do

This is a library of rules, not a playable game. It has no terminal
screen, no command to start a game, no main loop that reads keys and
dispatches commands, no level generator, no inventory handling, and no
saving or restoring of games. The score support stops at opening the
score file and locking it; reading, ranking and writing scores is left to
the caller.