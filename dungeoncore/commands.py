"""Command-key handling: repeat counts, key names, help and identification texts."""

from __future__ import annotations

from typing import Iterable, Optional

from .constants import ESCAPE, Tile, ctrl
from .data import HELP, HelpEntry, monster_info

MAX_COUNT = 255

_REPEATABLE = frozenset(
    [ctrl(c) for c in "BHJKLNUY"]
    + list(".abhjklmnqrstuyzBCHIJKLNUY")
)

_WALL = "wall of a room"

IDENT_LIST: tuple[tuple[str, str], ...] = (
    ("|", _WALL),
    ("-", _WALL),
    (Tile.GOLD.value, "gold"),
    (Tile.STAIRS.value, "a staircase"),
    (Tile.DOOR.value, "door"),
    (Tile.FLOOR.value, "room floor"),
    (Tile.PLAYER.value, "you"),
    (Tile.PASSAGE.value, "passage"),
    (Tile.TRAP.value, "trap"),
    (Tile.POTION.value, "potion"),
    (Tile.SCROLL.value, "scroll"),
    (Tile.FOOD.value, "food"),
    (Tile.WEAPON.value, "weapon"),
    (" ", "solid rock"),
    (Tile.ARMOR.value, "armor"),
    (Tile.AMULET.value, "the Amulet of Yendor"),
    (Tile.RING.value, "ring"),
    (Tile.STICK.value, "wand or staff"),
)
_IDENT = dict(IDENT_LIST)


def _code(ch: str | int) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    return ch


def unctrl(ch: str | int) -> str:
    """Return a printable name for a key: "^X" for control keys, "^?" for delete."""
    code = _code(ch)
    if code < 0:
        raise ValueError(f"negative key code {code}")
    if code < 32:
        return "^" + chr(code + 64)
    if code == 127:
        return "^?"
    if 128 <= code < 256:
        return "M-" + unctrl(code - 128)
    return chr(code)


def is_repeatable(ch: str) -> bool:
    """Return True if a repeat count makes sense for the command key `ch`."""
    return ch in _REPEATABLE


def parse_count(keys: Iterable[str]) -> tuple[int, str]:
    """Read an optional repeat count and the command that follows it.

    The count stops growing at 255 and is dropped for commands that are not
    worth repeating. Raises ValueError if the keys run out before a command.
    """
    it = iter(keys)
    count = 0
    seen_digit = False
    for ch in it:
        if ch.isascii() and ch.isdigit():
            seen_digit = True
            count = min(count * 10 + int(ch), MAX_COUNT)
            continue
        if seen_digit and not is_repeatable(ch):
            count = 0
        return count, ch
    raise ValueError("no command after the count")


def help_text(ch: str) -> str:
    """Return the help line for one command key, or a complaint for an unknown key."""
    _code(ch)
    for entry in HELP:
        if entry.key == ch:
            return unctrl(ch) + entry.description
    return f"unknown character '{unctrl(ch)}'"


def help_columns(entries: Iterable[HelpEntry], lines: int) -> list[tuple[str, str]]:
    """Lay out the printed help entries in two columns fitting `lines` screen lines.

    Returns one (left, right) pair per row; the last line stays free for the prompt.
    """
    if lines < 2:
        raise ValueError("at least two lines are needed for the help screen")
    printed = [e for e in entries if e.printed]
    numprint = (len(printed) + 1) // 2
    numprint = min(numprint, lines - 1)
    if numprint == 0:
        return []
    rows = [["", ""] for _ in range(numprint)]
    for cnt, entry in enumerate(printed[: numprint * 2]):
        text = (unctrl(entry.key) if entry.key else "") + entry.description
        rows[cnt % numprint][1 if cnt >= numprint else 0] = text
    return [(left, right) for left, right in rows]


def identify(ch: str) -> Optional[str]:
    """Say what a map character stands for; None if the player pressed escape."""
    code = _code(ch)
    if code == ESCAPE:
        return None
    if "A" <= ch <= "Z":
        what = monster_info(ch).name
    else:
        what = _IDENT.get(ch, "unknown character")
    return f"'{unctrl(ch)}': {what}"


def describe_current(
    item_name: Optional[str],
    how: str,
    where: Optional[str] = None,
    terse: bool = False,
) -> str:
    """Describe the weapon, armor or ring in use.

    `item_name` is the item with its pack letter, such as "a) a +1 mace", or
    None when nothing is in use.
    """
    text = ""
    if item_name is not None:
        if not terse:
            text += f"you are {how} ("
        text += item_name
    else:
        if not terse:
            text += "you are "
        text += f"{how} nothing"
    if where:
        text += f" {where}"
    return text