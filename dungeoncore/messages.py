"""The message line at the top of the screen, and the status line at the bottom."""

from __future__ import annotations

from typing import Callable

from .constants import ESCAPE, NUMCOLS

MORE = "--More--"
_ESC = chr(ESCAPE)

HUNGER_NAMES: tuple[str, ...] = ("", "Hungry", "Weak", "Faint")


class MessageLine:
    """Collects message text and shows it, pausing with --More-- before replacing a message."""

    def __init__(
        self,
        read_key: Callable[[], str],
        display: Callable[[str], None],
        width: int = NUMCOLS,
    ) -> None:
        self.read_key = read_key
        self.display = display
        self.max_len = width - len(MORE) - 1
        self.save_msg = True
        self.lower_msg = False
        self.msg_esc = False
        self.last = ""
        self.line = ""
        self.mpos = 0
        self._buf = ""
        self._newpos = 0

    def _wait_for(self, key: str) -> None:
        while self.read_key() != key:
            pass

    def clear(self) -> None:
        """Blank the message line."""
        self.line = ""
        self.display("")
        self.mpos = 0

    def addmsg(self, fmt: str, *args: object) -> None:
        """Append text to the pending message."""
        text = fmt % args if args else fmt
        if len(text) + self._newpos >= self.max_len:
            self.endmsg()
        self._buf += text
        self._newpos = len(self._buf)

    def msg(self, fmt: str, *args: object) -> bool:
        """Add text and show the message; an empty format just clears the line."""
        if fmt == "":
            self.clear()
            return True
        self.addmsg(fmt, *args)
        return self.endmsg()

    def endmsg(self) -> bool:
        """Show the pending message; return False if the player escaped at --More--."""
        if self.save_msg:
            self.last = self._buf
        if self.mpos:
            self.display(self.line[: self.mpos] + MORE)
            if not self.msg_esc:
                self._wait_for(" ")
            else:
                while (ch := self.read_key()) != " ":
                    if ch == _ESC:
                        self._buf = ""
                        self.mpos = 0
                        self._newpos = 0
                        return False
        text = self._buf
        first = text[:1]
        if first.isascii() and first.islower() and not self.lower_msg and text[1:2] != ")":
            text = first.upper() + text[1:]
        self.line = text
        self.display(text)
        self.mpos = self._newpos
        self._newpos = 0
        self._buf = ""
        return True


def step_ok(ch: str) -> bool:
    """Return True if a creature may step onto a square showing `ch`."""
    if ch in (" ", "|", "-"):
        return False
    return not (ch.isascii() and ch.isalpha())


def status_line(
    level: int,
    purse: int,
    hp: int,
    max_hp: int,
    strength: int,
    max_strength: int,
    armor: int,
    exp_level: int,
    exp: int,
    hunger: int,
) -> str:
    """Format the status line; `armor` is the armor class, shown as 10 minus it."""
    if not 0 <= hunger < len(HUNGER_NAMES):
        raise ValueError(f"unknown hunger state {hunger}")
    width = len(str(abs(max_hp))) if max_hp else 0
    return "Level: %d  Gold: %-5d  Hp: %*d(%*d)  Str: %2d(%d)  Arm: %-2d  Exp: %d/%d  %s" % (
        level, purse, width, hp, width, max_hp, strength, max_strength,
        10 - armor, exp_level, exp, HUNGER_NAMES[hunger],
    )