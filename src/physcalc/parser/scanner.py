"""Position-tracking cursor shared by the parser layers."""

from __future__ import annotations

import re
from typing import Optional

from ..errors import ParseError

_WHITESPACE_RE = re.compile(r"\s+")


class Scanner:
    """Cursor over ``text`` that matches anchored regular expressions.

    Every parser layer (unit, number, expression) advances the same scanner,
    so error positions are always reported against the original input.
    """

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        if self.at_end():
            return ""
        return self.text[self.pos]

    def remainder(self) -> str:
        return self.text[self.pos :]

    def match(self, pattern: re.Pattern[str]) -> Optional[re.Match[str]]:
        """Match ``pattern`` at the cursor and advance past it on success."""
        found = pattern.match(self.text, self.pos)
        if found is not None:
            self.pos = found.end()
        return found

    def check(self, pattern: re.Pattern[str]) -> bool:
        """Return whether ``pattern`` matches at the cursor without advancing."""
        return pattern.match(self.text, self.pos) is not None

    def skip_whitespace(self) -> int:
        found = self.match(_WHITESPACE_RE)
        return 0 if found is None else found.end() - found.start()

    def accept(self, char: str) -> bool:
        if self.peek() == char:
            self.pos += 1
            return True
        return False

    def expect(self, char: str) -> None:
        if not self.accept(char):
            found = self.peek()
            what = f"'{found}'" if found else "end of input"
            raise self.error(f"Expected '{char}' but found {what}")

    def error(self, detail: str, position: Optional[int] = None) -> ParseError:
        return ParseError(detail, self.text, self.pos if position is None else position)


__all__ = ["Scanner"]
