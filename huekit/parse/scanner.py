# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Scanner primitives for the color grammar.

A Scanner walks a string left to right. Every primitive either consumes
input and returns a value, or raises NoMatch. A failed rule may leave the
position anywhere; `optional` and `first_of` rewind it, so grammar rules
can be tried one after another.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Callable, Optional, TypeVar

T = TypeVar("T")

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_SPACE0_RE = re.compile(r"[ \t\r\n]*")
_SPACE1_RE = re.compile(r"[ \t\r\n]+")

# Angle units in the order they are tried, with their size in degrees
_ANGLE_UNITS = (
    ("turn", 360.0),
    ("trn", 360.0),
    ("grad", 0.9),
    ("grd", 0.9),
    ("rad", 180.0 / math.pi),
    ("deg", 1.0),
    ("°", 1.0),
)


class NoMatch(Exception):
    """The input does not match the rule at the current position."""


class Separator(Enum):
    """Argument separator of a legacy color function."""

    COMMA = "comma"
    SPACE = "space"


class Scanner:
    """Cursor over the text being parsed."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def __repr__(self) -> str:
        return f"Scanner({self.text!r}, pos={self.pos})"

    def at_end(self) -> bool:
        return self.pos == len(self.text)

    def pattern(self, regex: re.Pattern) -> str:
        m = regex.match(self.text, self.pos)
        if m is None:
            raise NoMatch(regex.pattern)
        self.pos = m.end()
        return m.group()

    def keyword(self, *words: str) -> str:
        """Consume the first of words found here (case-insensitive)."""
        for word in words:
            end = self.pos + len(word)
            if self.text[self.pos:end].lower() == word:
                self.pos = end
                return word
        raise NoMatch(" | ".join(words))

    def char(self, c: str) -> None:
        if not self.text.startswith(c, self.pos):
            raise NoMatch(c)
        self.pos += len(c)

    def optional(self, rule: Callable[..., T], *args) -> Optional[T]:
        """Run rule; on NoMatch rewind and return None."""
        start = self.pos
        try:
            return rule(*args)
        except NoMatch:
            self.pos = start
            return None

    def first_of(self, *rules: Callable[[Scanner], T]) -> T:
        """Result of the first rule that matches, rewinding between tries."""
        start = self.pos
        for rule in rules:
            try:
                return rule(self)
            except NoMatch:
                self.pos = start
        raise NoMatch("no alternative")

    # -------------------------------------------------------------------------
    # Whitespace and separators
    # -------------------------------------------------------------------------

    def space0(self) -> None:
        self.pattern(_SPACE0_RE)

    def space1(self) -> None:
        self.pattern(_SPACE1_RE)

    def comma(self) -> None:
        self.space0()
        self.char(",")
        self.space0()

    def separator(self, kind: Optional[Separator]) -> Separator:
        """
        Consume a legacy separator.

        With kind None either a comma or whitespace is accepted and the kind
        found is returned; otherwise only that kind is accepted.
        """
        if kind is None:
            start = self.pos
            try:
                self.comma()
                return Separator.COMMA
            except NoMatch:
                self.pos = start
            self.space1()
            return Separator.SPACE
        if kind == Separator.COMMA:
            self.comma()
        else:
            self.space1()
        return kind

    # -------------------------------------------------------------------------
    # Numbers
    # -------------------------------------------------------------------------

    def number(self) -> float:
        return float(self.pattern(_NUMBER_RE))

    def percentage(self) -> float:
        """A number followed by "%", as a fraction (50% -> 0.5)."""
        start = self.pos
        value = self.number()
        try:
            self.char("%")
        except NoMatch:
            self.pos = start
            raise
        return value / 100.0

    def number_or_percentage(self, reference: float = 1.0) -> float:
        """A bare number, or a percentage of reference."""
        value = self.number()
        if self.text.startswith("%", self.pos):
            self.pos += 1
            return value * reference / 100.0
        return value

    def angle(self) -> float:
        """A hue in degrees; turn, grad, rad and deg units are converted."""
        value = self.number()
        for unit, degrees in _ANGLE_UNITS:
            if self.text[self.pos:self.pos + len(unit)].lower() == unit:
                self.pos += len(unit)
                return value * degrees
        return value
