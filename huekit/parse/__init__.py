# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""
Text parsing: hex, CSS color functions, named colors and bare triples.
"""

from huekit.parse.grammar import GRAMMARS, parse_color
from huekit.parse.named import (
    NAMED_COLORS,
    NamedColor,
    closest_name,
    lookup_named,
    similar_colors,
)
from huekit.parse.scanner import NoMatch, Scanner, Separator

__all__ = [
    "parse_color",
    "GRAMMARS",
    # Named colors
    "NAMED_COLORS",
    "NamedColor",
    "lookup_named",
    "similar_colors",
    "closest_name",
    # Scanner primitives
    "Scanner",
    "Separator",
    "NoMatch",
]
