# Copyright (c) 2026 Huekit
# SPDX-License-Identifier: MIT

"""Exceptions raised by the raising entry points of huekit.

The core conversion and parsing paths are total: they never raise on
degenerate numbers and ``parse_color`` reports failure with ``None``.
These types are for the callers that want an exception instead.
"""


class HuekitError(Exception):
    """Base class for all huekit errors."""


class ColorParseError(HuekitError, ValueError):
    """Text could not be read as a color by any supported notation."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Could not parse color: {text!r}")
        self.text = text


class UnknownColorSpaceError(HuekitError, KeyError):
    """A color space name is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown color space: {self.name!r}"
