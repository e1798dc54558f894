"""Data types shared by text measurement and placement."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, Optional, Sequence


class VerticalAlignment(IntEnum):
    """Where text sits vertically relative to its anchor."""

    BELOW = 0
    CENTERED = 1
    ABOVE = 2


class HorizontalAlignment(IntEnum):
    """Where text sits horizontally relative to its anchor."""

    RIGHT = 0
    CENTERED = 1
    LEFT = 2


@dataclass(frozen=True, eq=False)
class TextFont:
    """A bitmap font: per-font metrics plus parallel per-glyph tables.

    Fonts compare by identity, so two fonts with equal metrics stay distinct.
    """

    code_point_spacing: int
    line_spacing: int
    line_height: int
    glyph_widths: Sequence[int]
    glyph_code_points: Sequence[int]
    glyph_row_offsets: Sequence[int]

    def __post_init__(self) -> None:
        widths = tuple(self.glyph_widths)
        code_points = tuple(self.glyph_code_points)
        offsets = tuple(self.glyph_row_offsets)
        if not len(widths) == len(code_points) == len(offsets):
            raise ValueError(
                "glyph_widths, glyph_code_points and glyph_row_offsets "
                "must have the same length"
            )
        object.__setattr__(self, "glyph_widths", widths)
        object.__setattr__(self, "glyph_code_points", code_points)
        object.__setattr__(self, "glyph_row_offsets", offsets)

    def __len__(self) -> int:
        return len(self.glyph_widths)


@dataclass(frozen=True)
class WrittenGlyph:
    """One glyph of written text with its font and colour."""

    font: TextFont
    glyph_index: int
    opacity: float
    red: float
    green: float
    blue: float

    @property
    def width(self) -> int:
        return self.font.glyph_widths[self.glyph_index]

    @property
    def row_offset(self) -> int:
        return self.font.glyph_row_offsets[self.glyph_index]

    @property
    def code_point(self) -> int:
        return self.font.glyph_code_points[self.glyph_index]


class WrittenText:
    """A sequence of glyphs and line breaks; line breaks appear as ``None``."""

    def __init__(self) -> None:
        self._entries: list[Optional[WrittenGlyph]] = []

    def add_glyph(
        self,
        font: TextFont,
        glyph_index: int,
        opacity: float,
        red: float,
        green: float,
        blue: float,
    ) -> WrittenGlyph:
        """Append a glyph of ``font`` and return it."""
        if not 0 <= glyph_index < len(font):
            raise IndexError(
                f"glyph index {glyph_index} out of range for a font of "
                f"{len(font)} glyphs"
            )
        glyph = WrittenGlyph(font, glyph_index, opacity, red, green, blue)
        self._entries.append(glyph)
        return glyph

    def add_new_line(self) -> None:
        """Append a line break."""
        self._entries.append(None)

    def __iter__(self) -> Iterator[Optional[WrittenGlyph]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class PlacedGlyph:
    """A glyph with its final position on the output surface."""

    font: TextFont
    glyph_index: int
    row: int
    column: int
    opacity: float
    red: float
    green: float
    blue: float
    _: object = field(default=None, repr=False, compare=False)


class PlacementLimitError(Exception):
    """Raised when text holds more glyphs than placement allows."""