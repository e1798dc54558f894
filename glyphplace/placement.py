"""Final placement of written text relative to an anchor point."""

from __future__ import annotations

from typing import Optional, Sequence

from glyphplace.model import (
    HorizontalAlignment,
    PlacedGlyph,
    PlacementLimitError,
    VerticalAlignment,
    WrittenText,
)


def _halve(value: int) -> int:
    """Halve ``value``, truncating toward zero."""
    return -(-value // 2) if value < 0 else value // 2


def _end_line(
    line: Sequence[PlacedGlyph],
    horizontal_alignment: HorizontalAlignment,
    previous_height: int,
    current_height: int,
    previous_spacing: int,
    current_spacing: int,
    width: int,
    first_line: bool,
    banked_lines: int,
) -> int:
    """Settle the glyphs of one finished line and return the height it used."""
    height_lines = banked_lines if first_line else banked_lines - 1
    output = (
        current_height
        + max(previous_spacing, current_spacing) * banked_lines
        + max(previous_height, current_height) * height_lines
    )

    for glyph in line:
        glyph.row += output - glyph.font.line_height

    if horizontal_alignment != HorizontalAlignment.RIGHT:
        shift = (
            _halve(width)
            if horizontal_alignment == HorizontalAlignment.CENTERED
            else width
        )
        for glyph in line:
            glyph.column -= shift

    return output


def place_text(
    written_text: WrittenText,
    vertical_alignment: VerticalAlignment = VerticalAlignment.BELOW,
    horizontal_alignment: HorizontalAlignment = HorizontalAlignment.RIGHT,
    row: int = 0,
    column: int = 0,
    limit: Optional[int] = None,
) -> list[PlacedGlyph]:
    """Compute the final position of every glyph of ``written_text``.

    ``row`` and ``column`` locate the anchor point. ``limit`` caps the number
    of glyphs that may be placed; exceeding it raises PlacementLimitError.
    """
    vertical_alignment = VerticalAlignment(vertical_alignment)
    horizontal_alignment = HorizontalAlignment(horizontal_alignment)

    placed: list[PlacedGlyph] = []
    total_height = 0
    previous_height = 0
    current_height = 0
    previous_spacing = 0
    current_spacing = 0
    width = 0
    previous_code_point_spacing: Optional[int] = None
    line_start = 0
    banked_lines = 0

    for entry in written_text:
        if entry is None:
            if line_start == len(placed):
                banked_lines += 1
                continue
            total_height += _end_line(
                placed[line_start:],
                horizontal_alignment,
                previous_height,
                current_height,
                previous_spacing,
                current_spacing,
                width,
                line_start == 0,
                banked_lines,
            )
            previous_height, current_height = current_height, 0
            previous_spacing, current_spacing = current_spacing, 0
            width = 0
            previous_code_point_spacing = None
            line_start = len(placed)
            banked_lines = 1
            continue

        if limit is not None and len(placed) >= limit:
            raise PlacementLimitError(
                f"text holds more than {limit} placeable glyphs"
            )

        font = entry.font
        if previous_code_point_spacing is not None:
            width += max(font.code_point_spacing, previous_code_point_spacing)

        placed.append(
            PlacedGlyph(
                font=font,
                glyph_index=entry.glyph_index,
                row=total_height + entry.row_offset + row,
                column=width + column,
                opacity=entry.opacity,
                red=entry.red,
                green=entry.green,
                blue=entry.blue,
            )
        )

        previous_code_point_spacing = font.code_point_spacing
        width += entry.width
        current_height = max(current_height, font.line_height)
        current_spacing = max(current_spacing, font.line_spacing)

    _end_line(
        placed[line_start:],
        horizontal_alignment,
        previous_height,
        current_height,
        previous_spacing,
        current_spacing,
        width,
        line_start == 0,
        banked_lines,
    )

    if vertical_alignment != VerticalAlignment.BELOW:
        total_height += (previous_spacing + previous_height) * banked_lines
        if vertical_alignment == VerticalAlignment.CENTERED:
            total_height = _halve(total_height)
        for glyph in placed:
            glyph.row -= total_height

    return placed