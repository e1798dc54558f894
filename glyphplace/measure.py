"""Height measurement of written text."""

from __future__ import annotations

from glyphplace.model import WrittenText


def measure_text_height(written_text: WrittenText) -> int:
    """Return the height of ``written_text``, counting blank and trailing lines."""
    total_height = 0
    previous_height = 0
    current_height = 0
    previous_spacing = 0
    current_spacing = 0
    banked_lines = 0
    written_on_line = False
    first_line = True

    for entry in written_text:
        if entry is None:
            if written_on_line:
                total_height += banked_lines * max(previous_spacing, current_spacing)
                total_height += (banked_lines - (0 if first_line else 1)) * max(
                    previous_height, current_height
                )
                total_height += current_height
                previous_height, current_height = current_height, 0
                previous_spacing, current_spacing = current_spacing, 0
                banked_lines = 1
                written_on_line = False
                first_line = False
            else:
                banked_lines += 1
        else:
            written_on_line = True
            current_height = max(current_height, entry.font.line_height)
            current_spacing = max(current_spacing, entry.font.line_spacing)

    if banked_lines > 0:
        if written_on_line:
            total_height += banked_lines * max(previous_spacing, current_spacing)
            total_height += (banked_lines - (0 if first_line else 1)) * max(
                previous_height, current_height
            )
            total_height += current_height
        else:
            total_height += banked_lines * previous_spacing
            total_height += banked_lines * previous_height
    else:
        total_height += current_height

    return total_height