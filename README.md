# glyphplace

Lay out text made of glyphs from one or more bitmap-style fonts. You describe
each font's metrics and write glyphs and line breaks into a `WrittenText`.
The package can then do two things with it:

- measure its total height
- compute a row and a column for every glyph, relative to an anchor point,
  with vertical and horizontal alignment

## Installing

```
pip install .
```

To run the test suite, install the `test` extra and run pytest:

```
pip install .[test]
pytest
```

## Concepts

All types live in `glyphplace.model`.

- `TextFont` holds a font's metrics:
  - `code_point_spacing`, `line_spacing` and `line_height`
  - for each glyph, in parallel sequences: `glyph_widths`,
    `glyph_code_points` and `glyph_row_offsets`. The three must be the same
    length, or a `ValueError` is raised. They are stored as tuples.
  - `len(font)` is the number of glyphs.
  - Fonts compare by identity, so two fonts with the same metrics are still
    distinct.
- `WrittenText` is an ordered sequence of written glyphs and line breaks.
  - `add_glyph(font, glyph_index, opacity, red, green, blue)` appends a glyph
    and returns the `WrittenGlyph` it made. A glyph index outside the font
    raises `IndexError`.
  - `add_new_line()` appends a line break.
  - Iterating over it yields `WrittenGlyph` entries, and `None` for each line
    break. `len()` counts both.
- `WrittenGlyph` has `font`, `glyph_index`, `opacity`, `red`, `green` and
  `blue`. It also has the properties `width`, `row_offset` and `code_point`,
  which it looks up in its font.
- `PlacedGlyph` has `font`, `glyph_index`, `row`, `column`, `opacity`, `red`,
  `green` and `blue`.

## Measuring

`glyphplace.measure.measure_text_height(written_text)` returns the height of
the text in rows.

- Each line is as tall as the tallest `line_height` of the fonts on it.
- Lines are separated by the larger `line_spacing` of the two neighbouring
  lines.
- Blank lines count towards the height, and so do leading and trailing line
  breaks.

## Placing

```
glyphplace.placement.place_text(
    written_text,
    vertical_alignment=VerticalAlignment.BELOW,
    horizontal_alignment=HorizontalAlignment.RIGHT,
    row=0,
    column=0,
    limit=None,
)
```

It returns a list of `PlacedGlyph`, one for each glyph in the text, in order.
Line breaks produce no entries.

- `row` and `column` locate the anchor point.
- Between two neighbouring glyphs on a line the gap is the larger
  `code_point_spacing` of their two fonts.
- Each glyph's row takes in its font's row offset, and glyphs are lined up at
  the bottom of their line.
- `limit` caps the number of glyphs that may be placed. If the text holds
  more, `PlacementLimitError` is raised. With `None` there is no cap.
- Both alignments accept the enum members or their integer values; any other
  value raises `ValueError`.

### Alignment

- `VerticalAlignment`: `BELOW` (0, the text hangs below the anchor),
  `CENTERED` (1) or `ABOVE` (2).
- `HorizontalAlignment`: `RIGHT` (0, each line starts at the anchor),
  `CENTERED` (1) or `LEFT` (2, each line ends at the anchor).

When centring, half the height or width is taken with the fraction dropped.

## Example

```python
from glyphplace.model import (
    HorizontalAlignment,
    TextFont,
    VerticalAlignment,
    WrittenText,
)
from glyphplace.measure import measure_text_height
from glyphplace.placement import place_text

font = TextFont(
    code_point_spacing=5,
    line_spacing=3,
    line_height=12,
    glyph_widths=(23, 18),
    glyph_code_points=(65, 66),
    glyph_row_offsets=(5, -7),
)

text = WrittenText()
text.add_glyph(font, 0, 1.0, 1.0, 1.0, 1.0)
text.add_new_line()
text.add_glyph(font, 1, 1.0, 0.5, 0.5, 0.5)

height = measure_text_height(text)
glyphs = place_text(
    text,
    VerticalAlignment.CENTERED,
    HorizontalAlignment.CENTERED,
    row=100,
    column=200,
    limit=64,
)
for glyph in glyphs:
    print(glyph.glyph_index, glyph.row, glyph.column)
```

## What it does not do

- It does not look up glyphs by code point or turn numbers into glyphs. You
  pass glyph indices to `WrittenText.add_glyph` yourself.
- It does not wrap long lines. Line breaks are only where you add them.
- It does not load fonts from files and does not draw anything. It only
  computes heights and positions.