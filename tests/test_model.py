import pytest

from glyphplace.model import (
    HorizontalAlignment,
    PlacedGlyph,
    PlacementLimitError,
    TextFont,
    VerticalAlignment,
    WrittenGlyph,
    WrittenText,
)


@pytest.fixture
def font_a():
    return TextFont(
        code_point_spacing=5,
        line_spacing=3,
        line_height=12,
        glyph_widths=[23, 18, 19, 25],
        glyph_code_points=[505255796, 204668171, 358868195, 402862483],
        glyph_row_offsets=[5, -7, 8, 2],
    )


@pytest.mark.parametrize(
    "value, member",
    [
        (0, VerticalAlignment.BELOW),
        (1, VerticalAlignment.CENTERED),
        (2, VerticalAlignment.ABOVE),
    ],
)
def test_vertical_alignment_lookup_by_value(value, member):
    assert VerticalAlignment(value) is member


@pytest.mark.parametrize(
    "value, member",
    [
        (0, HorizontalAlignment.RIGHT),
        (1, HorizontalAlignment.CENTERED),
        (2, HorizontalAlignment.LEFT),
    ],
)
def test_horizontal_alignment_lookup_by_value(value, member):
    assert HorizontalAlignment(value) is member


@pytest.mark.parametrize("enum_type", [VerticalAlignment, HorizontalAlignment])
def test_alignment_rejects_unknown_value(enum_type):
    with pytest.raises(ValueError):
        enum_type(3)


def test_font_tables_become_tuples(font_a):
    assert font_a.glyph_widths == (23, 18, 19, 25)
    assert font_a.glyph_row_offsets == (5, -7, 8, 2)
    assert len(font_a) == 4


def test_font_rejects_mismatched_tables():
    with pytest.raises(ValueError):
        TextFont(1, 1, 1, [1, 2], [10], [0, 0])


def test_fonts_compare_by_identity(font_a):
    twin = TextFont(5, 3, 12, [23, 18, 19, 25],
                    [505255796, 204668171, 358868195, 402862483],
                    [5, -7, 8, 2])
    assert font_a == font_a
    assert font_a != twin


def test_add_glyph_records_all_fields(font_a):
    text = WrittenText()
    glyph = text.add_glyph(font_a, 1, 0.1564262168, 0.0437286089,
                           0.2452098142, 0.4578030974)
    assert list(text) == [glyph]
    assert glyph.font is font_a
    assert glyph.glyph_index == 1
    assert glyph.opacity == 0.1564262168
    assert glyph.red == 0.0437286089
    assert glyph.green == 0.2452098142
    assert glyph.blue == 0.4578030974
    assert glyph.code_point == 204668171
    assert glyph.width == 18
    assert glyph.row_offset == -7


def test_new_lines_appear_as_none_in_order(font_a):
    text = WrittenText()
    text.add_new_line()
    first = text.add_glyph(font_a, 0, 1.0, 1.0, 1.0, 1.0)
    text.add_new_line()
    assert list(text) == [None, first, None]
    assert len(text) == 3


def test_empty_text_has_no_entries():
    text = WrittenText()
    assert len(text) == 0
    assert list(text) == []


@pytest.mark.parametrize("index", [-1, 4, 100])
def test_add_glyph_rejects_out_of_range_index(font_a, index):
    text = WrittenText()
    with pytest.raises(IndexError):
        text.add_glyph(font_a, index, 0.0, 0.0, 0.0, 0.0)
    assert len(text) == 0


def test_written_glyph_is_immutable(font_a):
    glyph = WrittenGlyph(font_a, 2, 0.5, 0.5, 0.5, 0.5)
    with pytest.raises(AttributeError):
        glyph.glyph_index = 3  # type: ignore[misc]
    assert glyph.code_point == 358868195


def test_placed_glyph_is_adjustable(font_a):
    placed = PlacedGlyph(font_a, 3, 1000, -2000, 0.2, 0.3, 0.4, 0.5)
    placed.row -= 10
    placed.column += 5
    assert (placed.row, placed.column) == (990, -1995)
    assert placed.font is font_a


def test_placement_limit_error_keeps_its_message():
    error = PlacementLimitError("too many glyphs")
    assert str(error) == "too many glyphs"
    assert error.args == ("too many glyphs",)