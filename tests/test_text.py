from zedscripts.text import LineIndex, TextRange, slice_text_range


def test_text_range_rejects_inverted_and_negative_ranges() -> None:
    for start, end in ((3, 2), (-1, 2)):
        try:
            TextRange(start, end)
        except ValueError:
            pass
        else:
            raise AssertionError(f"Expected ValueError for TextRange({start}, {end})")


def test_text_range_containment_and_cover() -> None:
    outer = TextRange(2, 10)
    inner = TextRange(4, 6)

    assert outer.contains(2)
    assert not outer.contains(10)
    assert outer.contains_inclusive(10)
    assert outer.contains_range(inner)
    assert not inner.contains_range(outer)
    assert inner.cover(TextRange(8, 12)) == TextRange(4, 12)
    assert TextRange.at(5, 3).as_tuple() == (5, 8)
    assert TextRange.empty(7).is_empty()


def test_slice_text_range_uses_python_string_offsets() -> None:
    source = "module Base {}"
    assert slice_text_range(source, TextRange(7, 11)) == "Base"


def test_line_index_converts_offsets_both_ways() -> None:
    source = "module Base {\r\n    item Axe {\n    }\n}"
    index = LineIndex(source)

    item_offset = source.index("item")
    assert index.line_count == 4
    assert index.position_at(item_offset) == (1, 4)
    assert index.offset_at(1, 4) == item_offset
    assert index.position_at(len(source)) == (3, 1)


def test_line_index_clamps_character_to_line_end() -> None:
    source = "ab\r\ncd\n"
    index = LineIndex(source)

    assert index.offset_at(0, 99) == 2
    assert index.offset_at(1, 99) == 6
    assert index.offset_at(5, 0) == len(source)
    assert index.offset_at(-1, 3) == 0
