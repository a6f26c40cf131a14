from zedscripts.scripts import BlockScanner, mask_comments, scan_blocks


def test_scan_blocks_finds_top_level_blocks_only() -> None:
    source = "module Base {\n    item Axe {\n        Weight = 1,\n    }\n    item Saw {\n    }\n}\n"

    result = scan_blocks(source)

    assert result.unmatched is None
    assert [(match.block_type, match.id) for match in result.matches] == [("module", "Base")]
    module = result.matches[0]
    assert module.header_offset == 0
    assert module.brace_offset == source.index("{")
    assert module.end == source.rindex("}") + 1


def test_scan_blocks_inside_a_body_returns_children_in_source_order() -> None:
    source = "module Base {\n    item Axe {\n        Weight = 1,\n    }\n    item Saw {\n    }\n}\n"
    module = scan_blocks(source).matches[0]

    children = scan_blocks(source, module.range.start, module.range.end - 1)

    assert [(match.block_type, match.id) for match in children.matches] == [("item", "Axe"), ("item", "Saw")]
    first, second = children.matches
    assert module.range.contains_range(first.span)
    assert module.range.contains_range(second.span)
    assert first.end <= second.header_offset
    assert first.header_offset == source.index("item Axe")


def test_header_may_put_brace_on_next_line_and_use_multi_word_ids() -> None:
    source = "recipe Make Spear\n{\n}\nimports\n{\n}\n"

    result = scan_blocks(source)

    assert [(match.block_type, match.id) for match in result.matches] == [
        ("recipe", "Make Spear"),
        ("imports", None),
    ]


def test_headers_must_start_a_line_or_follow_a_brace() -> None:
    source = "module Base {item Axe {} Tags = x {}\n}"
    module = scan_blocks(source).matches[0]

    children = scan_blocks(source, module.range.start, module.range.end - 1)

    assert [match.block_type for match in children.matches] == ["item"]


def test_unterminated_block_is_reported_with_no_matches() -> None:
    result = scan_blocks("ITEM x {")

    assert result.matches == ()
    assert result.unmatched is not None
    assert result.unmatched.block_type == "ITEM"
    assert result.unmatched.id == "x"
    assert result.unmatched.header_offset == 0
    assert result.unmatched.brace_offset == 7


def test_unterminated_block_stops_the_scan_after_earlier_siblings() -> None:
    source = "module A {\n}\nmodule B {\n    item C {\n    }\n"

    result = scan_blocks(source)

    assert [match.id for match in result.matches] == ["A"]
    assert result.unmatched is not None
    assert result.unmatched.header_offset == source.index("module B")


def test_scanner_owns_its_position() -> None:
    source = "a {\n}\nb {\n}\n"
    first = BlockScanner(source)
    second = BlockScanner(source)

    first.scan()

    assert first.position == len(source) - 1
    assert second.position == 0
    assert [match.block_type for match in second.scan().matches] == ["a", "b"]


def test_mask_comments_keeps_offsets_and_line_breaks() -> None:
    source = "/* item Fake {\n*/\nmodule Base { // }\n}\n"

    masked = mask_comments(source)

    assert len(masked) == len(source)
    assert masked.count("\n") == source.count("\n")
    assert "Fake" not in masked
    assert masked.index("module") == source.index("module")


def test_commented_out_blocks_are_only_found_without_masking() -> None:
    source = "/*\nitem Fake {\n*/\nmodule Base {\n}\n"

    masked = scan_blocks(mask_comments(source))
    unmasked = scan_blocks(source)

    assert [match.block_type for match in masked.matches] == ["module"]
    assert masked.unmatched is None
    assert unmasked.matches == ()
    assert unmasked.unmatched is not None
    assert unmasked.unmatched.block_type == "item"


def test_mask_comments_leaves_quoted_strings_alone() -> None:
    source = 'name = "http://example.org", // note\nother = "a /* b",\n}\n'

    masked = mask_comments(source)

    assert '"http://example.org",' in masked
    assert '"a /* b",' in masked
    assert "note" not in masked
    assert masked.endswith("}\n")
