from zedscripts.diagnostics import (
    MISSING_ID,
    UNNECESSARY_COMMA,
    Diagnostic,
    collect_diagnostics,
    emit,
    format_message,
    has_errors,
    join_names,
)
from zedscripts.text import LineIndex, TextRange


def test_format_message_fills_known_and_blanks_unknown_placeholders() -> None:
    message = format_message("'{scriptBlock}' inside '{parentBlock}'", {"scriptBlock": "item"})
    assert message == "'item' inside ''"


def test_emit_uses_spec_severity_unless_overridden() -> None:
    diagnostic = emit(MISSING_ID, {"scriptBlock": "item"}, 4)

    assert diagnostic.code == "missingID"
    assert diagnostic.severity == "error"
    assert diagnostic.message == "'item' block is missing an ID"
    assert diagnostic.range == TextRange(4, 4)

    warning = emit(MISSING_ID, {"scriptBlock": "item"}, 4, 8, severity="warning")
    assert warning.severity == "warning"
    assert warning.range == TextRange(4, 8)


def test_hint_diagnostics_do_not_count_as_errors() -> None:
    hint = emit(UNNECESSARY_COMMA, {}, 0, 1)

    assert hint.severity == "hint"
    assert has_errors([hint]) is False
    assert has_errors(collect_diagnostics([hint], [emit(MISSING_ID, {}, 0)])) is True


def test_join_names_renders_empty_lists_as_none() -> None:
    assert join_names(()) == "none"
    assert join_names(("module", "item")) == "module, item"
    assert join_names(("UI_",), quoted=True) == "'UI_'"


def test_diagnostic_to_dict_adds_line_positions_when_given_an_index() -> None:
    source = "module\nitem {\n"
    diagnostic = Diagnostic(code="missingID", message="m", range=TextRange(7, 11))

    plain = diagnostic.to_dict()
    positioned = diagnostic.to_dict(LineIndex(source))

    assert plain == {
        "range": {"startOffset": 7, "endOffset": 11},
        "message": "m",
        "severity": "error",
        "code": "missingID",
    }
    assert positioned["range"]["start"] == {"line": 1, "character": 0}
    assert positioned["range"]["end"] == {"line": 1, "character": 4}
