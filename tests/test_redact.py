from __future__ import annotations

from core.redact import redact


def test_empty_or_missing_pattern_is_noop(logger) -> None:

    assert redact("int x; // note", "", logger) == "int x; // note"
    assert redact("int x; // note", None, logger) == "int x; // note"
    assert logger.calls == []


def test_removes_matches_but_keeps_newlines() -> None:
    assert redact("ldp x8\n; comment", ";.*") == "ldp x8\n"


def test_removes_every_occurrence() -> None:
    source = "ldp x8, x9, [x0]    ; x8=begin, x9=end\nmvn x10, x8         ; x10 = ~begin"

    assert redact(source, ";.*") == "ldp x8, x9, [x0]    \nmvn x10, x8         "


def test_invalid_pattern_returns_text_and_logs_once(logger) -> None:

    assert redact("int main() { return 0; }", "([unclosed", logger) == "int main() { return 0; }"
    assert len(logger.calls) == 1
    assert "([unclosed" in logger.calls[0][0]
