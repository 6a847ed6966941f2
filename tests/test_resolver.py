from __future__ import annotations

from core.config import PerLanguage, Scalar
from core.resolver import resolve


def test_scalar_applies_to_every_language() -> None:
    assert resolve(Scalar("X"), "c++") == "X"
    assert resolve(Scalar("X"), "rust") == "X"
    assert resolve("X", "anything") == "X"


def test_mapping_entry_for_language() -> None:
    assert resolve(PerLanguage({"a": "1"}), "a") == "1"
    assert resolve({"a": "1"}, "a") == "1"


def test_missing_mapping_entry_uses_default() -> None:
    assert resolve(PerLanguage({"a": "1"}), "b", "D") == "D"
    assert resolve({"a": "1"}, "b") == ""


def test_falsy_mapping_entry_uses_default() -> None:
    assert resolve({"a": ""}, "a", "D") == "D"


def test_absent_value_uses_default() -> None:
    assert resolve(None, "a", "D") == "D"
    assert resolve(None, "a") == ""


def test_non_string_scalar_uses_default() -> None:
    assert resolve(Scalar(142), "c++", "D") == "D"
    assert resolve(142, "c++") == ""
