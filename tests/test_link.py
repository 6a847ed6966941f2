from __future__ import annotations

import json
import string
from urllib.parse import unquote

from core.config import CompilerExplorerConfig, initialize_config
from core.link import build_link_payload, build_url, create_link_fragment, join_compiler_options

SOURCE = "int main() { return 0; }"


def _config(**overrides) -> CompilerExplorerConfig:
    base = {
        "editorFontScale": 2.0,
        "compilerFontScale": 2.5,
        "intelSyntax": True,
        "trimAsmWhitespace": True,
        "additionalCompilerOptions": "-Wall",
    }
    base.update(overrides)
    return initialize_config(base)


def _decode(fragment: str) -> dict:
    return json.loads(unquote(fragment))


def test_fragment_has_expected_layout() -> None:
    config = _config()
    fragment = create_link_fragment(config, SOURCE, "-O2", "c++", "g142")

    assert "%7B" in fragment
    assert "%7D" in fragment

    payload = _decode(fragment)
    assert payload["version"] == 4
    assert payload["content"][0]["type"] == "row"

    editor, compiler = payload["content"][0]["content"]
    assert editor["componentName"] == "codeEditor"
    assert editor["componentState"] == {
        "id": 1,
        "source": SOURCE,
        "options": {"compileOnChange": True, "colouriseAsm": True},
        "fontScale": 2.0,
        "lang": "c++",
    }
    assert compiler["componentName"] == "compiler"
    assert compiler["componentState"] == {
        "source": 1,
        "filters": {
            "commentOnly": True,
            "directives": True,
            "intel": True,
            "labels": True,
            "trim": True,
        },
        "options": "-O2 -Wall",
        "compiler": "g142",
        "fontScale": 2.5,
    }


def test_filters_follow_config_flags() -> None:
    config = _config(intelSyntax=False, trimAsmWhitespace=False)
    payload = build_link_payload(config, SOURCE, "-O2", "c++", "g142")
    filters = payload["content"][0]["content"][1]["componentState"]["filters"]

    assert filters["intel"] is False
    assert filters["trim"] is False
    assert filters["commentOnly"] is True


def test_per_language_options_pick_the_block_language() -> None:
    config = _config()
    payload = build_link_payload(config, SOURCE, {"c++": "-O2", "rust": "-O3"}, "c++", "g142")
    options = payload["content"][0]["content"][1]["componentState"]["options"]

    assert "-O2" in options
    assert "-O3" not in options


def test_per_language_additional_options() -> None:
    config = _config(additionalCompilerOptions={"c++": "-Wall -Wextra", "rust": "--verbose"})

    assert join_compiler_options(config, "-O2", "c++") == "-O2 -Wall -Wextra"
    assert join_compiler_options(config, "-O2", "rust") == "-O2 --verbose"
    assert join_compiler_options(config, "-O2", "go") == "-O2"


def test_empty_options_leave_only_additional_options() -> None:
    config = _config()

    assert join_compiler_options(config, "", "c++") == "-Wall"


def test_editor_source_is_redacted() -> None:
    config = _config()
    source = "ldp x8, x9, [x0]    ; x8=begin, x9=end\nmvn x10, x8         ; x10 = ~begin"
    payload = build_link_payload(config, source, "-O2", "asm", "clang", ";.*")

    assert payload["content"][0]["content"][0]["componentState"]["source"] == (
        "ldp x8, x9, [x0]    \nmvn x10, x8         "
    )


def test_invalid_remove_pattern_keeps_source_and_logs(logger) -> None:
    fragment = create_link_fragment(_config(), SOURCE, "-O2", "c++", "g142", "([unclosed", logger)

    assert logger.messages
    assert _decode(fragment)["content"][0]["content"][0]["componentState"]["source"] == SOURCE


def test_fragment_only_uses_uri_component_safe_characters() -> None:
    fragment = create_link_fragment(_config(), 'a b/c?d&e#f="g"', "-O2", "c++", "g142")
    allowed = set(string.ascii_letters + string.digits + "-_.!~*'()%")

    assert set(fragment) <= allowed


def test_non_ascii_source_is_utf8_percent_encoded() -> None:
    fragment = create_link_fragment(_config(), "auto π = 3.14;", "-O2", "c++", "g142")

    assert "%CF%80" in fragment


def test_integral_font_scale_serializes_as_integer() -> None:
    config = initialize_config(None)
    text = unquote(create_link_fragment(config, SOURCE, "-O1", "c++", "g142"))

    assert '"fontScale":3}' in text
    assert '"fontScale":2.5,' in text


def test_build_url_joins_base_and_fragment() -> None:
    config = initialize_config({"baseUrl": "https://godbolt.example"})

    assert build_url(config, "abc") == "https://godbolt.example#abc"
