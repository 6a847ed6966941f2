"""Per-language config value resolution (core domain)."""

from __future__ import annotations

from typing import Any

from core.config import PerLanguage, Scalar, as_config_value


def resolve(value: Any, language: str, default: str = "") -> Any:
    """Resolve a setting that is either shared by all languages or keyed by language.

    String scalars are returned unchanged; any other scalar (such as a bare
    number) resolves to ``default``, as a host would only ever treat a string
    as an all-languages value. A per-language mapping yields the entry
    for ``language`` when it is present and truthy, otherwise ``default``.
    Absent values resolve to ``default``. Raw strings and dicts are accepted
    too and wrapped the same way the settings loader wraps them.
    """

    value = as_config_value(value)
    if isinstance(value, Scalar):
        return value.value if isinstance(value.value, str) else default
    if isinstance(value, PerLanguage):
        return value.values.get(language) or default
    return default
