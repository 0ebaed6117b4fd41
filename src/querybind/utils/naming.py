"""Identifier naming-convention helpers."""

from __future__ import annotations

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def camel_to_snake(name: str) -> str:
    """Convert a CamelCase or mixedCase identifier to snake_case.

    Acronyms stay together (``HTTPServer`` -> ``http_server``, ``UserID`` ->
    ``user_id``); names already in snake_case come back unchanged.
    """
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.lower()
