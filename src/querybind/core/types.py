"""Type aliases used across querybind."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

QueryKey = str
Multimap = dict[QueryKey, list[str]]
MultimapLike = Mapping[QueryKey, Sequence[str] | str]
KnownKeys = set[QueryKey]
ScalarParser = Callable[[str], Any]
