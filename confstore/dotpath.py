"""Dot-path access into nested dictionaries.

``"a.b.c"`` addresses ``store["a"]["b"]["c"]``. A literal dot inside a key is
written as ``\\.``, so ``"a\\.b.c"`` addresses ``store["a.b"]["c"]``. Only
dictionaries are traversed; there is no list index syntax.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

_MISSING = object()


def split_path(path: str) -> List[str]:
    if not isinstance(path, str):
        raise TypeError(f"Expected path to be of type str, got {type(path).__name__}")

    parts = path.split(".")
    segments: List[str] = []
    index = 0
    while index < len(parts):
        segment = parts[index]
        while segment.endswith("\\") and index + 1 < len(parts):
            index += 1
            segment = segment[:-1] + "." + parts[index]
        segments.append(segment)
        index += 1
    return segments


def _walk(store: Any, segments: List[str]) -> Tuple[Optional[Dict[str, Any]], str]:
    """Return the dict holding the last segment, or ``None`` if unreachable."""
    node = store
    for segment in segments[:-1]:
        if not isinstance(node, dict):
            return None, segments[-1]
        node = node.get(segment, _MISSING)
    if not isinstance(node, dict):
        return None, segments[-1]
    return node, segments[-1]


def get_value(store: Any, path: str, default: Any = None) -> Any:
    parent, leaf = _walk(store, split_path(path))
    if parent is None:
        return default
    return parent.get(leaf, default)


def has_value(store: Any, path: str) -> bool:
    parent, leaf = _walk(store, split_path(path))
    return parent is not None and leaf in parent


def set_value(store: Dict[str, Any], path: str, value: Any) -> None:
    segments = split_path(path)
    node = store
    for segment in segments[:-1]:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
            node[segment] = child
        node = child
    node[segments[-1]] = value


def delete_value(store: Any, path: str) -> None:
    parent, leaf = _walk(store, split_path(path))
    if parent is not None:
        parent.pop(leaf, None)
