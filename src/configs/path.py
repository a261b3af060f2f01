"""Dotted-path resolution over a normalized Node tree."""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Any

from configs.errors import (
    IndexOutOfRangeError,
    InvalidDescentError,
    InvalidListIndexError,
    NonexistentKeyError,
    PathSyntaxError,
)
from configs.node import Node, kind_of

__all__ = ["DELIMITER", "split_path", "get", "walk"]

DELIMITER = "."

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


def split_path(path: str) -> list[str]:
    """Split a dotted path into segments.

    A single leading delimiter is ignored and the empty path yields no
    segments. Any other empty segment raises :class:`PathSyntaxError`.
    """
    if not path:
        return []
    parts = path.split(DELIMITER)
    if parts[0] == "":
        parts = parts[1:]
    if any(part == "" for part in parts):
        raise PathSyntaxError(path)
    return parts


def get(root: Node, path: str) -> Node:
    """Return the node reached by following ``path`` from ``root``.

    Errors name the path prefix consumed so far, including the failing
    segment, so that deep paths can be debugged.
    """
    parts = split_path(path)
    current: Any = root
    for pos, part in enumerate(parts):
        prefix = DELIMITER.join(parts[: pos + 1])
        if isinstance(current, list):
            if not _INDEX_RE.fullmatch(part) or int(part) < 0:
                raise InvalidListIndexError(path=path, prefix=prefix)
            index = int(part)
            if index >= len(current):
                raise IndexOutOfRangeError(path=path, prefix=prefix, length=len(current))
            current = current[index]
        elif isinstance(current, dict):
            if part not in current:
                raise NonexistentKeyError(path=path, prefix=prefix)
            current = current[part]
        else:
            raise InvalidDescentError(path=path, prefix=prefix, kind=kind_of(current).value)
    return current


def walk(root: Node, prefix: str = "") -> Iterator[tuple[str, Node]]:
    """Yield ``(path, value)`` for every scalar leaf under ``root``, depth first.

    Empty lists and maps have no leaves and yield nothing.
    """
    if isinstance(root, dict):
        children: Iterator[tuple[str, Node]] = iter(root.items())
    elif isinstance(root, list):
        children = ((str(i), item) for i, item in enumerate(root))
    else:
        yield prefix, root
        return
    for segment, child in children:
        child_path = f"{prefix}{DELIMITER}{segment}" if prefix else segment
        yield from walk(child, child_path)
