"""Node kinds and normalization of deserialized documents."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Union

from configs.errors import UnsupportedValueError

__all__ = ["Node", "NodeKind", "kind_of", "normalize"]

Node = Union[bool, int, float, str, list["Node"], dict[str, "Node"]]


class NodeKind(str, Enum):
    """Tag for the shape of a normalized value."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    LIST = "list"
    MAP = "map"


def kind_of(value: Any) -> NodeKind:
    """Classify a normalized value.

    ``bool`` is checked before numbers since it subclasses ``int``.
    """
    if isinstance(value, bool):
        return NodeKind.BOOLEAN
    if isinstance(value, (int, float)):
        return NodeKind.NUMBER
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, list):
        return NodeKind.LIST
    if isinstance(value, dict):
        return NodeKind.MAP
    raise UnsupportedValueError(f"Unsupported type: {type(value).__name__}", value=value)


def normalize(value: Any) -> Node:
    """Convert a deserialized value into the canonical Node shape.

    Mappings are rebuilt with string keys, sequences are rebuilt as lists, and
    scalars pass through. Anything else (including ``None``) raises
    :class:`UnsupportedValueError`; nothing is returned on partial failure.
    """
    if isinstance(value, dict):
        node: dict[str, Node] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise UnsupportedValueError(f"Unsupported map key: {key!r}", value=key)
            try:
                node[key] = normalize(item)
            except UnsupportedValueError as exc:
                raise UnsupportedValueError(f"Unsupported map value: {item!r}", value=item, cause=exc) from exc
        return node

    if isinstance(value, (list, tuple)):
        items: list[Node] = []
        for item in value:
            try:
                items.append(normalize(item))
            except UnsupportedValueError as exc:
                raise UnsupportedValueError(f"Unsupported list item: {item!r}", value=item, cause=exc) from exc
        return items

    if isinstance(value, float) and not math.isfinite(value):
        raise UnsupportedValueError(f"Unsupported number: {value!r}", value=value)

    if isinstance(value, (bool, int, float, str)):
        return value

    raise UnsupportedValueError(f"Unsupported type: {type(value).__name__}", value=value)
