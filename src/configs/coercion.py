"""Coercion of resolved nodes to requested Python types."""

from __future__ import annotations

import re
from typing import Any

from configs.errors import CoercionError, TypeMismatchError
from configs.node import NodeKind, kind_of

__all__ = [
    "format_number",
    "parse_bool",
    "to_str",
    "to_bool",
    "to_float",
    "to_int",
    "to_list",
    "to_map",
]

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_RE = re.compile(r"[+-]?[0-9]+")


def format_number(value: int | float) -> str:
    """Return the canonical text of a number: ``42``, ``42.5``, ``1e+16``.

    Floats use their shortest round-tripping ``repr`` with a trailing ``.0``
    dropped, so ``42.0`` renders as ``42``.
    """
    if isinstance(value, int):
        return str(value)
    text = repr(value)
    if text.endswith(".0"):
        return text[:-2]
    return text


def parse_bool(text: str) -> bool:
    """Parse a boolean literal such as ``true``, ``False``, ``1`` or ``f``."""
    if text in _TRUE_LITERALS:
        return True
    if text in _FALSE_LITERALS:
        return False
    raise ValueError(f"invalid boolean literal: {text!r}")


def to_str(value: Any, path: str | None = None) -> str:
    kind = kind_of(value)
    if kind is NodeKind.BOOLEAN:
        return "true" if value else "false"
    if kind is NodeKind.NUMBER:
        try:
            return format_number(value)
        except ValueError as exc:
            # str() refuses ints beyond the interpreter's digit limit
            raise CoercionError(
                "Value can't be converted to string: number has too many digits",
                target="string",
                value=value,
                path=path,
                cause=exc,
            ) from exc
    if kind is NodeKind.STRING:
        return value
    raise TypeMismatchError(expected="string", actual=kind.value, path=path)


def to_bool(value: Any, path: str | None = None) -> bool:
    kind = kind_of(value)
    if kind is NodeKind.BOOLEAN:
        return value
    if kind is NodeKind.STRING:
        try:
            return parse_bool(value)
        except ValueError as exc:
            raise CoercionError(
                f"Value can't be converted to bool: {value!r}",
                target="bool",
                value=value,
                path=path,
                cause=exc,
            ) from exc
    raise TypeMismatchError(expected="bool", actual=kind.value, path=path)


def to_float(value: Any, path: str | None = None) -> float:
    kind = kind_of(value)
    if kind is NodeKind.NUMBER:
        try:
            return float(value)
        except OverflowError as exc:
            raise CoercionError(
                "Value can't be converted to float: number out of range",
                target="float",
                value=value,
                path=path,
                cause=exc,
            ) from exc
    if kind is NodeKind.STRING:
        message = f"Value can't be converted to float: {value!r}"
        if value != value.strip():
            raise CoercionError(message, target="float", value=value, path=path)
        try:
            return float(value)
        except (ValueError, OverflowError) as exc:
            raise CoercionError(message, target="float", value=value, path=path, cause=exc) from exc
    raise TypeMismatchError(expected="float", actual=kind.value, path=path)


def to_int(value: Any, path: str | None = None) -> int:
    """Coerce a node to ``int``.

    JSON numbers with a fraction or exponent arrive as floats. A float is
    accepted only when its truncation renders to the same text as the float
    itself (see :func:`format_number`), which also rejects magnitudes where
    float precision is lossy. Floats render with an exponent from ``1e16``
    upward, so ``1e15`` converts and ``1e16`` does not.

    Digit strings are parsed as base-10 literals; strings longer than the
    interpreter's integer digit limit fail like any other bad literal.
    """
    kind = kind_of(value)
    if kind is NodeKind.NUMBER:
        if isinstance(value, int):
            return value
        truncated = int(value)
        if str(truncated) == format_number(value):
            return truncated
        raise CoercionError(
            f"Value can't be converted to int: {format_number(value)}",
            target="int",
            value=value,
            path=path,
        )
    if kind is NodeKind.STRING:
        if _INT_RE.fullmatch(value):
            try:
                return int(value)
            except ValueError as exc:
                raise CoercionError(
                    f"Value can't be converted to int: string of {len(value)} characters",
                    target="int",
                    value=value,
                    path=path,
                    cause=exc,
                ) from exc
        raise CoercionError(
            f"Value can't be converted to int: {value!r}",
            target="int",
            value=value,
            path=path,
        )
    raise TypeMismatchError(expected="int", actual=kind.value, path=path)


def to_list(value: Any, path: str | None = None) -> list[Any]:
    kind = kind_of(value)
    if kind is NodeKind.LIST:
        return value
    raise TypeMismatchError(expected="list", actual=kind.value, path=path)


def to_map(value: Any, path: str | None = None) -> dict[str, Any]:
    kind = kind_of(value)
    if kind is NodeKind.MAP:
        return value
    raise TypeMismatchError(expected="map", actual=kind.value, path=path)
