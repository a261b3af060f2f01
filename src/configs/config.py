"""Configuration loading and typed dotted-path access."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Callable, TypeVar

from configs import coercion
from configs.errors import ConfigNotFoundError, ConfigParseError, ConfigsError, LoadError
from configs.node import Node, normalize
from configs.path import get as get_node
from configs.path import walk

__all__ = ["Config", "load", "parse"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


class Config:
    """Read-only configuration accessor with dot-path key support.

    Every typed accessor comes in two forms. ``get_<type>(path)`` returns the
    coerced value or raises a :class:`ConfigsError`. ``get_<type>_or_default(
    path, default)`` never raises for configuration errors: it returns
    ``default`` when given, otherwise the zero value of the type.

    Containers handed out by the accessors are deep copies, so the wrapped
    tree cannot be modified through them.
    """

    __slots__ = ("_root",)

    def __init__(self, root: Node) -> None:
        object.__setattr__(self, "_root", normalize(root))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Config is immutable")

    def __repr__(self) -> str:
        return f"Config(root={self._root!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Config):
            return NotImplemented
        return self._root == other._root

    # === Construction ===

    @classmethod
    def load(cls, filename: str | Path) -> Config:
        """Read and parse a JSON configuration file."""
        path = Path(filename)
        try:
            data = path.read_bytes()
        except FileNotFoundError as exc:
            raise ConfigNotFoundError(config_path=str(path), cause=exc) from exc
        except OSError as exc:
            raise LoadError(
                f"Cannot read configuration file {path}: {exc}",
                details={"config_path": str(path)},
                cause=exc,
            ) from exc
        return cls.parse(data, source=str(path))

    @classmethod
    def parse(cls, data: bytes | str, source: str = "<string>") -> Config:
        """Parse a JSON document held in memory."""
        if isinstance(data, bytes):
            try:
                data = data.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ConfigParseError(
                    f"Configuration in {source} is not valid UTF-8: {exc}",
                    details={"source": source},
                    cause=exc,
                ) from exc
        try:
            document = json.loads(data, parse_constant=_reject_constant)
        except json.JSONDecodeError as exc:
            raise ConfigParseError(
                f"Invalid JSON in {source}: {exc}",
                details={"source": source, "line": exc.lineno, "column": exc.colno},
                cause=exc,
            ) from exc
        except ValueError as exc:
            raise ConfigParseError(
                f"Invalid JSON in {source}: {exc}",
                details={"source": source},
                cause=exc,
            ) from exc
        config = cls(document)
        logger.debug("Loaded configuration from %s", source)
        return config

    # === Raw access ===

    @property
    def root(self) -> Node:
        """A copy of the whole configuration tree."""
        return copy.deepcopy(self._root)

    def get(self, path: str) -> Node:
        """Return a copy of the raw node at ``path``."""
        return copy.deepcopy(get_node(self._root, path))

    def get_config(self, path: str) -> Config:
        """Return a Config rooted at the node found at ``path``."""
        return Config(get_node(self._root, path))

    def leaves(self) -> list[tuple[str, Node]]:
        """List ``(path, value)`` for every scalar in the tree."""
        return list(walk(self._root))

    # === Strict accessors ===

    def get_str(self, path: str) -> str:
        return coercion.to_str(get_node(self._root, path), path)

    def get_bool(self, path: str) -> bool:
        return coercion.to_bool(get_node(self._root, path), path)

    def get_float(self, path: str) -> float:
        return coercion.to_float(get_node(self._root, path), path)

    def get_int(self, path: str) -> int:
        return coercion.to_int(get_node(self._root, path), path)

    def get_list(self, path: str) -> list[Any]:
        return copy.deepcopy(coercion.to_list(get_node(self._root, path), path))

    def get_map(self, path: str) -> dict[str, Any]:
        return copy.deepcopy(coercion.to_map(get_node(self._root, path), path))

    # === Defaulted accessors ===

    def _or_default(self, getter: Callable[[str], T], path: str, default: T | None, zero: T) -> T:
        try:
            return getter(path)
        except ConfigsError as exc:
            logger.debug("Using default for %r: %s", path, exc)
            return zero if default is None else default

    def get_str_or_default(self, path: str, default: str | None = None) -> str:
        return self._or_default(self.get_str, path, default, "")

    def get_bool_or_default(self, path: str, default: bool | None = None) -> bool:
        return self._or_default(self.get_bool, path, default, False)

    def get_float_or_default(self, path: str, default: float | None = None) -> float:
        return self._or_default(self.get_float, path, default, 0.0)

    def get_int_or_default(self, path: str, default: int | None = None) -> int:
        return self._or_default(self.get_int, path, default, 0)

    def get_list_or_default(self, path: str, default: list[Any] | None = None) -> list[Any]:
        return self._or_default(self.get_list, path, default, [])

    def get_map_or_default(self, path: str, default: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._or_default(self.get_map, path, default, {})


def load(filename: str | Path) -> Config:
    """Read and parse a JSON configuration file."""
    return Config.load(filename)


def parse(data: bytes | str, source: str = "<string>") -> Config:
    """Parse a JSON document held in memory."""
    return Config.parse(data, source=source)
