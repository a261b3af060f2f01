"""configs - Typed dotted-path access to JSON configuration."""

from __future__ import annotations

# Core
from configs.config import Config, load, parse
from configs.node import Node, NodeKind, normalize
from configs.path import DELIMITER, get, split_path

# Errors
from configs.errors import (
    CoercionError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigsError,
    ErrorCodes,
    IndexOutOfRangeError,
    InvalidDescentError,
    InvalidListIndexError,
    LoadError,
    NonexistentKeyError,
    PathSyntaxError,
    ResolutionError,
    TypeMismatchError,
    UnsupportedValueError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Config",
    "load",
    "parse",
    # Tree
    "Node",
    "NodeKind",
    "normalize",
    "DELIMITER",
    "get",
    "split_path",
    # Errors
    "ErrorCodes",
    "ConfigsError",
    "PathSyntaxError",
    "ResolutionError",
    "IndexOutOfRangeError",
    "InvalidListIndexError",
    "NonexistentKeyError",
    "InvalidDescentError",
    "TypeMismatchError",
    "CoercionError",
    "LoadError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "UnsupportedValueError",
]
