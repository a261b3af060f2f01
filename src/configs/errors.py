"""Error hierarchy for the configs package."""

from __future__ import annotations

from typing import Any

__all__ = [
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
    "ErrorCodes",
]


class ConfigsError(Exception):
    """Base error for all configs errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class PathSyntaxError(ConfigsError):
    """Raised when a path contains an empty segment other than a leading one."""

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            code="PATH_SYNTAX_ERROR",
            message=f"Invalid path {path!r}",
            details={"path": path},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The offending path string."""
        return self.details["path"]


class ResolutionError(ConfigsError):
    """Base for errors raised while walking a path through the tree."""

    def __init__(self, code: str, message: str, path: str, prefix: str, **kwargs: Any) -> None:
        details = {"path": path, "prefix": prefix}
        details.update(kwargs.pop("details", None) or {})
        super().__init__(code=code, message=message, details=details, **kwargs)

    @property
    def path(self) -> str:
        """The full path that was being resolved."""
        return self.details["path"]

    @property
    def prefix(self) -> str:
        """The path prefix consumed up to and including the failing segment."""
        return self.details["prefix"]


class IndexOutOfRangeError(ResolutionError):
    """Raised when a list index is past the end of the list."""

    def __init__(self, path: str, prefix: str, length: int, **kwargs: Any) -> None:
        super().__init__(
            code="INDEX_OUT_OF_RANGE",
            message=f"Index out of range at {prefix!r}: list has only {length} items",
            path=path,
            prefix=prefix,
            details={"length": length},
            **kwargs,
        )

    @property
    def length(self) -> int:
        """Length of the list that was indexed."""
        return self.details["length"]


class InvalidListIndexError(ResolutionError):
    """Raised when a segment applied to a list is not a non-negative integer."""

    def __init__(self, path: str, prefix: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_LIST_INDEX",
            message=f"Invalid list index at {prefix!r}",
            path=path,
            prefix=prefix,
            **kwargs,
        )


class NonexistentKeyError(ResolutionError):
    """Raised when a map does not contain the requested key."""

    def __init__(self, path: str, prefix: str, **kwargs: Any) -> None:
        super().__init__(
            code="NONEXISTENT_KEY",
            message=f"Nonexistent map key at {prefix!r}",
            path=path,
            prefix=prefix,
            **kwargs,
        )


class InvalidDescentError(ResolutionError):
    """Raised when a path tries to descend into a scalar."""

    def __init__(self, path: str, prefix: str, kind: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_DESCENT",
            message=f"Invalid type at {prefix!r}: expected list or map; got {kind}",
            path=path,
            prefix=prefix,
            details={"kind": kind},
            **kwargs,
        )

    @property
    def kind(self) -> str:
        """Kind of the scalar that could not be descended into."""
        return self.details["kind"]


class TypeMismatchError(ConfigsError):
    """Raised when a resolved value's kind cannot produce the requested type."""

    def __init__(self, expected: str, actual: str, path: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="TYPE_MISMATCH",
            message=f"Type mismatch: expected {expected}; got {actual}",
            details={"expected": expected, "actual": actual, "path": path},
            **kwargs,
        )

    @property
    def expected(self) -> str:
        return self.details["expected"]

    @property
    def actual(self) -> str:
        return self.details["actual"]


class CoercionError(ConfigsError):
    """Raised when a value of an accepted kind fails to convert to the target type."""

    def __init__(self, message: str, target: str, value: Any, path: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="COERCION_ERROR",
            message=message,
            details={"target": target, "value": value, "path": path},
            **kwargs,
        )


class LoadError(ConfigsError):
    """Raised when a configuration document cannot be loaded."""

    def __init__(self, message: str, code: str = "LOAD_ERROR", **kwargs: Any) -> None:
        super().__init__(code=code, message=message, **kwargs)


class ConfigNotFoundError(LoadError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigParseError(LoadError):
    """Raised when a configuration document is not valid JSON."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_PARSE_ERROR", message=message, **kwargs)


class UnsupportedValueError(LoadError):
    """Raised when a deserialized value has no Node representation."""

    def __init__(self, message: str, value: Any = None, **kwargs: Any) -> None:
        super().__init__(
            code="UNSUPPORTED_VALUE",
            message=message,
            details={"value": value},
            **kwargs,
        )


class ErrorCodes:
    """All configs error codes as constants.

    Use these instead of hardcoding error code strings.

    Example:
        if error.code == ErrorCodes.NONEXISTENT_KEY:
            use_fallback()
    """

    PATH_SYNTAX_ERROR = "PATH_SYNTAX_ERROR"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    INVALID_LIST_INDEX = "INVALID_LIST_INDEX"
    NONEXISTENT_KEY = "NONEXISTENT_KEY"
    INVALID_DESCENT = "INVALID_DESCENT"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    COERCION_ERROR = "COERCION_ERROR"
    LOAD_ERROR = "LOAD_ERROR"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
    UNSUPPORTED_VALUE = "UNSUPPORTED_VALUE"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
