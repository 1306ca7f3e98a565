from __future__ import annotations

from typing import Any, Dict, Mapping


class ThemerError(Exception):
    """Base exception for Themer."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ResourceNotFoundError(ThemerError, FileNotFoundError):
    """Raised when a resource exists in neither the project nor the theme."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ThemerError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)

    @property
    def checked_paths(self) -> list[str]:
        return list(self.context.get("checked", []))


class InvalidResourceNameError(ThemerError, ValueError):
    """Raised when a resource name would escape its resource directory."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ThemerError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ThemeNotFoundError(ThemerError, FileNotFoundError):
    """Raised when the theme package is not installed where expected."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ThemerError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)


class ThemeMetadataError(ThemerError, ValueError):
    """Raised when theme.json is missing, unreadable or fails its schema."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ThemerError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ConfigError(ThemerError, ValueError):
    """Raised when project configuration is invalid."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ThemerError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "ThemerError",
    "ResourceNotFoundError",
    "InvalidResourceNameError",
    "ThemeNotFoundError",
    "ThemeMetadataError",
    "ConfigError",
]
