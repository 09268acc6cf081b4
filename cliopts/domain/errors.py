# cliopts/domain/errors.py

from __future__ import annotations


class CliOptionsError(Exception):
    """Base class for every error raised by cliopts."""


class InvalidDefinitionError(CliOptionsError, ValueError):
    """Raised when an option cannot be registered."""


class UnknownOptionError(CliOptionsError, KeyError):
    """Raised when querying values for a name that was never registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown option: {self.name!r}"
