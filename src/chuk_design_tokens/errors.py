"""
Exceptions raised by the token pipeline.

Input problems derive from ValueError so callers that only care about
"bad input" can catch one type. Failures of the external splitter are
RuntimeErrors.
"""

from __future__ import annotations


class TokenSourceError(ValueError):
    """A token file or manifest is missing or malformed."""

    def __init__(self, message: str, path: object = None):
        super().__init__(message)
        self.path = path


class ConfigError(ValueError):
    """The build configuration is missing, unparsable or invalid."""


class CircularReferenceError(ValueError):
    """A chain of aliases loops back on itself."""

    def __init__(self, message: str, chain: list[str]):
        super().__init__(message)
        self.chain = chain


class SplitError(RuntimeError):
    """The external set-splitting command failed."""

    def __init__(self, message: str, command: list[str], returncode: int | None = None):
        super().__init__(message)
        self.command = command
        self.returncode = returncode
