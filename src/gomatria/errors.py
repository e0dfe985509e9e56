"""Exceptions raised by the gomatria core.

The core raises; only the command-line layer turns these into messages
and exit codes. An empty lookup is not an error and has no exception.
"""

from __future__ import annotations


class GomatriaError(Exception):
    """Base class for all gomatria failures."""


class CipherNotFound(GomatriaError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f'Cipher "{self.name}" does not exist.'


class CipherDefinitionError(GomatriaError):
    """A cipher definition file could not be read or failed validation."""

    def __init__(self, source: str, errors):
        self.source = source
        self.errors = list(errors)
        super().__init__(f"{source}: " + "; ".join(self.errors))


class StorageError(GomatriaError):
    """The reverse index file could not be opened, written or read."""
