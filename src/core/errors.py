"""Error kinds raised by the generator.

Every error is terminal for the whole run. The CLI is the only layer that turns
them into exit codes.
"""

from __future__ import annotations


class PasswordGenError(Exception):
    """Base class for all generator failures."""

    exit_code: int = 1


class UsageError(PasswordGenError):
    """Wrong number of positional arguments."""


class ValidationError(PasswordGenError):
    """An argument is not a positive integer or is out of bounds."""


class DependencyError(PasswordGenError):
    """The secure random source is unavailable."""


class ReadError(PasswordGenError):
    """Reading from the secure random source failed mid-generation."""
