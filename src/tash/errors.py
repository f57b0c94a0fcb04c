"""Application-level exception types for tash."""

from __future__ import annotations


class TashError(Exception):
    """Base exception for tash."""


class AllocationError(TashError):
    """Raised when a buffer cannot grow. Fatal for the whole process."""


class UsageError(TashError):
    """Raised when a builtin is invoked with missing or bad arguments."""


class RegistryError(TashError):
    """Base exception for builtin registry construction errors."""


class DuplicateBuiltinError(RegistryError):
    """Raised when two builtins are registered under the same name."""


class RegistryFrozenError(RegistryError):
    """Raised when registering into a registry that is already frozen."""
