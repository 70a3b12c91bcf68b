# src/taskpad/core/errors.py

from __future__ import annotations


class TaskpadError(Exception):
    """Base class for taskpad errors."""


class StorageReadError(TaskpadError):
    """The storage slot exists but could not be read or decoded."""


class StorageWriteError(TaskpadError):
    """The storage slot could not be written."""


class ValidationError(TaskpadError, ValueError):
    """User input rejected (e.g. blank task text)."""
