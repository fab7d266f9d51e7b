"""Exception types raised by regswitch."""

from __future__ import annotations


class RegswitchError(Exception):
    """Base class for all regswitch errors."""


class ValidationError(RegswitchError):
    """User input was rejected (empty value, duplicate name)."""


class DuplicateNameError(ValidationError):
    def __init__(self, name: str):
        super().__init__(f"Registry name already exists: {name}")
        self.name = name


class CatalogParseError(RegswitchError):
    """The catalog file is missing or is not a valid catalog."""


class PersistenceError(RegswitchError):
    """Writing the catalog file failed."""


class NpmConfigError(RegswitchError):
    """The npm configuration command could not be run or exited non-zero."""

    def __init__(self, message: str, returncode: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class SwitchFailure(RegswitchError):
    """npm did not end up on the requested registry.

    ``current`` is the snapshot read back after the attempt.
    """

    def __init__(self, message: str, current=None):
        super().__init__(message)
        self.current = current


class ProbeError(RegswitchError):
    """The latency probe could not reach the registry."""
