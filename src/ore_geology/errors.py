"""Error taxonomy for a submission.

Every error here terminates the current submission and lands in a
``Failure`` state. None of them are retried automatically.
"""

from __future__ import annotations


class GeologyError(Exception):
    """Base class for all submission errors."""


class ConfigurationError(GeologyError):
    """Required backend credential is absent."""


class EncodingError(GeologyError):
    """An attachment could not be read or decoded."""

    def __init__(self, file_name: str, reason: str):
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Could not read attachment '{file_name}': {reason}")


class BackendError(GeologyError):
    """The remote call failed or returned no usable text."""


class HandleRevokedError(OSError):
    """A file handle was read after it was revoked."""
