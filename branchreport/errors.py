"""
Error taxonomy shared by the repository, service and HTTP layers.
"""

from __future__ import annotations


class BranchReportError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BranchReportError):
    """Client input failed a business rule; raised before any storage call."""

    status_code = 400


class NotFoundError(BranchReportError):
    status_code = 404


class StorageError(BranchReportError):
    """
    The store failed (connectivity, constraint violation, bad query).

    `message` is safe to return to clients; the underlying driver error is
    chained as `__cause__` and only ever logged.
    """

    status_code = 500
