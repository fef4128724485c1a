from __future__ import annotations

from typing import Optional


class DashboardError(Exception):
    """Base exception for dashboard failures."""


class ValidationError(DashboardError):
    """Raised when user input (e.g. a date filter) is malformed."""


class AuthenticationError(DashboardError):
    """Raised when no bearer token is available for the backend."""


class ApiError(DashboardError):
    """Raised when a backend call fails (transport, HTTP status or body)."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, backend_message: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.backend_message = backend_message
