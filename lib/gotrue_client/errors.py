from __future__ import annotations


class GoTrueClientError(Exception):
    """Base client error."""


class NetworkError(GoTrueClientError):
    """Transport/network layer error."""


class ApiError(GoTrueClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""
