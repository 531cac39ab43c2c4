from __future__ import annotations


class FlexClientError(Exception):
    """Base client error."""


class ConfigurationError(FlexClientError):
    """Client options are missing, unknown or of the wrong type."""


class InvalidApiError(FlexClientError):
    """Requested API resource is not registered."""


class ApiClientError(FlexClientError):
    def __init__(self, message: str, code: int = 0, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class DecodeError(FlexClientError):
    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body
