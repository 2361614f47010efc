# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ApiException(Exception):
    """Exception raised for API errors (non-2xx responses)."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data if isinstance(response_data, dict) else {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class ValidationException(Exception):
    """Exception raised for local validation errors."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None, timed_out: bool = False):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context
        self.timed_out = timed_out

    @property
    def is_timeout(self) -> bool:
        if self.timed_out:
            return True
        msg = str(self.original_error) if self.original_error else self.message
        return "timeout" in msg.lower() or "timed out" in msg.lower()


class InvalidResponseException(ApiException):
    """A 2xx response whose body is not the JSON the caller required."""
