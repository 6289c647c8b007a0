# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ApiException(Exception):
    """Exception raised for API errors (non-2xx responses)."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class ValidationException(Exception):
    """Exception raised for validation errors."""

    def __init__(self, message: str, field: str = None,
                 errors: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or {}
        self.context = context


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context


class UnknownStepError(LookupError):
    """Raised when a wizard is asked about a step key it never declared."""

    def __init__(self, step_key: str):
        super().__init__(f"Unknown wizard step: {step_key!r}")
        self.step_key = step_key


class GatewayError(Exception):
    """
    Submission failed at the gateway.

    `message` is already user-facing; the wizard shows it as-is next to a
    retry affordance.
    """

    def __init__(self, message: str, status_code: int = None,
                 original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.original_error = original_error
