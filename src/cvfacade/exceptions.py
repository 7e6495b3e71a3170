"""
Custom exceptions for cvfacade.

OpenCV failures (``cv2.error``) are never wrapped: they reach the caller
unchanged. The exceptions here cover the only failures the facade itself
originates, which happen before any OpenCV primitive is called.
"""

from typing import Any, Dict, Optional


class FacadeError(Exception):
    """Base exception for cvfacade."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class UnsupportedOptionError(FacadeError, ValueError):
    """Exception raised when an option name does not resolve to an OpenCV flag."""

    def __init__(self, option: str, value: Any, choices: Optional[list] = None):
        message = f"Unsupported {option}: {value!r}"
        if choices:
            message += f". Available: {choices}"
        super().__init__(
            message=message,
            details={"option": option, "value": value, "choices": choices or []},
        )
        self.option = option
        self.value = value
