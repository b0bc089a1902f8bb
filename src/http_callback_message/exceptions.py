"""
Custom exceptions for http_callback_message.

All errors raised by this package are synchronous construction-time
failures. They propagate straight out of the constructor; no partially
built object is ever returned.
"""

from typing import Optional


class MessageError(Exception):
    """Base exception for all http_callback_message errors."""
    
    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ArgumentError(MessageError, TypeError):
    """Raised when a positional argument list has the wrong shape."""
    
    def __init__(self, type_name: str, expected: str) -> None:
        super().__init__(f"{type_name} expects {expected}")
        self.type_name = type_name
        self.expected = expected


class AbstractOperationError(MessageError, NotImplementedError):
    """Raised when a variant does not provide a required operation."""
    
    def __init__(self, type_name: str, operation: str) -> None:
        super().__init__(f"{type_name} error: {operation}() is not defined")
        self.type_name = type_name
        self.operation = operation


class TransportError(MessageError):
    """Raised when a request is handed to something that cannot send it."""
    
    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Transport error: {message}", cause)


class ConversionError(MessageError):
    """Raised when a message cannot be converted into a foreign message."""
    
    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(f"Conversion error: {message}", cause)
