"""
Unit tests for custom exceptions.

Tests the exception hierarchy to ensure proper error handling
and cause tracking.
"""

import pytest

from http_callback_message.exceptions import (
    MessageError,
    ArgumentError,
    AbstractOperationError,
    TransportError,
    ConversionError,
)


class TestMessageError:
    """Test base MessageError class."""
    
    def test_basic_creation(self) -> None:
        """Test creating basic MessageError."""
        error = MessageError("Test error message")
        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.cause is None
    
    def test_with_cause(self) -> None:
        """Test creating MessageError with cause."""
        original_error = ValueError("Original error")
        error = MessageError("Test error message", cause=original_error)
        assert error.cause == original_error


class TestArgumentError:
    """Test ArgumentError class."""
    
    def test_message(self) -> None:
        """Test that the message names the type and the expected shape."""
        error = ArgumentError("Response", "two arguments: (content_body, headers)")
        assert str(error) == "Response expects two arguments: (content_body, headers)"
        assert error.type_name == "Response"
        assert error.expected == "two arguments: (content_body, headers)"
    
    def test_is_type_error(self) -> None:
        """Test that ArgumentError can be caught as TypeError."""
        with pytest.raises(TypeError):
            raise ArgumentError("Request", "an odd number of arguments")


class TestAbstractOperationError:
    """Test AbstractOperationError class."""
    
    def test_message(self) -> None:
        """Test that the message names the type and the operation."""
        error = AbstractOperationError("Message", "parse_args")
        assert str(error) == "Message error: parse_args() is not defined"
        assert error.type_name == "Message"
        assert error.operation == "parse_args"
    
    def test_is_not_implemented_error(self) -> None:
        """Test that AbstractOperationError can be caught as NotImplementedError."""
        assert isinstance(AbstractOperationError("Message", "x"), NotImplementedError)


class TestTransportError:
    """Test TransportError class."""
    
    def test_basic_creation(self) -> None:
        """Test creating basic TransportError."""
        error = TransportError("None is not callable")
        assert str(error) == "Transport error: None is not callable"


class TestConversionError:
    """Test ConversionError class."""
    
    def test_with_cause(self) -> None:
        """Test creating ConversionError with cause."""
        original_error = ValueError("bad header")
        error = ConversionError("cannot build request", cause=original_error)
        assert "Conversion error: cannot build request" in str(error)
        assert error.cause == original_error


class TestExceptionHierarchy:
    """Test exception hierarchy relationships."""
    
    @pytest.mark.parametrize("error", [
        ArgumentError("Request", "x"),
        AbstractOperationError("Message", "parse_args"),
        TransportError("x"),
        ConversionError("x"),
    ])
    def test_inheritance(self, error) -> None:
        """Test that every error is a MessageError."""
        assert isinstance(error, MessageError)
        assert isinstance(error, Exception)
