"""
Unit tests for foreign message support.

Tests the H11Message adapter and header line flattening.
"""

import h11
import pytest

from http_callback_message.foreign import ForeignMessage, H11Message, header_lines


class TestH11Message:
    """Test H11Message class."""
    
    def test_request_event(self) -> None:
        """Test attributes of a wrapped request."""
        event = h11.Request(method="GET", target="/x?y=1", headers=[("Host", "example.com")])
        message = H11Message(event)
        assert message.is_request
        assert message.method == "GET"
        assert message.uri == "/x?y=1"
        assert message.status_code is None
        assert message.reason is None
        assert message.http_version == "1.1"
        assert message.content == b""
    
    def test_response_event(self) -> None:
        """Test attributes of a wrapped response."""
        event = h11.Response(status_code=302, reason="Found", headers=[("Location", "/y")])
        message = H11Message(event, "body")
        assert not message.is_request
        assert message.method is None
        assert message.uri is None
        assert message.status_code == 302
        assert message.reason == "Found"
        assert message.content == "body"
    
    def test_scan_keeps_order_and_case(self) -> None:
        """Test that scan reports every line as created."""
        event = h11.Response(
            status_code=200,
            headers=[("Set-Cookie", "a=1"), ("Content-Type", "text/plain"), ("Set-Cookie", "b=2")],
        )
        lines = []
        H11Message(event).scan(lambda name, value: lines.append((name, value)))
        assert lines == [
            ("Set-Cookie", "a=1"),
            ("Content-Type", "text/plain"),
            ("Set-Cookie", "b=2"),
        ]
    
    def test_rejects_other_events(self) -> None:
        """Test that only request and response events are accepted."""
        with pytest.raises(TypeError, match="h11 Request or Response"):
            H11Message(h11.Data(data=b"x"))
    
    def test_is_foreign_message(self) -> None:
        """Test that H11Message implements the ForeignMessage interface."""
        event = h11.Response(status_code=200, headers=[])
        assert isinstance(H11Message(event), ForeignMessage)


class TestForeignMessage:
    """Test the ForeignMessage interface."""
    
    def test_cannot_instantiate(self) -> None:
        """Test that scan and content must be implemented."""
        with pytest.raises(TypeError):
            ForeignMessage()
    
    def test_optional_attributes_default_to_none(self, scan_message) -> None:
        """Test attributes a message does not carry."""
        assert scan_message([]).http_version is None


class TestHeaderLines:
    """Test header_lines function."""
    
    def test_lists_expand(self) -> None:
        """Test that list values become repeated lines."""
        assert header_lines({"vary": ["a", "b"], "accept": "*/*"}) == [
            ("vary", "a"),
            ("vary", "b"),
            ("accept", "*/*"),
        ]
    
    def test_values_become_text(self) -> None:
        """Test conversion of bytes and numbers."""
        assert header_lines({"content-length": 10, "x-raw": b"v"}) == [
            ("content-length", "10"),
            ("x-raw", "v"),
        ]
