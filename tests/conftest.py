"""
Pytest configuration for http_callback_message tests.

This file contains shared fixtures and configuration
for all tests in the project.
"""

import pytest
from typing import Any, Callable, List, Tuple

from http_callback_message import ForeignMessage


class RecordingTransport:
    """Transport stand-in that records every call instead of sending."""
    
    def __init__(self) -> None:
        self.calls: List[Tuple[Any, ...]] = []
    
    def __call__(self, method: str, uri: str, *args: Any) -> str:
        self.calls.append((method, uri) + args)
        return "guard"


class ScanMessage(ForeignMessage):
    """Minimal foreign message reporting a fixed list of header lines."""
    
    def __init__(
        self,
        lines: List[Tuple[str, Any]],
        content: Any = "",
        method: Any = None,
        uri: Any = None,
        status_code: Any = None,
        reason: Any = None,
    ) -> None:
        self.lines = lines
        self._content = content
        self._method = method
        self._uri = uri
        self._status_code = status_code
        self._reason = reason
    
    def scan(self, fn: Callable[[str, Any], None]) -> None:
        for name, value in self.lines:
            fn(name, value)
    
    @property
    def content(self) -> Any:
        return self._content
    
    @property
    def method(self) -> Any:
        return self._method
    
    @property
    def uri(self) -> Any:
        return self._uri
    
    @property
    def status_code(self) -> Any:
        return self._status_code
    
    @property
    def reason(self) -> Any:
        return self._reason


@pytest.fixture
def callback():
    """A completion callback that does nothing."""
    def _callback(body, headers):
        return None
    return _callback


@pytest.fixture
def transport():
    """Create a recording transport."""
    return RecordingTransport()


@pytest.fixture
def scan_message():
    """Factory for foreign messages built from header lines."""
    def _create(lines, **kwargs) -> ScanMessage:
        return ScanMessage(lines, **kwargs)
    return _create


@pytest.fixture
def sample_callback_headers():
    """Headers as a transport delivers them to the completion callback."""
    return {
        "content-type": "text/html",
        "content-length": "1234",
        "set-cookie": "a=1,b=2",
        "Status": 200,
        "Reason": "OK",
        "HTTPVersion": "1.1",
        "URL": "http://example.com/",
    }
