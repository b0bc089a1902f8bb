"""
Foreign message support for http_callback_message.

A foreign message is a richer request/response representation that
Request and Response objects can be built from, and converted back into.
The only thing the normalization core needs from one is a ``scan``
operation reporting each header line; ``H11Message`` provides that for
h11 events.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

import h11


H11Event = Union[h11.Request, h11.Response, h11.InformationalResponse]


class ForeignMessage(ABC):
    """
    Interface for messages that can be adapted into Request/Response.
    
    Subclasses must report their headers through ``scan`` and expose the
    message body as ``content``. Request-like messages also provide
    ``method`` and ``uri``; response-like messages provide ``status_code``,
    ``reason`` and ``http_version``. Attributes a message does not carry
    are ``None``.
    """
    
    @abstractmethod
    def scan(self, fn: Callable[[str, Any], None]) -> None:
        """
        Call ``fn(name, value)`` once per header line, in message order.
        
        Repeated headers are reported once per occurrence.
        """
        pass
    
    @property
    @abstractmethod
    def content(self) -> Union[str, bytes]:
        """The message body."""
        pass
    
    @property
    def method(self) -> Optional[str]:
        return None
    
    @property
    def uri(self) -> Optional[str]:
        return None
    
    @property
    def status_code(self) -> Optional[int]:
        return None
    
    @property
    def reason(self) -> Optional[str]:
        return None
    
    @property
    def http_version(self) -> Optional[str]:
        return None


def _text(value: bytes) -> str:
    return value.decode("latin-1")


class H11Message(ForeignMessage):
    """
    Foreign message backed by an h11 event and a body.
    
    h11 events carry the start line and headers only, so the body is
    supplied separately.
    """
    
    def __init__(self, event: H11Event, body: Union[str, bytes] = b"") -> None:
        if not isinstance(event, (h11.Request, h11.Response, h11.InformationalResponse)):
            raise TypeError(
                f"event must be an h11 Request or Response, not {type(event).__name__}"
            )
        self._event = event
        self._body = body
    
    @property
    def event(self) -> H11Event:
        return self._event
    
    @property
    def is_request(self) -> bool:
        return isinstance(self._event, h11.Request)
    
    def scan(self, fn: Callable[[str, Any], None]) -> None:
        # raw_items() keeps the casing the headers were created with
        for name, value in self._event.headers.raw_items():
            fn(_text(name), _text(value))
    
    @property
    def content(self) -> Union[str, bytes]:
        return self._body
    
    @property
    def method(self) -> Optional[str]:
        if not self.is_request:
            return None
        return _text(self._event.method)
    
    @property
    def uri(self) -> Optional[str]:
        if not self.is_request:
            return None
        return _text(self._event.target)
    
    @property
    def status_code(self) -> Optional[int]:
        if self.is_request:
            return None
        return self._event.status_code
    
    @property
    def reason(self) -> Optional[str]:
        if self.is_request:
            return None
        return _text(self._event.reason)
    
    @property
    def http_version(self) -> Optional[str]:
        return _text(self._event.http_version)
    
    def __repr__(self) -> str:
        return f"H11Message({self._event!r}, body={self._body!r})"


def header_lines(headers: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """
    Flatten a header map into (name, value) lines.
    
    List values become one line per element. Values that were joined
    with commas stay on a single line.
    """
    lines: List[Tuple[str, str]] = []
    for name, value in headers.items():
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if isinstance(item, bytes):
                item = _text(item)
            lines.append((name, str(item)))
    return lines
