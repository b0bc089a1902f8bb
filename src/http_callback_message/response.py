"""
Response objects for http_callback_message.

A transport calls its completion callback with ``(body, headers)``,
where ``headers`` mixes real response headers (lower-case keys) with
pseudo-headers such as ``Status`` and ``Reason`` (capitalized keys).
Response separates the two.
"""

import functools
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Tuple

import h11

from .exceptions import ArgumentError, ConversionError
from .foreign import ForeignMessage, H11Message, header_lines
from .headers import HeaderMap, PseudoHeaderMap, classify_headers, hashify_foreign_headers
from .message import Fields, Message


@dataclass(frozen=True, init=False)
class Response(Message):
    """Immutable HTTP response as delivered to a completion callback."""
    
    body: Any = ""
    headers: HeaderMap = field(default_factory=dict)
    pseudo_headers: PseudoHeaderMap = field(default_factory=dict)
    
    # fields hold dicts
    __hash__ = None  # type: ignore[assignment]
    
    @classmethod
    def parse_args(cls, *args: Any) -> Fields:
        """
        Parse ``(content_body, headers)``.
        
        Raises:
            ArgumentError: If not called with exactly two arguments
        """
        if len(args) != 2:
            raise ArgumentError(cls.__name__, "two arguments: (content_body, headers)")
        
        body, raw_headers = args
        headers, pseudo_headers = classify_headers(raw_headers or {})
        return {
            "body": body,
            "headers": headers,
            "pseudo_headers": pseudo_headers,
        }
    
    @classmethod
    def from_foreign_message(
        cls,
        message: ForeignMessage,
        extra: Optional[Mapping[str, Any]] = None,
    ) -> Fields:
        """Take body, headers, status, reason and protocol version from a foreign message."""
        pseudo_headers = {
            "Status": message.status_code,
            "Reason": message.reason,
        }
        if message.http_version:
            pseudo_headers["HTTPVersion"] = message.http_version
        
        fields = {
            "body": message.content,
            "headers": hashify_foreign_headers(message),
            "pseudo_headers": pseudo_headers,
        }
        if extra:
            fields.update(extra)
        return fields
    
    @classmethod
    def _post_process(cls, fields: Fields) -> Fields:
        fields = super()._post_process(fields)
        fields["pseudo_headers"] = dict(fields.get("pseudo_headers") or {})
        return fields
    
    def args(self) -> Tuple[Any, dict]:
        """
        Get the completion callback arguments.
        
        Returns:
            ``(body, headers)`` with the pseudo-headers merged back in
        """
        return (self.body, {**self.headers, **self.pseudo_headers})
    
    def to_foreign_message(self) -> H11Message:
        """
        Convert to an h11 response event plus body.
        
        Status defaults to 200; 1xx statuses produce an
        ``h11.InformationalResponse``.
        
        Raises:
            ConversionError: If h11 rejects the status line or headers
        """
        try:
            status_code = int(self.pseudo_headers.get("Status", 200))
        except (TypeError, ValueError) as e:
            raise ConversionError(
                f"invalid status {self.pseudo_headers.get('Status')!r}", cause=e
            ) from e
        
        event_cls = h11.InformationalResponse if status_code < 200 else h11.Response
        try:
            event = event_cls(
                status_code=status_code,
                reason=self.pseudo_headers.get("Reason") or "",
                http_version=self.pseudo_headers.get("HTTPVersion") or "1.1",
                headers=header_lines(self.headers),
            )
        except h11.LocalProtocolError as e:
            raise ConversionError(f"cannot build response: {e}", cause=e) from e
        
        return H11Message(event, self.body)


def response_handler(handler: Callable[[Response], Any]) -> Callable[[Any, Mapping[str, Any]], Any]:
    """
    Wrap a function taking a Response into a completion callback.
    
    Example:
        @response_handler
        def on_done(response):
            print(response.pseudo_headers["Status"], response.body)
        
        Request("GET", "http://example.com", on_done).send(transport)
    """
    @functools.wraps(handler)
    def callback(body: Any, headers: Mapping[str, Any]) -> Any:
        return handler(Response(body, headers))
    
    return callback
