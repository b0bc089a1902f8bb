"""
Request objects for http_callback_message.

A Request wraps the argument list of a transport's request function::

    Request("POST", "http://example.com", "headers", {...}, "body", data, callback)

and exposes it through named attributes. ``args()`` gives the argument
list back, ready to be applied to the transport.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlsplit

import h11

from .exceptions import ArgumentError, ConversionError, TransportError
from .foreign import ForeignMessage, H11Message, header_lines
from .headers import HeaderMap, hashify_foreign_headers, normalize_headers
from .message import Fields, Message
from .transport import CompletionCallback, TransportFunction

logger = logging.getLogger(__name__)


@dataclass(frozen=True, init=False)
class Request(Message):
    """
    Immutable HTTP request as passed to a transport's request function.
    
    ``body`` and ``headers`` are stored inside ``params`` next to the
    other connection options; the ``body`` and ``headers`` attributes
    read them from there.
    """
    
    method: str = ""
    uri: Optional[str] = None
    callback: Optional[CompletionCallback] = None
    params: Dict[str, Any] = field(default_factory=dict)
    
    # fields hold dicts
    __hash__ = None  # type: ignore[assignment]
    
    @classmethod
    def parse_args(cls, *args: Any) -> Fields:
        """
        Parse ``(method, uri, (key, value)*, callback)``.
        
        Raises:
            ArgumentError: If the argument count is even or below three
        """
        if len(args) < 3 or not len(args) % 2:
            raise ArgumentError(
                cls.__name__,
                "an odd number of arguments: (method, uri, (key, value)*, callback)",
            )
        
        method, uri, *options, callback = args
        return {
            "method": method,
            "uri": uri,
            "callback": callback,
            "params": dict(zip(options[::2], options[1::2])),
        }
    
    @classmethod
    def from_foreign_message(
        cls,
        message: ForeignMessage,
        extra: Optional[Mapping[str, Any]] = None,
    ) -> Fields:
        """Take method, uri, headers and body from a foreign message."""
        fields = {
            "method": message.method,
            "uri": message.uri,
            "headers": hashify_foreign_headers(message),
            "body": message.content,
        }
        if extra:
            fields.update(extra)
        return fields
    
    @classmethod
    def _post_process(cls, fields: Fields) -> Fields:
        fields = dict(fields)
        if "cb" in fields:
            fields.setdefault("callback", fields.pop("cb"))
        
        supplied = {key for key in ("body", "content", "headers") if key in fields}
        fields = super()._post_process(fields)
        
        fields["method"] = (fields.get("method") or "").upper()
        
        # only a body or headers that were actually given become options
        params = dict(fields.get("params") or {})
        body = fields.pop("body")
        headers = fields.pop("headers")
        if supplied & {"body", "content"}:
            params["body"] = body
        elif "body" in params and params["body"] is None:
            params["body"] = ""
        if "headers" in supplied:
            params["headers"] = headers
        elif "headers" in params:
            params["headers"] = normalize_headers(params["headers"] or {})
        fields["params"] = params
        
        return fields
    
    @property
    def headers(self) -> HeaderMap:
        return self.params.get("headers") or {}
    
    @property
    def body(self) -> Any:
        return self.params.get("body", "")
    
    def args(self) -> tuple:
        """
        Get the positional argument list for the transport.
        
        Returns:
            ``(method, uri, key1, value1, ..., callback)``
        """
        options = [item for pair in self.params.items() for item in pair]
        return (self.method, self.uri, *options, self.callback)
    
    def send(self, transport: TransportFunction) -> Any:
        """
        Start the request by calling ``transport(*self.args())``.
        
        Returns whatever the transport returns (typically a guard or
        handle for the in-flight request).
        """
        if not callable(transport):
            raise TransportError(f"{transport!r} is not callable")
        logger.debug(f"Sending {self.method} {self.uri}")
        return transport(*self.args())
    
    def to_foreign_message(self) -> H11Message:
        """
        Convert to an h11 request event plus body.
        
        A Host header is derived from the uri when none is set, and an
        absolute uri is reduced to its path and query for the target.
        
        Raises:
            ConversionError: If h11 rejects the method, target or headers
        """
        uri = self.uri or ""
        parts = urlsplit(uri)
        if parts.netloc:
            target = parts.path or "/"
            if parts.query:
                target = f"{target}?{parts.query}"
        else:
            target = uri or "/"
        
        lines = header_lines(self.headers)
        if parts.netloc and not any(name.lower() == "host" for name, _ in lines):
            lines.insert(0, ("host", parts.netloc))
        
        try:
            event = h11.Request(method=self.method, target=target, headers=lines)
        except h11.LocalProtocolError as e:
            raise ConversionError(f"cannot build request: {e}", cause=e) from e
        
        return H11Message(event, self.body)
