"""
Transport interface for http_callback_message.

The transport performs the actual HTTP I/O. This package never
implements one; it only shapes the arguments a transport is called with
and the arguments it hands to the completion callback.
"""

from typing import Any, Mapping

from typing_extensions import Protocol


class CompletionCallback(Protocol):
    """Called by the transport once with the response body and headers."""
    
    def __call__(self, body: Any, headers: Mapping[str, Any]) -> Any:
        ...


class TransportFunction(Protocol):
    """
    Request-initiation function of an asynchronous HTTP transport.
    
    Called as ``transport(method, uri, *options, callback)`` where
    ``options`` alternate between connection option names and values
    and ``callback`` is a CompletionCallback.
    """
    
    def __call__(self, method: str, uri: str, *args: Any) -> Any:
        ...
