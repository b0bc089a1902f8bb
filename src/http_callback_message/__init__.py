"""
http_callback_message - Request/Response objects for callback HTTP clients

Read-only value objects wrapping the positional argument conventions of
an asynchronous, callback-based HTTP client: the request function's
``(method, uri, options..., callback)`` and the completion callback's
``(body, headers)``.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

# Import main components for easy access
from .request import Request
from .response import Response, response_handler
from .message import (
    Message,
    ArgParser,
    ConfigInput,
    ForeignMessageInput,
    PositionalInput,
    classify_input,
)
from .foreign import ForeignMessage, H11Message
from .headers import (
    canonical_key,
    normalize_headers,
    hashify_foreign_headers,
    classify_headers,
)
from .transport import CompletionCallback, TransportFunction
from .exceptions import (
    MessageError,
    ArgumentError,
    AbstractOperationError,
    TransportError,
    ConversionError,
)

__all__ = [
    "Request",
    "Response",
    "response_handler",
    "Message",
    "ArgParser",
    "ConfigInput",
    "ForeignMessageInput",
    "PositionalInput",
    "classify_input",
    "ForeignMessage",
    "H11Message",
    "canonical_key",
    "normalize_headers",
    "hashify_foreign_headers",
    "classify_headers",
    "CompletionCallback",
    "TransportFunction",
    "MessageError",
    "ArgumentError",
    "AbstractOperationError",
    "TransportError",
    "ConversionError",
]
