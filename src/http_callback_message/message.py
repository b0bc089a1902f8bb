"""
Message base class for http_callback_message.

Request and Response objects can be built from three input shapes:

* a single configuration dict of named fields,
* a foreign message (optionally followed by a dict of extra fields),
* the positional argument list used by the transport's calling
  convention.

``classify_input`` tags the constructor arguments with the shape they
have, and ``Message`` turns each shape into a dict of fields, applies the
shared post-processing and stores the result on a frozen dataclass.
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Mapping,
    NamedTuple,
    Optional,
    Tuple,
    Type,
    Union,
)

from typing_extensions import Protocol, TypeAlias

from .exceptions import AbstractOperationError
from .foreign import ForeignMessage
from .headers import HeaderMap, canonical_key, normalize_headers

logger = logging.getLogger(__name__)


Fields: TypeAlias = Dict[str, Any]


class ConfigInput(NamedTuple):
    """A single dict of named fields."""
    fields: Mapping[str, Any]


class ForeignMessageInput(NamedTuple):
    """A foreign message plus optional extra fields."""
    message: ForeignMessage
    extra: Optional[Mapping[str, Any]] = None


class PositionalInput(NamedTuple):
    """An argument list in the transport's positional convention."""
    args: Tuple[Any, ...]


MessageInput = Union[ConfigInput, ForeignMessageInput, PositionalInput]


def classify_input(args: Tuple[Any, ...]) -> MessageInput:
    """
    Tag constructor arguments with their input shape.
    
    Args:
        args: The positional arguments given to the constructor
        
    Returns:
        ConfigInput, ForeignMessageInput or PositionalInput; anything that
        is not recognizably one of the first two is positional
    """
    if len(args) == 1 and isinstance(args[0], Mapping):
        return ConfigInput(args[0])
    
    if args and isinstance(args[0], ForeignMessage):
        if len(args) == 1:
            return ForeignMessageInput(args[0])
        if len(args) == 2 and (args[1] is None or isinstance(args[1], Mapping)):
            return ForeignMessageInput(args[0], args[1])
    
    return PositionalInput(tuple(args))


class ArgParser(Protocol):
    """Operations every Message variant has to provide."""
    
    @classmethod
    def parse_args(cls, *args: Any) -> Fields:
        ...
    
    @classmethod
    def from_foreign_message(
        cls,
        message: ForeignMessage,
        extra: Optional[Mapping[str, Any]] = None,
    ) -> Fields:
        ...


def _from_config(cls: Type["Message"], source: ConfigInput) -> Fields:
    return dict(source.fields)


def _from_foreign_message(cls: Type[ArgParser], source: ForeignMessageInput) -> Fields:
    return dict(cls.from_foreign_message(source.message, source.extra))


def _from_positional(cls: Type[ArgParser], source: PositionalInput) -> Fields:
    return dict(cls.parse_args(*source.args))


_INPUT_HANDLERS: Dict[type, Callable[[Any, Any], Fields]] = {
    ConfigInput: _from_config,
    ForeignMessageInput: _from_foreign_message,
    PositionalInput: _from_positional,
}


@dataclass(frozen=True, init=False)
class Message:
    """
    Immutable base for Request and Response.
    
    Cannot be instantiated directly: variants supply ``parse_args``
    and ``from_foreign_message`` and declare their fields as dataclass
    fields. Every container handed to the constructor is copied, so later
    changes to the caller's dicts never show through.
    """
    
    if TYPE_CHECKING:
        body: Any
        headers: HeaderMap
    
    # fields hold dicts
    __hash__ = None  # type: ignore[assignment]
    
    def __init__(self, *args: Any) -> None:
        if type(self) is Message:
            raise AbstractOperationError("Message", "__init__")
        source = classify_input(args)
        fields = self._build_fields(source)
        fields = self._post_process(fields)
        self._seal(fields)
    
    @classmethod
    def _build_fields(cls, source: MessageInput) -> Fields:
        logger.debug(f"Building {cls.__name__} from {type(source).__name__}")
        handler = _INPUT_HANDLERS[type(source)]
        return handler(cls, source)
    
    @classmethod
    def _post_process(cls, fields: Fields) -> Fields:
        """Apply the content alias, the body default and header normalization."""
        fields = dict(fields)
        
        if "content" in fields:
            fields["body"] = fields.pop("content")
        
        if fields.get("body") is None:
            fields["body"] = ""
        
        headers = fields.get("headers")
        fields["headers"] = normalize_headers(headers) if headers else {}
        
        return fields
    
    def _seal(self, fields: Fields) -> None:
        for f in dataclasses.fields(self):
            if f.name in fields:
                value = fields[f.name]
            elif f.default_factory is not dataclasses.MISSING:
                value = f.default_factory()
            elif f.default is not dataclasses.MISSING:
                value = f.default
            else:
                value = None
            object.__setattr__(self, f.name, value)
    
    @classmethod
    def parse_args(cls, *args: Any) -> Fields:
        """
        Turn a positional argument list into a dict of fields.
        
        Raises:
            AbstractOperationError: If the variant does not override it
        """
        raise AbstractOperationError(cls.__name__, "parse_args")
    
    @classmethod
    def from_foreign_message(
        cls,
        message: ForeignMessage,
        extra: Optional[Mapping[str, Any]] = None,
    ) -> Fields:
        """
        Turn a foreign message (plus extra fields) into a dict of fields.
        
        Raises:
            AbstractOperationError: If the variant does not override it
        """
        raise AbstractOperationError(cls.__name__, "from_foreign_message")
    
    @property
    def content(self) -> Any:
        """Alias for ``body``."""
        return self.body
    
    def header(self, name: str) -> Any:
        """
        Get a header value by name.
        
        The name is canonicalized first, so ``"User-Agent"``,
        ``"user_agent"`` and ``"user-agent"`` all find the same header.
        Returns None if the header is not present.
        """
        return self.headers.get(canonical_key(name))
