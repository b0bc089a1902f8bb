"""
Header normalization for http_callback_message.

Header maps are plain dicts keyed by canonical header names: underscores
become dashes and the whole name is lower-cased. Response pseudo-headers
(status, reason and other transport metadata) are told apart from real
headers by their raw key: a single capitalized word with no dash or
underscore, e.g. ``Status``. ``Content-Type`` is a regular header.
"""

import re
from typing import Any, Callable, Dict, Mapping, Tuple

from typing_extensions import Protocol, TypeAlias


HeaderMap: TypeAlias = Dict[str, Any]
PseudoHeaderMap: TypeAlias = Dict[str, Any]

# matches every pseudo-header the transport emits: Status, Reason,
# HTTPVersion, URL, Redirect, OrigStatus, OrigReason
_PSEUDO_HEADER = re.compile(r"^[A-Z][^-_]*$")


class HeaderScanner(Protocol):
    """Anything that reports its headers one (name, value) pair at a time."""
    
    def scan(self, fn: Callable[[str, Any], None]) -> None:
        ...


def canonical_key(raw: str) -> str:
    """Return ``raw`` with underscores turned into dashes, lower-cased."""
    return raw.replace("_", "-").lower()


def normalize_headers(raw: Mapping[str, Any]) -> HeaderMap:
    """
    Return a new header map with every key canonicalized.
    
    Keys that collide after canonicalization are not merged: the one
    seen last wins.
    """
    return {canonical_key(key): value for key, value in raw.items()}


def hashify_foreign_headers(foreign: HeaderScanner) -> HeaderMap:
    """
    Build a header map from a foreign message's ``scan`` callback.
    
    Repeated headers (several ``Set-Cookie`` lines, say) are joined with
    a comma in the order they were reported.
    """
    headers: HeaderMap = {}
    
    def collect(key: str, value: Any) -> None:
        name = canonical_key(key)
        if name in headers:
            headers[name] = f"{headers[name]},{value}"
        else:
            headers[name] = value
    
    foreign.scan(collect)
    return headers


def is_pseudo_header(raw: Any) -> bool:
    return isinstance(raw, str) and _PSEUDO_HEADER.match(raw) is not None


def classify_headers(raw: Mapping[str, Any]) -> Tuple[HeaderMap, PseudoHeaderMap]:
    """
    Split a transport header map into regular headers and pseudo-headers.
    
    Args:
        raw: Header map as delivered to a completion callback
        
    Returns:
        ``(headers, pseudo_headers)``; regular keys are canonicalized,
        pseudo-header keys are kept exactly as given
    """
    regular: HeaderMap = {}
    pseudo: PseudoHeaderMap = {}
    for key, value in raw.items():
        if is_pseudo_header(key):
            pseudo[key] = value
        else:
            regular[key] = value
    return normalize_headers(regular), pseudo
