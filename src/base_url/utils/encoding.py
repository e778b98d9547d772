"""utils/encoding.py

Percent-encoding helpers for path segments and form-urlencoded query pairs.
"""

import urllib.parse
from typing import Iterator, Tuple

# Printable ASCII kept as-is inside a path segment. Everything else, including
# "/" and "%", is percent-encoded.
_SEGMENT_SAFE = "!$&'()*+,;=:@[]^|"


def encode_path_segment(segment: str, special: bool = True) -> str:
    """
    Percent-encode a single path segment.

    Args:
        segment: Raw segment text.
        special: Whether the URL has a special scheme, in which case ``\\``
            is a path separator and must be encoded too.

    Returns:
        The encoded segment, safe to join with ``/``.
    """
    safe = _SEGMENT_SAFE if special else _SEGMENT_SAFE + "\\"
    return urllib.parse.quote(segment, safe=safe)


def form_urlencode(value: str) -> str:
    """Encode a name or value with the application/x-www-form-urlencoded rules."""
    # quote_plus always keeps "~", the form encoding does not.
    return urllib.parse.quote_plus(value, safe="*").replace("~", "%7E")


def serialize_pair(name: str, value: str) -> str:
    """Serialize one ``name=value`` pair."""
    return f"{form_urlencode(name)}={form_urlencode(value)}"


def iter_form_pairs(query: str) -> Iterator[Tuple[str, str]]:
    """
    Lazily decode an application/x-www-form-urlencoded string.

    Empty chunks are skipped, a chunk without ``=`` yields an empty value.
    """
    for chunk in query.split("&"):
        if not chunk:
            continue
        name, _, value = chunk.partition("=")
        yield urllib.parse.unquote_plus(name), urllib.parse.unquote_plus(value)
