"""src/base_url/url/builders.py

Chainable builders over a BaseUrl's path segments and query pairs.
"""

from typing import TYPE_CHECKING, Any, Iterable, Optional, Tuple

from base_url.utils.encoding import encode_path_segment, form_urlencode, serialize_pair

if TYPE_CHECKING:
    from base_url.url.base import BaseUrl

__all__ = ["PathSegmentsMut", "QueryPairsMut"]


class _Builder:
    """
    Shared borrow handling.

    Every operation writes through to the BaseUrl immediately. Entering the
    builder as a context manager takes an exclusive guard on the BaseUrl:
    its mutators and any other builder raise BuilderActiveError until the
    block exits.
    """

    __slots__ = ("_base",)

    def __init__(self, base: "BaseUrl"):
        self._base = base

    def __enter__(self):
        self._base._acquire(self)
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._base._release(self)


class PathSegmentsMut(_Builder):
    """
    Edit the path as a list of segments.

    Pushed segments are percent-encoded, including ``/`` and ``%``; the
    ``.`` and ``..`` segments are ignored.
    """

    __slots__ = ()

    def _rest(self) -> str:
        # Path after the leading "/"; empty for "/" and for an empty path.
        return self._base._url.pathname[1:]

    def _write(self, rest: str) -> None:
        self._base._check_access(self)
        self._base._url.pathname = "/" + rest

    def clear(self) -> "PathSegmentsMut":
        """Remove all segments, leaving the path ``/``."""
        self._write("")
        return self

    def pop_if_empty(self) -> "PathSegmentsMut":
        """Remove the last segment if it is empty (a trailing ``/``)."""
        rest = self._rest()
        if rest.endswith("/"):
            self._write(rest[:-1])
        return self

    def pop(self) -> "PathSegmentsMut":
        """Remove the last segment, if any."""
        rest = self._rest()
        if rest:
            self._write(rest[: max(rest.rfind("/"), 0)])
        return self

    def push(self, segment: str) -> "PathSegmentsMut":
        """Append one segment."""
        return self.extend((segment,))

    def extend(self, segments: Iterable[str]) -> "PathSegmentsMut":
        """Append each segment in order."""
        special = self._base._is_special()
        rest = self._rest()
        for segment in segments:
            if segment in (".", ".."):
                continue
            if rest:
                rest += "/"
            rest += encode_path_segment(segment, special=special)
        self._write(rest)
        return self


class QueryPairsMut(_Builder):
    """
    Edit the query as application/x-www-form-urlencoded pairs.

    Pairs are appended after any existing query content.
    """

    __slots__ = ()

    def _current(self) -> str:
        return self._base.query() or ""

    def _write(self, query: str) -> None:
        self._base._check_access(self)
        self._base._url.search = "?" + query

    def _append(self, chunk: str) -> "QueryPairsMut":
        query = self._current()
        self._write(f"{query}&{chunk}" if query else chunk)
        return self

    def clear(self) -> "QueryPairsMut":
        """Drop every pair, leaving an empty query."""
        self._write("")
        return self

    def append_pair(self, name: str, value: str) -> "QueryPairsMut":
        """Append ``name=value``."""
        return self._append(serialize_pair(name, value))

    def append_key_only(self, name: str) -> "QueryPairsMut":
        """Append ``name`` without ``=``."""
        return self._append(form_urlencode(name))

    def extend_pairs(self, pairs: Iterable[Tuple[str, Optional[str]]]) -> "QueryPairsMut":
        """
        Append every pair in order.

        A pair whose value is None is written key-only.
        """
        chunks = [
            form_urlencode(name) if value is None else serialize_pair(name, value)
            for name, value in pairs
        ]
        if chunks:
            self._append("&".join(chunks))
        return self

    def finish(self) -> "BaseUrl":
        """Release the builder and return the BaseUrl it edited."""
        self._base._release(self)
        return self._base
