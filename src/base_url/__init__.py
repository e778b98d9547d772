"""src/base_url/__init__.py

base_url - URLs that are guaranteed to be usable as a base.

base_url wraps a WHATWG URL (parsed by ``ada_url``) and admits only URLs
that are hierarchical and carry a host, like ``http://...``, ``ftp://...``
or ``ws://...``. Opaque URLs such as ``data:``, ``mailto:`` or
``javascript:`` are rejected once, at construction, so the accessors that
would otherwise have to report a missing host or path never fail.

Key Features:
    - Base-suitability checked once, at construction
    - Total host, host_str and path_segments accessors
    - Mutators that refuse changes which would break base-suitability
    - Chainable path-segment and query-pair builders
    - Full type hints (PEP 561)

Example:
    Parsing text::

        from base_url import BaseUrl, NotABase, ParseFailed

        url = BaseUrl.from_text("ftp://example.org/foo")
        scheme, host, port = url.origin()   # ("ftp", Host.domain("example.org"), 21)

        try:
            BaseUrl.from_text("data:text/plain,Hello?World#")
        except NotABase:
            ...

    Editing in place::

        url = BaseUrl.from_text("https://example.org/")
        url.path_segments_mut().push("sitemaps").push("sitemap_1.xml")
        url.as_str()   # "https://example.org/sitemaps/sitemap_1.xml"
"""

from ada_url import URL

from base_url.exceptions import (
    BaseUrlError,
    BuilderActiveError,
    CannotBeBase,
    InvariantViolation,
    NotABase,
    ParseFailed,
    SchemeInvalid,
    SchemeRefusal,
)
from base_url.url import (
    BaseUrl,
    Host,
    HostKind,
    OriginTuple,
    PathSegmentsMut,
    QueryPairsMut,
    is_base_suitable,
)
from base_url.version import __version__

__all__ = [
    "URL",
    "BaseUrl",
    "Host",
    "HostKind",
    "OriginTuple",
    "PathSegmentsMut",
    "QueryPairsMut",
    "is_base_suitable",
    "BaseUrlError",
    "BuilderActiveError",
    "CannotBeBase",
    "InvariantViolation",
    "NotABase",
    "ParseFailed",
    "SchemeInvalid",
    "SchemeRefusal",
    "__version__",
]
