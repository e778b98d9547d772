"""src/base_url/url/__init__.py

URL layer of base_url: the base-suitability classifier, host values and the
BaseUrl wrapper with its builders.
"""

from .base import BaseUrl
from .builders import PathSegmentsMut, QueryPairsMut
from .classifier import cannot_be_a_base, has_authority, is_base_suitable
from .host import Host, HostKind, OriginTuple

__all__ = [
    "BaseUrl",
    "Host",
    "HostKind",
    "OriginTuple",
    "PathSegmentsMut",
    "QueryPairsMut",
    "cannot_be_a_base",
    "has_authority",
    "is_base_suitable",
]
