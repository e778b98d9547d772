"""src/base_url/utils/__init__.py"""

from .encoding import encode_path_segment, form_urlencode, iter_form_pairs, serialize_pair
from .logging import configure_logging, get_logger, resolve_log_level
from .validators import (
    KNOWN_DEFAULT_PORTS,
    ORIGIN_PORT_SENTINEL,
    SPECIAL_SCHEMES,
    is_special_scheme,
    known_default_port,
    validate_port,
    validate_scheme,
)

__all__ = [
    "KNOWN_DEFAULT_PORTS",
    "ORIGIN_PORT_SENTINEL",
    "SPECIAL_SCHEMES",
    "configure_logging",
    "encode_path_segment",
    "form_urlencode",
    "get_logger",
    "is_special_scheme",
    "iter_form_pairs",
    "known_default_port",
    "resolve_log_level",
    "serialize_pair",
    "validate_port",
    "validate_scheme",
]
