"""utils/validators.py

Validation utilities and scheme tables for base_url.
"""

import re
from typing import Optional

# Schemes the URL Standard treats as special (authority-bearing, default ports).
SPECIAL_SCHEMES = frozenset(("http", "https", "ws", "wss", "ftp", "file"))

# Known default ports. gopher is no longer special but its port is still known.
KNOWN_DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
    "gopher": 70,
}

# Port reported in an origin tuple when neither an explicit nor a default port exists.
ORIGIN_PORT_SENTINEL = 0

_SCHEME_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9+.\-]*")


def validate_scheme(scheme: str) -> bool:
    """Check a scheme against ``[a-zA-Z][a-zA-Z0-9+.-]*``."""
    return _SCHEME_RE.fullmatch(scheme) is not None


def is_special_scheme(scheme: str) -> bool:
    """Whether ``scheme`` belongs to the special-scheme set."""
    return scheme.lower() in SPECIAL_SCHEMES


def known_default_port(scheme: str) -> Optional[int]:
    """Default port for ``scheme`` or None when unknown."""
    return KNOWN_DEFAULT_PORTS.get(scheme.lower())


def validate_port(port: int) -> int:
    """
    Validate a port number.

    Args:
        port: Port number to check.

    Returns:
        The port, unchanged.

    Raises:
        ValueError: If ``port`` is not an integer in 0..65535.
    """
    if isinstance(port, bool) or not isinstance(port, int):
        raise ValueError(f"Port must be an integer, got {port!r}")
    if not 0 <= port <= 65535:
        raise ValueError(f"Port out of range: {port}")
    return port
