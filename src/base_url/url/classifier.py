"""src/base_url/url/classifier.py

Base-suitability predicate.

A URL can serve as a base when it is hierarchical (its path is not opaque,
unlike ``data:`` or ``mailto:`` URLs) and it has an authority with a
non-empty host. Both facts are read off the stored serialization, so
classification never reparses.
"""

from ada_url import URL

__all__ = ["cannot_be_a_base", "has_authority", "is_base_suitable"]


def _after_scheme(url: URL) -> str:
    return url.href[len(url.protocol) :]


def cannot_be_a_base(url: URL) -> bool:
    """True for URLs with an opaque path such as ``mailto:user@example.org``."""
    return not _after_scheme(url).startswith("/")


def has_authority(url: URL) -> bool:
    """True when the serialization carries ``//`` after the scheme."""
    return _after_scheme(url).startswith("//")


def is_base_suitable(url: URL) -> bool:
    """
    Decide whether ``url`` may be wrapped in a BaseUrl.

    Args:
        url: A parsed URL value.

    Returns:
        True iff the URL is not "cannot be a base" and has a non-empty host.
    """
    return not cannot_be_a_base(url) and has_authority(url) and url.hostname != ""
