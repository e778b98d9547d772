"""src/base_url/exceptions.py

base_url Exceptions hierarchy.
"""

import enum
from typing import Optional


class BaseUrlError(Exception):
    """Base exception for all base_url errors."""


class NotABase(BaseUrlError):
    """
    The URL cannot be used as a base.

    Raised when a URL is flagged "cannot be a base" (``data:``, ``mailto:``,
    ``javascript:``...) or carries no host (``file:///tmp/x``).
    """

    def __init__(self, message: str = "URL cannot be a base"):
        super().__init__(message)


# Alternative name for NotABase.
CannotBeBase = NotABase


class ParseFailed(BaseUrlError, ValueError):
    """
    The underlying URL parser rejected the input.

    The parser's own error is kept verbatim in ``inner`` (and as
    ``__cause__`` when raised through ``from_error``).
    """

    def __init__(self, inner: Optional[BaseException] = None, message: Optional[str] = None):
        self.inner = inner
        if message is None:
            message = f"URL parse failed: {inner}" if inner is not None else "URL parse failed"
        super().__init__(message)

    @classmethod
    def from_error(cls, err: BaseException) -> "ParseFailed":
        """Wrap an error raised by the underlying parser."""
        return cls(err)


class SchemeRefusal(enum.Enum):
    """Why a scheme change was refused."""

    INVALID_SYNTAX = "invalid_syntax"
    SPECIALITY_MISMATCH = "speciality_mismatch"
    REJECTED = "rejected"


class SchemeInvalid(BaseUrlError, ValueError):
    """set_scheme() refused the new scheme. The URL is left unchanged."""

    def __init__(self, scheme: str, reason: SchemeRefusal = SchemeRefusal.REJECTED):
        self.scheme = scheme
        self.reason = reason
        super().__init__(f"Cannot set scheme to {scheme!r} ({reason.value})")


class InvariantViolation(BaseUrlError, AssertionError):
    """
    A BaseUrl invariant was broken.

    Never raised by the checked API for well-formed values; the unchecked
    convenience constructors raise it in place of a recoverable error.
    """


class BuilderActiveError(BaseUrlError, RuntimeError):
    """A path or query builder holds exclusive access to the BaseUrl."""

    def __init__(self, message: str = "BaseUrl is borrowed by an active builder"):
        super().__init__(message)
