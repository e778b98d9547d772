"""src/base_url/url/host.py

Host values and origin tuples.
"""

import enum
import ipaddress
from dataclasses import dataclass
from typing import Tuple, Union

__all__ = ["Host", "HostKind", "OriginTuple"]

HostValue = Union[str, ipaddress.IPv4Address, ipaddress.IPv6Address]


class HostKind(enum.Enum):
    """Which form a host takes."""

    DOMAIN = "domain"
    IPV4 = "ipv4"
    IPV6 = "ipv6"


@dataclass(frozen=True)
class Host:
    """
    A parsed host: a domain name, an IPv4 address or an IPv6 address.

    Attributes:
        kind: The host form.
        value: ``str`` for domains, ``ipaddress`` objects for addresses.
    """

    kind: HostKind
    value: HostValue

    @classmethod
    def domain(cls, name: str) -> "Host":
        """Domain host (also used for opaque hosts of non-special URLs)."""
        return cls(HostKind.DOMAIN, name)

    @classmethod
    def ipv4(cls, address: Union[str, int, ipaddress.IPv4Address]) -> "Host":
        """IPv4 host."""
        return cls(HostKind.IPV4, ipaddress.IPv4Address(address))

    @classmethod
    def ipv6(cls, address: Union[str, int, ipaddress.IPv6Address]) -> "Host":
        """IPv6 host."""
        return cls(HostKind.IPV6, ipaddress.IPv6Address(address))

    @classmethod
    def from_serialized(cls, host: str, special: bool) -> "Host":
        """
        Rebuild a Host from its URL serialization.

        The serialization comes from a WHATWG parser, so an IPv4 host of a
        special URL is always a canonical dotted quad and an IPv6 host is
        always bracketed.
        """
        if host.startswith("[") and host.endswith("]"):
            return cls.ipv6(host[1:-1])
        if special:
            try:
                return cls.ipv4(host)
            except ipaddress.AddressValueError:
                pass
        return cls.domain(host)

    @property
    def is_domain(self) -> bool:
        return self.kind is HostKind.DOMAIN

    def __str__(self) -> str:
        if self.kind is HostKind.IPV6:
            return f"[{self.value.compressed}]"  # type: ignore[union-attr]
        return str(self.value)


# (scheme, host, port) of a base-suitable URL.
OriginTuple = Tuple[str, Host, int]
