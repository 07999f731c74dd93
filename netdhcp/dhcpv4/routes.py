"""The Classless Static Route option (RFC 3442)."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Any

from .options import Option
from .types import OptionCode

__all__ = ["Route", "Routes", "opt_classless_static_route"]


@dataclass(frozen=True)
class Route:
    """A destination network and the router to reach it through."""

    dest: ipaddress.IPv4Network
    router: ipaddress.IPv4Address

    def __post_init__(self) -> None:
        object.__setattr__(self, "dest", ipaddress.IPv4Network(self.dest, strict=False))
        object.__setattr__(self, "router", ipaddress.IPv4Address(self.router))

    def to_bytes(self) -> bytes:
        """Mask width, the significant destination octets, then the router."""
        ones = self.dest.prefixlen
        significant = (ones + 7) // 8
        return (
            bytes([ones])
            + self.dest.network_address.packed[:significant]
            + self.router.packed
        )

    def __str__(self) -> str:
        return f"route to {self.dest} via {self.router}"


class Routes(list):
    """A list of classless static routes."""

    @classmethod
    def from_bytes(cls, data: bytes) -> "Routes":
        data = bytes(data)
        routes = cls()
        pos = 0
        while pos < len(data):
            mask = data[pos]
            pos += 1
            if mask > 32:
                raise ValueError(f"invalid mask length {mask} in route option")
            significant = (mask + 7) // 8
            if pos + significant + 4 > len(data):
                raise ValueError("short route option data")
            dest = data[pos : pos + significant] + bytes(4 - significant)
            pos += significant
            router = data[pos : pos + 4]
            pos += 4
            network = ipaddress.IPv4Network(
                (ipaddress.IPv4Address(dest), mask), strict=False
            )
            routes.append(Route(network, ipaddress.IPv4Address(router)))
        return routes

    def to_bytes(self) -> bytes:
        return b"".join(route.to_bytes() for route in self)

    def __str__(self) -> str:
        return "; ".join(str(route) for route in self)


def opt_classless_static_route(*routes: Any) -> Option:
    """A Classless Static Route option (RFC 3442)."""
    return Option(OptionCode.CLASSLESS_STATIC_ROUTE, Routes(routes))