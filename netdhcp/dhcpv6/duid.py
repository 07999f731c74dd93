"""DHCPv6 unique identifiers (RFC 3315) and well-known DHCPv6 addresses."""

from __future__ import annotations

import enum
import ipaddress
import struct
from dataclasses import dataclass

__all__ = [
    "DEFAULT_CLIENT_PORT",
    "DEFAULT_SERVER_PORT",
    "ALL_DHCP_RELAY_AGENTS_AND_SERVERS",
    "ALL_DHCP_SERVERS",
    "HW_TYPE_ETHERNET",
    "DuidType",
    "Duid",
    "duid_from_bytes",
]

DEFAULT_CLIENT_PORT = 546
DEFAULT_SERVER_PORT = 547

ALL_DHCP_RELAY_AGENTS_AND_SERVERS = ipaddress.IPv6Address("ff02::1:2")
ALL_DHCP_SERVERS = ipaddress.IPv6Address("ff05::1:3")

HW_TYPE_ETHERNET = 1


class DuidType(enum.IntEnum):
    """DUID types."""

    LLT = 1
    EN = 2
    LL = 3
    UUID = 4

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 0xFFFF:
            member = int.__new__(cls, value)
            member._name_ = f"UNKNOWN_{value}"
            member._value_ = value
            return cls._value2member_map_.setdefault(value, member)
        return None

    def __str__(self) -> str:
        return _DUID_TYPE_NAMES.get(int(self), "Unknown")

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_DUID_TYPE_NAMES = {1: "DUID-LLT", 2: "DUID-EN", 3: "DUID-LL", 4: "DUID-UUID"}


@dataclass
class Duid:
    """A DHCP Unique Identifier; only the fields of its type are serialized."""

    type: DuidType = DuidType(0)
    hw_type: int = 0
    time: int = 0
    link_layer_addr: bytes = b""
    enterprise_number: int = 0
    enterprise_identifier: bytes = b""
    uuid: bytes = b""
    opaque: bytes = b""

    def __post_init__(self) -> None:
        self.type = DuidType(int(self.type))
        for name in ("link_layer_addr", "enterprise_identifier", "uuid", "opaque"):
            value = getattr(self, name)
            setattr(self, name, b"" if value is None else bytes(value))

    def length(self) -> int:
        """The serialized length in bytes."""
        if self.type == DuidType.LLT:
            return 8 + len(self.link_layer_addr)
        if self.type == DuidType.LL:
            return 4 + len(self.link_layer_addr)
        if self.type == DuidType.EN:
            return 6 + len(self.enterprise_identifier)
        if self.type == DuidType.UUID:
            return 18
        return 2 + len(self.opaque)

    def to_bytes(self) -> bytes:
        if self.type == DuidType.LLT:
            return (
                struct.pack(">HHI", self.type, self.hw_type, self.time)
                + self.link_layer_addr
            )
        if self.type == DuidType.LL:
            return struct.pack(">HH", self.type, self.hw_type) + self.link_layer_addr
        if self.type == DuidType.EN:
            return (
                struct.pack(">HI", self.type, self.enterprise_number)
                + self.enterprise_identifier
            )
        if self.type == DuidType.UUID:
            return struct.pack(">H", self.type) + self.uuid
        return struct.pack(">H", self.type) + self.opaque

    def __str__(self) -> str:
        hwaddr = ""
        if self.hw_type == HW_TYPE_ETHERNET:
            hwaddr = ":".join(f"{b:02x}" for b in self.link_layer_addr)
        return f"DUID{{type={self.type} hwtype={self.hw_type} hwaddr={hwaddr}}}"


def duid_from_bytes(data: bytes) -> Duid:
    """Parse a DUID; ValueError if it is too short for its type."""
    data = bytes(data)
    if len(data) < 2:
        raise ValueError("Invalid DUID: shorter than 2 bytes")
    duid_type = DuidType(int.from_bytes(data[0:2], "big"))
    if duid_type == DuidType.LLT:
        if len(data) < 8:
            raise ValueError("Invalid DUID-LLT: shorter than 8 bytes")
        hw_type, time = struct.unpack(">HI", data[2:8])
        return Duid(type=duid_type, hw_type=hw_type, time=time, link_layer_addr=data[8:])
    if duid_type == DuidType.LL:
        if len(data) < 4:
            raise ValueError("Invalid DUID-LL: shorter than 4 bytes")
        (hw_type,) = struct.unpack(">H", data[2:4])
        return Duid(type=duid_type, hw_type=hw_type, link_layer_addr=data[4:])
    if duid_type == DuidType.EN:
        if len(data) < 6:
            raise ValueError("Invalid DUID-EN: shorter than 6 bytes")
        (number,) = struct.unpack(">I", data[2:6])
        return Duid(
            type=duid_type, enterprise_number=number, enterprise_identifier=data[6:]
        )
    if duid_type == DuidType.UUID:
        if len(data) != 18:
            raise ValueError(f"Invalid DUID-UUID length. Expected 18, got {len(data)}")
        return Duid(type=duid_type, uuid=data[2:18])
    return Duid(type=duid_type, opaque=data[2:])