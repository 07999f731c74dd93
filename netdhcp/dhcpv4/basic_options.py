"""Simple DHCPv4 option values: IP lists, integers, strings, masks and code lists."""

from __future__ import annotations

import ipaddress
from typing import Any, Iterable, Optional

from .options import Option, Options
from .types import MessageType, OptionCode

__all__ = [
    "IPs",
    "get_ips",
    "opt_router",
    "opt_ntp_servers",
    "opt_dns",
    "Uint16",
    "get_uint16",
    "opt_max_message_size",
    "opt_message_type",
    "Strings",
    "opt_rfc3004_user_class",
    "IPMask",
    "opt_subnet_mask",
    "OptionCodeList",
    "opt_parameter_request_list",
]

_IPV4_LEN = 4


class IPs(list):
    """A list of IPv4 addresses (RFC 2132, Sections 3.5-3.13 and others)."""

    def __init__(self, addresses: Iterable[Any] = ()) -> None:
        super().__init__(ipaddress.IPv4Address(a) for a in addresses)

    @classmethod
    def from_bytes(cls, data: bytes) -> "IPs":
        """Parse one or more packed IPv4 addresses."""
        data = bytes(data)
        if not data:
            raise ValueError("IP DHCP options must always list at least one IP")
        if len(data) % _IPV4_LEN:
            raise ValueError(f"IP list length {len(data)} is not a multiple of 4")
        return cls(data[i : i + _IPV4_LEN] for i in range(0, len(data), _IPV4_LEN))

    def to_bytes(self) -> bytes:
        return b"".join(ip.packed for ip in self)

    def __str__(self) -> str:
        return ", ".join(str(ip) for ip in self)


def get_ips(code: Any, options: Options) -> Optional[IPs]:
    """Parse a list of IPs from ``code`` in ``options``; None if absent or invalid."""
    data = options.get(code)
    if data is None:
        return None
    try:
        return IPs.from_bytes(data)
    except ValueError:
        return None


def opt_router(*routers: Any) -> Option:
    """A Router option (RFC 2132, Section 3.5)."""
    return Option(OptionCode.ROUTER, IPs(routers))


def opt_ntp_servers(*servers: Any) -> Option:
    """An NTP Servers option (RFC 2132, Section 8.3)."""
    return Option(OptionCode.NTP_SERVERS, IPs(servers))


def opt_dns(*servers: Any) -> Option:
    """A Domain Name Server option (RFC 2132, Section 3.8)."""
    return Option(OptionCode.DOMAIN_NAME_SERVER, IPs(servers))


class Uint16(int):
    """A big-endian 16-bit unsigned value (RFC 2132, Section 9.10)."""

    def __new__(cls, value: int) -> "Uint16":
        value = int(value)
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"value out of range for uint16: {value}")
        return super().__new__(cls, value)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Uint16":  # type: ignore[override]
        data = bytes(data)
        if len(data) != 2:
            raise ValueError(f"expected exactly 2 bytes, got {len(data)}")
        return cls(int.from_bytes(data, "big"))

    def to_bytes(self) -> bytes:  # type: ignore[override]
        return int(self).to_bytes(2, "big")

    def __str__(self) -> str:
        return str(int(self))

    def __repr__(self) -> str:
        return f"Uint16({int(self)})"


def get_uint16(code: Any, options: Options) -> int:
    """Parse a uint16 from ``code``; KeyError if absent, ValueError if malformed."""
    data = options.get(code)
    if data is None:
        raise KeyError(f"option {code} not present")
    return int(Uint16.from_bytes(data))


def opt_max_message_size(size: int) -> Option:
    """A Maximum DHCP Message Size option (RFC 2132, Section 9.10)."""
    return Option(OptionCode.MAXIMUM_DHCP_MESSAGE_SIZE, Uint16(size))


def opt_message_type(message_type: int) -> Option:
    """A DHCP Message Type option."""
    return Option(OptionCode.DHCP_MESSAGE_TYPE, MessageType(message_type))


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


class Strings(list):
    """A list of length-prefixed strings (RFC 3004)."""

    @classmethod
    def from_bytes(cls, data: bytes) -> "Strings":
        data = bytes(data)
        if not data:
            raise ValueError("Strings DHCP option must always list at least one String")
        result = cls()
        pos = 0
        while pos < len(data):
            length = data[pos]
            pos += 1
            if length == 0:
                raise ValueError("DHCP Strings must have length greater than 0")
            if pos + length > len(data):
                raise ValueError(
                    f"string needs {length} bytes, only {len(data) - pos} left"
                )
            result.append(data[pos : pos + length].decode("utf-8", "surrogateescape"))
            pos += length
        return result

    def to_bytes(self) -> bytes:
        out = bytearray()
        for text in self:
            encoded = _encode(text)
            if len(encoded) > 0xFF:
                raise ValueError(f"string too long for option: {len(encoded)} bytes")
            out.append(len(encoded))
            out += encoded
        return bytes(out)

    def __str__(self) -> str:
        return ", ".join(self)


def opt_rfc3004_user_class(values: Iterable[str]) -> Option:
    """A User Class option as described by RFC 3004."""
    return Option(OptionCode.USER_CLASS_INFORMATION, Strings(values))


class IPMask(bytes):
    """A subnet mask (RFC 2132, Section 3.3)."""

    @classmethod
    def from_bytes(cls, data: bytes) -> "IPMask":  # type: ignore[override]
        data = bytes(data)
        if len(data) != _IPV4_LEN:
            raise ValueError(f"subnet mask must be 4 bytes, got {len(data)}")
        return cls(data)

    def to_bytes(self) -> bytes:
        return bytes(self[:_IPV4_LEN])

    def __str__(self) -> str:
        return self.hex() if self else "<nil>"

    def __repr__(self) -> str:
        return f"IPMask({bytes(self)!r})"


def opt_subnet_mask(mask: Any) -> Option:
    """A Subnet Mask option; ``mask`` is bytes or an IPv4 address."""
    raw = mask.packed if hasattr(mask, "packed") else bytes(mask)
    return Option(OptionCode.SUBNET_MASK, IPMask(raw))


class OptionCodeList(list):
    """A list of option codes (RFC 2132, Section 9.8)."""

    def has(self, code: Any) -> bool:
        """Whether ``code`` is in the list."""
        return any(int(c) == int(code) for c in self)

    def add(self, *codes: Any) -> None:
        """Append each code not already present."""
        for code in codes:
            if not self.has(code):
                self.append(code)

    @classmethod
    def from_bytes(cls, data: bytes) -> "OptionCodeList":
        return cls(OptionCode(b) for b in bytes(data))

    def to_bytes(self) -> bytes:
        return bytes(int(c) for c in self)

    def __str__(self) -> str:
        return ", ".join(str(c) for c in sorted(self, key=int))


def opt_parameter_request_list(*codes: Any) -> Option:
    """A Parameter Request List option (RFC 2132, Section 9.8)."""
    return Option(OptionCode.PARAMETER_REQUEST_LIST, OptionCodeList(codes))