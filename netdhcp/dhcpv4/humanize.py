"""Human-readable interpretation of DHCPv4 option data by option code."""

from __future__ import annotations

import ipaddress
from collections.abc import Callable
from typing import Any, Optional

from .basic_options import IPMask, IPs, OptionCodeList, Strings, Uint16
from .options import OptionGeneric, OptionHumanizer, Options
from .relay import RelayOptions
from .routes import Routes
from .types import MessageType, OptionCode
from .vivc import VIVCIdentifiers

__all__ = ["get_option", "parse_option", "summary"]


class _Text(str):
    """A string option value."""

    @classmethod
    def from_bytes(cls, data: bytes) -> "_Text":
        return cls(bytes(data).decode("utf-8", "replace"))


def _ip_from_bytes(data: bytes) -> ipaddress.IPv4Address:
    data = bytes(data)
    if len(data) != 4:
        raise ValueError(f"IPv4 address must be 4 bytes, got {len(data)}")
    return ipaddress.IPv4Address(data)


def _user_class(data: bytes) -> object:
    try:
        return Strings.from_bytes(data)
    except ValueError:
        return _Text.from_bytes(data)


_DECODERS: dict[int, Callable[[bytes], object]] = {
    OptionCode.ROUTER: IPs.from_bytes,
    OptionCode.DOMAIN_NAME_SERVER: IPs.from_bytes,
    OptionCode.NTP_SERVERS: IPs.from_bytes,
    OptionCode.SERVER_IDENTIFIER: IPs.from_bytes,
    OptionCode.BROADCAST_ADDRESS: _ip_from_bytes,
    OptionCode.REQUESTED_IP_ADDRESS: _ip_from_bytes,
    OptionCode.SUBNET_MASK: IPMask.from_bytes,
    OptionCode.DHCP_MESSAGE_TYPE: MessageType.from_bytes,
    OptionCode.PARAMETER_REQUEST_LIST: OptionCodeList.from_bytes,
    OptionCode.HOST_NAME: _Text.from_bytes,
    OptionCode.DOMAIN_NAME: _Text.from_bytes,
    OptionCode.ROOT_PATH: _Text.from_bytes,
    OptionCode.CLASS_IDENTIFIER: _Text.from_bytes,
    OptionCode.TFTP_SERVER_NAME: _Text.from_bytes,
    OptionCode.BOOTFILE_NAME: _Text.from_bytes,
    OptionCode.RELAY_AGENT_INFORMATION: RelayOptions.from_bytes,
    OptionCode.MAXIMUM_DHCP_MESSAGE_SIZE: Uint16.from_bytes,
    OptionCode.USER_CLASS_INFORMATION: _user_class,
    OptionCode.VENDOR_IDENTIFYING_VENDOR_CLASS: VIVCIdentifiers.from_bytes,
    OptionCode.CLASSLESS_STATIC_ROUTE: Routes.from_bytes,
}


def get_option(code: Any, data: bytes, vendor_decoder: Optional[Any]) -> object:
    """Decode ``data`` by ``code``; fall back to raw bytes when undecodable.

    ``vendor_decoder`` interprets the Vendor Specific Information option; it
    must offer ``from_bytes(data)`` returning a printable value.
    """
    key = int(code)
    if key == OptionCode.VENDOR_SPECIFIC_INFORMATION:
        decoder = vendor_decoder.from_bytes if vendor_decoder is not None else None
    else:
        decoder = _DECODERS.get(key)
    if decoder is not None:
        try:
            return decoder(bytes(data))
        except ValueError:
            pass
    return OptionGeneric(bytes(data))


def parse_option(code: Any, data: bytes) -> object:
    """Decode option data with no vendor-specific decoder."""
    return get_option(code, data, None)


def summary(options: Options, vendor_decoder: Optional[Any] = None) -> str:
    """Render ``options`` using ``vendor_decoder`` for vendor-specific data."""
    return options.to_string(
        OptionHumanizer(
            value_humanizer=lambda code, data: get_option(code, data, vendor_decoder),
            code_humanizer=OptionCode,
        )
    )