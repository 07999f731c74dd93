"""The Relay Agent Information option (RFC 3046) and its sub-option space."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

from .options import Option, OptionHumanizer, Options, options_from_list
from .types import OptionCode

__all__ = [
    "RaiSubOptionCode",
    "RelayOptions",
    "opt_relay_agent_info",
    "get_relay_agent_info",
]


class RaiSubOptionCode(enum.IntEnum):
    """Relay Agent Information (option 82) sub-option codes."""

    AGENT_CIRCUIT_ID = 1  # RFC 3046
    AGENT_REMOTE_ID = 2  # RFC 3046
    DOCSIS_DEVICE_CLASS = 4  # RFC 3256
    LINK_SELECTION = 5  # RFC 3527
    SUBSCRIBER_ID = 6  # RFC 3993
    RADIUS_ATTRIBUTES = 7  # RFC 4014
    AUTHENTICATION = 8  # RFC 4030
    VENDOR_SPECIFIC_INFORMATION = 9  # RFC 4243
    RELAY_AGENT_FLAGS = 10  # RFC 5010
    SERVER_IDENTIFIER_OVERRIDE = 11  # RFC 5107
    RELAY_SOURCE_PORT = 19  # RFC 8357
    VIRTUAL_SUBNET_SELECTION = 151  # RFC 6607
    VIRTUAL_SUBNET_SELECTION_CONTROL = 152  # RFC 6607

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 0xFF:
            member = int.__new__(cls, value)
            member._name_ = f"UNKNOWN_{value}"
            member._value_ = value
            return cls._value2member_map_.setdefault(value, member)
        return None

    def __str__(self) -> str:
        return _SUB_OPTION_NAMES.get(int(self), f"unknown ({int(self)})")

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_SUB_OPTION_NAMES = {
    1: "Agent Circuit ID Sub-option",
    2: "Agent Remote ID Sub-option",
    4: "DOCSIS Device Class Sub-option",
    5: "Link Selection Sub-option",
    6: "Subscriber ID Sub-option",
    7: "RADIUS Attributes Sub-option",
    8: "Authentication Sub-option",
    9: "Vendor Specific Sub-option",
    10: "Relay Agent Flags Sub-option",
    11: "Server Identifier Override Sub-option",
    19: "Relay Source Port Sub-option",
    151: "Virtual Subnet Selection Sub-option",
    152: "Virtual Subnet Selection Control Sub-option",
}


@dataclass(frozen=True)
class _SubOptionValue:
    data: bytes

    def __str__(self) -> str:
        text = self.data.decode("utf-8", "replace")
        return f"{text} ([{' '.join(str(b) for b in self.data)}])"


_RELAY_HUMANIZER = OptionHumanizer(
    value_humanizer=lambda code, data: _SubOptionValue(bytes(data)),
    code_humanizer=RaiSubOptionCode,
)


@dataclass
class RelayOptions:
    """Options in the Relay Agent Information sub-option space."""

    options: Options = field(default_factory=Options)

    @classmethod
    def from_bytes(cls, data: bytes) -> "RelayOptions":
        """Parse relay agent sub-options; raises InvalidOptionsError when malformed."""
        options = Options()
        options.from_bytes(data)
        return cls(options)

    def to_bytes(self) -> bytes:
        return self.options.to_bytes()

    def __str__(self) -> str:
        return "\n" + self.options.to_string(_RELAY_HUMANIZER)


def opt_relay_agent_info(*options: Option) -> Option:
    """A Relay Agent Information option (RFC 3046) holding the given sub-options."""
    return Option(
        OptionCode.RELAY_AGENT_INFORMATION, RelayOptions(options_from_list(*options))
    )


def get_relay_agent_info(options: Options) -> Optional[RelayOptions]:
    """The relay agent sub-options in ``options``; None if absent or malformed."""
    data: Any = options.get(OptionCode.RELAY_AGENT_INFORMATION)
    if data is None:
        return None
    try:
        return RelayOptions.from_bytes(data)
    except ValueError:
        return None