"""Parsing of relay agent circuit IDs into network interface coordinates."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..options import Options
from ..relay import RaiSubOptionCode, get_relay_agent_info

__all__ = ["CircuitID", "match_circuit_id", "parse_circuit_id"]


@dataclass
class CircuitID:
    """The interface a circuit ID names, in vendor-neutral parts."""

    slot: str = ""
    module: str = ""
    port: str = ""
    sub_port: str = ""
    vlan: str = ""

    def format_circuit_id(self) -> str:
        """The comma-separated form used in ZTP bootfile URLs."""
        return f"{self.slot},{self.module},{self.port},{self.sub_port},{self.vlan}"


_CIRCUIT_PATTERNS = [
    # Juniper QFX et-0/0/0:0.0 and xe-0/0/0:0.0
    re.compile(r"^(et|xe)-(?P<slot>[0-9]+)/(?P<mod>[0-9]+)/(?P<port>[0-9]+):(?P<subport>[0-9]+).*\Z"),
    # Juniper PTX et-0/0/0.0
    re.compile(r"^et-(?P<slot>[0-9]+)/(?P<mod>[0-9]+)/(?P<port>[0-9]+).(?P<subport>[0-9]+)\Z"),
    # Juniper EX ge-0/0/0.0
    re.compile(r"^ge-(?P<slot>[0-9]+)/(?P<mod>[0-9]+)/(?P<port>[0-9]+).(?P<subport>[0-9]+).*"),
    # Arista Ethernet3/17/1; not anchored, a type and length byte may come first
    re.compile(r"Ethernet(?P<slot>[0-9]+)/(?P<mod>[0-9]+)/(?P<port>[0-9]+)\Z"),
    # Juniper QFX et-1/0/61
    re.compile(r"^et-(?P<slot>[0-9]+)/(?P<mod>[0-9]+)/(?P<port>[0-9]+)\Z"),
    # Arista Ethernet14:Vlan2001 and Ethernet10:2020
    re.compile(r"Ethernet(?P<port>[0-9]+):(?P<vlan>.*)\Z"),
    # Cisco Gi1/10:2020
    re.compile(r"^Gi(?P<slot>[0-9]+)/(?P<port>[0-9]+):(?P<vlan>.*)\Z"),
    # Nexus Ethernet1/3
    re.compile(r"^Ethernet(?P<slot>[0-9]+)/(?P<port>[0-9]+)\Z"),
    # Juniper bundle interface ae52.0
    re.compile(r"^ae(?P<port>[0-9]+).(?P<subport>[0-9])\Z"),
]

_FIELDS = {
    "slot": "slot",
    "mod": "module",
    "port": "port",
    "subport": "sub_port",
    "vlan": "vlan",
}


def match_circuit_id(circuit_id: str) -> CircuitID:
    """Match ``circuit_id`` against known vendor formats; ValueError if none fit."""
    for pattern in _CIRCUIT_PATTERNS:
        match = pattern.search(circuit_id)
        if match is None:
            continue
        parts = {
            _FIELDS[name]: value
            for name, value in match.groupdict().items()
            if value is not None
        }
        return CircuitID(**parts)
    raise ValueError(
        f"Unable to match circuit id : {circuit_id} with listed regexes of interface types"
    )


def parse_circuit_id(options: Options) -> CircuitID:
    """Extract and parse the circuit ID from a packet's relay agent information."""
    relay = get_relay_agent_info(options)
    if relay is None:
        raise ValueError("No relay agent information option found in the dhcpv4 pkt")
    raw = relay.options.get(RaiSubOptionCode.AGENT_CIRCUIT_ID)
    if not raw:
        raise ValueError("no circuit-id suboption found in dhcpv4 packet")
    return match_circuit_id(raw.decode("utf-8", "replace"))