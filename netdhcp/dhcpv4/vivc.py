"""The Vendor-Identifying Vendor Class option (RFC 3925)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .options import Option, Options
from .types import OptionCode

__all__ = ["VIVCIdentifier", "VIVCIdentifiers", "opt_vivc", "get_vivc"]


@dataclass(frozen=True)
class VIVCIdentifier:
    """An enterprise ID and its opaque vendor class data."""

    ent_id: int
    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))


class VIVCIdentifiers(list):
    """A list of vendor-identifying vendor class identifiers."""

    @classmethod
    def from_bytes(cls, data: bytes) -> "VIVCIdentifiers":
        data = bytes(data)
        result = cls()
        pos = 0
        while len(data) - pos >= 5:
            ent_id = int.from_bytes(data[pos : pos + 4], "big")
            length = data[pos + 4]
            pos += 5
            if pos + length > len(data):
                raise ValueError(
                    f"identifier needs {length} bytes, only {len(data) - pos} left"
                )
            result.append(VIVCIdentifier(ent_id, data[pos : pos + length]))
            pos += length
        if pos != len(data):
            raise ValueError(f"{len(data) - pos} unread bytes in VIVC option")
        return result

    def to_bytes(self) -> bytes:
        out = bytearray()
        for ident in self:
            if len(ident.data) > 0xFF:
                raise ValueError(f"identifier data too long: {len(ident.data)} bytes")
            out += ident.ent_id.to_bytes(4, "big")
            out.append(len(ident.data))
            out += ident.data
        return bytes(out)

    def __str__(self) -> str:
        return ", ".join(
            f"{ident.ent_id}:'{ident.data.decode('utf-8', 'replace')}'" for ident in self
        )


def opt_vivc(*identifiers: VIVCIdentifier) -> Option:
    """A Vendor-Identifying Vendor Class option (RFC 3925)."""
    return Option(OptionCode.VENDOR_IDENTIFYING_VENDOR_CLASS, VIVCIdentifiers(identifiers))


def get_vivc(options: Options) -> Optional[VIVCIdentifiers]:
    """The VIVC identifiers in ``options``; None if absent or malformed."""
    data = options.get(OptionCode.VENDOR_IDENTIFYING_VENDOR_CLASS)
    if data is None:
        return None
    try:
        return VIVCIdentifiers.from_bytes(data)
    except ValueError:
        return None