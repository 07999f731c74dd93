"""Vendor, model and serial number detection for zero-touch provisioning."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..options import Options
from ..types import OptionCode
from ..vivc import get_vivc

__all__ = ["VendorData", "parse_vendor_data", "ENT_ID_CISCO_SYSTEMS"]

ENT_ID_CISCO_SYSTEMS = 9
_CISCO_SYSTEMS_NAME = "Cisco Systems"

_MALFORMED = "malformed vendor option"


@dataclass
class VendorData:
    """Vendor details a device may announce in its vendor class options."""

    vendor_name: str = ""
    model: str = ""
    serial: str = ""


def _get_string(options: Options, code: OptionCode) -> str:
    data = options.get(code)
    if data is None:
        return ""
    return data.decode("utf-8", "replace")


def _parse_class_identifier(options: Options) -> Optional[VendorData]:
    vc = _get_string(options, OptionCode.CLASS_IDENTIFIER)

    # Arista;DCS-7050S-64;01.23;JPE00000000
    if vc.startswith("Arista;"):
        parts = vc.split(";")
        if len(parts) < 4:
            raise ValueError(_MALFORMED)
        return VendorData(vendor_name=parts[0], model=parts[1], serial=parts[3])

    # ZPESystems:NSC:000000000
    if vc.startswith("ZPESystems:"):
        parts = vc.split(":")
        if len(parts) < 3:
            raise ValueError(_MALFORMED)
        return VendorData(vendor_name=parts[0], model=parts[1], serial=parts[2])

    # Juniper-<model>-<serial>, Juniper-<model> (serial in the host name),
    # and models that themselves contain dashes.
    if vc.startswith("Juniper-"):
        parts = vc.split("-")
        if len(parts) < 3:
            model = parts[1]
            serial = _get_string(options, OptionCode.HOST_NAME)
            if not serial:
                raise ValueError("host name option is missing")
        else:
            model = "-".join(parts[1:-1])
            serial = parts[-1]
        return VendorData(vendor_name=parts[0], model=model, serial=serial)

    # Cisco Firepower: model in option 60, serial in option 61.
    if vc in ("FPR4100", "FPR9300"):
        return VendorData(
            vendor_name=_CISCO_SYSTEMS_NAME,
            model=vc,
            serial=_get_string(options, OptionCode.CLIENT_IDENTIFIER),
        )

    return None


def _parse_vivc(options: Options) -> Optional[VendorData]:
    for ident in get_vivc(options) or ():
        if ident.ent_id != ENT_ID_CISCO_SYSTEMS:
            continue
        vd = VendorData(vendor_name=_CISCO_SYSTEMS_NAME)
        # SN:0;PID:R-IOSXRV9000-CC
        for field in ident.data.split(b";"):
            pair = field.split(b":")
            if len(pair) != 2:
                raise ValueError(_MALFORMED)
            key, value = pair
            if key == b"SN":
                vd.serial = value.decode("utf-8", "replace")
            elif key == b"PID":
                vd.model = value.decode("utf-8", "replace")
        return vd
    return None


def parse_vendor_data(options: Options) -> VendorData:
    """Find vendor details in a packet's options; ValueError if none are known."""
    vd = _parse_class_identifier(options)
    if vd is not None:
        return vd
    vd = _parse_vivc(options)
    if vd is not None:
        return vd
    raise ValueError("no known ZTP vendor found")