# netdhcp

A pure-Python library, with no dependencies outside the standard library,
for building, encoding, decoding and printing DHCP data:

- **DHCPv4 option codes and types** (`netdhcp.dhcpv4.types`):
  `OptionCode`, `MessageType`, `OpcodeType`, `GenericOptionCode` and
  `TransactionID`, each printing its human-readable name.
- **The options container** (`netdhcp.dhcpv4.options`): `Options` maps
  option codes to their data, parses wire data (repeated options are
  concatenated, RFC 3396) and serializes in ascending code order, splitting
  data longer than 255 bytes. Also `Option`, `OptionGeneric`,
  `OptionHumanizer`, `options_from_list`, `opt_generic` and
  `opt_client_identifier`.
- **Option values** (`netdhcp.dhcpv4.basic_options`): IP address lists
  (`IPs`, `opt_router`, `opt_dns`, `opt_ntp_servers`, `get_ips`),
  16-bit values (`Uint16`, `opt_max_message_size`, `get_uint16`),
  `opt_message_type`, RFC 3004 user classes (`Strings`,
  `opt_rfc3004_user_class`), subnet masks (`IPMask`, `opt_subnet_mask`) and
  parameter request lists (`OptionCodeList`, `opt_parameter_request_list`).
- **Relay Agent Information**, RFC 3046 (`netdhcp.dhcpv4.relay`):
  `RelayOptions`, `RaiSubOptionCode`, `opt_relay_agent_info`,
  `get_relay_agent_info`.
- **Classless static routes**, RFC 3442 (`netdhcp.dhcpv4.routes`):
  `Route`, `Routes`, `opt_classless_static_route`.
- **Vendor-identifying vendor class**, RFC 3925 (`netdhcp.dhcpv4.vivc`):
  `VIVCIdentifier`, `VIVCIdentifiers`, `opt_vivc`, `get_vivc`.
- **Readable output** (`netdhcp.dhcpv4.humanize`): `parse_option`,
  `get_option` and `summary` decode option data by code, falling back to the
  raw bytes when the data cannot be decoded.
- **Zero-touch provisioning** (`netdhcp.dhcpv4.ztpv4`): `match_circuit_id`
  and `parse_circuit_id` turn switch circuit IDs into a `CircuitID`;
  `parse_vendor_data` finds vendor, model and serial number in the class
  identifier or the vendor class option.
- **DHCPv6 DUIDs**, RFC 3315 (`netdhcp.dhcpv6.duid`): `Duid`, `DuidType`,
  `duid_from_bytes`, plus the default DHCPv6 ports and multicast addresses.
- **Server loggers** (`netdhcp.dhcpv4.server4.logger`): `EmptyLogger`,
  `ShortSummaryLogger` and `DebugLogger`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Building and encoding options:

```python
from ipaddress import IPv4Address

from netdhcp.dhcpv4.basic_options import opt_dns, opt_max_message_size
from netdhcp.dhcpv4.options import options_from_list

dns = opt_dns(IPv4Address("192.168.0.1"), IPv4Address("192.168.0.10"))
print(dns)                      # Domain Name Server: 192.168.0.1, 192.168.0.10

opts = options_from_list(dns, opt_max_message_size(1500))
wire = opts.to_bytes()          # b"\x06\x08\xc0\xa8\x00\x01\xc0\xa8\x00\x0a9\x02\x05\xdc"
```

Decoding options from wire data and printing them:

```python
from netdhcp.dhcpv4.options import Options

opts = Options()
opts.from_bytes(b"\x03\x04\xc0\xa8\x01\x01\xff")
print(opts)                     #     Router: 192.168.1.1
```

`Options.from_bytes_check_end(data, True)` additionally requires the End
option. `netdhcp.dhcpv4.humanize.summary(options, vendor_decoder)` prints the
same way, using `vendor_decoder.from_bytes(data)` to interpret the Vendor
Specific Information option.

Classless static routes:

```python
from netdhcp.dhcpv4.routes import Route, opt_classless_static_route

opt = opt_classless_static_route(Route("10.0.0.0/8", "192.168.0.1"))
print(opt.value)                # route to 10.0.0.0/8 via 192.168.0.1
opt.value.to_bytes()            # b"\x08\x0a\xc0\xa8\x00\x01"
```

Reading a circuit ID from relay agent information:

```python
from netdhcp.dhcpv4.options import options_from_list, opt_generic
from netdhcp.dhcpv4.relay import RaiSubOptionCode, opt_relay_agent_info
from netdhcp.dhcpv4.ztpv4.circuitid import match_circuit_id, parse_circuit_id

print(match_circuit_id("Ethernet3/17/1").format_circuit_id())   # 3,17,1,,

opts = options_from_list(
    opt_relay_agent_info(
        opt_generic(RaiSubOptionCode.AGENT_CIRCUIT_ID, b"Ethernet14:Vlan2001")
    )
)
print(parse_circuit_id(opts))   # CircuitID(slot='', module='', port='14', sub_port='', vlan='Vlan2001')
```

Finding vendor data for zero-touch provisioning:

```python
from netdhcp.dhcpv4.options import Options, opt_generic
from netdhcp.dhcpv4.types import OptionCode
from netdhcp.dhcpv4.ztpv4.ztp import parse_vendor_data

opts = Options()
opts.update(opt_generic(OptionCode.CLASS_IDENTIFIER, b"Arista;DCS-7050S-64;01.23;JPE00000000"))
print(parse_vendor_data(opts))
# VendorData(vendor_name='Arista', model='DCS-7050S-64', serial='JPE00000000')
```

Parsing a DUID:

```python
from netdhcp.dhcpv6.duid import duid_from_bytes

duid = duid_from_bytes(bytes.fromhex("0003000102000000aa01"))
print(duid)                     # DUID{type=DUID-LL hwtype=1 hwaddr=02:00:00:00:aa:01}
print(duid.length())            # 10
```

Logging with a chosen output function:

```python
from netdhcp.dhcpv4.server4.logger import ShortSummaryLogger

logger = ShortSummaryLogger(printer=print)
logger.printf("Handling request from %s", "192.0.2.10")
```

Without a `printer`, `ShortSummaryLogger` and `DebugLogger` write through the
standard `logging` module under the `netdhcp.dhcpv4` logger.

## Errors

Malformed wire data is reported by raising `ValueError`, or its subclass
`netdhcp.dhcpv4.options.InvalidOptionsError` for the options container.
`get_uint16` raises `KeyError` when the option is absent. The `get_*`
helpers that return lists (`get_ips`, `get_vivc`, `get_relay_agent_info`)
return `None` when the option is absent or malformed.

## What it does not do

This package works with options and identifiers only. It has no type for a
whole DHCPv4 or DHCPv6 packet (header fields, magic cookie, message
construction), opens no sockets, and contains no DHCP client or server: the
loggers are there for a server to use, but the server itself is not part of
the package.