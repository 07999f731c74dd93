"""DHCPv4 option and DHCPv6 DUID encoding and decoding."""

__version__ = "0.1.0"