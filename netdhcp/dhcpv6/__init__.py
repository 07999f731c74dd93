"""DHCPv6 unique identifiers and default ports and addresses."""