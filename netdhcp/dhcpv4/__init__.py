"""DHCPv4 option codes, option values, their encoding and readable output."""