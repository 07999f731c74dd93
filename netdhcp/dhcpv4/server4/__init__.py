"""Loggers for DHCPv4 servers."""