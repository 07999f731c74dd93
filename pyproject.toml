[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netdhcp"
version = "0.1.0"
description = "Encoding, decoding and inspection of DHCPv4 options and DHCPv6 DUIDs"
requires-python = ">=3.10"
dependencies = []
keywords = ["dhcp", "dhcpv4", "dhcpv6", "networking", "ztp", "duid", "options"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["netdhcp"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
