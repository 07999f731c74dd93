import pytest

from netdhcp.dhcpv4.humanize import get_option, parse_option, summary
from netdhcp.dhcpv4.options import Option, OptionGeneric, Options
from netdhcp.dhcpv4.types import GenericOptionCode, MessageType, OptionCode


@pytest.mark.parametrize(
    "code, value, want",
    [
        (OptionCode.NAME_SERVER, bytes([192, 168, 1, 254]), "[192 168 1 254]"),
        (OptionCode.SUBNET_MASK, bytes([255, 255, 255, 0]), "ffffff00"),
        (OptionCode.ROUTER, bytes([192, 168, 1, 1, 192, 168, 2, 1]), "192.168.1.1, 192.168.2.1"),
        (
            OptionCode.DOMAIN_NAME_SERVER,
            bytes([192, 168, 1, 1, 192, 168, 2, 1]),
            "192.168.1.1, 192.168.2.1",
        ),
        (
            OptionCode.NTP_SERVERS,
            bytes([192, 168, 1, 1, 192, 168, 2, 1]),
            "192.168.1.1, 192.168.2.1",
        ),
        (
            OptionCode.SERVER_IDENTIFIER,
            bytes([192, 168, 1, 1, 192, 168, 2, 1]),
            "192.168.1.1, 192.168.2.1",
        ),
        (OptionCode.HOST_NAME, b"test", "test"),
        (OptionCode.DOMAIN_NAME, b"test", "test"),
        (OptionCode.ROOT_PATH, b"test", "test"),
        (OptionCode.CLASS_IDENTIFIER, b"test", "test"),
        (OptionCode.TFTP_SERVER_NAME, b"test", "test"),
        (OptionCode.BOOTFILE_NAME, b"test", "test"),
        (OptionCode.BROADCAST_ADDRESS, bytes([192, 168, 1, 1]), "192.168.1.1"),
        (OptionCode.REQUESTED_IP_ADDRESS, bytes([192, 168, 1, 1]), "192.168.1.1"),
        (OptionCode.DHCP_MESSAGE_TYPE, bytes([1]), "DISCOVER"),
        (OptionCode.PARAMETER_REQUEST_LIST, bytes([3, 4, 5]), "Router, Time Server, Name Server"),
        (OptionCode.MAXIMUM_DHCP_MESSAGE_SIZE, bytes([1, 2]), "258"),
        (OptionCode.USER_CLASS_INFORMATION, bytes([4]) + b"test" + bytes([3]) + b"foo", "test, foo"),
        (
            OptionCode.RELAY_AGENT_INFORMATION,
            bytes([1, 12]) + b"circuit-id-1",
            "\n    Agent Circuit ID Sub-option: circuit-id-1 "
            "([99 105 114 99 117 105 116 45 105 100 45 49])\n",
        ),
    ],
)
def test_parse_option(code, value, want):
    assert str(parse_option(code, value)) == want


def test_user_class_falls_back_to_string():
    assert str(parse_option(OptionCode.USER_CLASS_INFORMATION, b"abc")) == "abc"


def test_undecodable_falls_back_to_generic():
    result = parse_option(OptionCode.ROUTER, bytes([1, 1, 1]))
    assert result == OptionGeneric(bytes([1, 1, 1]))
    assert str(result) == "[1 1 1]"


def test_vivc_and_routes_decoded():
    vivc = parse_option(
        OptionCode.VENDOR_IDENTIFYING_VENDOR_CLASS, bytes([0, 0, 0, 9, 3]) + b"abc"
    )
    assert str(vivc) == "9:'abc'"
    routes = parse_option(OptionCode.CLASSLESS_STATIC_ROUTE, bytes([8, 10, 1, 2, 3, 4]))
    assert str(routes) == "route to 10.0.0.0/8 via 1.2.3.4"


class _UpperDecoder:
    @staticmethod
    def from_bytes(data):
        if not data:
            raise ValueError("empty")
        return data.decode().upper()


def test_vendor_decoder_used_only_for_vendor_option():
    assert get_option(OptionCode.VENDOR_SPECIFIC_INFORMATION, b"abc", _UpperDecoder) == "ABC"
    assert get_option(OptionCode.VENDOR_SPECIFIC_INFORMATION, b"abc", None) == OptionGeneric(b"abc")
    assert get_option(OptionCode.VENDOR_SPECIFIC_INFORMATION, b"", _UpperDecoder) == OptionGeneric(b"")


def test_summary():
    options = Options({OptionCode.VENDOR_SPECIFIC_INFORMATION: b"abc", OptionCode.HOST_NAME: b"host"})
    assert summary(options, _UpperDecoder) == (
        "    Host Name: host\n    Vendor Specific Information: ABC\n"
    )


def test_options_string():
    options = Options({OptionCode.DHCP_MESSAGE_TYPE: bytes([1]), OptionCode.ROUTER: bytes([10, 0, 0, 1])})
    assert str(options) == "    Router: 10.0.0.1\n    DHCP Message Type: DISCOVER\n"


def test_option_to_bytes():
    opt = Option(OptionCode.DHCP_MESSAGE_TYPE, OptionGeneric(bytes([MessageType.DISCOVER])))
    assert opt.value.to_bytes() == bytes([1])


def test_option_string():
    opt = Option(OptionCode.DHCP_MESSAGE_TYPE, MessageType.DISCOVER)
    assert str(opt) == "DHCP Message Type: DISCOVER"


def test_option_string_unknown():
    opt = Option(GenericOptionCode(102), OptionGeneric(bytes([MessageType.DISCOVER])))
    assert str(opt) == "unknown (102): [1]"