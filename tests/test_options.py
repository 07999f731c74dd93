import pytest

from netdhcp.dhcpv4.options import (
    InvalidOptionsError,
    Option,
    OptionGeneric,
    OptionHumanizer,
    Options,
    opt_client_identifier,
    opt_generic,
    options_from_list,
)
from netdhcp.dhcpv4.types import GenericOptionCode, MessageType, OptionCode


def test_option_to_bytes():
    o = Option(OptionCode.DHCP_MESSAGE_TYPE, OptionGeneric(bytes([MessageType.DISCOVER])))
    assert o.value.to_bytes() == b"\x01"


def test_option_string():
    o = Option(OptionCode.DHCP_MESSAGE_TYPE, MessageType.DISCOVER)
    assert str(o) == "DHCP Message Type: DISCOVER"


def test_option_string_unknown():
    o = Option(GenericOptionCode(102), OptionGeneric(bytes([MessageType.DISCOVER])))
    assert str(o) == "unknown (102): [1]"


def test_option_string_multiline():
    class Multi:
        def to_bytes(self):
            return b""

        def __str__(self):
            return "a\nb"

    assert str(Option(OptionCode.ROUTER, Multi())) == "Router:\na\nb"


@pytest.mark.parametrize(
    "opts, want",
    [
        (Options(), b""),
        (Options({5: bytes([1, 2, 3, 4])}), bytes([5, 4, 1, 2, 3, 4])),
        (
            Options({5: bytes([1, 2, 3]), 100: bytes([101, 102, 103]), 255: b""}),
            bytes([5, 3, 1, 2, 3, 100, 3, 101, 102, 103]),
        ),
        (
            Options({5: bytes([10] * 256)}),
            bytes([5, 255]) + bytes([10] * 255) + bytes([5, 1, 10]),
        ),
        (Options({80: b""}), bytes([80, 0])),
        (Options({0: b"", 255: b""}), b""),
    ],
)
def test_options_marshal(opts, want):
    assert opts.to_bytes() == want


@pytest.mark.parametrize(
    "data",
    [
        bytes([3, 3, 1]),
        bytes([3, 3, 0, 0, 0, 0, 0, 0, 0]),
        bytes([3]),
        bytes([255, 3]),
    ],
)
def test_options_unmarshal_errors(data):
    with pytest.raises(InvalidOptionsError):
        Options().from_bytes_check_end(data, True)


@pytest.mark.parametrize(
    "data, want",
    [
        (bytes([255]), {}),
        (bytes([3, 2, 5, 6, 255]), {3: bytes([5, 6])}),
        (
            bytes([3, 255]) + bytes([10] * 255) + bytes([3, 5, 10, 10, 10, 10, 10, 255]),
            {3: bytes([10] * 260)},
        ),
        (
            bytes([10, 2, 255, 254, 11, 3, 5, 5, 5, 255]),
            {10: bytes([255, 254]), 11: bytes([5, 5, 5])},
        ),
        (bytes([10, 2, 255, 254]) + bytes(255) + bytes([255]), {10: bytes([255, 254])}),
    ],
)
def test_options_unmarshal(data, want):
    opts = Options()
    opts.from_bytes_check_end(data, True)
    assert opts == want


def test_from_bytes_does_not_require_end():
    opts = Options()
    opts.from_bytes(bytes([3, 3, 0, 0, 0, 0, 0, 0, 0]))
    assert opts == {3: bytes(3)}


def test_from_bytes_empty_is_noop():
    opts = Options()
    opts.from_bytes(b"")
    assert len(opts) == 0


def test_from_bytes_trailing_garbage():
    with pytest.raises(InvalidOptionsError):
        Options().from_bytes(bytes([255, 0, 7]))


def test_round_trip():
    original = Options({1: b"\xff\xff\xff\x00", 3: b"\x0a\x00\x00\x01", 12: b"x" * 300})
    parsed = Options()
    parsed.from_bytes(original.to_bytes() + b"\xff")
    assert parsed == original


def test_get_has_update():
    opts = Options()
    assert opts.get(OptionCode.ROUTER) is None
    assert not opts.has(OptionCode.ROUTER)
    opts.update(opt_generic(OptionCode.ROUTER, b"\x01\x02\x03\x04"))
    assert opts.has(3)
    assert opts.get(OptionCode.ROUTER) == b"\x01\x02\x03\x04"


def test_options_from_list_and_client_identifier():
    opts = options_from_list(
        opt_client_identifier(b"abc"), opt_generic(GenericOptionCode(200), b"\x01")
    )
    assert opts == {61: b"abc", 200: b"\x01"}


def test_to_string_with_humanizer():
    humanizer = OptionHumanizer(
        value_humanizer=lambda code, data: OptionGeneric(data),
        code_humanizer=OptionCode,
    )
    opts = Options({3: b"\x01\x02", 1: b"\xff"})
    assert opts.to_string(humanizer) == "    Subnet Mask: [255]\n    Router: [1 2]\n"


def test_to_string_indents_substructures():
    humanizer = OptionHumanizer(
        value_humanizer=lambda code, data: "\n  sub",
        code_humanizer=OptionCode,
    )
    assert Options({3: b""}).to_string(humanizer) == "    Router: \n      sub\n"


def test_stringify():
    humanizer = OptionHumanizer(
        value_humanizer=lambda code, data: OptionGeneric(data),
        code_humanizer=GenericOptionCode,
    )
    assert humanizer.stringify(7, b"\x09") == "unknown (7): [9]"


def test_option_generic_str_empty():
    assert str(OptionGeneric(b"")) == "[]"