import pytest

from netdhcp.dhcpv6.duid import HW_TYPE_ETHERNET, Duid, DuidType, duid_from_bytes

MAC = bytes([0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF])


@pytest.mark.parametrize(
    "data",
    [
        bytes([0]),
        bytes([0, 3, 0xA]),
        bytes([0, 2, 0xA, 0xB, 0xC]),
        bytes([0, 1, 0xA, 0xB, 0xC, 0xD, 0xE]),
        bytes([0, 4, 0xA, 0xB, 0xC, 0xD, 0xE, 0xF]),
    ],
)
def test_duid_too_short(data):
    with pytest.raises(ValueError):
        duid_from_bytes(data)


def test_duid_llt_from_bytes():
    buf = bytes([0, 1, 0, 1, 0x01, 0x02, 0x03, 0x04]) + MAC
    duid = duid_from_bytes(buf)
    assert duid.length() == 14
    assert duid.type == DuidType.LLT
    assert duid.time == 0x01020304
    assert duid.hw_type == HW_TYPE_ETHERNET
    assert duid.link_layer_addr == MAC


def test_duid_ll_from_bytes():
    duid = duid_from_bytes(bytes([0, 3, 0, 1]) + MAC)
    assert duid.length() == 10
    assert duid.type == DuidType.LL
    assert duid.hw_type == HW_TYPE_ETHERNET
    assert duid.link_layer_addr == MAC


def test_duid_uuid_from_bytes():
    uuid = bytes([0, 1, 0, 2, 0, 3, 0, 4, 0, 5, 0, 6, 0, 7, 0, 8])
    duid = duid_from_bytes(bytes([0, 4]) + uuid)
    assert duid.length() == 18
    assert duid.type == DuidType.UUID
    assert duid.uuid == uuid


def test_duid_llt_to_bytes():
    expected = bytes([0, 1, 0, 1, 0x01, 0x02, 0x03, 0x04]) + MAC
    duid = Duid(
        type=DuidType.LLT, hw_type=HW_TYPE_ETHERNET, time=0x01020304, link_layer_addr=MAC
    )
    assert duid.to_bytes() == expected


def test_duid_uuid_to_bytes():
    uuid = bytes([0, 2, 0, 3, 0, 4, 0, 5, 0, 6, 0, 7, 0, 8, 0, 9])
    assert Duid(type=DuidType.UUID, uuid=uuid).to_bytes() == bytes([0, 4]) + uuid


def test_duid_en_round_trip():
    raw = bytes([0, 2, 0, 0, 0, 9, 1, 2, 3])
    duid = duid_from_bytes(raw)
    assert duid.enterprise_number == 9
    assert duid.enterprise_identifier == bytes([1, 2, 3])
    assert duid.length() == 9
    assert duid.to_bytes() == raw


def test_opaque_duid():
    raw = b"\x00\x0a\x00\x03\x00\x01\x02\x00\x00\x00\x00\x01"
    duid = duid_from_bytes(raw)
    assert duid.length() == len(raw)
    assert duid.to_bytes() == raw
    assert str(duid.type) == "Unknown"


def test_duid_equal():
    d = Duid(type=DuidType.LL, hw_type=HW_TYPE_ETHERNET, link_layer_addr=MAC)
    o = Duid(type=DuidType.LL, hw_type=HW_TYPE_ETHERNET, link_layer_addr=MAC)
    assert d == o


def test_duid_not_equal():
    d = Duid(type=DuidType.LL, hw_type=HW_TYPE_ETHERNET, link_layer_addr=MAC)
    o = Duid(
        type=DuidType.LL, hw_type=HW_TYPE_ETHERNET, link_layer_addr=MAC[:-1] + b"\x00"
    )
    assert d != o


def test_duid_str():
    d = Duid(type=DuidType.LL, hw_type=HW_TYPE_ETHERNET, link_layer_addr=MAC)
    assert str(d) == "DUID{type=DUID-LL hwtype=1 hwaddr=aa:bb:cc:dd:ee:ff}"


def test_duid_type_names():
    assert str(DuidType.LLT) == "DUID-LLT"
    assert str(DuidType(99)) == "Unknown"