import struct

import pytest

from xtcpnl.pcap import (
    PCAP_HEADER_SIZE,
    PCAP_NETLINK_OFFSET,
    PCAP_RECORD_HEADER_SIZE,
    PcapHeader,
    PcapHeaderTooSmall,
    PcapRecordHeader,
    PcapRecordHeaderTooSmall,
    netlink_bytes,
)

EXPECTED_HEADER = PcapHeader(
    magic=2712847316,
    version_major=2,
    version_minor=4,
    reserved1=0,
    reserved2=0,
    snap_len=262144,
    fcs=253,
    link_type=0,
)

EXPECTED_RECORD = PcapRecordHeader(ts_sec=1723171594, ts_xsec=213187, cap_len=36, length=36)

NETLINK_PAYLOAD = struct.pack("<IHHII", 20, 3, 2, 123456, 1438) + bytes(4)


@pytest.fixture
def capture():
    file_header = struct.pack("<IHHIIIHH", 2712847316, 2, 4, 0, 0, 262144, 253, 0)
    record = struct.pack("<IIII", 1723171594, 213187, 36, 36)
    cooked = bytes(16)
    return file_header + record + cooked + NETLINK_PAYLOAD


def test_pcap_header(capture):
    assert PcapHeader.from_bytes(capture[:PCAP_HEADER_SIZE]) == EXPECTED_HEADER


def test_pcap_header_from_whole_capture(capture):
    assert PcapHeader.from_bytes(capture) == EXPECTED_HEADER


def test_pcap_magic_wire_bytes(capture):
    header = PcapHeader.from_bytes(capture)
    assert capture[:4] == bytes.fromhex("d4c3b2a1")
    assert header.magic == 0xA1B2C3D4


def test_pcap_record_header(capture):
    buf = capture[PCAP_HEADER_SIZE : PCAP_HEADER_SIZE + PCAP_RECORD_HEADER_SIZE]
    assert PcapRecordHeader.from_bytes(buf) == EXPECTED_RECORD


def test_pcap_header_too_small():
    with pytest.raises(PcapHeaderTooSmall):
        PcapHeader.from_bytes(bytes(PCAP_HEADER_SIZE - 1))


def test_pcap_record_header_too_small():
    with pytest.raises(PcapRecordHeaderTooSmall):
        PcapRecordHeader.from_bytes(bytes(PCAP_RECORD_HEADER_SIZE - 1))


def test_netlink_bytes(capture):
    assert netlink_bytes(capture) == NETLINK_PAYLOAD
    assert PCAP_NETLINK_OFFSET == 56


def test_netlink_bytes_too_short():
    with pytest.raises(ValueError):
        netlink_bytes(bytes(PCAP_NETLINK_OFFSET - 1))