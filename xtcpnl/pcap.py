"""Decoding of pcap file and record headers around captured netlink traffic."""

from __future__ import annotations

import struct
from dataclasses import dataclass

PCAP_HEADER_SIZE = 24
PCAP_RECORD_HEADER_SIZE = 16
NETLINK_COOKED_HEADER_SIZE = 16
PCAP_NETLINK_OFFSET = PCAP_HEADER_SIZE + PCAP_RECORD_HEADER_SIZE + NETLINK_COOKED_HEADER_SIZE

_FILE_HEADER = struct.Struct("<IHHIIIHH")
_RECORD_HEADER = struct.Struct("<IIII")


class PcapHeaderTooSmall(ValueError):
    """Raised when there are fewer bytes than a pcap file header needs."""

    def __init__(self, size: int) -> None:
        super().__init__(f"data too small for PcapHeader: {size} bytes")
        self.size = size


class PcapRecordHeaderTooSmall(ValueError):
    """Raised when there are fewer bytes than a pcap record header needs."""

    def __init__(self, size: int) -> None:
        super().__init__(f"data too small for PcapRecordHeader: {size} bytes")
        self.size = size


@dataclass(frozen=True)
class PcapHeader:
    """The global header at the start of a pcap file."""

    magic: int
    version_major: int
    version_minor: int
    reserved1: int
    reserved2: int
    snap_len: int
    fcs: int
    link_type: int

    @classmethod
    def from_bytes(cls, data: bytes) -> PcapHeader:
        """Decode the first 24 bytes of ``data``."""
        if len(data) < PCAP_HEADER_SIZE:
            raise PcapHeaderTooSmall(len(data))
        return cls(*_FILE_HEADER.unpack_from(data))


@dataclass(frozen=True)
class PcapRecordHeader:
    """The header in front of each captured packet."""

    ts_sec: int
    ts_xsec: int
    cap_len: int
    length: int

    @classmethod
    def from_bytes(cls, data: bytes) -> PcapRecordHeader:
        """Decode the first 16 bytes of ``data``."""
        if len(data) < PCAP_RECORD_HEADER_SIZE:
            raise PcapRecordHeaderTooSmall(len(data))
        return cls(*_RECORD_HEADER.unpack_from(data))


def netlink_bytes(capture: bytes) -> bytes:
    """Return the netlink message of a single-packet capture.

    Skips the file header, the record header and the cooked netlink header.
    """
    if len(capture) < PCAP_NETLINK_OFFSET:
        raise ValueError(
            f"capture of {len(capture)} bytes is shorter than the "
            f"{PCAP_NETLINK_OFFSET} byte headers"
        )
    return capture[PCAP_NETLINK_OFFSET:]