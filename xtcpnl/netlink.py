"""Netlink message header decoding and sock_diag request encoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass

NLMSG_HEADER_SIZE = 16
NLMSG_TYPE_INET_DIAG = 20
NLMSG_TYPE_DONE = 3

INET_DIAG_REQUEST_SIZE = 72
SOCK_DIAG_BY_FAMILY = 20
TCP_ALL_STATES = 4282318848

_HEADER = struct.Struct("<IHHII")
_REQUEST_PREFIX = struct.Struct("<IHHI")
_STATES = struct.Struct(">I")


class NetlinkHeaderTooSmall(ValueError):
    """Raised when there are fewer bytes than a netlink header needs."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for NlMsgHdr: {size} bytes, need {NLMSG_HEADER_SIZE}"
        )
        self.size = size


@dataclass(frozen=True)
class NetlinkHeader:
    """The 16 byte header that starts every netlink message."""

    length: int
    msg_type: int
    flags: int
    seq: int
    pid: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> NetlinkHeader:
        """Decode a header from the first 16 bytes of ``data``."""
        if len(data) < NLMSG_HEADER_SIZE:
            raise NetlinkHeaderTooSmall(len(data))
        return cls(*_HEADER.unpack_from(data))

    def to_bytes(self) -> bytes:
        """Encode the header as 16 little-endian bytes."""
        return _HEADER.pack(self.length, self.msg_type, self.flags, self.seq, self.pid)

    @property
    def is_done(self) -> bool:
        """True for the message that ends a dump."""
        return self.msg_type == NLMSG_TYPE_DONE


def serialize_diag_request(
    header: NetlinkHeader, family: int, protocol: int, ext: int, states: int
) -> bytes:
    """Build an inet_diag_req_v2 request message.

    The sender pid and the socket id are left zero; the state mask is
    written big-endian as the kernel expects.
    """
    buffer = bytearray(INET_DIAG_REQUEST_SIZE)
    _REQUEST_PREFIX.pack_into(buffer, 0, header.length, header.msg_type, header.flags, header.seq)
    buffer[16] = family & 0xFF
    buffer[17] = protocol & 0xFF
    buffer[18] = ext & 0xFF
    _STATES.pack_into(buffer, 20, states)
    return bytes(buffer)