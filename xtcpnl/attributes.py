"""Decoding of the INET_DIAG_TOS and INET_DIAG_VEGASINFO attributes."""

from __future__ import annotations

import struct
from dataclasses import dataclass

TYPE_OF_SERVICE_SIZE = 1
TYPE_OF_SERVICE_ATTRIBUTE_TYPE = 5

VEGAS_INFO_SIZE = 16
VEGAS_INFO_ATTRIBUTE_TYPE = 3

_VEGAS_INFO = struct.Struct("<IIII")


class TypeOfServiceTooSmall(ValueError):
    """Raised when there is no byte to read a type of service from."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for TypeOfService: {size} bytes, need {TYPE_OF_SERVICE_SIZE}"
        )
        self.size = size


class VegasInfoTooSmall(ValueError):
    """Raised when there are fewer bytes than a tcpvegas_info needs."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for VegasInfo: {size} bytes, need {VEGAS_INFO_SIZE}"
        )
        self.size = size


def deserialize_type_of_service(data: bytes) -> int:
    """Return the IPv4 type of service byte at the start of ``data``."""
    if len(data) < TYPE_OF_SERVICE_SIZE:
        raise TypeOfServiceTooSmall(len(data))
    return data[0]


@dataclass(frozen=True)
class VegasInfo:
    """The kernel's ``struct tcpvegas_info``; all zero when absent."""

    enabled: int = 0
    rtt_cnt: int = 0
    rtt: int = 0
    min_rtt: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> VegasInfo:
        """Decode the first 16 bytes of ``data`` (without the attribute header)."""
        if len(data) < VEGAS_INFO_SIZE:
            raise VegasInfoTooSmall(len(data))
        return cls(*_VEGAS_INFO.unpack_from(data))