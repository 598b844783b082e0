"""Binary layouts of the kernel's ``struct tcp_info`` across kernel versions.

Each kernel series appended fields to the end of ``tcp_info``; a layout is
the prefix of the full field list that a given kernel exports.  The sizes
are those of the attribute payload, without the 4 byte route attribute
header.
"""

from __future__ import annotations

import struct
from enum import Enum

RTA_HEADER_SIZE = 4

# Every field of the newest tcp_info, in wire order, with its struct code.
FIELD_FORMATS: tuple[tuple[str, str], ...] = (
    ("state", "B"),
    ("ca_state", "B"),
    ("retransmits", "B"),
    ("probes", "B"),
    ("backoff", "B"),
    ("options", "B"),
    ("scale_temp", "B"),  # snd_wscale:4, rcv_wscale:4
    ("flags_temp", "B"),  # delivery_rate_app_limited:1, fastopen_client_fail:2
    ("rto", "I"),
    ("ato", "I"),
    ("snd_mss", "I"),
    ("rcv_mss", "I"),
    ("unacked", "I"),
    ("sacked", "I"),
    ("lost", "I"),
    ("retrans", "I"),
    ("fackets", "I"),
    ("last_data_sent", "I"),
    ("last_ack_sent", "I"),
    ("last_data_recv", "I"),
    ("last_ack_recv", "I"),
    ("pmtu", "I"),
    ("rcv_ssthresh", "I"),
    ("rtt", "I"),
    ("rttvar", "I"),
    ("snd_ssthresh", "I"),
    ("snd_cwnd", "I"),
    ("adv_mss", "I"),
    ("reordering", "I"),
    ("rcv_rtt", "I"),
    ("rcv_space", "I"),
    ("total_retrans", "I"),
    ("pacing_rate", "Q"),
    ("max_pacing_rate", "Q"),
    ("bytes_acked", "Q"),
    ("bytes_received", "Q"),
    ("segs_out", "I"),
    ("segs_in", "I"),
    ("not_sent_bytes", "I"),
    ("min_rtt", "I"),
    ("data_segs_in", "I"),
    ("data_segs_out", "I"),
    ("delivery_rate", "Q"),
    ("busy_time", "Q"),
    ("rwnd_limited", "Q"),
    ("sndbuf_limited", "Q"),
    # 4.15 ends here
    ("delivered", "I"),
    ("delivered_ce", "I"),
    ("bytes_sent", "Q"),
    ("bytes_retrans", "Q"),
    ("dsack_dups", "I"),
    ("reord_seen", "I"),
    # 4.19 ends here
    ("rcv_ooopack", "I"),
    ("snd_wnd", "I"),
    # 5.4 ends here
    ("rcv_wnd", "I"),
    ("rehash", "I"),
    # 6.6 ends here
    ("total_rto", "H"),
    ("total_rto_recoveries", "H"),
    ("total_rto_time", "I"),
)


class TCPInfoLayout(Enum):
    """A known tcp_info layout, valued by its size in bytes."""

    V4_15 = 192
    V4_19_219 = 224
    V5_4_281 = 232
    V6_6_44 = 240
    V6_10_3 = 248
    V6_8_12 = 248  # same layout as 6.10.3

    @property
    def size(self) -> int:
        """Size of the tcp_info payload in bytes."""
        return self.value

    @property
    def attribute_size(self) -> int:
        """Size of the whole netlink attribute, header included."""
        return self.value + RTA_HEADER_SIZE

    @property
    def fields(self) -> tuple[str, ...]:
        """Names of the fields this layout carries, in wire order."""
        return _LAYOUT_FIELDS[self.value]

    @property
    def struct(self) -> struct.Struct:
        """Little-endian packed struct for this layout."""
        return _LAYOUT_STRUCTS[self.value]

    @classmethod
    def for_size(cls, size: int) -> TCPInfoLayout:
        """Pick the layout for a payload of ``size`` bytes.

        Sizes of 248 bytes or more use the newest layout; any other size
        must match a known layout exactly.
        """
        if size < cls.V4_15.size:
            raise ValueError(f"data too small for TCPInfo: {size} bytes")
        if size >= cls.V6_10_3.size:
            return cls.V6_10_3
        for layout in cls:
            if layout.size == size:
                return layout
        raise ValueError(f"no tcp_info layout is {size} bytes long")


def _prefix_fields(size: int) -> tuple[tuple[str, ...], struct.Struct]:
    names: list[str] = []
    codes = "<"
    for name, code in FIELD_FORMATS:
        if struct.calcsize(codes) == size:
            break
        names.append(name)
        codes += code
    packed = struct.Struct(codes)
    if packed.size != size:
        raise RuntimeError(f"field list does not end on a {size} byte boundary")
    return tuple(names), packed


_LAYOUT_FIELDS: dict[int, tuple[str, ...]] = {}
_LAYOUT_STRUCTS: dict[int, struct.Struct] = {}
for _layout in TCPInfoLayout:
    _LAYOUT_FIELDS[_layout.value], _LAYOUT_STRUCTS[_layout.value] = _prefix_fields(
        _layout.value
    )
del _layout


def decode_layout(data: bytes, layout: TCPInfoLayout) -> dict[str, int]:
    """Decode every field of ``layout`` from the start of ``data``.

    Bytes beyond the layout are ignored; too few bytes raise ValueError.
    """
    if len(data) < layout.size:
        raise ValueError(
            f"{len(data)} bytes is too short for the {layout.name} tcp_info "
            f"layout of {layout.size} bytes"
        )
    return dict(zip(layout.fields, layout.struct.unpack_from(data)))