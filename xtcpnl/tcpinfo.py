"""Decoding of the INET_DIAG_INFO attribute, the kernel's ``struct tcp_info``."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from xtcpnl.tcpinfo_layouts import TCPInfoLayout, decode_layout

TCP_INFO_MIN_SIZE = TCPInfoLayout.V4_15.size
TCP_INFO_ATTRIBUTE_TYPE = 2


class TCPInfoTooSmall(ValueError):
    """Raised when there are fewer bytes than the oldest tcp_info layout."""

    def __init__(self, size: int) -> None:
        super().__init__(
            f"data too small for TCPInfo: {size} bytes, need {TCP_INFO_MIN_SIZE}"
        )
        self.size = size


@dataclass(frozen=True)
class TCPInfo:
    """A decoded tcp_info; fields a kernel does not export stay zero."""

    state: int = 0
    ca_state: int = 0
    retransmits: int = 0
    probes: int = 0
    backoff: int = 0
    options: int = 0
    scale_temp: int = 0
    flags_temp: int = 0

    rto: int = 0
    ato: int = 0
    snd_mss: int = 0
    rcv_mss: int = 0

    unacked: int = 0
    sacked: int = 0
    lost: int = 0
    retrans: int = 0
    fackets: int = 0

    last_data_sent: int = 0
    last_ack_sent: int = 0
    last_data_recv: int = 0
    last_ack_recv: int = 0

    pmtu: int = 0
    rcv_ssthresh: int = 0
    rtt: int = 0
    rttvar: int = 0
    snd_ssthresh: int = 0
    snd_cwnd: int = 0
    adv_mss: int = 0
    reordering: int = 0

    rcv_rtt: int = 0
    rcv_space: int = 0

    total_retrans: int = 0

    pacing_rate: int = 0
    max_pacing_rate: int = 0
    bytes_acked: int = 0
    bytes_received: int = 0

    segs_out: int = 0
    segs_in: int = 0

    not_sent_bytes: int = 0
    min_rtt: int = 0
    data_segs_in: int = 0
    data_segs_out: int = 0

    delivery_rate: int = 0

    busy_time: int = 0
    rwnd_limited: int = 0
    sndbuf_limited: int = 0

    delivered: int = 0
    delivered_ce: int = 0

    bytes_sent: int = 0
    bytes_retrans: int = 0

    dsack_dups: int = 0
    reord_seen: int = 0

    rcv_ooopack: int = 0
    snd_wnd: int = 0

    rcv_wnd: int = 0
    rehash: int = 0

    total_rto: int = 0
    total_rto_recoveries: int = 0
    total_rto_time: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> TCPInfo:
        """Decode a tcp_info payload (without its attribute header)."""
        info, _ = deserialize_tcp_info(data)
        return info

    def as_dict(self) -> dict[str, int]:
        """All fields by name."""
        return asdict(self)


def deserialize_tcp_info(data: bytes) -> tuple[TCPInfo, int]:
    """Decode a tcp_info payload and report how many bytes it used.

    The layout is chosen from the payload length.  The legacy ``fackets``
    field is not read and stays zero.
    """
    if len(data) < TCP_INFO_MIN_SIZE:
        raise TCPInfoTooSmall(len(data))
    layout = TCPInfoLayout.for_size(len(data))
    values = decode_layout(data, layout)
    values["fackets"] = 0
    return TCPInfo(**values), layout.size