"""Decoders for Linux netlink sock_diag messages, tcp_info and pcap headers."""

__version__ = "0.1.0"