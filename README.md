# xtcpnl

Decoders for the binary messages that the Linux kernel returns on a
`NETLINK_SOCK_DIAG` socket, and an encoder for the dump request that asks
for them.

The package has no dependencies beyond the standard library.

## Modules

| Module                    | Contents                                                               |
|---------------------------|------------------------------------------------------------------------|
| `xtcpnl.netlink`          | `NetlinkHeader` (16-byte `nlmsghdr`), `serialize_diag_request`         |
| `xtcpnl.pcap`             | `PcapHeader`, `PcapRecordHeader`, `netlink_bytes`                      |
| `xtcpnl.tcpinfo`          | `TCPInfo`, `deserialize_tcp_info` (`INET_DIAG_INFO`)                   |
| `xtcpnl.tcpinfo_layouts`  | `TCPInfoLayout`, `decode_layout` for each kernel's `tcp_info`          |
| `xtcpnl.attributes`       | `deserialize_type_of_service` (`INET_DIAG_TOS`), `VegasInfo`           |
| `xtcpnl.readfile`         | `read_file`                                                            |

All values are read little-endian, except the state mask in a dump
request, which is written big-endian. Every decoder checks the length of
its input first and raises a specific exception, a subclass of
`ValueError`, when the data is too short: `NetlinkHeaderTooSmall`,
`PcapHeaderTooSmall`, `PcapRecordHeaderTooSmall`, `TCPInfoTooSmall`,
`TypeOfServiceTooSmall` and `VegasInfoTooSmall`. Bytes beyond what a
structure needs are ignored.

### Netlink headers and requests

`NetlinkHeader.from_bytes(data)` decodes the first 16 bytes into
`length`, `msg_type`, `flags`, `seq` and `pid`; `to_bytes()` encodes them
back, and `is_done` is true for the message that ends a dump
(`NLMSG_TYPE_DONE`, 3).

`serialize_diag_request(header, family, protocol, ext, states)` returns a
72-byte `inet_diag_req_v2` request. The header's pid and the socket id are
left zero. `TCP_ALL_STATES` and `SOCK_DIAG_BY_FAMILY` are provided as
constants.

### Packet captures

`PcapHeader.from_bytes` and `PcapRecordHeader.from_bytes` decode the pcap
file header and record header. `netlink_bytes(capture)` skips the file
header, the first record header and the 16-byte cooked netlink header of a
capture taken on an `nlmon` interface, and returns what follows; it raises
`ValueError` if the capture is shorter than those headers.

### tcp_info

`tcp_info` has grown with kernel releases. `TCPInfoLayout` names the known
layouts by payload size: 192 bytes (4.15), 224 (4.19), 232 (5.4), 240
(6.6) and 248 (6.8 and later). `TCPInfoLayout.for_size(size)` picks the
layout for a payload: 248 bytes or more use the newest layout, any other
size must match one exactly, otherwise `ValueError` is raised. Each layout
has `size`, `attribute_size` (with the 4-byte attribute header), `fields`
and `struct`. `decode_layout(data, layout)` returns a dict of field name
to value.

`TCPInfo.from_bytes(payload)` decodes an `INET_DIAG_INFO` payload (attribute
header already removed). Fields the kernel did not send stay zero, and the
legacy `fackets` field is never read. `deserialize_tcp_info(payload)`
returns the `TCPInfo` together with the number of bytes used.
`TCPInfo.as_dict()` returns all fields by name.

### Other attributes

`deserialize_type_of_service(payload)` returns the `INET_DIAG_TOS` byte.
`VegasInfo.from_bytes(payload)` decodes `INET_DIAG_VEGASINFO` into
`enabled`, `rtt_cnt`, `rtt` and `min_rtt`.

### Files

`read_file(path)` returns the whole contents of a file and raises
`OSError` if fewer bytes are read than the file's size.

## Examples

```python
from xtcpnl.netlink import NetlinkHeader
from xtcpnl.pcap import PcapHeader, netlink_bytes
from xtcpnl.readfile import read_file

capture = read_file("netlink_sock_diag_reply_single_packet.pcap")
print(PcapHeader.from_bytes(capture))
print(NetlinkHeader.from_bytes(netlink_bytes(capture)))
```

```python
from xtcpnl.attributes import VegasInfo, deserialize_type_of_service
from xtcpnl.tcpinfo import TCPInfo

info = TCPInfo.from_bytes(info_payload)
tos = deserialize_type_of_service(tos_payload)
vegas = VegasInfo.from_bytes(vegas_payload)
```

## What the package does not do

It works on bytes only. It does not open netlink sockets, send requests or
receive replies, and it does not walk the sequence of messages in a reply,
the `inet_diag_msg` body or its list of attributes; the caller slices out
each payload. Attributes other than `INET_DIAG_INFO`, `INET_DIAG_TOS` and
`INET_DIAG_VEGASINFO` are not decoded. It installs no commands, and has no
tools for generating TCP traffic.

## Running the tests

```
pip install -e ".[test]"
pytest
```