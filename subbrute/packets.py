"""Builders for the raw frames used to probe DNS servers and the local network."""

from __future__ import annotations

import ipaddress
import struct

ETHERTYPE_IPV4 = 0x0800
ETHERTYPE_ARP = 0x0806
ETHERTYPE_IPV6 = 0x86DD

PROTOCOL_ICMP = 1
PROTOCOL_UDP = 17

ICMP_ECHO_REQUEST = 8
ICMP_ECHO_REPLY = 0

BROADCAST_MAC = b"\xff" * 6
ZERO_MAC = b"\x00" * 6

DEFAULT_TRANSACTION_ID = 0x3301
_IPV4_DONT_FRAGMENT = 0x4000

MacLike = "bytes | bytes | str"


def parse_mac(text: str) -> bytes:
    """Parse a colon or dash separated MAC address into six bytes."""
    parts = text.replace("-", ":").split(":")
    if len(parts) != 6:
        raise ValueError(f"invalid MAC address: {text!r}")
    try:
        values = [int(part, 16) for part in parts]
    except ValueError:
        raise ValueError(f"invalid MAC address: {text!r}") from None
    if any(len(part) not in (1, 2) or not 0 <= value <= 0xFF
           for part, value in zip(parts, values)):
        raise ValueError(f"invalid MAC address: {text!r}")
    return bytes(values)


def format_mac(mac: bytes | bytearray) -> str:
    """Format six bytes as a lower-case colon separated MAC address."""
    if len(mac) != 6:
        raise ValueError("a MAC address has exactly six bytes")
    return ":".join(f"{byte:02x}" for byte in mac)


def _mac_bytes(mac: bytes | bytearray | str) -> bytes:
    if isinstance(mac, str):
        return parse_mac(mac)
    if len(mac) != 6:
        raise ValueError("a MAC address has exactly six bytes")
    return bytes(mac)


def _ipv4_bytes(address: str | ipaddress.IPv4Address) -> bytes:
    return ipaddress.IPv4Address(address).packed


def internet_checksum(data: bytes | bytearray) -> int:
    """Return the 16-bit one's complement checksum of *data*."""
    if len(data) % 2:
        data = bytes(data) + b"\x00"
    total = sum(word for (word,) in struct.iter_unpack("!H", data))
    while total >> 16:
        total = (total & 0xFFFF) + (total >> 16)
    return ~total & 0xFFFF


def build_dns_query(domain: str, transaction_id: int = DEFAULT_TRANSACTION_ID) -> bytes:
    """Build a standard recursive query for the A record of *domain*."""
    if not 0 <= transaction_id <= 0xFFFF:
        raise ValueError("transaction id must fit in 16 bits")
    header = struct.pack("!HHHHHH", transaction_id, 0x0100, 1, 0, 0, 0)
    name = bytearray()
    trimmed = domain.rstrip(".")
    if trimmed:
        for label in trimmed.split("."):
            encoded = label.encode("utf-8")
            if not encoded:
                raise ValueError(f"empty label in domain name: {domain!r}")
            if len(encoded) > 63:
                raise ValueError(f"label longer than 63 bytes: {label!r}")
            name.append(len(encoded))
            name += encoded
    name.append(0)
    return header + bytes(name) + struct.pack("!HH", 1, 1)


def build_icmp_echo_request(
    identifier: int,
    sequence_number: int,
    payload: bytes = b"",
    size: int | None = None,
) -> bytes:
    """Build an ICMP echo request, zero padded to *size* bytes when given."""
    body = struct.pack("!BBHHH", ICMP_ECHO_REQUEST, 0, 0, identifier, sequence_number)
    body += bytes(payload)
    if size is not None:
        if size < len(body):
            raise ValueError(f"echo request needs {len(body)} bytes, size is {size}")
        body += b"\x00" * (size - len(body))
    checksum = internet_checksum(body)
    return body[:2] + struct.pack("!H", checksum) + body[4:]


def build_ethernet_header(
    destination: bytes | str,
    source: bytes | str,
    ethertype: int = ETHERTYPE_IPV4,
) -> bytes:
    """Build a 14-byte Ethernet II header."""
    return _mac_bytes(destination) + _mac_bytes(source) + struct.pack("!H", ethertype)


def build_ipv4_header(
    source: str | ipaddress.IPv4Address,
    destination: str | ipaddress.IPv4Address,
    payload_length: int,
    protocol: int = PROTOCOL_UDP,
    identification: int = 0,
    ttl: int = 64,
) -> bytes:
    """Build a 20-byte IPv4 header with the don't-fragment flag and a valid checksum."""
    total_length = 20 + payload_length
    if payload_length < 0 or total_length > 0xFFFF:
        raise ValueError(f"payload length out of range: {payload_length}")
    if not 0 <= ttl <= 0xFF:
        raise ValueError(f"ttl out of range: {ttl}")
    header = struct.pack(
        "!BBHHHBBH4s4s",
        (4 << 4) | 5,
        0,
        total_length,
        identification & 0xFFFF,
        _IPV4_DONT_FRAGMENT,
        ttl,
        protocol,
        0,
        _ipv4_bytes(source),
        _ipv4_bytes(destination),
    )
    checksum = internet_checksum(header)
    return header[:10] + struct.pack("!H", checksum) + header[12:]


def build_udp_datagram(
    source: str | ipaddress.IPv4Address,
    destination: str | ipaddress.IPv4Address,
    source_port: int,
    destination_port: int,
    payload: bytes,
) -> bytes:
    """Build a UDP header and payload, checksummed over the IPv4 pseudo header."""
    length = 8 + len(payload)
    if length > 0xFFFF:
        raise ValueError("UDP payload too large")
    for port in (source_port, destination_port):
        if not 0 <= port <= 0xFFFF:
            raise ValueError(f"port out of range: {port}")
    datagram = struct.pack("!HHHH", source_port, destination_port, length, 0) + bytes(payload)
    pseudo = _ipv4_bytes(source) + _ipv4_bytes(destination) + struct.pack(
        "!BBH", 0, PROTOCOL_UDP, length
    )
    checksum = internet_checksum(pseudo + datagram) or 0xFFFF
    return datagram[:6] + struct.pack("!H", checksum) + datagram[8:]


def build_arp_request(
    sender_mac: bytes | str,
    sender_ip: str | ipaddress.IPv4Address,
    target_ip: str | ipaddress.IPv4Address,
) -> bytes:
    """Build a 28-byte ARP request asking who has *target_ip*."""
    return (
        struct.pack("!HHBBH", 1, ETHERTYPE_IPV4, 6, 4, 1)
        + _mac_bytes(sender_mac)
        + _ipv4_bytes(sender_ip)
        + ZERO_MAC
        + _ipv4_bytes(target_ip)
    )