"""Discovery and selection of the local network interfaces used for probing."""

from __future__ import annotations

import ipaddress
import random
import socket
import string
import subprocess
from dataclasses import dataclass, field

import psutil

from subbrute.packets import ZERO_MAC, format_mac, parse_mac

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

_ALPHANUMERIC = string.ascii_letters + string.digits
_COLUMNS = (20, 18, 15, 8, 10, 30)


@dataclass
class NetworkDevice:
    """A network interface with its hardware address and IP addresses."""

    name: str
    description: str | None = None
    mac: bytes | None = None
    ips: list[IPAddress] = field(default_factory=list)
    is_up: bool = False
    is_loopback: bool = False


@dataclass(frozen=True)
class DeviceSelection:
    """The interface, addresses and next-hop MAC used to send raw frames."""

    src_ip: ipaddress.IPv4Address
    device: str
    src_mac: bytes = ZERO_MAC
    dst_mac: bytes = ZERO_MAC

    def __str__(self) -> str:
        return (
            f"{self.device}: {self.src_ip} "
            f"src={format_mac(self.src_mac)} dst={format_mac(self.dst_mac)}"
        )


def _parse_ip(address: str) -> IPAddress | None:
    try:
        return ipaddress.ip_address(address.split("%", 1)[0])
    except ValueError:
        return None


def _parse_link_address(address: str) -> bytes | None:
    try:
        return parse_mac(address)
    except ValueError:
        return None


def list_network_devices() -> list[NetworkDevice]:
    """Return every interface known to the system."""
    stats = psutil.net_if_stats()
    devices = []
    for name, addresses in psutil.net_if_addrs().items():
        mac: bytes | None = None
        ips: list[IPAddress] = []
        for entry in addresses:
            if entry.family == psutil.AF_LINK:
                mac = mac or _parse_link_address(entry.address)
            elif entry.family in (socket.AF_INET, socket.AF_INET6):
                ip = _parse_ip(entry.address)
                if ip is not None:
                    ips.append(ip)
        stat = stats.get(name)
        devices.append(
            NetworkDevice(
                name=name,
                mac=mac,
                ips=ips,
                is_up=bool(stat.isup) if stat is not None else False,
                is_loopback=name == "lo" or any(ip.is_loopback for ip in ips),
            )
        )
    return devices


def _row(*cells: str) -> str:
    return " ".join(f"{cell:<{width}}" for cell, width in zip(cells, _COLUMNS)).rstrip()


def format_network_devices(devices: list[NetworkDevice]) -> str:
    """Render devices as a table, one line per IP address."""
    lines = [_row("Device", "MAC", "IP", "Status", "Type", "Description"), "-" * 100]
    for device in devices:
        mac = format_mac(device.mac) if device.mac else "N/A"
        status = "UP" if device.is_up else "DOWN"
        kind = "LOOPBACK" if device.is_loopback else "ETHERNET"
        description = device.description or "N/A"
        if not device.ips:
            lines.append(_row(device.name, mac, "N/A", status, kind, description))
            continue
        first, *rest = device.ips
        lines.append(_row(device.name, mac, str(first), status, kind, description))
        lines.extend(_row("", "", str(ip), "", "", "") for ip in rest)
    return "\n".join(lines)


def print_network_devices() -> str:
    """Print the table of all interfaces and return the printed text."""
    devices = list_network_devices()
    table = format_network_devices(devices)
    print()
    print(table)
    return table


def get_device_by_name(name: str) -> DeviceSelection | None:
    """Select the non-loopback interface *name* by its first IPv4 address.

    The gateway MAC is not looked up, so the destination MAC is all zeros.
    """
    for device in list_network_devices():
        if device.name != name or device.is_loopback:
            continue
        for ip in device.ips:
            if isinstance(ip, ipaddress.IPv4Address):
                return DeviceSelection(
                    src_ip=ip,
                    device=device.name,
                    src_mac=device.mac or ZERO_MAC,
                    dst_mac=ZERO_MAC,
                )
    return None


def random_label(length: int) -> str:
    """Return a random string of ASCII letters and digits."""
    if length < 0:
        raise ValueError("length must not be negative")
    return "".join(random.choices(_ALPHANUMERIC, k=length))


def trigger_lookup(domain: str) -> subprocess.CompletedProcess:
    """Run nslookup for *domain* so that a DNS answer crosses the wire."""
    return subprocess.run(["nslookup", domain], capture_output=True, check=False)