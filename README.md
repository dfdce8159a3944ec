# subbrute

Building blocks for subdomain discovery:

- turning a wordlist and a set of target domains into candidate names,
- deriving candidate labels from hostnames you already know,
- building raw DNS, UDP, IPv4, Ethernet, ICMP and ARP frames byte for byte,
- resolving A/AAAA, CNAME, NS, MX, TXT and SOA records for discovered hosts,
- pacing traffic with a per-second byte budget and measuring send and receive rates,
- listing local network interfaces and picking one by name.

## Installation

Install the package from a checkout with any standard Python installer. It
depends on `dnspython` and `psutil`. The `test` extra pulls in pytest and
pytest-asyncio.

## Modules

| Module                | What it holds |
|-----------------------|---------------|
| `subbrute.generate`   | `generate_subdomains` builds label combinations from known hosts |
| `subbrute.packets`    | `build_dns_query`, `build_udp_datagram`, `build_ipv4_header`, `build_ethernet_header`, `build_icmp_echo_request`, `build_arp_request`, `internet_checksum`, `parse_mac`, `format_mac` |
| `subbrute.resolver`   | `DnsResolver`, `DnsRecord`, `DnsResolveResult`, `format_results`, `display_results` |
| `subbrute.bandwidth`  | `BandwidthLimiter`, `TrafficCounter`, `SpeedTestResult`, `compute_rates`, `format_speed_result` |
| `subbrute.device`     | `NetworkDevice`, `DeviceSelection`, `list_network_devices`, `format_network_devices`, `print_network_devices`, `get_device_by_name`, `random_label`, `trigger_lookup` |
| `subbrute.config`     | `SubdomainBruteConfig`, `SubdomainResult`, `make_config`, `load_dictionary`, `choose_dictionary`, `iter_queries`, `filter_wildcards`, `attach_verification`, `attach_dns_records` |

## Candidate labels

`generate_subdomains(domains, suffixes)` removes a matching suffix from each
known host, splits what is left on dots and returns every non-empty, ordered
combination of those parts:

```python
from subbrute.generate import generate_subdomains

labels = generate_subdomains(["tuyere.api.example.com"], [".example.com"])
# ["tuyere", "api", "tuyere.api"]
```

## Configuration and query names

`SubdomainBruteConfig` is a dataclass holding the targets, resolvers, wordlist
source and switches of a run. `make_config` builds one and falls back to
`8.8.8.8` when no resolvers are given:

```python
from subbrute.config import make_config, choose_dictionary, iter_queries

config = make_config(["example.com"], dictionary=["www", "mail"], silent=True)

words = choose_dictionary(config, default=["api"])
for name in iter_queries(words, config.domains):
    print(name)  # www.example.com, mail.example.com
```

`choose_dictionary` uses the given word list first, then the file named by
`dictionary_file` (read with `load_dictionary`, one stripped word per line),
and otherwise the `default` you pass in.

Found names are carried as `SubdomainResult` objects. `filter_wildcards` drops
those whose address a callable `is_wildcard(domain, address)` marks as a
wildcard answer (results whose `ip` is not an IP address are kept).
`attach_verification` and `attach_dns_records` return copies of the results
with the item of matching `domain` attached.

## Packets

```python
from subbrute.packets import (
    build_dns_query,
    build_udp_datagram,
    build_ipv4_header,
    build_ethernet_header,
)

query = build_dns_query("www.example.com", 0x3301)
udp = build_udp_datagram("192.0.2.10", "198.51.100.53", 40000, 53, query)
ip = build_ipv4_header("192.0.2.10", "198.51.100.53", len(udp), 17, 5636, 64)
eth = build_ethernet_header("02:00:00:00:00:02", "02:00:00:00:00:01", 0x0800)
frame = eth + ip + udp
```

MAC addresses may be given as six bytes or as text. The IPv4 header sets the
don't-fragment flag and carries a valid checksum; the UDP checksum covers the
IPv4 pseudo header. `build_icmp_echo_request` pads to an optional `size`, and
`build_arp_request` asks who has a target address. `internet_checksum` computes
the ones'-complement sum used by these headers.

## Record resolution

```python
import asyncio
from subbrute.resolver import DnsResolver, display_results

async def main():
    resolver = DnsResolver(nameservers=["198.51.100.53"], timeout=3.0)
    results = await resolver.resolve_domains(["www.example.com"])
    display_results(results)

asyncio.run(main())
```

Without `nameservers` the system configuration is used. `resolve_domains` runs
at most 20 lookups at a time and keeps the input order. `resolve_a_record`
returns the first IPv4 address or `None`. Failed lookups simply yield no
records.

## Pacing and rates

`BandwidthLimiter(max_bytes_per_sec)` keeps a byte budget per one-second
window. Its coroutine `can_send(packet_size)` returns `True` when the packet
fits (counting it), and otherwise waits 0.1 s and returns `False`; once a
second has passed the budget is cleared and the call returns `True`. The limit
is a plain number of bytes.

`TrafficCounter` is a thread-safe count of packets sent and received and bytes
sent; `snapshot(elapsed)` turns it into a `SpeedTestResult` of per-second rates
(via `compute_rates`), and `format_speed_result` renders it as text.

## Interfaces

```python
from subbrute.device import list_network_devices, format_network_devices

print(format_network_devices(list_network_devices()))
```

`get_device_by_name` returns a `DeviceSelection` for a non-loopback interface
with an IPv4 address, or `None`. Its destination MAC is all zeros, since the
gateway's hardware address is not looked up. `trigger_lookup` runs the
system's `nslookup` for a name, and `random_label` makes random alphanumeric
labels.

## What the package does not do

The package builds frames but does not open raw sockets or send or capture
packets, so it does not itself run a brute-force scan, measure live traffic or
detect the interface by watching a DNS answer. It has no wildcard detector, no
HTTP/HTTPS verifier, no built-in default wordlist, no result export and no
command-line program: those are left to the code that uses these modules.