"""Settings and results of a brute-force run, plus the steps that shape them."""

from __future__ import annotations

import ipaddress
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from subbrute.resolver import DnsResolveResult

DEFAULT_RESOLVERS = ("8.8.8.8",)
DEFAULT_BANDWIDTH = "3M"

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


@dataclass
class SubdomainBruteConfig:
    """What to brute force, how fast, and what to do with the names found."""

    domains: list[str] = field(default_factory=list)
    resolvers: list[str] = field(default_factory=list)
    dictionary_file: str | None = None
    dictionary: list[str] | None = None
    skip_wildcard: bool = True
    bandwidth_limit: str | None = DEFAULT_BANDWIDTH
    verify_mode: bool = False
    resolve_records: bool = False
    silent: bool = False
    device: str | None = None


@dataclass
class SubdomainResult:
    """A discovered name with its answer and any later enrichment."""

    domain: str
    ip: str
    record_type: str
    verified: Any = None
    dns_records: DnsResolveResult | None = None


def make_config(
    domains: Iterable[str],
    dictionary_file: str | None = None,
    dictionary: Iterable[str] | None = None,
    resolvers: Iterable[str] | None = None,
    skip_wildcard: bool = True,
    bandwidth_limit: str | None = DEFAULT_BANDWIDTH,
    verify_mode: bool = False,
    resolve_records: bool = False,
    silent: bool = False,
    device: str | None = None,
) -> SubdomainBruteConfig:
    """Build a configuration; without resolvers the public default is used."""
    return SubdomainBruteConfig(
        domains=list(domains),
        resolvers=list(resolvers) if resolvers is not None else list(DEFAULT_RESOLVERS),
        dictionary_file=dictionary_file,
        dictionary=list(dictionary) if dictionary is not None else None,
        skip_wildcard=skip_wildcard,
        bandwidth_limit=bandwidth_limit,
        verify_mode=verify_mode,
        resolve_records=resolve_records,
        silent=silent,
        device=device,
    )


def load_dictionary(path: str | Path) -> list[str]:
    """Read one word per line, with surrounding whitespace removed."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return [line.strip() for line in handle]


def choose_dictionary(config: SubdomainBruteConfig, default: Iterable[str]) -> list[str]:
    """Pick the words to try: the given list, else the file, else *default*."""
    if config.dictionary is not None:
        return list(config.dictionary)
    if config.dictionary_file is not None:
        return load_dictionary(config.dictionary_file)
    return list(default)


def iter_queries(words: Iterable[str], domains: Iterable[str]) -> Iterator[str]:
    """Yield ``word.domain`` for every word, trying each domain in turn."""
    domain_list = list(domains)
    for word in words:
        for domain in domain_list:
            yield f"{word}.{domain}"


def filter_wildcards(
    results: Iterable[SubdomainResult],
    is_wildcard: Callable[[str, IPAddress], bool],
) -> list[SubdomainResult]:
    """Drop results whose address the detector marks as a wildcard answer.

    Results whose ip is not an IP address are always kept.
    """
    kept = []
    for result in results:
        try:
            address = ipaddress.ip_address(result.ip)
        except ValueError:
            kept.append(result)
            continue
        if not is_wildcard(result.domain, address):
            kept.append(result)
    return kept


def attach_verification(
    results: Iterable[SubdomainResult], verified: Iterable[Any]
) -> list[SubdomainResult]:
    """Return results with the verification whose ``domain`` matches attached."""
    by_domain = {item.domain: item for item in verified}
    return [
        replace(result, verified=by_domain[result.domain])
        if result.domain in by_domain
        else result
        for result in results
    ]


def attach_dns_records(
    results: Iterable[SubdomainResult], records: Iterable[DnsResolveResult]
) -> list[SubdomainResult]:
    """Return results with the matching DNS lookup result attached."""
    by_domain = {item.domain: item for item in records}
    return [
        replace(result, dns_records=by_domain[result.domain])
        if result.domain in by_domain
        else result
        for result in results
    ]