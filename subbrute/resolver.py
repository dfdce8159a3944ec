"""Asynchronous lookup of the common DNS record types for discovered names."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

import dns.asyncresolver
import dns.exception

MAX_CONCURRENT_LOOKUPS = 20
ADDRESS_KEY = "A/AAAA"


@dataclass(frozen=True)
class DnsRecord:
    """One record value; *kind* is A, AAAA, CNAME, NS, MX, TXT, SOA or PTR."""

    kind: str
    value: str
    priority: int | None = None

    def __str__(self) -> str:
        if self.kind == "MX":
            return f"{self.priority} {self.value}"
        if self.kind == "TXT":
            return f'"{self.value}"'
        return self.value


@dataclass
class DnsResolveResult:
    """All records found for one domain, grouped by record type."""

    domain: str
    records: dict[str, list[DnsRecord]] = field(default_factory=dict)

    @property
    def has_records(self) -> bool:
        return any(self.records.values())


def _txt_value(rdata: Any) -> str:
    return b"".join(rdata.strings).decode("utf-8", errors="replace")


_OTHER_LOOKUPS: tuple[tuple[str, Callable[[Any], DnsRecord]], ...] = (
    ("CNAME", lambda r: DnsRecord("CNAME", r.target.to_text())),
    ("NS", lambda r: DnsRecord("NS", r.target.to_text())),
    ("MX", lambda r: DnsRecord("MX", r.exchange.to_text(), r.preference)),
    ("TXT", lambda r: DnsRecord("TXT", _txt_value(r))),
    ("SOA", lambda r: DnsRecord("SOA", f"{r.mname.to_text()} {r.rname.to_text()}")),
)


class DnsResolver:
    """Looks up records through the system or the given name servers."""

    def __init__(
        self,
        nameservers: Sequence[str] | None = None,
        timeout: float | None = None,
    ) -> None:
        if nameservers:
            self._resolver = dns.asyncresolver.Resolver(configure=False)
            self._resolver.nameservers = list(nameservers)
        else:
            self._resolver = dns.asyncresolver.Resolver()
        if timeout is not None:
            self._resolver.timeout = timeout
            self._resolver.lifetime = timeout

    async def _query(self, domain: str, rdtype: str) -> list[Any]:
        try:
            answer = await self._resolver.resolve(domain, rdtype)
        except dns.exception.DNSException:
            return []
        return list(answer)

    async def _addresses(self, domain: str) -> list[DnsRecord]:
        found = [DnsRecord("A", r.address) for r in await self._query(domain, "A")]
        if not found:
            found = [DnsRecord("AAAA", r.address) for r in await self._query(domain, "AAAA")]
        return found

    async def resolve_all_records(self, domain: str) -> DnsResolveResult:
        """Look up addresses, CNAME, NS, MX, TXT and SOA records of *domain*."""
        result = DnsResolveResult(domain)
        addresses = await self._addresses(domain)
        if addresses:
            result.records[ADDRESS_KEY] = addresses
        for rdtype, convert in _OTHER_LOOKUPS:
            found = [convert(rdata) for rdata in await self._query(domain, rdtype)]
            if found:
                result.records[rdtype] = found
        return result

    async def resolve_domains(self, domains: Iterable[str]) -> list[DnsResolveResult]:
        """Resolve many domains concurrently, keeping their order."""
        limit = asyncio.Semaphore(MAX_CONCURRENT_LOOKUPS)

        async def limited(name: str) -> DnsResolveResult:
            async with limit:
                return await self.resolve_all_records(name)

        outcomes = await asyncio.gather(
            *(limited(name) for name in domains), return_exceptions=True
        )
        return [o for o in outcomes if isinstance(o, DnsResolveResult)]

    async def resolve_a_record(self, domain: str) -> str | None:
        """Return the first IPv4 address of *domain*, or None."""
        for rdata in await self._query(domain, "A"):
            return rdata.address
        return None


def format_results(results: Iterable[DnsResolveResult]) -> str:
    """Render the results that hold records as an indented listing."""
    lines = ["=== DNS resolution results ==="]
    for result in results:
        if not result.has_records:
            continue
        lines.append(f"Domain: {result.domain}")
        for record_type, records in result.records.items():
            lines.append(f"  {record_type}:")
            lines.extend(f"    {record}" for record in records)
        lines.append("")
    return "\n".join(lines)


def display_results(results: Iterable[DnsResolveResult]) -> None:
    """Print the listing produced by format_results."""
    print(format_results(results))