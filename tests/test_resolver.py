from unittest.mock import patch

import dns.asyncresolver
import dns.rdata
import dns.resolver
import pytest

from subbrute.resolver import (
    DnsRecord,
    DnsResolveResult,
    DnsResolver,
    display_results,
    format_results,
)


def _rdata(rdtype, text):
    return dns.rdata.from_text("IN", rdtype, text)


TABLE = {
    ("www.example.com", "A"): [_rdata("A", "192.0.2.10"), _rdata("A", "192.0.2.11")],
    ("www.example.com", "CNAME"): [_rdata("CNAME", "alias.example.com.")],
    ("www.example.com", "MX"): [_rdata("MX", "10 mail.example.com.")],
    ("www.example.com", "TXT"): [_rdata("TXT", '"v=spf1" " -all"')],
    ("www.example.com", "SOA"): [
        _rdata("SOA", "ns1.example.com. admin.example.com. 1 2 3 4 5")
    ],
    ("v6.example.com", "AAAA"): [_rdata("AAAA", "2001:db8::1")],
    ("ns.example.com", "NS"): [_rdata("NS", "ns1.example.com.")],
}


async def _fake_resolve(self, qname, rdtype="A", *args, **kwargs):
    key = (str(qname), str(rdtype))
    if key in TABLE:
        return TABLE[key]
    raise dns.resolver.NXDOMAIN()


@pytest.fixture
def resolver():
    with patch.object(dns.asyncresolver.Resolver, "resolve", new=_fake_resolve):
        yield DnsResolver(nameservers=["127.0.0.1"], timeout=1.0)


@pytest.mark.asyncio
async def test_resolve_all_records_groups_by_type(resolver):
    result = await resolver.resolve_all_records("www.example.com")
    assert result.domain == "www.example.com"
    assert list(result.records) == ["A/AAAA", "CNAME", "MX", "TXT", "SOA"]
    assert [r.value for r in result.records["A/AAAA"]] == ["192.0.2.10", "192.0.2.11"]
    assert result.records["CNAME"] == [DnsRecord("CNAME", "alias.example.com.")]
    assert result.records["MX"] == [DnsRecord("MX", "mail.example.com.", 10)]
    assert result.records["TXT"][0].value == "v=spf1 -all"
    assert result.records["SOA"][0].value == "ns1.example.com. admin.example.com."
    assert result.has_records is True


@pytest.mark.asyncio
async def test_falls_back_to_aaaa_without_a_records(resolver):
    result = await resolver.resolve_all_records("v6.example.com")
    assert result.records == {"A/AAAA": [DnsRecord("AAAA", "2001:db8::1")]}


@pytest.mark.asyncio
async def test_ns_records(resolver):
    result = await resolver.resolve_all_records("ns.example.com")
    assert result.records == {"NS": [DnsRecord("NS", "ns1.example.com.")]}


@pytest.mark.asyncio
async def test_unknown_domain_has_no_records(resolver):
    result = await resolver.resolve_all_records("missing.example.com")
    assert result.records == {}
    assert result.has_records is False


@pytest.mark.asyncio
async def test_resolve_domains_keeps_order(resolver):
    names = ["ns.example.com", "missing.example.com", "www.example.com"]
    results = await resolver.resolve_domains(names)
    assert [r.domain for r in results] == names
    assert [r.has_records for r in results] == [True, False, True]


@pytest.mark.asyncio
async def test_resolve_a_record(resolver):
    assert await resolver.resolve_a_record("www.example.com") == "192.0.2.10"
    assert await resolver.resolve_a_record("v6.example.com") is None


def test_record_str_forms():
    assert str(DnsRecord("MX", "mail.example.com.", 5)) == "5 mail.example.com."
    assert str(DnsRecord("TXT", "hello")) == '"hello"'
    assert str(DnsRecord("A", "192.0.2.1")) == "192.0.2.1"


def test_format_results_skips_empty():
    results = [
        DnsResolveResult("empty.example.com"),
        DnsResolveResult(
            "www.example.com",
            {"MX": [DnsRecord("MX", "mail.example.com.", 10)]},
        ),
    ]
    text = format_results(results)
    assert "empty.example.com" not in text
    lines = text.splitlines()
    assert lines[1:4] == ["Domain: www.example.com", "  MX:", "    10 mail.example.com."]


def test_display_results_prints(capsys):
    display_results([DnsResolveResult("a.example.com", {"A/AAAA": [DnsRecord("A", "192.0.2.7")]})])
    out = capsys.readouterr().out
    assert "Domain: a.example.com" in out
    assert "    192.0.2.7" in out