"""Candidate subdomain labels derived from already known hostnames."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations


def generate_subdomains(domains: Iterable[str], suffixes: Iterable[str]) -> list[str]:
    """Return every ordered combination of the labels left after removing a suffix.

    For each domain, the last suffix in *suffixes* that occurs in it is removed
    (all of its occurrences). The remaining name is split on dots, and every
    non-empty combination of its parts is joined back with dots. The
    combinations keep the original order of the parts. If no suffix occurs in a
    domain, that domain contributes a single empty string.
    """
    suffix_list = list(suffixes)
    subdomains: list[str] = []
    for domain in domains:
        stripped = ""
        for suffix in suffix_list:
            if suffix in domain:
                stripped = domain.replace(suffix, "")
        parts = stripped.split(".")
        for size in range(1, len(parts) + 1):
            subdomains.extend(".".join(combo) for combo in combinations(parts, size))
    return subdomains