import pytest

from subbrute.generate import generate_subdomains

SUFFIXES = [".example.com", ".sample.net"]


def test_two_labels_give_three_combinations():
    assert generate_subdomains(["alpha.beta.example.com"], SUFFIXES) == [
        "alpha",
        "beta",
        "alpha.beta",
    ]


def test_single_label_after_other_suffix():
    assert generate_subdomains(["gamma-node.sample.net"], SUFFIXES) == ["gamma-node"]


def test_suffix_removed_from_middle_of_name():
    result = generate_subdomains(["one.two.example.com.cdn.org"], SUFFIXES)
    assert len(result) == 15
    assert result[:4] == ["one", "two", "cdn", "org"]
    assert result[4:10] == [
        "one.two",
        "one.cdn",
        "one.org",
        "two.cdn",
        "two.org",
        "cdn.org",
    ]
    assert result[-1] == "one.two.cdn.org"


def test_several_domains_are_concatenated_in_order():
    result = generate_subdomains(
        [
            "alpha.beta.example.com",
            "gamma-node.sample.net",
            "one.two.example.com.cdn.org",
        ],
        SUFFIXES,
    )
    assert len(result) == 19
    assert result[:4] == ["alpha", "beta", "alpha.beta", "gamma-node"]
    assert result[-1] == "one.two.cdn.org"


def test_no_matching_suffix_yields_empty_label():
    assert generate_subdomains(["example.org"], SUFFIXES) == [""]


def test_last_matching_suffix_wins():
    result = generate_subdomains(["a.x.com.y.com"], [".x.com", ".y.com"])
    assert result[:3] == ["a", "x", "com"]
    assert result[-1] == "a.x.com"
    assert len(result) == 7


@pytest.mark.parametrize("domains", [[], ()])
def test_empty_input(domains):
    assert generate_subdomains(domains, SUFFIXES) == []