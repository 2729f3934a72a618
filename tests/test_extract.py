import pytest

from urlspell.extract import extract_sites


def test_extracts_hosts_between_slashes() -> None:
    text = "https://docs.rs/regex/latest/regex/ https://norvig.com/spell-correct.html"

    assert extract_sites(text) == ["docs.rs", "norvig.com"]


def test_sites_are_lowercased_and_duplicates_kept() -> None:
    text = "see https://Docs.RS/regex/ and http://docs.rs/serde/"

    assert extract_sites(text) == ["docs.rs", "docs.rs"]


def test_host_without_trailing_slash_is_ignored() -> None:
    assert extract_sites("visit https://norvig.com today") == []
    assert extract_sites("") == []


def test_custom_pattern() -> None:
    pattern = r"@(?P<site>[a-z0-9.-]+)"

    assert extract_sites("mail bob@example.org now", pattern) == ["example.org"]


def test_pattern_without_site_group_is_rejected() -> None:
    with pytest.raises(ValueError):
        extract_sites("https://docs.rs/", r"//([a-z.]+)/")
