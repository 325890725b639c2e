"""Tests for full-name parsing."""

import pytest

from kinboard.domain import ParsedName, ValidationError, parse_full_name


def test_single_token_is_first_name_only() -> None:
    parsed = parse_full_name("Madonna")
    assert parsed == ParsedName(first_name="Madonna")
    assert parsed.middle_name is None
    assert parsed.last_name is None


def test_two_tokens_are_first_and_last() -> None:
    parsed = parse_full_name("Ada Lovelace")
    assert parsed.first_name == "Ada"
    assert parsed.middle_name is None
    assert parsed.last_name == "Lovelace"


def test_three_or_more_tokens_join_the_middle() -> None:
    parsed = parse_full_name("Madonna Louise Cicone")
    assert (parsed.first_name, parsed.middle_name, parsed.last_name) == (
        "Madonna",
        "Louise",
        "Cicone",
    )

    parsed = parse_full_name("Johann Sebastian Carl Bach")
    assert parsed.first_name == "Johann"
    assert parsed.middle_name == "Sebastian Carl"
    assert parsed.last_name == "Bach"


def test_surrounding_and_repeated_whitespace_ignored() -> None:
    parsed = parse_full_name("  Grace \t Brewster   Hopper \n")
    assert parsed.first_name == "Grace"
    assert parsed.middle_name == "Brewster"
    assert parsed.last_name == "Hopper"
    assert parsed.full_name == "Grace Brewster Hopper"


@pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
def test_empty_name_rejected(raw: str) -> None:
    with pytest.raises(ValidationError, match="fullName cannot be an empty string."):
        parse_full_name(raw)


def test_non_string_rejected() -> None:
    with pytest.raises(ValidationError, match="must be a string"):
        parse_full_name(None)  # type: ignore[arg-type]
