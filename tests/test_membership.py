import pytest

from pumping_lab import membership
from pumping_lab.catalog import LanguageCatalog
from pumping_lab.exceptions import LanguageNotFoundError


def test_accepts_and_rejects() -> None:
    accepted = membership.test_membership("a^nb^n", "aabb")
    assert accepted.accepted is True
    assert accepted.ok
    assert membership.test_membership("a^nb^n", "aab").accepted is False


def test_unknown_language() -> None:
    with pytest.raises(LanguageNotFoundError):
        membership.test_membership("nope", "ab")


def test_recognizer_failure_is_wrapped(fragile_catalog: LanguageCatalog) -> None:
    outcome = membership.test_membership("fragile", "abc", catalog=fragile_catalog)
    assert outcome.accepted is None
    assert not outcome.ok
    assert "no c allowed" in outcome.error


def test_same_input_same_outcome() -> None:
    first = membership.test_membership("palindromes", "abba")
    second = membership.test_membership("palindromes", "abba")
    assert first == second


def test_empty_catalog_is_used_as_given() -> None:
    with pytest.raises(LanguageNotFoundError):
        membership.test_membership("a*b*", "ab", catalog=LanguageCatalog([]))
