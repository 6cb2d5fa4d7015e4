import pytest

from pumping_lab.exceptions import InvalidPumpCountError, LanguageNotFoundError
from pumping_lab.models import ContextFreeDecomposition, RegularDecomposition
from pumping_lab.session import Session


def test_actions_return_new_sessions() -> None:
    start = Session()
    chosen = start.with_language("a*b*")
    assert start.language_id is None
    assert chosen.language_id == "a*b*"
    with_source = chosen.with_source("aaabbb")
    assert chosen.source == ""
    assert with_source.source == "aaabbb"


def test_switching_language_resets_string() -> None:
    session = Session().with_language("a*b*").with_source("aab").with_lengths([1, 1])
    switched = session.with_language("a^nb^n")
    assert switched.source == ""
    assert switched.lengths == ()


def test_unknown_language() -> None:
    with pytest.raises(LanguageNotFoundError):
        Session().with_language("nope")


def test_decomposition_follows_language_shape() -> None:
    regular = Session().with_language("a*b*").with_source("aaabbb").with_lengths([1, 1])
    assert regular.decomposition() == RegularDecomposition("a", "a", "abbb")
    assert regular.constraints().all_satisfied

    cf = Session().with_language("a^nb^nc^n").with_generated(6).with_lengths([1, 1, 1, 1])
    assert cf.source == "aabbcc"
    assert isinstance(cf.decomposition(), ContextFreeDecomposition)


def test_starting_lengths_for_fresh_string() -> None:
    regular = Session().with_language("(ab)*").with_source("abab")
    assert regular.decomposition() == RegularDecomposition("a", "b", "ab")

    cf = Session().with_language("a^nb^n").with_source("aaabbb")
    assert cf.decomposition() == ContextFreeDecomposition("a", "a", "abb", "b", "b")


def test_pumped_and_verdict() -> None:
    session = (
        Session()
        .with_language("a^nb^n")
        .with_source("aaabbb")
        .with_lengths([1, 1, 1, 0])
        .with_pump_count(2)
    )
    assert session.pumped() == "aaaabbb"
    verdict = session.with_pump_counts([0, 1, 2]).verdict()
    assert verdict.has_violation


def test_invalid_pump_count() -> None:
    with pytest.raises(InvalidPumpCountError):
        Session().with_pump_count(-3)


def test_language_required() -> None:
    with pytest.raises(ValueError):
        Session().with_source("ab").decomposition()
