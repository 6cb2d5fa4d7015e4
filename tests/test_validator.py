import pytest

from pumping_lab.models import ContextFreeDecomposition, FormalType, RegularDecomposition
from pumping_lab.validator import validate_context_free, validate_decomposition, validate_regular


def test_regular_decomposition_within_bounds() -> None:
    report = validate_regular("aaabbb", RegularDecomposition("a", "a", "abbb"), 2)
    assert report.formal_type is FormalType.REGULAR
    assert [c.name for c in report.constraints] == ["|xy| ≤ p", "|y| ≥ 1"]
    assert [c.measured for c in report.constraints] == [2, 1]
    assert report.constraints[0].value_text == "|xy| = 2, p = 2"
    assert report.all_satisfied
    assert report.valid
    assert report.errors == ()


def test_regular_xy_too_long() -> None:
    report = validate_regular("aaabbb", RegularDecomposition("aaa", "b", "bb"), 2)
    xy, y = report.constraints
    assert not xy.satisfied
    assert y.satisfied
    assert not report.all_satisfied


def test_regular_empty_y() -> None:
    report = validate_regular("ab", RegularDecomposition("a", "", "b"), 2)
    assert not report.constraints[1].satisfied
    assert not report.valid


def test_regular_mismatch_is_reported_not_raised() -> None:
    report = validate_regular("aaabbb", RegularDecomposition("a", "a", "bbb"), 2)
    assert report.all_satisfied
    assert not report.reconstructs_source
    assert not report.valid
    assert "does not match" in report.errors[0]


def test_context_free_constraints() -> None:
    report = validate_context_free("aaabbb", ContextFreeDecomposition("a", "a", "a", "b", "bb"), 3)
    assert [c.name for c in report.constraints] == ["|vwx| ≤ p", "|vx| ≥ 1"]
    assert [c.measured for c in report.constraints] == [3, 2]
    assert report.valid


def test_context_free_v_and_x_empty() -> None:
    report = validate_context_free("aaabbb", ContextFreeDecomposition("aa", "", "a", "", "bbb"), 3)
    assert not report.constraints[1].satisfied
    assert report.constraints[0].satisfied


def test_context_free_only_one_of_v_x_needed() -> None:
    report = validate_context_free("aaabbb", ContextFreeDecomposition("aa", "a", "", "", "bbb"), 3)
    assert report.constraints[1].satisfied


def test_context_free_vwx_too_long() -> None:
    report = validate_context_free("aaabbb", ContextFreeDecomposition("", "aa", "a", "bb", "b"), 3)
    assert not report.constraints[0].satisfied
    assert report.constraints[0].measured == 5


def test_validation_is_idempotent() -> None:
    decomposition = ContextFreeDecomposition("a", "a", "a", "b", "bb")
    assert validate_decomposition("aaabbb", decomposition, 3) == validate_decomposition("aaabbb", decomposition, 3)


def test_dispatch_rejects_unknown_shape() -> None:
    with pytest.raises(TypeError):
        validate_decomposition("ab", ("a", "b"), 2)  # type: ignore[arg-type]
