import pytest

from pumping_lab.exceptions import InvalidPumpCountError
from pumping_lab.models import ContextFreeDecomposition, RegularDecomposition
from pumping_lab.pumper import pump, pump_context_free, pump_regular

REGULAR = RegularDecomposition("ab", "ba", "c")
CONTEXT_FREE = ContextFreeDecomposition("a", "bc", "d", "e", "fg")


def test_pump_once_is_identity() -> None:
    assert pump(REGULAR, 1) == REGULAR.joined()
    assert pump(CONTEXT_FREE, 1) == CONTEXT_FREE.joined()


def test_pump_zero_elides_repeatable_segments() -> None:
    assert pump(REGULAR, 0) == "abc"
    assert pump(CONTEXT_FREE, 0) == "adfg"


def test_pump_repeats_literally() -> None:
    assert pump_regular("x", "yz", "w", 3) == "xyzyzyzw"
    assert pump_context_free("u", "v", "w", "x", "y", 2) == "uvvwxxy"


@pytest.mark.parametrize("i1,i2", [(1, 2), (1, 5), (2, 7)])
def test_growth_is_linear_in_pump_count(i1: int, i2: int) -> None:
    assert len(pump(REGULAR, i2)) - len(pump(REGULAR, i1)) == (i2 - i1) * len(REGULAR.y)
    assert len(pump(CONTEXT_FREE, i2)) - len(pump(CONTEXT_FREE, i1)) == (i2 - i1) * (
        len(CONTEXT_FREE.v) + len(CONTEXT_FREE.x)
    )


@pytest.mark.parametrize("decomposition", [REGULAR, CONTEXT_FREE])
def test_negative_pump_count_rejected(decomposition) -> None:
    with pytest.raises(InvalidPumpCountError) as excinfo:
        pump(decomposition, -1)
    assert excinfo.value.kind == "invalid_pump_count"


def test_non_integer_pump_count_rejected() -> None:
    with pytest.raises(InvalidPumpCountError):
        pump(REGULAR, 1.5)  # type: ignore[arg-type]
    with pytest.raises(InvalidPumpCountError):
        pump(REGULAR, True)
