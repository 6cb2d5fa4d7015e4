import pytest

from pumping_lab.catalog import LanguageCatalog, default_catalog
from pumping_lab.models import FormalType, LanguageDefinition


def _explode(candidate: str) -> bool:
    if "c" in candidate:
        raise ValueError("no c allowed")
    return candidate == "" or set(candidate) <= {"a", "b"}


@pytest.fixture
def catalog() -> LanguageCatalog:
    return default_catalog()


@pytest.fixture
def fragile_catalog() -> LanguageCatalog:
    """Catalog whose only recognizer blows up on strings containing 'c'."""
    return LanguageCatalog(
        [
            LanguageDefinition(
                language_id="fragile",
                name="Fragile",
                description="Any a/b string; fails on c",
                formal_type=FormalType.REGULAR,
                recognizer=_explode,
                pumping_length=2,
                sample_strings=("ab",),
            )
        ]
    )
