from pathlib import Path

import pytest

from pumping_lab.catalog import LanguageCatalog, load_catalog
from pumping_lab.exceptions import ConfigError, LanguageNotFoundError, UnknownFormalTypeError
from pumping_lab.models import FormalType, LanguageDefinition


def test_lookup_returns_definition(catalog: LanguageCatalog) -> None:
    language = catalog.lookup("a^nb^n")
    assert language.formal_type is FormalType.CONTEXT_FREE
    assert language.pumping_length == 3
    assert language.recognizer("aabb")
    assert language.examples_by_length[6] == "aaabbb"


def test_lookup_unknown_raises(catalog: LanguageCatalog) -> None:
    with pytest.raises(LanguageNotFoundError) as excinfo:
        catalog.lookup("a^nb^nd^n")
    assert excinfo.value.kind == "not_found"
    assert catalog.get("a^nb^nd^n") is None


def test_list_by_type_keeps_registration_order(catalog: LanguageCatalog) -> None:
    assert [d.language_id for d in catalog.list_by_type(FormalType.REGULAR)] == ["a*b*", "(ab)*"]
    assert [d.language_id for d in catalog.list_by_type("context-free")] == ["a^nb^n", "palindromes"]
    assert [d.language_id for d in catalog.list_by_type(FormalType.NEITHER)] == ["a^nb^nc^n"]
    assert catalog.ids() == ["a*b*", "(ab)*", "a^nb^n", "palindromes", "a^nb^nc^n"]
    assert len(catalog) == 5


def test_samples_are_members_and_counter_examples_are_not(catalog: LanguageCatalog) -> None:
    for language in catalog:
        for sample in language.sample_strings:
            assert language.recognizer(sample), (language.language_id, sample)
        for counter in language.counter_examples:
            assert not language.recognizer(counter), (language.language_id, counter)
        for length, example in language.examples_by_length.items():
            assert len(example) == length
            assert language.recognizer(example)


def test_pumping_length_must_be_positive() -> None:
    with pytest.raises(ValueError):
        LanguageDefinition(
            language_id="bad",
            name="bad",
            description="",
            formal_type=FormalType.REGULAR,
            recognizer=lambda s: True,
            pumping_length=0,
        )


def test_duplicate_ids_rejected(catalog: LanguageCatalog) -> None:
    language = catalog.lookup("a*b*")
    with pytest.raises(ValueError):
        LanguageCatalog([language, language])


def test_load_catalog_rejects_unknown_recognizer(tmp_path: Path) -> None:
    table = tmp_path / "languages.yaml"
    table.write_text(
        "languages:\n"
        "  - id: x\n"
        "    type: regular\n"
        "    recognizer: nope\n"
        "    pumping_length: 1\n",
        encoding="utf-8",
    )
    with pytest.raises(ConfigError):
        load_catalog(table)


def test_load_catalog_requires_language_list(tmp_path: Path) -> None:
    table = tmp_path / "languages.yaml"
    table.write_text("languages: {}\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_catalog(table)


def test_list_by_type_unknown_type(catalog: LanguageCatalog) -> None:
    with pytest.raises(UnknownFormalTypeError):
        catalog.list_by_type("bogus")
