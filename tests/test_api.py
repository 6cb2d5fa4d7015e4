from pumping_lab import api
from pumping_lab.catalog import LanguageCatalog
from pumping_lab.models import ContextFreeDecomposition, FormalType, RegularDecomposition


def test_list_languages_filters_by_type() -> None:
    summaries = api.list_languages(FormalType.CONTEXT_FREE).unwrap()
    assert [(s.language_id, s.name) for s in summaries] == [("a^nb^n", "a^n b^n"), ("palindromes", "Palindromes")]
    assert len(api.list_languages().unwrap()) == 5


def test_list_languages_unknown_type() -> None:
    outcome = api.list_languages("bogus")
    assert not outcome.ok
    assert outcome.error_kind == "unknown_formal_type"


def test_get_language() -> None:
    assert api.get_language("(ab)*").unwrap().pumping_length == 3
    missing = api.get_language("nope")
    assert not missing.ok
    assert missing.error_kind == "not_found"


def test_validate_uses_language_pumping_length() -> None:
    outcome = api.validate_decomposition("a*b*", "aaabbb", RegularDecomposition("a", "a", "abbb"))
    assert outcome.ok
    assert outcome.value.pumping_length == 2
    assert outcome.value.all_satisfied


def test_validate_rejects_wrong_shape() -> None:
    outcome = api.validate_decomposition("a*b*", "aaabbb", ContextFreeDecomposition("a", "a", "a", "b", "bb"))
    assert outcome.error_kind == "decomposition_mismatch"


def test_validate_mismatch_stays_in_report() -> None:
    outcome = api.validate_decomposition("a*b*", "aaabbb", RegularDecomposition("a", "a", "b"))
    assert outcome.ok
    assert not outcome.value.reconstructs_source


def test_pump_reports_invalid_count() -> None:
    assert api.pump(RegularDecomposition("", "a", "b"), 3).value == "aaab"
    assert api.pump(RegularDecomposition("", "a", "b"), -1).error_kind == "invalid_pump_count"
    assert api.pump(ContextFreeDecomposition("", "a", "", "b", ""), -1).error_kind == "invalid_pump_count"


def test_membership_and_generation() -> None:
    assert api.test_membership("a^nb^nc^n", "abc").value.accepted is True
    assert api.test_membership("nope", "abc").error_kind == "not_found"
    assert api.generate_sample("a^nb^n", 6).value == "aaabbb"
    assert api.generate_sample("a^nb^n", -2).error_kind == "error"


def test_analyze_outcome() -> None:
    outcome = api.analyze("a^nb^n", ContextFreeDecomposition("a", "a", "a", "", "bbb"), [0, 1, 2])
    assert outcome.ok
    assert outcome.value.has_violation
    assert api.analyze("a^nb^n", ContextFreeDecomposition("a", "a", "a", "b", "bb"), []).error_kind == "error"


def test_engine_with_custom_catalog(fragile_catalog: LanguageCatalog) -> None:
    lab = api.PumpingLab(fragile_catalog)
    outcome = lab.test_membership("fragile", "cab")
    assert outcome.ok
    assert outcome.value.error is not None
    assert lab.get_language("a*b*").error_kind == "not_found"


def test_empty_catalog_is_not_replaced() -> None:
    lab = api.PumpingLab(LanguageCatalog([]))
    assert lab.get_language("a*b*").error_kind == "not_found"
    assert lab.list_languages().unwrap() == []


def test_analyze_rejects_wrong_shape() -> None:
    outcome = api.analyze("a^nb^n", RegularDecomposition("a", "a", "abbb"), [0, 1, 2])
    assert outcome.error_kind == "decomposition_mismatch"
