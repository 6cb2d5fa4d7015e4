"""Pumps a decomposition over several counts and summarises the outcome."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .catalog import LanguageCatalog, default_catalog
from .membership import run_recognizer
from .models import AnalysisVerdict, Decomposition, FormalType, PumpingResult
from .pumper import check_pump_count, pump

logger = logging.getLogger(__name__)

DEFAULT_PUMP_COUNTS: Tuple[int, ...] = (0, 1, 2)

_CLASS_NAMES = {
    FormalType.REGULAR: "regular",
    FormalType.CONTEXT_FREE: "context-free",
}


def _class_name(formal_type: FormalType) -> str:
    # NEITHER languages are pumped with whatever decomposition shape the caller picked
    return _CLASS_NAMES.get(formal_type, "context-free")


def _describe(result: PumpingResult) -> str:
    return f'"{result.produced_string}" (i={result.pump_count})'


def build_narrative(
    formal_type: FormalType,
    violating: Sequence[PumpingResult],
    errored: Sequence[PumpingResult],
) -> Tuple[str, str, str]:
    """Return (conclusion, explanation, violation details) for the outcomes."""

    class_name = _class_name(formal_type)
    if violating:
        conclusion = "Pumping Lemma Violation Detected!"
        explanation = (
            "Not all pumped strings are accepted by the language. This suggests that either:\n"
            f"1. The language is not {class_name}, or\n"
            "2. The current decomposition doesn't satisfy the pumping lemma conditions."
        )
        details = "Rejected strings: " + ", ".join(_describe(r) for r in violating)
    else:
        conclusion = "No Violation Found"
        explanation = (
            "All pumped strings are accepted by the language. This decomposition satisfies "
            "the pumping lemma conditions for the tested values. However, this doesn't prove "
            f"the language is {class_name} - you would need to show this holds for ALL "
            "possible decompositions."
        )
        details = ""

    if errored:
        explanation += (
            "\nConfidence is degraded: the recognizer failed on "
            + ", ".join(_describe(r) for r in errored)
            + "; these results count neither as accepted nor as violations."
        )
    return conclusion, explanation, details


def pump_and_classify(
    language_id: str,
    decomposition: Decomposition,
    pump_counts: Sequence[int],
    catalog: LanguageCatalog | None = None,
) -> List[PumpingResult]:
    language = (catalog if catalog is not None else default_catalog()).lookup(language_id)
    results: List[PumpingResult] = []
    for count in pump_counts:
        produced = pump(decomposition, count)
        outcome = run_recognizer(language, produced)
        logger.debug("i=%d produced %r accepted=%s", count, produced, outcome.accepted)
        results.append(
            PumpingResult(
                pump_count=count,
                produced_string=produced,
                accepted=outcome.accepted,
                recognizer_error=outcome.error,
            )
        )
    return results


def analyze(
    language_id: str,
    decomposition: Decomposition,
    pump_counts: Sequence[int] = DEFAULT_PUMP_COUNTS,
    catalog: LanguageCatalog | None = None,
) -> AnalysisVerdict:
    """Pump ``decomposition`` for every count and aggregate a verdict."""

    counts = list(pump_counts)
    if not counts:
        raise ValueError("pump_counts must contain at least one count")
    for count in counts:
        check_pump_count(count)

    catalog = catalog if catalog is not None else default_catalog()
    language = catalog.lookup(language_id)
    results = pump_and_classify(language_id, decomposition, counts, catalog=catalog)

    violating = tuple(r for r in results if r.rejected)
    accepted = tuple(r for r in results if r.recognizer_error is None and r.accepted)
    errored = tuple(r for r in results if r.recognizer_error is not None)
    conclusion, explanation, details = build_narrative(language.formal_type, violating, errored)

    if violating:
        logger.info(
            "%s: %d of %d pumped strings rejected", language_id, len(violating), len(results)
        )
    return AnalysisVerdict(
        language_id=language_id,
        formal_type=language.formal_type,
        results=tuple(results),
        has_violation=bool(violating),
        violating_results=violating,
        accepted_results=accepted,
        errored_results=errored,
        conclusion_text=conclusion,
        explanation_text=explanation,
        violation_details=details,
    )
