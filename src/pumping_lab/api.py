"""Entry points for presentation layers.

Each call returns an ``Outcome`` holding either a value or one of the
``PumpingLabError`` kinds, so a front end never has to guard against the
engine raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from . import analyzer, generator, membership, pumper, validator
from .catalog import LanguageCatalog, default_catalog
from .decomposition import check_shape
from .exceptions import PumpingLabError
from .models import (
    AnalysisVerdict,
    ConstraintReport,
    Decomposition,
    FormalType,
    LanguageDefinition,
    MembershipOutcome,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Success value or a domain error, never both."""

    value: Optional[T] = None
    error: Optional[PumpingLabError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


@dataclass(frozen=True)
class LanguageSummary:
    language_id: str
    name: str
    formal_type: FormalType


def _capture(call: Callable[[], T]) -> Outcome[T]:
    try:
        return Outcome(value=call())
    except PumpingLabError as exc:
        return Outcome(error=exc)


class PumpingLab:
    """The engine bound to one catalog."""

    def __init__(self, catalog: LanguageCatalog | None = None):
        self.catalog = catalog if catalog is not None else default_catalog()

    def list_languages(self, formal_type: FormalType | str | None = None) -> Outcome[List[LanguageSummary]]:
        return _capture(
            lambda: [
                LanguageSummary(language_id=d.language_id, name=d.name, formal_type=d.formal_type)
                for d in self.catalog.list_by_type(formal_type)
            ]
        )

    def get_language(self, language_id: str) -> Outcome[LanguageDefinition]:
        return _capture(lambda: self.catalog.lookup(language_id))

    def validate_decomposition(
        self, language_id: str, source: str, decomposition: Decomposition
    ) -> Outcome[ConstraintReport]:
        def run() -> ConstraintReport:
            language = self.catalog.lookup(language_id)
            check_shape(language, decomposition)
            return validator.validate_decomposition(source, decomposition, language.pumping_length)

        return _capture(run)

    def pump(self, decomposition: Decomposition, pump_count: int) -> Outcome[str]:
        return _capture(lambda: pumper.pump(decomposition, pump_count))

    def test_membership(self, language_id: str, candidate: str) -> Outcome[MembershipOutcome]:
        return _capture(lambda: membership.test_membership(language_id, candidate, catalog=self.catalog))

    def generate_sample(self, language_id: str, length: int) -> Outcome[str]:
        def run() -> str:
            try:
                return generator.generate_sample(language_id, length, catalog=self.catalog)
            except ValueError as exc:
                raise PumpingLabError(str(exc)) from exc

        return _capture(run)

    def analyze(
        self,
        language_id: str,
        decomposition: Decomposition,
        pump_counts: Sequence[int] = analyzer.DEFAULT_PUMP_COUNTS,
    ) -> Outcome[AnalysisVerdict]:
        def run() -> AnalysisVerdict:
            check_shape(self.catalog.lookup(language_id), decomposition)
            try:
                return analyzer.analyze(language_id, decomposition, pump_counts, catalog=self.catalog)
            except ValueError as exc:
                raise PumpingLabError(str(exc)) from exc

        return _capture(run)


def _default() -> PumpingLab:
    return PumpingLab(default_catalog())


def list_languages(formal_type: FormalType | str | None = None) -> Outcome[List[LanguageSummary]]:
    return _default().list_languages(formal_type)


def get_language(language_id: str) -> Outcome[LanguageDefinition]:
    return _default().get_language(language_id)


def validate_decomposition(language_id: str, source: str, decomposition: Decomposition) -> Outcome[ConstraintReport]:
    return _default().validate_decomposition(language_id, source, decomposition)


def pump(decomposition: Decomposition, pump_count: int) -> Outcome[str]:
    return _default().pump(decomposition, pump_count)


def test_membership(language_id: str, candidate: str) -> Outcome[MembershipOutcome]:
    return _default().test_membership(language_id, candidate)


test_membership.__test__ = False  # type: ignore[attr-defined]


def generate_sample(language_id: str, length: int) -> Outcome[str]:
    return _default().generate_sample(language_id, length)


def analyze(
    language_id: str,
    decomposition: Decomposition,
    pump_counts: Sequence[int] = analyzer.DEFAULT_PUMP_COUNTS,
) -> Outcome[AnalysisVerdict]:
    return _default().analyze(language_id, decomposition, pump_counts)
