"""Immutable session value for interactive front ends.

A front end holds one ``Session`` and replaces it on every user action; no
field is ever assigned in place.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from .analyzer import DEFAULT_PUMP_COUNTS, analyze
from .catalog import LanguageCatalog, default_catalog
from .decomposition import decomposition_shape, from_lengths, initial_lengths
from .generator import generate_sample
from .models import AnalysisVerdict, ConstraintReport, Decomposition
from .pumper import check_pump_count, pump
from .validator import validate_decomposition


@dataclass(frozen=True)
class Session:
    language_id: Optional[str] = None
    source: str = ""
    lengths: Tuple[int, ...] = ()
    pump_count: int = 1
    pump_counts: Tuple[int, ...] = DEFAULT_PUMP_COUNTS

    def with_language(self, language_id: str, catalog: LanguageCatalog | None = None) -> "Session":
        """Switch language; the string and lengths start over."""
        (catalog if catalog is not None else default_catalog()).lookup(language_id)
        return Session(language_id=language_id, pump_count=self.pump_count, pump_counts=self.pump_counts)

    def with_source(self, source: str) -> "Session":
        return replace(self, source=source)

    def with_generated(self, length: int, catalog: LanguageCatalog | None = None) -> "Session":
        return replace(self, source=generate_sample(self._require_language(), length, catalog=catalog))

    def with_lengths(self, lengths: Sequence[int]) -> "Session":
        return replace(self, lengths=tuple(int(n) for n in lengths))

    def with_pump_count(self, pump_count: int) -> "Session":
        return replace(self, pump_count=check_pump_count(pump_count))

    def with_pump_counts(self, pump_counts: Sequence[int]) -> "Session":
        return replace(self, pump_counts=tuple(check_pump_count(n) for n in pump_counts))

    def _require_language(self) -> str:
        if self.language_id is None:
            raise ValueError("Select a language first")
        return self.language_id

    def decomposition(self, catalog: LanguageCatalog | None = None) -> Decomposition:
        language = (catalog if catalog is not None else default_catalog()).lookup(self._require_language())
        shape = decomposition_shape(language.formal_type)
        return from_lengths(self.source, shape, self.lengths or initial_lengths(shape, len(self.source)))

    def constraints(self, catalog: LanguageCatalog | None = None) -> ConstraintReport:
        catalog = catalog if catalog is not None else default_catalog()
        language = catalog.lookup(self._require_language())
        return validate_decomposition(self.source, self.decomposition(catalog), language.pumping_length)

    def pumped(self, catalog: LanguageCatalog | None = None) -> str:
        return pump(self.decomposition(catalog), self.pump_count)

    def verdict(self, catalog: LanguageCatalog | None = None) -> AnalysisVerdict:
        return analyze(self._require_language(), self.decomposition(catalog), self.pump_counts, catalog=catalog)
