"""Domain models shared by the catalog, validator, pumper and analyzer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Tuple, Union

Recognizer = Callable[[str], bool]


class FormalType(str, Enum):
    """Language class a catalog entry belongs to."""

    REGULAR = "regular"
    CONTEXT_FREE = "context-free"
    NEITHER = "non-cfl"

    @property
    def display_name(self) -> str:
        return {
            FormalType.REGULAR: "Regular",
            FormalType.CONTEXT_FREE: "Context-Free",
            FormalType.NEITHER: "Neither CFL nor Regular",
        }[self]


@dataclass(frozen=True)
class LanguageDefinition:
    """A single catalog entry with its recognizer bound in."""

    language_id: str
    name: str
    description: str
    formal_type: FormalType
    recognizer: Recognizer = field(compare=False, repr=False)
    pumping_length: int
    sample_strings: Tuple[str, ...] = ()
    counter_examples: Tuple[str, ...] = ()
    examples_by_length: Mapping[int, str] = field(default_factory=dict, compare=False)
    generation_rule: Optional[str] = None

    def __post_init__(self) -> None:
        if self.pumping_length < 1:
            raise ValueError(
                f"Pumping length for '{self.language_id}' must be >= 1, got {self.pumping_length}"
            )
        object.__setattr__(self, "examples_by_length", MappingProxyType(dict(self.examples_by_length)))


@dataclass(frozen=True)
class RegularDecomposition:
    """x/y/z split used by the regular pumping lemma."""

    x: str
    y: str
    z: str

    formal_type = FormalType.REGULAR

    def segments(self) -> List[Tuple[str, str]]:
        return [("x", self.x), ("y", self.y), ("z", self.z)]

    def joined(self) -> str:
        return self.x + self.y + self.z


@dataclass(frozen=True)
class ContextFreeDecomposition:
    """u/v/w/x/y split used by the context-free pumping lemma."""

    u: str
    v: str
    w: str
    x: str
    y: str

    formal_type = FormalType.CONTEXT_FREE

    def segments(self) -> List[Tuple[str, str]]:
        return [("u", self.u), ("v", self.v), ("w", self.w), ("x", self.x), ("y", self.y)]

    def joined(self) -> str:
        return self.u + self.v + self.w + self.x + self.y


Decomposition = Union[RegularDecomposition, ContextFreeDecomposition]


@dataclass(frozen=True)
class Constraint:
    """One named pumping-lemma constraint and how the decomposition fared."""

    name: str
    satisfied: bool
    measured: int
    value_text: str
    description: str


@dataclass(frozen=True)
class ConstraintReport:
    """Outcome of checking a decomposition against a pumping length."""

    formal_type: FormalType
    pumping_length: int
    constraints: Tuple[Constraint, ...]
    reconstructs_source: bool = True
    errors: Tuple[str, ...] = ()

    @property
    def all_satisfied(self) -> bool:
        return all(constraint.satisfied for constraint in self.constraints)

    @property
    def valid(self) -> bool:
        return self.all_satisfied and self.reconstructs_source


@dataclass(frozen=True)
class MembershipOutcome:
    """Result of running a recognizer on one candidate.

    ``accepted`` is ``None`` whenever ``error`` is set: a failed recognizer
    neither accepts nor rejects.
    """

    language_id: str
    candidate: str
    accepted: Optional[bool]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class PumpingResult:
    """One pumped string and its classification."""

    pump_count: int
    produced_string: str
    accepted: Optional[bool]
    recognizer_error: Optional[str] = None

    @property
    def rejected(self) -> bool:
        return self.recognizer_error is None and self.accepted is False


@dataclass(frozen=True)
class AnalysisVerdict:
    """Aggregate over a sequence of pumping results."""

    language_id: str
    formal_type: FormalType
    results: Tuple[PumpingResult, ...]
    has_violation: bool
    violating_results: Tuple[PumpingResult, ...]
    accepted_results: Tuple[PumpingResult, ...]
    errored_results: Tuple[PumpingResult, ...]
    conclusion_text: str
    explanation_text: str
    violation_details: str = ""

    @property
    def degraded(self) -> bool:
        return bool(self.errored_results)
