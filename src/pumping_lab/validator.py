"""Checks a decomposition against the pumping-lemma constraints."""

from __future__ import annotations

from typing import List

from .models import (
    Constraint,
    ConstraintReport,
    ContextFreeDecomposition,
    Decomposition,
    FormalType,
    RegularDecomposition,
)

MISMATCH_MESSAGES = {
    FormalType.REGULAR: "x + y + z must equal the original string",
    FormalType.CONTEXT_FREE: "u + v + w + x + y must equal the original string",
}


def _mismatch_errors(source: str, decomposition: Decomposition) -> List[str]:
    if decomposition.joined() == source:
        return []
    return [
        f"Decomposition does not match original string "
        f"({MISMATCH_MESSAGES[decomposition.formal_type]})"
    ]


def validate_regular(source: str, decomposition: RegularDecomposition, pumping_length: int) -> ConstraintReport:
    """|xy| <= p and |y| >= 1."""

    xy_length = len(decomposition.x) + len(decomposition.y)
    y_length = len(decomposition.y)
    constraints = (
        Constraint(
            name="|xy| ≤ p",
            satisfied=xy_length <= pumping_length,
            measured=xy_length,
            value_text=f"|xy| = {xy_length}, p = {pumping_length}",
            description="The x and y segments together cannot exceed the pumping length",
        ),
        Constraint(
            name="|y| ≥ 1",
            satisfied=y_length >= 1,
            measured=y_length,
            value_text=f"|y| = {y_length}",
            description="The y segment must be non-empty",
        ),
    )
    errors = _mismatch_errors(source, decomposition)
    return ConstraintReport(
        formal_type=FormalType.REGULAR,
        pumping_length=pumping_length,
        constraints=constraints,
        reconstructs_source=not errors,
        errors=tuple(errors),
    )


def validate_context_free(
    source: str, decomposition: ContextFreeDecomposition, pumping_length: int
) -> ConstraintReport:
    """|vwx| <= p and |vx| >= 1."""

    vwx_length = len(decomposition.v) + len(decomposition.w) + len(decomposition.x)
    vx_length = len(decomposition.v) + len(decomposition.x)
    constraints = (
        Constraint(
            name="|vwx| ≤ p",
            satisfied=vwx_length <= pumping_length,
            measured=vwx_length,
            value_text=f"|vwx| = {vwx_length}, p = {pumping_length}",
            description="The v, w, and x segments together cannot exceed the pumping length",
        ),
        Constraint(
            name="|vx| ≥ 1",
            satisfied=vx_length >= 1,
            measured=vx_length,
            value_text=f"|vx| = {vx_length}",
            description="At least one of v or x must be non-empty",
        ),
    )
    errors = _mismatch_errors(source, decomposition)
    return ConstraintReport(
        formal_type=FormalType.CONTEXT_FREE,
        pumping_length=pumping_length,
        constraints=constraints,
        reconstructs_source=not errors,
        errors=tuple(errors),
    )


def validate_decomposition(source: str, decomposition: Decomposition, pumping_length: int) -> ConstraintReport:
    if isinstance(decomposition, RegularDecomposition):
        return validate_regular(source, decomposition, pumping_length)
    if isinstance(decomposition, ContextFreeDecomposition):
        return validate_context_free(source, decomposition, pumping_length)
    raise TypeError(f"Unsupported decomposition type: {type(decomposition).__name__}")
