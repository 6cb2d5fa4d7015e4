"""Schema validation for batch case files.

A batch file is a YAML mapping with a ``cases`` list. Each case names a
language, a source string (or a length to generate one), a decomposition as
``segments`` or ``lengths``, and optionally the pump counts to try.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .catalog import LanguageCatalog


# ============================================================================
# Schema Definitions
# ============================================================================

@dataclass
class FieldSpec:
    """Specification for a YAML field."""
    required: bool = True
    field_type: Optional[type] = None
    min_value: Optional[int] = None


CASE_SCHEMA = {
    "language": FieldSpec(required=True, field_type=str),
    "name": FieldSpec(required=False, field_type=str),
    "source": FieldSpec(required=False, field_type=str),
    "length": FieldSpec(required=False, field_type=int, min_value=0),
    "segments": FieldSpec(required=False, field_type=list),
    "lengths": FieldSpec(required=False, field_type=list),
    "pump_counts": FieldSpec(required=False, field_type=list),
}

_SEGMENT_COUNTS = {3, 5}
_LENGTH_COUNTS = {2, 4}


# ============================================================================
# Validation Result
# ============================================================================

@dataclass
class ValidationResult:
    """Result of YAML validation."""
    valid: bool
    errors: List[str]
    warnings: List[str]

    def __bool__(self) -> bool:
        return self.valid

    def summary(self) -> str:
        """Generate human-readable summary."""
        lines = [f"Valid: {self.valid}"]
        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            for err in self.errors:
                lines.append(f"  - {err}")
        if self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for warn in self.warnings:
                lines.append(f"  - {warn}")
        return "\n".join(lines)


# ============================================================================
# Schema Validation
# ============================================================================

def validate_field(
    field_name: str,
    value: Any,
    spec: FieldSpec,
    path_context: str = ""
) -> List[str]:
    """Validate a single field against its specification.

    Returns:
        List of error messages (empty if valid)
    """
    errors = []
    context = f"{path_context}.{field_name}" if path_context else field_name

    if spec.field_type and value is not None:
        # bool is an int subclass; never accept it where a number is expected
        if not isinstance(value, spec.field_type) or (spec.field_type is int and isinstance(value, bool)):
            errors.append(
                f"{context}: expected type {spec.field_type.__name__}, "
                f"got {type(value).__name__}"
            )
            return errors

    if isinstance(value, int) and not isinstance(value, bool):
        if spec.min_value is not None and value < spec.min_value:
            errors.append(f"{context}: value {value} < minimum {spec.min_value}")

    return errors


def validate_schema(
    content: Dict[str, Any],
    schema: Dict[str, FieldSpec],
    path_context: str = ""
) -> List[str]:
    """Validate content against schema.

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    for field_name, spec in schema.items():
        if spec.required and field_name not in content:
            errors.append(f"{path_context}: missing required field '{field_name}'")
        elif field_name in content:
            errors.extend(validate_field(field_name, content[field_name], spec, path_context))

    return errors


def _all_ints(values: List[Any], minimum: int = 0) -> bool:
    return all(isinstance(v, int) and not isinstance(v, bool) and v >= minimum for v in values)


def validate_case(
    case: Any,
    index: int,
    catalog: Optional[LanguageCatalog] = None,
) -> tuple[List[str], List[str]]:
    """Validate one batch case. Returns (errors, warnings)."""

    context = f"cases[{index}]"
    if not isinstance(case, dict):
        return [f"{context}: expected a mapping, got {type(case).__name__}"], []

    errors = validate_schema(case, CASE_SCHEMA, context)
    warnings: List[str] = []

    unknown = sorted(set(case) - set(CASE_SCHEMA))
    if unknown:
        warnings.append(f"{context}: ignoring unknown fields {unknown}")

    if "source" in case and "length" in case:
        errors.append(f"{context}: give either 'source' or 'length', not both")
    elif "source" not in case and "length" not in case:
        errors.append(f"{context}: one of 'source' or 'length' is required")

    has_segments = isinstance(case.get("segments"), list)
    has_lengths = isinstance(case.get("lengths"), list)
    if has_segments and has_lengths:
        errors.append(f"{context}: give either 'segments' or 'lengths', not both")
    elif not has_segments and not has_lengths:
        errors.append(f"{context}: one of 'segments' or 'lengths' is required")

    if has_segments:
        segments = case["segments"]
        if len(segments) not in _SEGMENT_COUNTS:
            errors.append(f"{context}.segments: expected 3 or 5 entries, got {len(segments)}")
        if not all(isinstance(s, str) for s in segments):
            errors.append(f"{context}.segments: every segment must be a string")
    if has_lengths:
        lengths = case["lengths"]
        if len(lengths) not in _LENGTH_COUNTS:
            errors.append(f"{context}.lengths: expected 2 or 4 entries, got {len(lengths)}")
        if not _all_ints(lengths):
            errors.append(f"{context}.lengths: every length must be a non-negative integer")

    pump_counts = case.get("pump_counts")
    if isinstance(pump_counts, list):
        if not pump_counts:
            errors.append(f"{context}.pump_counts: must not be empty")
        elif not _all_ints(pump_counts):
            errors.append(f"{context}.pump_counts: every count must be a non-negative integer")

    language = case.get("language")
    if catalog is not None and isinstance(language, str) and language not in catalog:
        errors.append(f"{context}.language: unknown language '{language}'")

    return errors, warnings


def validate_batch_content(content: Any, catalog: Optional[LanguageCatalog] = None) -> ValidationResult:
    if not isinstance(content, dict):
        return ValidationResult(False, ["Root must be a mapping with a 'cases' list"], [])
    cases = content.get("cases")
    if not isinstance(cases, list):
        return ValidationResult(False, ["Missing 'cases' list"], [])
    if not cases:
        return ValidationResult(True, [], ["Batch file contains no cases"])

    errors: List[str] = []
    warnings: List[str] = []
    for index, case in enumerate(cases):
        case_errors, case_warnings = validate_case(case, index, catalog)
        errors.extend(case_errors)
        warnings.extend(case_warnings)
    return ValidationResult(not errors, errors, warnings)

