"""Custom exceptions for the PumpingLab engine."""

from __future__ import annotations


class PumpingLabError(RuntimeError):
    """Base class for domain-specific runtime errors."""

    kind = "error"


class LanguageNotFoundError(PumpingLabError):
    """Raised when a language id is not registered in the catalog."""

    kind = "not_found"

    def __init__(self, language_id: str):
        super().__init__(f"Unknown language '{language_id}'")
        self.language_id = language_id


class InvalidPumpCountError(PumpingLabError):
    """Raised when a pump count is negative or not an integer."""

    kind = "invalid_pump_count"

    def __init__(self, pump_count: object, message: str | None = None):
        super().__init__(message or f"Pump count must be a non-negative integer, got {pump_count!r}")
        self.pump_count = pump_count


class DecompositionMismatchError(PumpingLabError):
    """Raised when segments cannot describe the given source string."""

    kind = "decomposition_mismatch"


class RecognizerError(PumpingLabError):
    """Raised when a language recognizer fails on a candidate string."""

    kind = "recognizer_error"


class UnsupportedGenerationError(PumpingLabError):
    """Raised when no generation rule exists for a language/length pair."""

    kind = "unsupported_generation"


class BatchFileError(PumpingLabError):
    """Raised when a batch case file cannot be loaded or fails validation."""

    kind = "batch_file"


class ConfigError(PumpingLabError):
    """Raised when a configuration file is malformed."""

    kind = "config"


class UnknownFormalTypeError(PumpingLabError):
    """Raised when a formal type filter names no known language class."""

    kind = "unknown_formal_type"

    def __init__(self, formal_type: object):
        super().__init__(f"Unknown formal type {formal_type!r}")
        self.formal_type = formal_type
