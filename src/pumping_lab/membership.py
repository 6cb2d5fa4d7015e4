"""Runs a language's recognizer on a candidate string."""

from __future__ import annotations

import logging

from .catalog import LanguageCatalog, default_catalog
from .exceptions import RecognizerError
from .models import LanguageDefinition, MembershipOutcome

logger = logging.getLogger(__name__)


def run_recognizer(language: LanguageDefinition, candidate: str) -> MembershipOutcome:
    """Classify ``candidate``; recognizer failures end up in ``error``."""

    try:
        accepted = bool(language.recognizer(candidate))
    except Exception as exc:
        error = RecognizerError(f"Recognizer for '{language.language_id}' failed on {candidate!r}: {exc}")
        logger.warning("%s", error)
        return MembershipOutcome(
            language_id=language.language_id,
            candidate=candidate,
            accepted=None,
            error=str(error),
        )
    return MembershipOutcome(language_id=language.language_id, candidate=candidate, accepted=accepted)


def test_membership(
    language_id: str,
    candidate: str,
    catalog: LanguageCatalog | None = None,
) -> MembershipOutcome:
    """Look up ``language_id`` and classify ``candidate``.

    Raises ``LanguageNotFoundError`` for unknown ids.
    """
    language = (catalog if catalog is not None else default_catalog()).lookup(language_id)
    return run_recognizer(language, candidate)


# keep pytest from collecting the public name as a test
test_membership.__test__ = False  # type: ignore[attr-defined]
