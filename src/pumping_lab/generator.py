"""Deterministic sample strings of a requested length."""

from __future__ import annotations

import random
from typing import Callable, Dict

from .catalog import LanguageCatalog, default_catalog
from .exceptions import UnsupportedGenerationError


def _split(length: int) -> str:
    # the odd character goes to the b block
    a_count = length // 2
    return "a" * a_count + "b" * (length - a_count)


def _alternating(length: int) -> str:
    return "ab" * (length // 2) + ("a" if length % 2 else "")


def _palindrome(length: int) -> str:
    left = "a" * (length // 2)
    center = "c" if length % 2 else ""
    return left + center + left[::-1]


def _thirds(length: int) -> str:
    third = length // 3
    return "a" * third + "b" * third + "c" * (length - 2 * third)


GENERATION_RULES: Dict[str, Callable[[int], str]] = {
    "split": _split,
    "alternating": _alternating,
    "palindrome": _palindrome,
    "thirds": _thirds,
}


def generate_sample(language_id: str, length: int, catalog: LanguageCatalog | None = None) -> str:
    """Return the canonical string of ``length`` characters for a language.

    A precomputed example for the exact length wins; otherwise the language's
    generation rule builds one. Raises ``LanguageNotFoundError`` for unknown
    ids and ``UnsupportedGenerationError`` when neither source applies.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise ValueError(f"length must be a non-negative integer, got {length!r}")

    language = (catalog if catalog is not None else default_catalog()).lookup(language_id)
    if length in language.examples_by_length:
        return language.examples_by_length[length]

    rule = GENERATION_RULES.get(language.generation_rule or "")
    if rule is None:
        raise UnsupportedGenerationError(
            f"No generation rule for language '{language_id}' at length {length}"
        )
    return rule(length)


def random_sample(language_id: str, rng: random.Random, catalog: LanguageCatalog | None = None) -> str:
    """Pick one of the language's sample strings, preferring non-empty ones."""

    language = (catalog if catalog is not None else default_catalog()).lookup(language_id)
    if not language.sample_strings:
        raise UnsupportedGenerationError(f"Language '{language_id}' has no sample strings")
    non_empty = [sample for sample in language.sample_strings if sample]
    return rng.choice(non_empty or list(language.sample_strings))
