"""Builds decompositions from segment lengths, and suggests good ones."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from .catalog import LanguageCatalog, default_catalog
from .exceptions import DecompositionMismatchError
from .models import ContextFreeDecomposition, Decomposition, FormalType, LanguageDefinition, RegularDecomposition

_LEADING_A = re.compile(r"a*")

REGULAR_LENGTH_COUNT = 2
CONTEXT_FREE_LENGTH_COUNT = 4


def _cut(source: str, lengths: Sequence[int]) -> List[str]:
    """Slice ``source`` by ``lengths`` in order; the remainder is the last piece.

    Lengths are clamped to what is left so the pieces always concatenate back
    to ``source``.
    """
    pieces: List[str] = []
    index = 0
    for requested in lengths:
        take = min(max(0, int(requested)), len(source) - index)
        pieces.append(source[index : index + take])
        index += take
    pieces.append(source[index:])
    return pieces


def from_lengths(source: str, formal_type: FormalType | str, lengths: Sequence[int]) -> Decomposition:
    """(|x|, |y|) for regular, (|u|, |v|, |w|, |x|) for context-free."""

    kind = FormalType(formal_type)
    if kind is FormalType.REGULAR:
        if len(lengths) != REGULAR_LENGTH_COUNT:
            raise DecompositionMismatchError(
                f"Regular decompositions take {REGULAR_LENGTH_COUNT} lengths (x, y), got {len(lengths)}"
            )
        return RegularDecomposition(*_cut(source, lengths))
    if len(lengths) != CONTEXT_FREE_LENGTH_COUNT:
        raise DecompositionMismatchError(
            f"Context-free decompositions take {CONTEXT_FREE_LENGTH_COUNT} lengths (u, v, w, x), "
            f"got {len(lengths)}"
        )
    return ContextFreeDecomposition(*_cut(source, lengths))


def from_segments(segments: Sequence[str]) -> Decomposition:
    """Three segments give x/y/z, five give u/v/w/x/y."""

    if len(segments) == 3:
        return RegularDecomposition(*segments)
    if len(segments) == 5:
        return ContextFreeDecomposition(*segments)
    raise DecompositionMismatchError(
        f"Expected 3 (x, y, z) or 5 (u, v, w, x, y) segments, got {len(segments)}"
    )


def decomposition_shape(formal_type: FormalType) -> FormalType:
    """Shape used to pump a language of ``formal_type``.

    Languages that are neither regular nor context-free are explored with the
    u/v/w/x/y shape.
    """
    if formal_type is FormalType.REGULAR:
        return FormalType.REGULAR
    return FormalType.CONTEXT_FREE


def check_shape(language: LanguageDefinition, decomposition: Decomposition) -> Decomposition:
    """Raise ``DecompositionMismatchError`` unless ``decomposition`` fits the language type."""

    expected = decomposition_shape(language.formal_type)
    if decomposition.formal_type is not expected:
        raise DecompositionMismatchError(
            f"Language '{language.language_id}' is pumped with a {expected.value} decomposition, "
            f"got a {decomposition.formal_type.value} one"
        )
    return decomposition


def initial_lengths(formal_type: FormalType, source_length: int) -> Tuple[int, ...]:
    """Starting lengths for a fresh string: x=1, y=1, or u=1, v=1, w=middle, x=1.

    Every piece shrinks to fit short strings; the last segment takes the rest.
    """
    first = min(1, source_length)
    second = min(1, max(0, source_length - first))
    if decomposition_shape(formal_type) is FormalType.REGULAR:
        return (first, second)
    x_length = min(1, max(0, source_length - first - second - 1))
    w_length = max(0, source_length - first - second - x_length - 1)
    return (first, second, w_length, x_length)


def suggest_decomposition(
    language_id: str,
    source: str,
    catalog: LanguageCatalog | None = None,
) -> Optional[Decomposition]:
    """A decomposition that pumps cleanly for the built-in languages, if any."""

    language = (catalog if catalog is not None else default_catalog()).lookup(language_id)
    if not source or not language.recognizer(source):
        return None

    if language_id == "a*b*":
        # pumping the first symbol keeps |xy| = 1
        return RegularDecomposition(x="", y=source[0], z=source[1:])

    if language_id == "(ab)*":
        return RegularDecomposition(x="", y="ab", z=source[2:])

    if language_id == "a^nb^n":
        a_count = len(_LEADING_A.match(source).group(0))
        return ContextFreeDecomposition(
            u=source[: a_count - 1],
            v="a",
            w="",
            x="b",
            y=source[a_count + 1 :],
        )

    return None
