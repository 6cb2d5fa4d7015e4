"""Read-only registry of the languages the engine knows about."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

import yaml

from .exceptions import ConfigError, LanguageNotFoundError, UnknownFormalTypeError
from .models import FormalType, LanguageDefinition, Recognizer
from .recognizers import RECOGNIZERS

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
LANGUAGES_PATH = DATA_DIR / "languages.yaml"


class LanguageCatalog:
    """Ordered, immutable mapping of language id to definition."""

    def __init__(self, definitions: Iterable[LanguageDefinition]):
        entries: Dict[str, LanguageDefinition] = {}
        for definition in definitions:
            if definition.language_id in entries:
                raise ValueError(f"Duplicate language id '{definition.language_id}'")
            entries[definition.language_id] = definition
        self._entries = entries

    def lookup(self, language_id: str) -> LanguageDefinition:
        try:
            return self._entries[language_id]
        except KeyError:
            raise LanguageNotFoundError(language_id) from None

    def get(self, language_id: str) -> LanguageDefinition | None:
        return self._entries.get(language_id)

    def list_by_type(self, formal_type: FormalType | str | None = None) -> List[LanguageDefinition]:
        """Definitions of one formal type (all when ``None``), in registration order."""
        if formal_type is None:
            return list(self._entries.values())
        try:
            wanted = FormalType(formal_type)
        except ValueError:
            raise UnknownFormalTypeError(formal_type) from None
        return [definition for definition in self._entries.values() if definition.formal_type is wanted]

    def ids(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, language_id: object) -> bool:
        return language_id in self._entries

    def __iter__(self) -> Iterator[LanguageDefinition]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


def _definition_from_entry(entry: Mapping[str, Any], recognizers: Mapping[str, Recognizer]) -> LanguageDefinition:
    language_id = str(entry["id"])
    recognizer_key = entry.get("recognizer")
    if recognizer_key not in recognizers:
        raise ConfigError(f"Language '{language_id}' refers to unknown recognizer '{recognizer_key}'")
    examples = {int(length): str(text) for length, text in (entry.get("examples_by_length") or {}).items()}
    return LanguageDefinition(
        language_id=language_id,
        name=str(entry.get("name", language_id)),
        description=str(entry.get("description", "")),
        formal_type=FormalType(entry["type"]),
        recognizer=recognizers[recognizer_key],
        pumping_length=int(entry["pumping_length"]),
        sample_strings=tuple(str(s) for s in entry.get("sample_strings") or ()),
        counter_examples=tuple(str(s) for s in entry.get("counter_examples") or ()),
        examples_by_length=examples,
        generation_rule=entry.get("generation_rule"),
    )


def load_catalog(
    path: Path | None = None,
    recognizers: Optional[Mapping[str, Recognizer]] = None,
) -> LanguageCatalog:
    """Build a catalog from a YAML language table."""

    source = path or LANGUAGES_PATH
    recognizers = recognizers if recognizers is not None else RECOGNIZERS
    try:
        raw = yaml.safe_load(source.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to load language table {source}: {exc}") from exc

    if not isinstance(raw, dict) or not isinstance(raw.get("languages"), list):
        raise ConfigError(f"Language table {source} must contain a 'languages' list")

    try:
        definitions = [_definition_from_entry(entry, recognizers) for entry in raw["languages"]]
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid language entry in {source}: {exc}") from exc

    logger.debug("Loaded %d languages from %s", len(definitions), source)
    return LanguageCatalog(definitions)


@lru_cache(maxsize=1)
def default_catalog() -> LanguageCatalog:
    """The built-in catalog, loaded once per process."""
    return load_catalog()
