"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional
import json

import typer
import yaml

from .decomposition import decomposition_shape, from_lengths, from_segments
from .models import Decomposition, LanguageDefinition


def parse_int_list(raw: str, option_name: str) -> List[int]:
    """Parse ``"0,1,2"`` into ``[0, 1, 2]``."""
    values: List[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            values.append(int(part))
        except ValueError:
            raise typer.BadParameter(f"{option_name}: '{part}' is not an integer") from None
    if not values:
        raise typer.BadParameter(f"{option_name}: at least one value is required")
    return values


def parse_segments(raw: str) -> List[str]:
    """Split on commas, keeping empty segments (``",a,b"`` -> ``["", "a", "b"]``)."""
    return [part.strip() for part in raw.split(",")]


def build_decomposition(
    language: LanguageDefinition,
    source: str,
    segments: Optional[str],
    lengths: Optional[str],
) -> Decomposition:
    if segments is not None and lengths is not None:
        raise typer.BadParameter("Use either --segments or --lengths, not both")
    if segments is not None:
        return from_segments(parse_segments(segments))
    if lengths is not None:
        shape = decomposition_shape(language.formal_type)
        return from_lengths(source, shape, parse_int_list(lengths, "--lengths"))
    raise typer.BadParameter("One of --segments or --lengths is required")


def load_json_or_yaml(file_path: Path) -> Any:
    """Load data from JSON or YAML file, auto-detecting format by extension."""
    content = file_path.read_text(encoding="utf-8")

    if file_path.suffix.lower() in {".yml", ".yaml"}:
        return yaml.safe_load(content)
    else:
        return json.loads(content)


def ensure_output_dir(output: Optional[Path]) -> None:
    if output and not output.exists():
        output.mkdir(parents=True)
