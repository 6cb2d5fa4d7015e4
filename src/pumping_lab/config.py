"""Configuration helpers for loading JSON config files."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .exceptions import ConfigError

REPO_ROOT = Path(__file__).resolve().parents[2]
CONFIG_DIR = REPO_ROOT / "config"
DEFAULT_CONFIG_NAME = "pumping_lab.json"
CONFIG_ENV_VAR = "PUMPING_LAB_CONFIG"


@dataclass(frozen=True)
class Settings:
    """Runtime knobs for the CLI and report writer."""

    default_pump_counts: Tuple[int, ...] = (0, 1, 2)
    max_pump_count: int = 10
    reports_dir: Path = REPO_ROOT / "results" / "reports"
    log_level: str = "WARNING"


def load_json_config(file_name: str) -> Dict[str, Any]:
    """Load a JSON config file relative to the repository config directory."""

    file_path = Path(file_name)
    if not file_path.is_absolute():
        file_path = CONFIG_DIR / file_name

    if not file_path.exists():
        raise FileNotFoundError(f"Config file '{file_name}' does not exist at {file_path}")

    with file_path.open("r", encoding="utf-8") as handle:
        try:
            return json.load(handle)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Config file {file_path} is not valid JSON: {exc}") from exc


def auto_load_json_config(file_name: str, tag: str = "default") -> Dict[str, Any]:
    """
    Using tag strategy to load multiple json config from a single file.
    Return a {} item from [{},{}] in json config
    """
    config_data = load_json_config(file_name)

    if isinstance(config_data, list):
        if not config_data:
            raise ConfigError(f"Config file '{file_name}' is an empty list.")

        for config in config_data:
            if tag in config.get("tags", []):
                return config

        # Fallback to the first item if tag not found
        return config_data[0]

    return config_data


def load_settings(file_name: Optional[str] = None, tag: str = "default") -> Settings:
    """Build ``Settings`` from a config file; missing files mean defaults."""

    name = file_name or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_NAME
    try:
        raw = auto_load_json_config(name, tag=tag)
    except FileNotFoundError:
        if file_name:
            raise
        return Settings()

    defaults = Settings()
    try:
        counts = tuple(int(n) for n in raw.get("default_pump_counts", defaults.default_pump_counts))
        max_count = int(raw.get("max_pump_count", defaults.max_pump_count))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid pump count settings in '{name}': {exc}") from exc
    if not counts or any(n < 0 for n in counts) or max_count < 0:
        raise ConfigError(f"Pump counts in '{name}' must be non-negative and non-empty")

    reports_dir = Path(raw.get("reports_dir", defaults.reports_dir))
    if not reports_dir.is_absolute():
        reports_dir = REPO_ROOT / reports_dir

    return Settings(
        default_pump_counts=counts,
        max_pump_count=max_count,
        reports_dir=reports_dir,
        log_level=str(raw.get("log_level", defaults.log_level)).upper(),
    )
