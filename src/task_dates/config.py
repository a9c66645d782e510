"""YAML/dict config loader for task-dates.

Supports loading from a YAML file or a plain dict (for embedding
in a larger app config).

Example YAML:

    task_dates:
      enabled: true
      languages:
        - en
      prefer_dates_from: future
      expand_shorthands: true
      shorthands:
        thurs: thursday
        tmrw: tomorrow
"""

from __future__ import annotations
from datetime import datetime
from pathlib import Path
from typing import Any, Protocol

from .extractor import DateExtractor, ExtractorConfig
from .types import ParseResult


class Extractor(Protocol):
    """Anything with DateExtractor.extract's signature."""
    def extract(self, text: str, *, now: datetime | None = None) -> ParseResult: ...


class _NoopExtractor:
    """Pass-through extractor when date parsing is disabled."""
    def extract(self, text: str, *, now: datetime | None = None) -> ParseResult:
        return ParseResult(cleaned_text=text)


def load_config(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    # Support nested under "task_dates" key or flat
    if "task_dates" in data:
        data = data["task_dates"] or {}

    languages = data.get("languages") or ["en"]
    if isinstance(languages, str):
        languages = [languages]

    return {
        "enabled": data.get("enabled", True),
        "languages": list(languages),
        "prefer_dates_from": data.get("prefer_dates_from", "future"),
        "expand_shorthands": data.get("expand_shorthands", True),
        "shorthands": {str(k): str(v) for k, v in (data.get("shorthands") or {}).items()},
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml  # optional dependency
    with open(path) as f:
        return load_config(yaml.safe_load(f) or {})


def create_extractor(config: dict[str, Any]) -> Extractor:
    """Create a configured extractor from a config dict."""
    cfg = load_config(config)

    if not cfg["enabled"]:
        return _NoopExtractor()

    return DateExtractor(ExtractorConfig(
        languages=cfg["languages"],
        prefer_dates_from=cfg["prefer_dates_from"],
        expand_shorthands=cfg["expand_shorthands"],
        shorthands=cfg["shorthands"],
    ))
