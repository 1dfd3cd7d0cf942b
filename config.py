from __future__ import annotations

import pathlib
from dataclasses import dataclass, field, fields
from typing import Optional

import yaml

from event_logger import LOG_PATH
from rules import LifeRule
from simulate import DEFAULT_MAX_ITERATIONS

DEFAULT_CONFIG = pathlib.Path("life.yaml")


@dataclass
class Settings:
    store: pathlib.Path = field(default_factory=lambda: pathlib.Path("data") / "boards.jsonl")
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    rule: str = "B3/S23"
    log_file: pathlib.Path = LOG_PATH

    def life_rule(self) -> LifeRule:
        return LifeRule.from_notation(self.rule)


def load_config(path: Optional[pathlib.Path] = None) -> Settings:
    """
    Read settings from a YAML file. A missing file gives the defaults; keys
    not listed in Settings are rejected.
    """
    path = pathlib.Path(path) if path is not None else DEFAULT_CONFIG
    if not path.exists():
        return Settings()

    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: config must be a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"{path}: unknown config keys {unknown}")

    for key in ("store", "rule", "log_file"):
        if key in raw and not isinstance(raw[key], str):
            raise ValueError(f"{path}: {key} must be a string, got {raw[key]!r}")

    settings = Settings(**raw)
    settings.store = pathlib.Path(settings.store)
    settings.log_file = pathlib.Path(settings.log_file)
    if isinstance(settings.max_iterations, bool) or not isinstance(settings.max_iterations, int) \
            or settings.max_iterations < 1:
        raise ValueError(f"{path}: max_iterations must be a positive integer")
    settings.life_rule()  # validates the notation
    return settings
