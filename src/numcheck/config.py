from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError


# ---- Formatting ----
class FormatConfig(BaseModel):
    strict: bool = False   # raise on unsafe characters instead of dropping them
    separator: str = "-"


# ---- Detector configs (toggle and tune without code changes) ----
class RegexPacks(BaseModel):
    th: bool = True        # TH_IDNR

class Detectors(BaseModel):
    regex: bool = True
    regex_packs: RegexPacks = Field(default_factory=RegexPacks)
    min_confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    json_logs: bool = Field(default=True, alias="json")


# ---- Root config ----
class NumcheckConfig(BaseModel):
    default_type: str = "th.idnr"
    format: FormatConfig = Field(default_factory=FormatConfig)
    detectors: Detectors = Field(default_factory=Detectors)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# ---- Loader ----
def load_config(path: Optional[Path]) -> NumcheckConfig:
    if not path:
        return NumcheckConfig()
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")
    try:
        return NumcheckConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e
