"""Library configuration: dataid.yml parsing and defaults."""

from __future__ import annotations

import datetime
import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger("dataid.config")

CONFIG_FILENAME = "dataid.yml"

_ENV_VAR_RE = re.compile(r"\$\{(\w+)\}")


class IdCardConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Age is computed against this date instead of today when set
    reference_date: datetime.date | None = None


class MaskingConfig(BaseModel):
    """Window of an ID card number hidden by hide_id_card."""
    model_config = ConfigDict(extra="ignore")

    start: int = Field(default=6, ge=0)
    end: int = Field(default=14, ge=0)
    char: str = "*"

    @field_validator("char")
    @classmethod
    def _single_char(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("masking char must be a single character")
        return value


class DataIdConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    log_level: str = "INFO"
    id_card: IdCardConfig = Field(default_factory=IdCardConfig)
    masking: MaskingConfig = Field(default_factory=MaskingConfig)
    project_dir: Path = Field(default_factory=Path.cwd)


def _expand_env_vars(value: Any) -> Any:
    """Substitute ${NAME} in dataid.yml strings from the environment.

    Walks nested sections and lists. Names missing from the environment are
    left as written, so pydantic reports them against the field they land in.
    """
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), m.group(0)), value)
    if isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env_vars(v) for v in value]
    return value


def load_config(project_dir: Path | None = None) -> DataIdConfig:
    """Load dataid.yml from the given directory (or cwd).

    A missing file yields the defaults. Malformed content of any shape (a
    list at the top level, a scalar where a section belongs, out-of-range
    values) raises pydantic.ValidationError; YAML syntax errors surface as
    yaml.YAMLError.
    """
    project_dir = Path(project_dir) if project_dir else Path.cwd()
    config_path = project_dir / CONFIG_FILENAME

    if not config_path.exists():
        logger.debug("No %s in %s, using defaults", CONFIG_FILENAME, project_dir)
        return DataIdConfig(project_dir=project_dir)

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    raw = _expand_env_vars(raw)

    if not isinstance(raw, dict):
        # A non-mapping top level fails model validation as a whole
        return DataIdConfig.model_validate(raw)

    # Empty sections ("masking:" with nothing under it) keep their defaults
    raw = {key: value for key, value in raw.items() if value is not None}
    return DataIdConfig.model_validate({**raw, "project_dir": project_dir})
