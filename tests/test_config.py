"""Tests for dataid.yml configuration."""

from __future__ import annotations

import datetime
import logging

import pytest
from pydantic import ValidationError

from dataid import configure
from dataid.config import load_config


def test_load_missing_config(tmp_path):
    """Loading from a dir without dataid.yml returns defaults."""
    config = load_config(tmp_path)
    assert config.log_level == "INFO"
    assert config.id_card.reference_date is None
    assert config.masking.start == 6
    assert config.masking.end == 14
    assert config.masking.char == "*"
    assert config.project_dir == tmp_path


def test_load_config(tmp_path):
    (tmp_path / "dataid.yml").write_text(
        """
log_level: DEBUG
id_card:
  reference_date: 2024-01-01
masking:
  start: 3
  end: 15
  char: "#"
""",
        encoding="utf-8",
    )
    config = load_config(tmp_path)
    assert config.log_level == "DEBUG"
    assert config.id_card.reference_date == datetime.date(2024, 1, 1)
    assert config.masking.start == 3
    assert config.masking.end == 15
    assert config.masking.char == "#"


def test_empty_config_file(tmp_path):
    (tmp_path / "dataid.yml").write_text("", encoding="utf-8")
    config = load_config(tmp_path)
    assert config.log_level == "INFO"


def test_env_var_expansion(tmp_path, monkeypatch):
    monkeypatch.setenv("DATAID_REFERENCE_DATE", "2020-06-30")
    (tmp_path / "dataid.yml").write_text(
        """
id_card:
  reference_date: ${DATAID_REFERENCE_DATE}
""",
        encoding="utf-8",
    )
    config = load_config(tmp_path)
    assert config.id_card.reference_date == datetime.date(2020, 6, 30)


def test_unknown_keys_are_ignored(tmp_path):
    (tmp_path / "dataid.yml").write_text(
        """
masking:
  start: 2
  colour: red
extra: true
""",
        encoding="utf-8",
    )
    config = load_config(tmp_path)
    assert config.masking.start == 2
    assert config.masking.end == 14


def test_invalid_masking_char(tmp_path):
    (tmp_path / "dataid.yml").write_text(
        """
masking:
  char: "**"
""",
        encoding="utf-8",
    )
    with pytest.raises(ValidationError):
        load_config(tmp_path)


def test_negative_masking_window(tmp_path):
    (tmp_path / "dataid.yml").write_text("masking:\n  start: -1\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(tmp_path)


def test_top_level_list_is_rejected(tmp_path):
    (tmp_path / "dataid.yml").write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(tmp_path)


def test_scalar_section_is_rejected(tmp_path):
    (tmp_path / "dataid.yml").write_text("id_card: 2024\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(tmp_path)
    (tmp_path / "dataid.yml").write_text("masking: hidden\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(tmp_path)


def test_empty_sections_keep_defaults(tmp_path):
    (tmp_path / "dataid.yml").write_text("id_card:\nmasking:\n", encoding="utf-8")
    config = load_config(tmp_path)
    assert config.id_card.reference_date is None
    assert config.masking.start == 6


def test_configure_applies_log_level(tmp_path):
    """configure() hands the configured level to setup_logging."""
    (tmp_path / "dataid.yml").write_text("log_level: DEBUG\n", encoding="utf-8")
    package_logger = logging.getLogger("dataid")
    saved = list(package_logger.handlers)
    package_logger.handlers.clear()
    try:
        config = configure(tmp_path)
        assert config.log_level == "DEBUG"
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
    finally:
        package_logger.handlers[:] = saved
        package_logger.setLevel(logging.NOTSET)
