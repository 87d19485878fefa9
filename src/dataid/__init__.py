"""dataid - Chinese personal identifier validation and extraction."""

from __future__ import annotations

import logging
from pathlib import Path

from dataid.config import DataIdConfig, load_config
from dataid.errors import IdentificationError, InvalidArgumentError, InvalidIdCardError
from dataid.idcard import (
    IdCardInfo,
    check_identity_card,
    checksum_char,
    convert_15_to_18,
    get_age_by_id_card,
    get_birth_by_id_card,
    get_city_code_by_id_card,
    get_district_code_by_id_card,
    get_gender_by_id_card,
    get_id_card_info,
    get_province_by_id_card,
    hide_id_card,
)
from dataid.patterns import check_email, check_phone_number, check_plate_number

__version__ = "0.1.0"

__all__ = [
    "DataIdConfig",
    "IdCardInfo",
    "IdentificationError",
    "InvalidArgumentError",
    "InvalidIdCardError",
    "check_email",
    "check_identity_card",
    "check_phone_number",
    "check_plate_number",
    "checksum_char",
    "configure",
    "convert_15_to_18",
    "get_age_by_id_card",
    "get_birth_by_id_card",
    "get_city_code_by_id_card",
    "get_district_code_by_id_card",
    "get_gender_by_id_card",
    "get_id_card_info",
    "get_province_by_id_card",
    "hide_id_card",
    "load_config",
    "setup_logging",
]


def setup_logging(level: str = "INFO") -> None:
    """Send dataid log records to stderr at the given level.

    The checks only emit records on the ``dataid.*`` loggers (rejected
    inputs at DEBUG, always masked); nothing is printed until a host
    application calls this or configure(). Repeated calls change the level
    but attach the stream handler only once.
    """
    package_logger = logging.getLogger("dataid")
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if package_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    package_logger.addHandler(handler)


def configure(project_dir: Path | None = None) -> DataIdConfig:
    """Load dataid.yml and apply its log level.

    Returns the loaded config so it can be passed to get_id_card_info.
    """
    config = load_config(project_dir)
    setup_logging(config.log_level)
    return config
