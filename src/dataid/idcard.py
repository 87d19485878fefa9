"""Resident ID card numbers: validation, derived fields and 15 to 18 conversion.

An 18-digit number is laid out as::

    110105 19491231 002 X
    |      |        |   check character (ISO 7064 MOD 11-2)
    |      |        sequence code, odd for men and even for women
    |      birth date YYYYMMDD
    area code (province, city, district)

Legacy 15-digit numbers carry a 2-digit birth year (century 19 implied)
and no check character. Every derivation function validates its input
first, so callers never have to call check_identity_card themselves.
"""

from __future__ import annotations

import datetime
import logging
import re

from pydantic import BaseModel

from dataid.config import DataIdConfig
from dataid.errors import InvalidArgumentError, InvalidIdCardError
from dataid.regions import is_known_province, province_name
from dataid.utils import require_text

logger = logging.getLogger("dataid.idcard")

ID_LENGTH_18 = 18
ID_LENGTH_15 = 15
MIN_BIRTH_YEAR = 1900

WEIGHTS = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)
CHECK_CHARS = "10X98765432"

_DIGITS_15 = re.compile(r"[0-9]{15}")
_DIGITS_17 = re.compile(r"[0-9]{17}")


class IdCardInfo(BaseModel):
    """Everything derivable from a valid ID card number."""

    id_card: str  # normalized 18-digit form
    province_code: str
    city_code: str
    district_code: str
    province: str | None
    birth_date: datetime.date
    age: int
    gender: int  # 1 male, 0 female
    masked: str


def checksum_char(first17: str) -> str:
    """Compute the MOD 11-2 check character for a 17-digit prefix."""
    if not isinstance(first17, str) or not _DIGITS_17.fullmatch(first17):
        raise InvalidArgumentError("Checksum input must be exactly 17 digits")
    total = sum(int(digit) * weight for digit, weight in zip(first17, WEIGHTS))
    return CHECK_CHARS[total % 11]


def _is_birthday(year: int, month: int, day: int) -> bool:
    if year < MIN_BIRTH_YEAR or year > datetime.date.today().year:
        return False
    try:
        datetime.date(year, month, day)
    except ValueError:
        return False
    return True


def _is_valid_18(id_card: str) -> bool:
    first17 = id_card[:17]
    if not _DIGITS_17.fullmatch(first17):
        return False
    if not is_known_province(id_card):
        return False
    if not _is_birthday(int(id_card[6:10]), int(id_card[10:12]), int(id_card[12:14])):
        return False
    return id_card[17].upper() == checksum_char(first17)


def _is_valid_15(id_card: str) -> bool:
    if not _DIGITS_15.fullmatch(id_card):
        return False
    if not is_known_province(id_card):
        return False
    return _is_birthday(1900 + int(id_card[6:8]), int(id_card[8:10]), int(id_card[10:12]))


def _upgrade(id_card: str) -> str | None:
    """Insert the century and append the check character; None unless 15 digits."""
    if len(id_card) != ID_LENGTH_15 or not _DIGITS_15.fullmatch(id_card):
        return None
    first17 = id_card[:6] + "19" + id_card[6:]
    return first17 + checksum_char(first17)


def check_identity_card(id_card: str) -> bool:
    """Return whether id_card is a valid 15- or 18-digit ID card number.

    Raises InvalidArgumentError for None, empty or blank input.
    """
    id_card = require_text(id_card, "ID card number")
    if len(id_card) == ID_LENGTH_18:
        valid = _is_valid_18(id_card)
    elif len(id_card) == ID_LENGTH_15:
        valid = _is_valid_15(id_card)
    else:
        valid = False

    if not valid:
        logger.debug("Rejected ID card number %s", hide_id_card(id_card))
    return valid


def _validated(id_card: str) -> str:
    """Validate and return the 18-digit form with an uppercase check character."""
    if not check_identity_card(id_card):
        raise InvalidIdCardError("Invalid ID card number, please enter a valid one")
    id_card = id_card.strip()
    if len(id_card) == ID_LENGTH_15:
        return _upgrade(id_card)
    return id_card.upper()


def _birth_date(card18: str) -> datetime.date:
    return datetime.date(int(card18[6:10]), int(card18[10:12]), int(card18[12:14]))


def get_birth_by_id_card(id_card: str) -> str:
    """Return the birth date embedded in id_card as YYYY-MM-DD."""
    return _birth_date(_validated(id_card)).isoformat()


def get_province_by_id_card(id_card: str) -> str | None:
    """Return the province of issue, or None for a code missing from the table."""
    return province_name(_validated(id_card))


def get_city_code_by_id_card(id_card: str) -> str:
    return _validated(id_card)[:4]


def get_district_code_by_id_card(id_card: str) -> str:
    return _validated(id_card)[:6]


def convert_15_to_18(id_card: str) -> str:
    """Convert a legacy 15-digit number to the 18-digit form.

    Raises InvalidIdCardError if id_card is not a valid ID card number, and
    InvalidArgumentError if it is valid but not a 15-digit number.
    """
    id_card = require_text(id_card, "ID card number")
    if not check_identity_card(id_card):
        raise InvalidIdCardError("Invalid ID card number, please enter a valid one")
    converted = _upgrade(id_card)
    if not converted:
        raise InvalidArgumentError("Please enter a 15-digit ID card number")
    logger.debug("Converted %s to 18 digits", hide_id_card(id_card))
    return converted


def get_age_by_id_card(id_card: str, today: datetime.date | None = None) -> int:
    """Return the age in whole years on ``today`` (default: the current date)."""
    birth = _birth_date(_validated(id_card))
    today = today or datetime.date.today()
    if birth > today:
        raise InvalidArgumentError(
            f"Birth date {birth.isoformat()} is after {today.isoformat()}"
        )
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


def get_gender_by_id_card(id_card: str) -> int:
    """Return 1 for male (odd 17th digit) and 0 for female (even)."""
    return 1 if int(_validated(id_card)[16]) % 2 else 0


def hide_id_card(id_card: str, start: int = 6, end: int = 14, mask_char: str = "*") -> str:
    """Replace the characters in [start, end) with mask_char.

    The window is clamped to the string, so out-of-range indexes never raise.
    """
    id_card = require_text(id_card, "ID card number")
    start = max(0, min(start, len(id_card)))
    end = max(start, min(end, len(id_card)))
    return id_card[:start] + mask_char * (end - start) + id_card[end:]


def get_id_card_info(id_card: str, config: DataIdConfig | None = None) -> IdCardInfo:
    """Derive every field of a valid ID card number in one call.

    The reference date for the age and the masking window come from
    ``config`` (see dataid.config.load_config); defaults apply without one.
    """
    config = config or DataIdConfig()
    card18 = _validated(id_card)
    masking = config.masking
    return IdCardInfo(
        id_card=card18,
        province_code=card18[:2],
        city_code=card18[:4],
        district_code=card18[:6],
        province=province_name(card18),
        birth_date=_birth_date(card18),
        age=get_age_by_id_card(card18, today=config.id_card.reference_date),
        gender=get_gender_by_id_card(card18),
        masked=hide_id_card(card18, masking.start, masking.end, masking.char),
    )
