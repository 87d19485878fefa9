"""Format checks for mobile phone numbers, email addresses and plate numbers.

Patterns are compiled once at import and always matched against the whole
string.
"""

from __future__ import annotations

import logging
import re

from dataid.utils import require_text

logger = logging.getLogger("dataid.patterns")

# 11 digits: carrier-assigned 3-digit prefix followed by 8 digits
PHONE_RE = re.compile(
    r"(?:13[0-9]|14[579]|15[0-35-9]|166|17[0135678]|18[0-9]|19[89])[0-9]{8}"
)

EMAIL_RE = re.compile(
    r"[a-zA-Z0-9](?:[-.]?[a-zA-Z0-9])+"
    r"@(?:[a-zA-Z0-9]+(?:-[a-zA-Z0-9]+)?\.)+[a-zA-Z]{2,}"
)

PROVINCE_CHARS = "京津沪渝冀豫云辽黑湘皖鲁新苏浙赣鄂桂甘晋蒙陕吉闽贵粤青藏川宁琼使领"

PLATE_RE = re.compile(
    rf"[{PROVINCE_CHARS}][a-zA-Z]"
    r"(?:[DF](?![IO])[a-zA-Z0-9](?![IO])[0-9]{4}|[0-9]{5}[DF])"
    rf"|[{PROVINCE_CHARS}][A-Z][A-Z0-9]{{4}}[A-Z0-9挂学警港澳]"
)


def check_phone_number(phone_number: str) -> bool:
    """Return whether phone_number is an 11-digit mainland mobile number."""
    require_text(phone_number, "Phone number")
    return PHONE_RE.fullmatch(phone_number) is not None


def check_email(email: str) -> bool:
    """Return whether email matches local-part@domain with a letters-only TLD."""
    require_text(email, "Email")
    return EMAIL_RE.fullmatch(email) is not None


def check_plate_number(plate_number: str) -> bool:
    """Return whether plate_number is a valid vehicle plate.

    Accepts regular plates (including trailer, learner, police, Hong Kong
    and Macau suffixes) and new-energy plates. Spaces are ignored.
    """
    plate_number = require_text(plate_number, "Plate number").replace(" ", "")
    matched = PLATE_RE.fullmatch(plate_number) is not None
    if not matched:
        logger.debug("Rejected plate number of %d characters", len(plate_number))
    return matched
