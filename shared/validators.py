"""
Framework-agnostic input validators. All pure functions.

Services call these before touching storage so a rejected request never
leaves a record behind.
"""

from __future__ import annotations

import re
from typing import Optional

import validators as _validators
from bson import ObjectId

_PHONE_CHARS = re.compile(r"^\+?[0-9\s\-()]{7,20}$")


def normalize_email(email: Optional[str]) -> str:
    """Trim and lower-case *email*; ``None`` becomes an empty string."""
    return (email or "").strip().lower()


def validate_email(email: str) -> bool:
    """Return True if *email* is a syntactically valid address."""
    if not email or len(email) > 254:
        return False
    return bool(_validators.email(email))


def validate_phone(phone: str) -> bool:
    """Return True for a plausible phone number (digits, spaces, dashes, parens, leading +)."""
    if not _PHONE_CHARS.match(phone):
        return False
    return len(re.sub(r"\D", "", phone)) >= 7


def validate_subject_id(subject: str) -> bool:
    """Return True if *subject* can be used as a property reference.

    Property ids are normally ObjectId hex strings, but any short token
    without whitespace or Mongo operator characters is accepted.
    """
    if ObjectId.is_valid(subject):
        return True
    return bool(re.fullmatch(r"[A-Za-z0-9_\-]{1,64}", subject))


def validate_otp_format(code: str, length: int = 6) -> bool:
    """Return True if *code* is exactly *length* decimal digits."""
    return bool(re.fullmatch(rf"\d{{{length}}}", code))


def validate_password(password: str) -> tuple[bool, list[str]]:
    """
    Validate a new account password.

    Returns:
        (is_valid, missing_requirements)
    """
    if not password:
        return False, ["Password is required"]

    missing = []
    if len(password) < 8:
        missing.append("At least 8 characters")
    if len(password) > 128:
        missing.append("Maximum 128 characters")
    if not re.search(r"[A-Za-z]", password):
        missing.append("At least one letter")
    if not re.search(r"[0-9]", password):
        missing.append("At least one number")

    return len(missing) == 0, missing
