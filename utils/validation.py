"""
Input validation utilities for form data.
"""

import re
from datetime import date
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from utils.constants import INDIAN_STATES
from utils.exceptions import ValidationError

M = TypeVar("M", bound=BaseModel)

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def validate_email(email: str) -> bool:
    """
    Validate email address format.

    Args:
        email: Email address string

    Returns:
        True if valid format, False otherwise
    """
    if not email or not isinstance(email, str):
        return False

    pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
    return bool(re.match(pattern, email.strip()))


def validate_iso_date(value: str) -> bool:
    """
    Check that ``value`` is a real calendar date written as ``YYYY-MM-DD``.

    Only the zero-padded form is accepted; appointment ordering relies on
    comparing these strings lexicographically.
    """
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def validate_time(value: str) -> bool:
    """Check that ``value`` is a 24-hour ``HH:MM`` time."""
    return isinstance(value, str) and bool(_TIME_RE.match(value))


def validate_state_code(code: str) -> bool:
    """Check that ``code`` is a known GST state code."""
    return code in INDIAN_STATES


def sanitize_text(text: Optional[str], max_length: Optional[int] = None) -> str:
    """
    Sanitize user input text.

    Args:
        text: Input text
        max_length: Optional maximum length

    Returns:
        Sanitized text
    """
    if not text:
        return ""

    # Remove control characters except newlines and tabs
    sanitized = re.sub(r"[\x00-\x08\x0B-\x0C\x0E-\x1F\x7F]", "", str(text))
    sanitized = sanitized.strip()

    if max_length and len(sanitized) > max_length:
        sanitized = sanitized[:max_length]

    return sanitized


def parse_form(model: Type[M], data: Union[M, Mapping[str, Any]]) -> M:
    """
    Build ``model`` from submitted form data.

    Raises:
        ValidationError: Listing every field that failed, e.g.
            ``"date: date must be a calendar date in YYYY-MM-DD format"``
    """
    if isinstance(data, model):
        return data
    try:
        return model(**dict(data))
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'form'}: {err['msg']}"
            for err in e.errors()
        )
        raise ValidationError(problems) from e
