"""
Event Validator
===============
Checks a collected draft before it may be stored. The first failing check
is the reported reason.
"""

import math
import re
from dataclasses import dataclass
from typing import Optional

from data.models import EventDraft

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: Optional[str] = None


def is_number(value: Optional[str]) -> bool:
    """True for finite numeric text such as '50' or '12.5'."""
    if value is None or not value.strip():
        return False
    try:
        return math.isfinite(float(value))
    except ValueError:
        return False


def validate_event(draft: EventDraft) -> ValidationResult:
    required = (
        (draft.client_name, "Client name is required"),
        (draft.company_name, "Company name is required"),
        (draft.contact_number, "Contact number is required"),
        (draft.event_name, "Event name is required"),
        (draft.event_date, "Event date is required"),
    )
    for value, error in required:
        if not value:
            return ValidationResult(False, error)

    if not DATE_PATTERN.fullmatch(draft.event_date):
        return ValidationResult(False, "Date must be in YYYY-MM-DD format")

    if not is_number(draft.participants):
        return ValidationResult(False, "Number of participants is required and must be a number")

    return ValidationResult(True)
