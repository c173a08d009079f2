from typing import Any, Optional

from portal.core.errors import FieldValidationError

# Range of the INT semester column.
SEMESTER_MIN = -2147483648
SEMESTER_MAX = 2147483647


def clean_string(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def clean_string_or_none(value: Any) -> Optional[str]:
    cleaned = clean_string(value)
    return cleaned if cleaned else None


def normalize_section(value: Any) -> str:
    """Map every "no section" spelling (None, '', whitespace) to ''."""
    return clean_string(value)


def coerce_semester(value: Any) -> Optional[int]:
    """
    Lenient parse for lookups: "3" and "3.0" give 3, anything that is not a
    whole number inside the column range becomes None.
    """
    cleaned = clean_string(value)
    try:
        semester = int(cleaned)
    except ValueError:
        try:
            number = float(cleaned)
        except ValueError:
            return None
        if not number.is_integer():
            return None
        semester = int(number)
    if not SEMESTER_MIN <= semester <= SEMESTER_MAX:
        return None
    return semester


def parse_semester(value: Any) -> int:
    """Strict parse for write paths."""
    if isinstance(value, bool):
        raise FieldValidationError("Invalid semester", {"semester": "Semester must be a whole number."})
    semester = coerce_semester(value)
    if semester is None:
        raise FieldValidationError("Invalid semester", {"semester": "Semester must be a whole number."})
    return semester
