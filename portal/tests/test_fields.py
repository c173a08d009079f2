import pytest

from portal.core.errors import FieldValidationError
from portal.utils.fields import (
    clean_string,
    clean_string_or_none,
    coerce_semester,
    normalize_section,
    parse_semester,
)


def test_clean_string():
    assert clean_string("  CS101 ") == "CS101"
    assert clean_string(None) == ""
    assert clean_string(3) == "3"


def test_clean_string_or_none():
    assert clean_string_or_none("  ") is None
    assert clean_string_or_none(" Dr. A ") == "Dr. A"


@pytest.mark.parametrize("value", [None, "", "   ", "\t"])
def test_normalize_section_no_section_spellings(value):
    assert normalize_section(value) == ""


def test_normalize_section_keeps_case():
    assert normalize_section(" b ") == "b"


def test_coerce_semester():
    assert coerce_semester("3") == 3
    assert coerce_semester(" 3 ") == 3
    assert coerce_semester("xyz") is None
    assert coerce_semester("") is None
    assert coerce_semester(None) is None


def test_parse_semester():
    assert parse_semester(2) == 2
    assert parse_semester("7") == 7
    with pytest.raises(FieldValidationError) as exc:
        parse_semester("seven")
    assert exc.value.details == {"semester": "Semester must be a whole number."}
    with pytest.raises(FieldValidationError):
        parse_semester(True)


def test_coerce_semester_integral_decimals():
    assert coerce_semester("3.0") == 3
    assert coerce_semester("3.5") is None
    assert coerce_semester("nan") is None
    assert coerce_semester("inf") is None


def test_semester_outside_column_range():
    assert coerce_semester(str(2 ** 31)) is None
    assert coerce_semester("1e100") is None
    with pytest.raises(FieldValidationError):
        parse_semester(10 ** 20)
