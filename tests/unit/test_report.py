"""Unit tests for failure message formatting."""

import pytest

from resumekit.shared import FailureKind, ValidationError
from resumekit.validation.report import ValidationFailure, ValidationOutcome, format_failure


@pytest.mark.unit
def test_missing_field_message():
    failure = ValidationFailure("name", "Full Name", FailureKind.MISSING_FIELD)
    assert format_failure(failure) == "Missing required field: Full Name (path: name)"


@pytest.mark.unit
def test_missing_parent_names_the_absent_prefix():
    failure = ValidationFailure(
        "contact.phone", "Phone Number", FailureKind.MISSING_PARENT, missing_at="contact"
    )
    assert format_failure(failure) == (
        "Missing required field: Phone Number (path: contact.phone; 'contact' not found)"
    )


@pytest.mark.unit
def test_missing_array_message():
    failure = ValidationFailure("skills", "Skills Array", FailureKind.MISSING_FIELD, sequence=True)
    assert format_failure(failure) == "Missing required array: Skills Array (path: skills)"


@pytest.mark.unit
def test_alternatives_message():
    failure = ValidationFailure(
        "experience.0.role",
        "Experience #1 Role",
        FailureKind.MISSING_FIELD,
        candidates=("experience.0.role", "experience.0.jobTitle"),
    )
    assert format_failure(failure) == (
        "Missing required field: Experience #1 Role "
        "(expected one of: experience.0.role, experience.0.jobTitle)"
    )


@pytest.mark.unit
def test_empty_value_message():
    failure = ValidationFailure("name", "Full Name", FailureKind.EMPTY_VALUE)
    assert format_failure(failure) == "Required field is empty: Full Name (path: name)"


@pytest.mark.unit
def test_wrong_type_message():
    failure = ValidationFailure(
        "skills", "Skills Array", FailureKind.WRONG_TYPE, sequence=True, actual_kind="object"
    )
    assert format_failure(failure) == "Expected array but got object: Skills Array (path: skills)"


@pytest.mark.unit
def test_too_few_items_message():
    failure = ValidationFailure(
        "experience",
        "Experience Array",
        FailureKind.TOO_FEW_ITEMS,
        sequence=True,
        required=1,
        found=0,
    )
    assert format_failure(failure) == (
        "Array must have at least 1 item(s): Experience Array (path: experience), found 0"
    )


@pytest.mark.unit
def test_validation_error_carries_failure():
    failure = ValidationFailure("email", "Email Address", FailureKind.EMPTY_VALUE)
    error = ValidationError(failure)
    assert str(error) == failure.message
    assert error.kind is FailureKind.EMPTY_VALUE
    assert error.path == "email"


@pytest.mark.unit
def test_outcome_to_dict():
    ok = ValidationOutcome(checked=12, counts={"experience": 2})
    assert ok.to_dict() == {"valid": True, "checked": 12, "entries": {"experience": 2}}

    failure = ValidationFailure(
        "experience", "Experience Array", FailureKind.TOO_FEW_ITEMS, required=1, found=0
    )
    data = ValidationOutcome(failure=failure).to_dict()
    assert data["valid"] is False
    assert data["error"]["kind"] == "too-few-items"
    assert data["error"]["required"] == 1
    assert data["error"]["found"] == 0
