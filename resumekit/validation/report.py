"""Formatting of validation failures into human-readable messages."""

from dataclasses import dataclass, field
from typing import Any, Optional

from resumekit.shared import FailureKind


@dataclass(frozen=True)
class ValidationFailure:
    """The single rule violation that stopped a validation pass."""

    path: str
    description: str
    kind: FailureKind
    sequence: bool = False
    missing_at: Optional[str] = None
    candidates: tuple[str, ...] = ()
    required: Optional[int] = None
    found: Optional[int] = None
    actual_kind: Optional[str] = None

    @property
    def message(self) -> str:
        return format_failure(self)

    def to_dict(self) -> dict[str, Any]:
        data = {
            "kind": self.kind.value,
            "path": self.path,
            "description": self.description,
            "message": self.message,
        }
        if len(self.candidates) > 1:
            data["candidates"] = list(self.candidates)
        if self.required is not None:
            data["required"] = self.required
            data["found"] = self.found
        if self.actual_kind is not None:
            data["actual_kind"] = self.actual_kind
        return data


@dataclass(frozen=True)
class ValidationOutcome:
    """Success, or the first failure found."""

    failure: Optional[ValidationFailure] = None
    checked: int = 0
    counts: dict[str, int] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"valid": self.ok, "checked": self.checked}
        if self.counts:
            data["entries"] = dict(self.counts)
        if self.failure is not None:
            data["error"] = self.failure.to_dict()
        return data


def _location(failure: ValidationFailure) -> str:
    if len(failure.candidates) > 1:
        return f"expected one of: {', '.join(failure.candidates)}"
    location = f"path: {failure.path}"
    if failure.kind is FailureKind.MISSING_PARENT and failure.missing_at:
        location += f"; '{failure.missing_at}' not found"
    return location


def format_failure(failure: ValidationFailure) -> str:
    """Render a failure as a single line of text."""
    where = _location(failure)
    desc = failure.description

    if failure.kind in (FailureKind.MISSING_FIELD, FailureKind.MISSING_PARENT):
        noun = "array" if failure.sequence else "field"
        return f"Missing required {noun}: {desc} ({where})"

    if failure.kind is FailureKind.EMPTY_VALUE:
        return f"Required field is empty: {desc} ({where})"

    if failure.kind is FailureKind.WRONG_TYPE:
        return f"Expected array but got {failure.actual_kind}: {desc} ({where})"

    if failure.kind is FailureKind.TOO_FEW_ITEMS:
        return (
            f"Array must have at least {failure.required} item(s): {desc} ({where}), "
            f"found {failure.found}"
        )

    return f"{desc} ({where})"
