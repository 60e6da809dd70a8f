"""Declarative validation rules and the fail-fast engine that applies them.

Rules are checked in a fixed order and the first violation raises
ValidationError. Rule sets are named profiles; ``standard`` checks the
fields every rendered resume needs and ``strict`` also requires the
summary, contact details, and experience dates.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Union

from resumekit.shared import FailureKind, NullReporter, ValidationError
from resumekit.validation.paths import (
    FieldPath,
    ResolutionError,
    is_empty,
    is_sequence,
    kind_of,
    resolve_first,
)
from resumekit.validation.report import ValidationFailure, ValidationOutcome


class RuleKind(str, Enum):
    REQUIRED_SCALAR = "required-scalar"
    NON_EMPTY_SEQUENCE = "non-empty-sequence"


@dataclass(frozen=True)
class ValidationRule:
    """One check against one field, with legacy alternatives in priority order."""

    paths: tuple[FieldPath, ...]
    description: str
    kind: RuleKind = RuleKind.REQUIRED_SCALAR
    min_items: int = 1

    @classmethod
    def required(cls, *paths: str, description: str) -> "ValidationRule":
        return cls(tuple(FieldPath.parse(p) for p in paths), description)

    @classmethod
    def sequence(cls, path: str, description: str, min_items: int = 1) -> "ValidationRule":
        if min_items < 0:
            raise ValueError(f"min_items must be non-negative, got {min_items}")
        return cls(
            (FieldPath.parse(path),),
            description,
            kind=RuleKind.NON_EMPTY_SEQUENCE,
            min_items=min_items,
        )

    @property
    def path(self) -> FieldPath:
        return self.paths[0]

    def prefixed(self, prefix: FieldPath, label: str = "") -> "ValidationRule":
        description = f"{label} {self.description}" if label else self.description
        return replace(
            self,
            paths=tuple(p.prefixed(prefix) for p in self.paths),
            description=description,
        )


@dataclass(frozen=True)
class FieldGroup:
    title: str
    rules: tuple[ValidationRule, ...]


@dataclass(frozen=True)
class Section:
    """A required array plus rules applied to each of its entries."""

    title: str
    rule: ValidationRule
    entry_label: str
    entry_rules: tuple[ValidationRule, ...] = ()
    unit: str = "entries"


Stage = Union[FieldGroup, Section]


@dataclass(frozen=True)
class RuleSet:
    name: str
    stages: tuple[Stage, ...]


def _failure(rule: ValidationRule, path: FieldPath, kind: FailureKind, **extra) -> ValidationError:
    return ValidationError(
        ValidationFailure(
            path=str(path),
            description=rule.description,
            kind=kind,
            sequence=rule.kind is RuleKind.NON_EMPTY_SEQUENCE,
            **extra,
        )
    )


def _resolve(document: Any, rule: ValidationRule) -> tuple[FieldPath, Any]:
    try:
        return resolve_first(document, rule.paths)
    except ResolutionError as e:
        candidates = tuple(str(p) for p in e.candidates) if len(rule.paths) > 1 else ()
        raise _failure(
            rule,
            e.path,
            e.kind,
            missing_at=str(e.missing_at),
            candidates=candidates,
        ) from e


def check_required_field(document: Any, rule: ValidationRule) -> Any:
    """Apply a required-scalar rule and return the resolved value."""
    path, value = _resolve(document, rule)
    if is_empty(value):
        raise _failure(rule, path, FailureKind.EMPTY_VALUE)
    return value


def check_sequence(document: Any, rule: ValidationRule) -> list:
    """Apply a non-empty-sequence rule and return the resolved list."""
    path, value = _resolve(document, rule)
    if not is_sequence(value):
        raise _failure(rule, path, FailureKind.WRONG_TYPE, actual_kind=kind_of(value))
    if len(value) < rule.min_items:
        raise _failure(
            rule,
            path,
            FailureKind.TOO_FEW_ITEMS,
            required=rule.min_items,
            found=len(value),
        )
    return list(value)


def apply_rule(document: Any, rule: ValidationRule) -> Any:
    if rule.kind is RuleKind.NON_EMPTY_SEQUENCE:
        return check_sequence(document, rule)
    return check_required_field(document, rule)


class RuleEngine:
    """Runs a RuleSet over a document, stopping at the first violation."""

    def __init__(self, rule_set: Optional[RuleSet] = None, reporter=None):
        self.rule_set = rule_set or STANDARD
        self.reporter = reporter or NullReporter()

    def validate(self, document: Any) -> ValidationOutcome:
        """Check every rule in order; raise ValidationError on the first failure."""
        checked = 0
        counts: dict[str, int] = {}

        for stage in self.rule_set.stages:
            self.reporter.info(f"Validating {stage.title}...")

            if isinstance(stage, FieldGroup):
                for rule in stage.rules:
                    apply_rule(document, rule)
                    checked += 1
                self.reporter.success(f"{stage.title.capitalize()} validated")
                continue

            entries = check_sequence(document, stage.rule)
            checked += 1
            for index in range(len(entries)):
                prefix = stage.rule.path.child(index)
                label = f"{stage.entry_label} #{index + 1}"
                for rule in stage.entry_rules:
                    apply_rule(document, rule.prefixed(prefix, label))
                    checked += 1

            counts[str(stage.rule.path)] = len(entries)
            self.reporter.success(
                f"{stage.title.capitalize()} validated ({len(entries)} {stage.unit})"
            )

        return ValidationOutcome(checked=checked, counts=counts)

    def check(self, document: Any) -> ValidationOutcome:
        """Like validate(), but return the failure instead of raising it."""
        try:
            return self.validate(document)
        except ValidationError as e:
            return ValidationOutcome(failure=e.failure)


_NAME = ValidationRule.required("name", description="Full Name")
_EMAIL = ValidationRule.required("email", description="Email Address")
_SUMMARY = ValidationRule.required(
    "professional_summary", "summary", description="Professional Summary"
)

_EXPERIENCE_ENTRY = (
    ValidationRule.required("company", description="Company"),
    ValidationRule.required("role", "jobTitle", description="Role"),
)
_EXPERIENCE_DATES = ValidationRule.required("duration", "startDate", description="Duration")

_EDUCATION = Section(
    title="education",
    rule=ValidationRule.sequence("education", "Education Array"),
    entry_label="Education",
    entry_rules=(
        ValidationRule.required("school", "institution", description="School"),
        ValidationRule.required("degree", description="Degree"),
        ValidationRule.required(
            "graduation_year", "graduationYear", description="Graduation Year"
        ),
    ),
)

_SKILLS = Section(
    title="skills",
    rule=ValidationRule.sequence("skills", "Skills Array"),
    entry_label="Skill Category",
    entry_rules=(
        ValidationRule.required("category", description="Name"),
        ValidationRule.sequence("items", "Items"),
    ),
    unit="skill categories",
)

STANDARD = RuleSet(
    name="standard",
    stages=(
        FieldGroup("personal information", (_NAME, _EMAIL)),
        Section(
            title="professional experience",
            rule=ValidationRule.sequence("experience", "Experience Array"),
            entry_label="Experience",
            entry_rules=_EXPERIENCE_ENTRY,
        ),
        _EDUCATION,
        _SKILLS,
    ),
)

STRICT = RuleSet(
    name="strict",
    stages=(
        FieldGroup("personal information", (_NAME, _EMAIL, _SUMMARY)),
        FieldGroup(
            "contact information",
            (
                ValidationRule.required("contact.phone", description="Phone Number"),
                ValidationRule.required("contact.location", description="Location"),
            ),
        ),
        Section(
            title="professional experience",
            rule=ValidationRule.sequence("experience", "Experience Array"),
            entry_label="Experience",
            entry_rules=_EXPERIENCE_ENTRY + (_EXPERIENCE_DATES,),
        ),
        _EDUCATION,
        _SKILLS,
    ),
)

RULE_SETS = {rule_set.name: rule_set for rule_set in (STANDARD, STRICT)}


def get_rule_set(name: str) -> RuleSet:
    try:
        return RULE_SETS[name.lower()]
    except KeyError as exc:
        raise ValueError(
            f"Unknown validation profile: {name}. Valid profiles: {sorted(RULE_SETS)}"
        ) from exc


def validate_resume(document: Any, profile: str = "standard", reporter=None) -> ValidationOutcome:
    """Validate a parsed resume document with the named profile."""
    return RuleEngine(get_rule_set(profile), reporter).validate(document)
