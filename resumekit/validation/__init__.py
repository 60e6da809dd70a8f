"""Field-path validation of parsed resume documents.

Rules walk dotted paths through nested mappings and arrays and stop at
the first violation, which is raised as a ValidationError.
"""

from resumekit.validation.paths import FieldPath, ResolutionError, resolve, resolve_first
from resumekit.validation.report import ValidationFailure, ValidationOutcome, format_failure
from resumekit.validation.rules import (
    STANDARD,
    STRICT,
    RuleEngine,
    RuleKind,
    RuleSet,
    ValidationRule,
    check_required_field,
    check_sequence,
    get_rule_set,
    validate_resume,
)

__all__ = [
    "FieldPath",
    "ResolutionError",
    "resolve",
    "resolve_first",
    "ValidationFailure",
    "ValidationOutcome",
    "format_failure",
    "STANDARD",
    "STRICT",
    "RuleEngine",
    "RuleKind",
    "RuleSet",
    "ValidationRule",
    "check_required_field",
    "check_sequence",
    "get_rule_set",
    "validate_resume",
]
