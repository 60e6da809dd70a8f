"""Resume validation command."""

import argparse
import json
import traceback
from pathlib import Path

from resumekit.resume import load_resume
from resumekit.shared import (
    ConsoleReporter,
    LoadError,
    NullReporter,
    ValidationError,
    debug_enabled,
)
from resumekit.validation import RuleEngine, ValidationOutcome, get_rule_set


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle resume validation."""
    console = ConsoleReporter()
    reporter = NullReporter() if args.json else console
    input_path = Path(args.input)

    reporter.banner("Resume Validation")
    reporter.info(f"Loading resume from: {input_path.resolve()}")

    try:
        engine = RuleEngine(get_rule_set(args.profile), reporter)
        document = load_resume(input_path)
        reporter.success("Resume loaded successfully")

        if args.json:
            outcome = engine.check(document)
            print(json.dumps(outcome.to_dict(), indent=2))
            return 0 if outcome.ok else 1

        engine.validate(document)
    except (LoadError, ValidationError, ValueError) as e:
        if args.json:
            print(json.dumps(_error_payload(e), indent=2))
        else:
            console.error(str(e))
        if debug_enabled(args.verbose):
            traceback.print_exc()
        return 1

    reporter.success("All validation checks passed for PDF generation!")
    return 0


def _error_payload(error: Exception) -> dict:
    if isinstance(error, ValidationError):
        return ValidationOutcome(failure=error.failure).to_dict()
    return {"valid": False, "error": {"kind": "load-error", "message": str(error)}}
