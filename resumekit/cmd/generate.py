"""Resume to PDF generation command."""

import argparse
import traceback
from pathlib import Path

from resumekit.resume import ResumeGenerator, ResumeLayout, load_resume
from resumekit.shared import (
    ConsoleReporter,
    LoadError,
    PaperSize,
    RenderError,
    ValidationError,
    debug_enabled,
)
from resumekit.validation import RuleEngine, get_rule_set


def cmd_generate(args: argparse.Namespace) -> int:
    """Handle resume to PDF generation."""
    reporter = ConsoleReporter()
    input_path = Path(args.input)

    reporter.banner("Resume PDF Generation")

    try:
        paper_size = PaperSize.from_string(args.size)
        rule_set = get_rule_set(args.profile) if args.validate else None

        reporter.info(f"Loading resume from: {input_path.resolve()}")
        document = load_resume(input_path)
        reporter.success("Resume loaded successfully")

        if rule_set is not None:
            RuleEngine(rule_set, reporter).validate(document)

        reporter.info("Mapping resume data to layout...")
        layout = ResumeLayout.from_document(document)
        reporter.success("Layout prepared")

        generator = ResumeGenerator(
            font_name=args.font,
            paper_size=paper_size,
            timeout=args.timeout,
            reporter=reporter,
        )
        output_path = generator.generate(layout, Path(args.output))
    except (LoadError, ValidationError, RenderError, ValueError) as e:
        reporter.error(str(e))
        if debug_enabled(args.verbose):
            traceback.print_exc()
        return 1

    reporter.success(f"PDF generated successfully at: {output_path}")
    reporter.info(f"PDF file size: {output_path.stat().st_size / 1024:.2f} KB")
    return 0
