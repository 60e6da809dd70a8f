"""Resume loading, layout mapping and PDF rendering.

Reads JSON/YAML resume documents, projects them onto a fixed layout and
renders that layout to a PDF with reportlab.
"""

from resumekit.resume.generator import ResumeGenerator
from resumekit.resume.loader import load_resume
from resumekit.resume.models import ResumeLayout

__all__ = ["ResumeLayout", "ResumeGenerator", "load_resume"]
