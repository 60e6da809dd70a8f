"""Command implementations for the resumekit CLI."""

from resumekit.cmd.generate import cmd_generate
from resumekit.cmd.validate import cmd_validate

__all__ = [
    "cmd_generate",
    "cmd_validate",
]
