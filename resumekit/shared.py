import os
import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from resumekit.validation.report import ValidationFailure


DEFAULT_INPUT = Path("data") / "resume.json"
DEFAULT_OUTPUT = Path("output") / "resume.pdf"
RENDER_TIMEOUT = 30.0
BANNER_WIDTH = 39


class Color(str, Enum):
    SUCCESS = "\033[92m"
    ERROR = "\033[91m"
    INFO = "\033[96m"
    WARNING = "\033[93m"
    RESET = "\033[0m"


class FailureKind(str, Enum):
    MISSING_PARENT = "missing-parent"
    MISSING_FIELD = "missing-field"
    EMPTY_VALUE = "empty-value"
    WRONG_TYPE = "wrong-type"
    TOO_FEW_ITEMS = "too-few-items"


def colored(text: str, color: Color) -> str:
    return f"{color.value}{text}{Color.RESET.value}"


def echo(text: str, color: Color = Color.INFO, file: TextIO | None = None) -> None:
    print(colored(text, color), file=file or sys.stdout)


def debug_enabled(verbose: bool = False) -> bool:
    """Stack traces are shown with --verbose or a non-empty DEBUG variable."""
    return verbose or bool(os.environ.get("DEBUG"))


class ConsoleReporter:
    """Prints colored status lines; errors go to stderr."""

    def banner(self, title: str) -> None:
        line = "═" * BANNER_WIDTH
        echo(line, Color.INFO)
        echo(f"   {title}", Color.INFO)
        echo(line, Color.INFO)

    def info(self, message: str) -> None:
        echo(f"ℹ {message}", Color.INFO)

    def success(self, message: str) -> None:
        echo(f"✓ {message}", Color.SUCCESS)

    def warning(self, message: str) -> None:
        echo(f"⚠ {message}", Color.WARNING)

    def error(self, message: str) -> None:
        echo(f"❌ ERROR: {message}", Color.ERROR, file=sys.stderr)


class NullReporter:
    """Reporter that discards everything."""

    def banner(self, title: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


class InvalidPaperSizeError(ValueError):
    def __init__(self, size_str: str):
        super().__init__(
            f"Invalid paper size: {size_str}. Valid sizes: {[s.name for s in PaperSize]}"
        )


class InvalidPathError(ValueError):
    def __init__(self, path: str):
        super().__init__(f"Invalid field path: {path!r}")


class LoadError(Exception):
    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class ValidationError(Exception):
    def __init__(self, failure: "ValidationFailure"):
        self.failure = failure
        super().__init__(failure.message)

    @property
    def kind(self) -> FailureKind:
        return self.failure.kind

    @property
    def path(self) -> str:
        return self.failure.path


class RenderError(Exception):
    def __init__(self, reason: str):
        super().__init__(f"Failed to generate PDF: {reason}")


class RenderTimeoutError(RenderError):
    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"rendering did not finish within {timeout:g} seconds")


class PaperSize(Enum):
    A3 = (842, 1191)
    A4 = (595, 842)
    A5 = (420, 595)
    LETTER = (612, 792)
    LEGAL = (612, 1008)

    @property
    def width(self) -> int:
        return self.value[0]

    @property
    def height(self) -> int:
        return self.value[1]

    @staticmethod
    def from_string(size_str: str) -> "PaperSize":
        try:
            return PaperSize[size_str.upper()]
        except KeyError as exc:
            raise InvalidPaperSizeError(size_str) from exc
