import copy
import json
from pathlib import Path

import pytest
import yaml

REPO_ROOT = Path(__file__).resolve().parent.parent
SAMPLE_RESUME = REPO_ROOT / "data" / "resume.json"

MINIMAL_RESUME = {
    "name": "A",
    "email": "a@b.com",
    "experience": [{"company": "X", "role": "Eng"}],
    "education": [{"school": "S", "degree": "D", "graduation_year": 2020}],
    "skills": [{"category": "Lang", "items": ["X"]}],
}


class RecordingReporter:
    """Collects reporter calls as (level, message) pairs."""

    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def banner(self, title: str) -> None:
        self.messages.append(("banner", title))

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def lines(self, level: str) -> list[str]:
        return [m for lvl, m in self.messages if lvl == level]


@pytest.fixture
def minimal_resume() -> dict:
    return copy.deepcopy(MINIMAL_RESUME)


@pytest.fixture
def strict_resume(minimal_resume) -> dict:
    minimal_resume.update(
        professional_summary="Engineer.",
        contact={"phone": "555-0100", "location": "Remote"},
    )
    minimal_resume["experience"][0]["duration"] = "2020 - Present"
    return minimal_resume


@pytest.fixture
def sample_resume_path() -> Path:
    return SAMPLE_RESUME


@pytest.fixture
def sample_resume() -> dict:
    return json.loads(SAMPLE_RESUME.read_text(encoding="utf-8"))


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def write_resume(tmp_path):
    """Write a document to a resume file in tmp_path and return its path."""

    def _write(document, name: str = "resume.json") -> Path:
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        elif path.suffix == ".json":
            path.write_text(json.dumps(document), encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(document), encoding="utf-8")
        return path

    return _write
