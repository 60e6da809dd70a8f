"""Unit tests for the layout projection."""

import copy
from datetime import datetime

import pytest

from resumekit.resume.loader import load_resume
from resumekit.resume.models import ResumeLayout, format_date, format_timestamp
from resumekit.shared import RenderError


@pytest.mark.unit
def test_personal_info_projection(sample_resume):
    layout = ResumeLayout.from_document(sample_resume)
    info = layout.personal_info

    assert info.name == "Jordan Avery"
    assert info.email == "jordan.avery@example.com"
    assert info.phone == "+1 555 010 4477"
    assert info.summary.startswith("Backend engineer")
    assert info.contact_parts[0] == "jordan.avery@example.com"
    assert len(info.contact_parts) == 5


@pytest.mark.unit
def test_from_document_does_not_mutate_source(sample_resume):
    before = copy.deepcopy(sample_resume)
    ResumeLayout.from_document(sample_resume)
    assert sample_resume == before
    assert "personal_info" not in sample_resume


@pytest.mark.unit
def test_legacy_keys_are_folded():
    layout = ResumeLayout.from_document(
        {
            "name": "A",
            "summary": "Short summary",
            "experience": [{"company": "X", "jobTitle": "Eng", "startDate": "2019-03", "endDate": "2021-11"}],
            "education": [{"institution": "S", "degree": "D", "graduationYear": 2015}],
        }
    )
    entry = layout.experience[0]
    assert entry.role == "Eng"
    assert entry.period == "Mar 2019 - Nov 2021"
    assert layout.education[0].school == "S"
    assert layout.education[0].graduation_year == "2015"
    assert layout.personal_info.summary == "Short summary"


@pytest.mark.unit
def test_blank_role_falls_back_to_job_title():
    layout = ResumeLayout.from_document({"experience": [{"role": "", "jobTitle": "Eng"}]})
    assert layout.experience[0].role == "Eng"


@pytest.mark.unit
def test_missing_and_null_sections_become_empty():
    layout = ResumeLayout.from_document({"name": "Test", "experience": None, "skills": []})
    assert layout.experience == []
    assert layout.education == []
    assert layout.skills == []


@pytest.mark.unit
def test_email_from_contact():
    layout = ResumeLayout.from_document({"name": "A", "contact": {"email": "a@b.com"}})
    assert layout.personal_info.email == "a@b.com"


@pytest.mark.unit
def test_generated_at_is_stamped():
    layout = ResumeLayout.from_document({"name": "A"}, generated_at=datetime(2026, 10, 18, 9, 30))
    assert layout.generated_at == "October 18, 2026 at 09:30 AM"


@pytest.mark.unit
def test_non_mapping_document_is_a_render_error():
    with pytest.raises(RenderError):
        ResumeLayout.from_document(["not", "a", "resume"])


@pytest.mark.unit
def test_malformed_section_is_a_render_error():
    with pytest.raises(RenderError) as exc_info:
        ResumeLayout.from_document({"name": "A", "experience": "lots"})
    assert "layout mapping failed" in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        ("2021-03", "Mar 2021"),
        ("2021", "2021"),
        ("2020 - Present", "2020 - Present"),
        ("2021-13", "2021-13"),
        ("2019-2021", "2019-2021"),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected


@pytest.mark.unit
def test_format_timestamp_pm():
    assert format_timestamp(datetime(2026, 1, 5, 16, 5)) == "January 05, 2026 at 04:05 PM"


@pytest.mark.unit
def test_yaml_dates_become_strings(write_resume):
    path = write_resume(
        "name: A\n"
        "experience:\n"
        "  - company: X\n"
        "    role: Eng\n"
        "    startDate: 2020-01-15\n"
        "    endDate: 2021-03-01\n"
        "education:\n"
        "  - school: S\n"
        "    graduationYear: 2019-06-01\n",
        "resume.yaml",
    )
    layout = ResumeLayout.from_document(load_resume(path))

    entry = layout.experience[0]
    assert entry.duration == "2020-01-15"
    assert entry.end_date == "2021-03-01"
    assert layout.education[0].graduation_year == "2019-06-01"


@pytest.mark.unit
def test_null_achievements_are_dropped():
    layout = ResumeLayout.from_document(
        {"experience": [{"company": "X", "achievements": [None, "Shipped X", "  "]}]}
    )
    assert layout.experience[0].achievements == ["Shipped X"]


@pytest.mark.unit
def test_single_string_becomes_one_item():
    layout = ResumeLayout.from_document(
        {
            "experience": [{"company": "X", "achievements": "Led team"}],
            "skills": [{"category": "Lang", "items": "Python"}],
        }
    )
    assert layout.experience[0].achievements == ["Led team"]
    assert layout.skills[0].items == ["Python"]


@pytest.mark.unit
def test_null_skill_items_become_empty():
    layout = ResumeLayout.from_document({"skills": [{"category": "Lang", "items": None}]})
    assert layout.skills[0].items == []
