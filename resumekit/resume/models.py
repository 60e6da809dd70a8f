"""Pydantic models for the rendered resume layout.

The layout is a projection of the raw resume document: legacy keys
(jobTitle, startDate, institution, graduationYear, summary) are folded into
their current names, contact details are gathered into ``personal_info``,
and missing sections become empty lists.
"""

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from resumekit.shared import RenderError
from resumekit.validation.paths import is_empty

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
CONTACT_FIELDS = ("phone", "location", "github", "linkedin")


def _plain(value: Any) -> Any:
    # YAML loads unquoted dates as date objects
    if isinstance(value, date):
        return value.isoformat()
    return value


def _clean_items(value: Any) -> Any:
    """Accept a single string as a one-item list and drop blank items."""
    if value is None:
        return []
    if isinstance(value, (str, date, int, float)):
        value = [value]
    if isinstance(value, list):
        return [_plain(item) for item in value if not is_empty(item)]
    return value


class LayoutModel(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_blank(cls, data: Any) -> Any:
        # Blank values fall back to defaults so alias alternatives can apply.
        if isinstance(data, Mapping):
            return {k: _plain(v) for k, v in data.items() if not is_empty(v)}
        return data


class PersonalInfo(LayoutModel):
    """Header block: name, summary and contact details."""

    name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    github: Optional[str] = None
    linkedin: Optional[str] = None
    summary: Optional[str] = None

    @property
    def contact_parts(self) -> list[str]:
        parts = [self.email, self.phone, self.location, self.github, self.linkedin]
        return [p for p in parts if p]


class ExperienceEntry(LayoutModel):
    company: Optional[str] = None
    role: Optional[str] = Field(None, validation_alias=AliasChoices("role", "jobTitle"))
    duration: Optional[str] = Field(None, validation_alias=AliasChoices("duration", "startDate"))
    end_date: Optional[str] = Field(None, validation_alias=AliasChoices("end_date", "endDate"))
    achievements: list[str] = []

    clean_achievements = field_validator("achievements", mode="before")(_clean_items)

    @property
    def period(self) -> str:
        if not self.duration:
            return format_date(self.end_date) if self.end_date else ""
        if self.end_date:
            return f"{format_date(self.duration)} - {format_date(self.end_date)}"
        return format_date(self.duration)


class EducationEntry(LayoutModel):
    school: Optional[str] = Field(None, validation_alias=AliasChoices("school", "institution"))
    degree: Optional[str] = None
    graduation_year: Optional[str] = Field(
        None, validation_alias=AliasChoices("graduation_year", "graduationYear")
    )


class SkillGroup(LayoutModel):
    category: Optional[str] = None
    items: list[str] = []

    clean_items = field_validator("items", mode="before")(_clean_items)


class ResumeLayout(LayoutModel):
    """Everything the PDF generator needs, in render-ready form."""

    personal_info: PersonalInfo = PersonalInfo()
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    skills: list[SkillGroup] = []
    generated_at: str = ""

    @classmethod
    def from_document(
        cls, document: Mapping, generated_at: Optional[datetime] = None
    ) -> "ResumeLayout":
        """Map a parsed resume document onto the layout without modifying it."""
        if not isinstance(document, Mapping):
            raise RenderError("resume data must be an object")

        contact = document.get("contact")
        if not isinstance(contact, Mapping):
            contact = {}

        personal_info = {field: contact.get(field) for field in CONTACT_FIELDS}
        personal_info.update(
            name=document.get("name"),
            email=document.get("email") or contact.get("email"),
            summary=document.get("professional_summary") or document.get("summary"),
        )

        try:
            return cls.model_validate(
                {
                    "personal_info": personal_info,
                    "experience": document.get("experience"),
                    "education": document.get("education"),
                    "skills": document.get("skills"),
                    "generated_at": format_timestamp(generated_at or datetime.now()),
                }
            )
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(x) for x in error['loc'])}: {error['msg']}"
                for error in e.errors()
            )
            raise RenderError(f"layout mapping failed ({problems})") from e


def format_timestamp(moment: datetime) -> str:
    """Format a generation time, e.g. 'October 18, 2026 at 09:30 AM'."""
    return moment.strftime("%B %d, %Y at %I:%M %p")


def format_date(date_str: str) -> str:
    """Format an ISO 8601 year-month ('2021-03') for display; pass others through."""
    parts = date_str.split("-")
    if len(parts) != 2 or not (parts[0].isdigit() and parts[1].isdigit()):
        return date_str

    month_idx = int(parts[1]) - 1
    if 0 <= month_idx < 12:
        return f"{MONTHS[month_idx]} {parts[0]}"
    return date_str
