"""PDF generation for resume layouts using reportlab.

Renders a ResumeLayout to a fixed sequence of styled regions: header,
professional summary, experience, skills and education. The platypus
build runs on a daemon thread and is awaited with a timeout so a stuck
build cannot hang the command.
"""

import asyncio
import threading
from io import BytesIO
from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import (
    ListFlowable,
    ListItem,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
)

from resumekit.resume.models import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeLayout,
    SkillGroup,
)
from resumekit.shared import (
    NullReporter,
    PaperSize,
    RENDER_TIMEOUT,
    RenderError,
    RenderTimeoutError,
)


MARGIN_H = 0.75 * inch
MARGIN_V = 0.5 * inch
FONT_SIZE_NAME = 24
FONT_SIZE_SECTION = 14
FONT_SIZE_BODY = 10
FONT_SIZE_SMALL = 9

FONT_FAMILIES = {
    "helvetica": ("Helvetica", "Helvetica-Oblique"),
    "times": ("Times-Roman", "Times-Italic"),
    "courier": ("Courier", "Courier-Oblique"),
}


def _text(value) -> str:
    return escape(str(value))


class ResumeGenerator:
    """Generates PDF resumes from ResumeLayout models."""

    def __init__(
        self,
        font_name: str = "helvetica",
        paper_size: PaperSize = PaperSize.A4,
        timeout: float = RENDER_TIMEOUT,
        reporter=None,
    ):
        self.reporter = reporter or NullReporter()
        self.paper_size = paper_size
        self.timeout = timeout
        self.font_family, self.footer_font = self._setup_font(font_name)
        self.styles = self._create_styles()

    def _setup_font(self, font_name: str) -> tuple[str, str]:
        """Map a font option onto one of the built-in PDF families."""
        family = FONT_FAMILIES.get(font_name.lower())
        if family is None:
            self.reporter.warning(f"Font '{font_name}' not available, using Helvetica")
            return FONT_FAMILIES["helvetica"]
        return family

    def _create_styles(self) -> dict[str, ParagraphStyle]:
        """Create paragraph styles for different resume elements."""
        normal = getSampleStyleSheet()["Normal"]

        def style(name: str, size: float, leading: float = 1.2, **overrides) -> ParagraphStyle:
            return ParagraphStyle(
                name,
                parent=normal,
                fontName=self.font_family,
                fontSize=size,
                leading=size * leading,
                **overrides,
            )

        return {
            "name": style("Name", FONT_SIZE_NAME, alignment=TA_CENTER, spaceAfter=6),
            "contact": style("Contact", FONT_SIZE_SMALL, 1.4, alignment=TA_CENTER, spaceAfter=12),
            "section_header": style(
                "SectionHeader", FONT_SIZE_SECTION, textColor="#1f3a5f", spaceBefore=12, spaceAfter=6
            ),
            "entry_title": style("EntryTitle", FONT_SIZE_BODY + 1, spaceBefore=6, spaceAfter=2),
            "entry_subtitle": style("EntrySubtitle", FONT_SIZE_SMALL, textColor="gray", spaceAfter=4),
            "body": style("Body", FONT_SIZE_BODY, 1.4, alignment=TA_LEFT, spaceAfter=4),
            "bullet": style("Bullet", FONT_SIZE_BODY, 1.3, leftIndent=6, spaceAfter=1),
        }

    def build_story(self, layout: ResumeLayout) -> list:
        """Lay out the resume as a list of platypus flowables."""
        story = []

        self._add_header(story, layout.personal_info)

        if layout.personal_info.summary:
            self._add_summary(story, layout.personal_info.summary)

        if layout.experience:
            self._add_experience(story, layout.experience)

        if layout.skills:
            self._add_skills(story, layout.skills)

        if layout.education:
            self._add_education(story, layout.education)

        if not story:
            story.append(Spacer(1, 1))

        return story

    def generate(self, layout: ResumeLayout, output_path: Path | str) -> Path:
        """Render the layout and write the PDF; return the output path."""
        output_path = Path(output_path)
        pdf_bytes = asyncio.run(self.render(layout))

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(pdf_bytes)
        except OSError as e:
            raise RenderError(f"cannot write {output_path} ({e.strerror})") from e

        return output_path

    async def render(self, layout: ResumeLayout) -> bytes:
        """Build the PDF in memory, giving up after ``self.timeout`` seconds."""
        loop = asyncio.get_running_loop()
        done = loop.create_future()
        buffer = BytesIO()

        def settle(error: Exception | None) -> None:
            if done.done():
                return
            if error is None:
                done.set_result(None)
            else:
                done.set_exception(error)

        def work() -> None:
            error = None
            try:
                self._build(layout, buffer)
            except Exception as e:
                error = e
            try:
                loop.call_soon_threadsafe(settle, error)
            except RuntimeError:
                # loop already closed after a timeout
                pass

        try:
            self.reporter.info("Rendering PDF document...")
            # daemon thread so an abandoned build never holds up interpreter exit
            threading.Thread(target=work, name="resumekit-render", daemon=True).start()
            await asyncio.wait_for(done, timeout=self.timeout)
            return buffer.getvalue()
        except asyncio.TimeoutError as e:
            raise RenderTimeoutError(self.timeout) from e
        except RenderError:
            raise
        except Exception as e:
            raise RenderError(str(e)) from e
        finally:
            buffer.close()

    def _build(self, layout: ResumeLayout, buffer: BytesIO) -> None:
        name = layout.personal_info.name
        doc = SimpleDocTemplate(
            buffer,
            pagesize=(self.paper_size.width, self.paper_size.height),
            leftMargin=MARGIN_H,
            rightMargin=MARGIN_H,
            topMargin=MARGIN_V,
            bottomMargin=MARGIN_V,
            title=f"{name} - Resume" if name else "Resume",
            author=name,
            creator="resumekit",
        )

        def draw_footer(canvas, document):
            if not layout.generated_at:
                return
            canvas.saveState()
            canvas.setFont(self.footer_font, 7)
            canvas.setFillGray(0.5)
            canvas.drawRightString(
                self.paper_size.width - MARGIN_H,
                MARGIN_V / 2,
                f"Generated on {layout.generated_at}",
            )
            canvas.restoreState()

        doc.build(self.build_story(layout), onFirstPage=draw_footer, onLaterPages=draw_footer)

    def _add_header(self, story: list, info: PersonalInfo) -> None:
        """Add header section with name and contact line."""
        if info.name:
            story.append(Paragraph(_text(info.name), self.styles["name"]))

        contact_parts = [_text(p) for p in info.contact_parts]
        if contact_parts:
            story.append(Paragraph(" | ".join(contact_parts), self.styles["contact"]))

    def _add_summary(self, story: list, summary: str) -> None:
        story.append(Paragraph("Professional Summary", self.styles["section_header"]))
        story.append(Paragraph(_text(summary), self.styles["body"]))

    def _add_experience(self, story: list, entries: list[ExperienceEntry]) -> None:
        """Add work experience section."""
        story.append(Paragraph("Experience", self.styles["section_header"]))

        for entry in entries:
            if not entry.company and not entry.role:
                continue

            title = f"<b>{_text(entry.role)}</b>" if entry.role else ""
            if entry.company:
                company = _text(entry.company)
                title += f" at {company}" if title else f"<b>{company}</b>"

            story.append(Paragraph(title, self.styles["entry_title"]))

            if entry.period:
                story.append(Paragraph(_text(entry.period), self.styles["entry_subtitle"]))

            if entry.achievements:
                self._add_bullet_list(story, entry.achievements)

    def _add_skills(self, story: list, skills: list[SkillGroup]) -> None:
        """Add skills section."""
        story.append(Paragraph("Skills", self.styles["section_header"]))

        for group in skills:
            if not group.category and not group.items:
                continue

            items = ", ".join(_text(item) for item in group.items)
            if group.category:
                text = f"<b>{_text(group.category)}:</b> {items}" if items else _text(group.category)
            else:
                text = items

            story.append(Paragraph(text, self.styles["body"]))

    def _add_education(self, story: list, entries: list[EducationEntry]) -> None:
        """Add education section."""
        story.append(Paragraph("Education", self.styles["section_header"]))

        for entry in entries:
            if not entry.school and not entry.degree:
                continue

            title = f"<b>{_text(entry.degree)}</b>" if entry.degree else ""
            if entry.school:
                school = _text(entry.school)
                title += f" - {school}" if title else school

            story.append(Paragraph(title, self.styles["entry_title"]))

            if entry.graduation_year:
                story.append(
                    Paragraph(
                        f"Graduated {_text(entry.graduation_year)}",
                        self.styles["entry_subtitle"],
                    )
                )

    def _add_bullet_list(self, story: list, items: list[str]) -> None:
        """Add a bulleted list to the story."""
        list_items = [ListItem(Paragraph(_text(item), self.styles["bullet"])) for item in items]
        story.append(
            ListFlowable(
                list_items,
                bulletType="bullet",
                start="circle",
                leftIndent=6,
                bulletFontSize=6,
                bulletOffsetY=-2,
            )
        )
