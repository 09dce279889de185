"""test_section_parser.py
Run tests on SectionParser
"""
import pytest

from cv_site.models import CvSections
from cv_site.test_helpers.mock_cv_generator import (
    MockCvGenerator,
    SectionTemplates,
    SectionValues,
    DUMMY_CV_BLOCKS,
)

from cv_site.parse_classes.section_parser.section_parser import (
    DEFAULT_NAME_PLACEHOLDER,
    SectionParser,
    split_lines,
)

# Ten lines without any heading keyword
NO_HEADING_LINES = [
    "Jane Doe",
    "Line one of the intro",
    "Line two of the intro",
    "Line three of the intro",
    "Line four of the intro",
    "Line five of the intro",
    "Initech 2019 to 2023",
    "Built the billing pipeline",
    "Globex 2015 to 2019",
    "Maintained the reporting stack",
]


class TestSectionParserBasics:
    """Core behaviour of SectionParser.parse."""

    def test_raw_is_input_verbatim(self):
        """`raw` always holds the input, whitespace and all."""
        text = "  Jane Doe\r\n\n\nEXPERIENCE\n  Did X  \n"
        assert SectionParser().parse(text).raw == text

    def test_returns_cv_sections(self):
        sections = SectionParser().parse("Jane Doe")
        assert isinstance(sections, CvSections)
        assert sections.to_dict()["name"] == "Jane Doe"

    def test_simple_headings(self):
        """Sections run from the line after their heading to the next heading."""
        text = "Jane Doe\nBuilt things.\nEXPERIENCE\nDid X\nEDUCATION\nBA"
        sections = SectionParser().parse(text)

        assert sections.name == "Jane Doe"
        assert sections.summary == "Built things. EXPERIENCE Did X EDUCATION BA"
        assert sections.experience == "Did X"
        assert sections.education == "BA"
        assert sections.skills == ""
        assert sections.projects == ""

    def test_no_headings_uses_fallbacks(self):
        """Without headings: summary is lines 1..5, experience is lines 6..min(len, 60)."""
        text = "\n".join(NO_HEADING_LINES)
        sections = SectionParser().parse(text)

        assert sections.name == "Jane Doe"
        assert sections.summary == " ".join(NO_HEADING_LINES[1:6])
        assert sections.experience == "\n".join(NO_HEADING_LINES[6:10])

    def test_experience_fallback_is_capped_at_sixty_lines(self):
        lines = ["Jane Doe"] + [f"Entry number {i}" for i in range(1, 100)]
        sections = SectionParser().parse("\n".join(lines))
        assert sections.experience == "\n".join(lines[6:60])

    def test_short_text_without_headings_has_no_experience(self):
        sections = SectionParser().parse("Jane Doe\nA\nB\nC")
        assert sections.experience == ""

    def test_empty_text(self):
        sections = SectionParser().parse("")
        assert sections.name == DEFAULT_NAME_PLACEHOLDER
        assert sections.summary == ""
        assert sections.experience == ""
        assert sections.raw == ""

    def test_blank_lines_and_padding_are_ignored(self):
        text = "\n\n   Jane Doe   \n\n  SKILLS \n\n Python, SQL \n"
        sections = SectionParser().parse(text)
        assert sections.name == "Jane Doe"
        assert sections.skills == "Python, SQL"


class TestNameHeuristic:
    """Tests for the candidate name heuristic."""

    def test_skips_noise_lines(self):
        """URLs and script remnants are never taken as the name."""
        text = "https://share.example/abc\nvar x = 1\nJane Doe\nEngineer"
        assert SectionParser().parse(text).name == "Jane Doe"

    def test_skips_short_and_long_lines(self):
        text = "CV\n" + "one two three four five six seven eight nine\n" + "Jane Doe"
        assert SectionParser().parse(text).name == "Jane Doe"

    def test_only_scans_first_six_lines(self):
        text = "\n".join(["ab"] * 6 + ["Jane Doe"])
        assert SectionParser().parse(text).name == DEFAULT_NAME_PLACEHOLDER

    def test_summary_starts_after_the_name(self):
        text = "https://share.example/abc\nJane Doe\nBuilds billing systems."
        sections = SectionParser().parse(text)
        assert sections.name == "Jane Doe"
        assert sections.summary == "Builds billing systems."

    def test_summary_window_runs_through_headings(self):
        """Without a summary heading the five lines after the name are used as-is."""
        text = "Jane Doe\nBuilt things.\nEXPERIENCE\nDid X\nEDUCATION\nBA\nSKILLS\nPython"
        sections = SectionParser().parse(text)
        assert sections.summary == "Built things. EXPERIENCE Did X EDUCATION BA"
        assert sections.experience == "Did X"


class TestHeadingMatching:
    """Keyword matching rules."""

    @pytest.mark.parametrize(
        "heading, field",
        [
            ("Work History", "experience"),
            ("Employment", "experience"),
            ("Academic Background", "education"),
            ("Technologies", "skills"),
            ("Selected Projects", "projects"),
            ("Awards & Certifications", "achievements"),
            ("Contact", "contact"),
        ]
    )
    def test_keyword_variants(self, heading, field):
        text = f"Jane Doe\n{heading}\nSome content line"
        assert getattr(SectionParser().parse(text), field) == "Some content line"

    def test_matching_is_case_insensitive(self):
        sections = SectionParser().parse("Jane Doe\nexperience:\nDid X")
        assert sections.experience == "Did X"

    def test_first_heading_wins(self):
        """Only the first matching heading line starts a section."""
        text = "Jane Doe\nSKILLS\nPython\nEDUCATION\nBA\nSKILLS\nSQL"
        assert SectionParser().parse(text).skills == "Python"

    def test_summary_heading_is_used_when_present(self):
        text = "Jane Doe\nLondon\nSUMMARY\nBuilds billing systems.\nLoves SQL.\nEXPERIENCE\nDid X"
        sections = SectionParser().parse(text)
        assert sections.summary == "Builds billing systems. Loves SQL."

    def test_keyword_inside_prose_ends_a_section_by_default(self):
        """Substring matching treats any line mentioning a keyword as a heading."""
        text = "Jane Doe\nEXPERIENCE\nDid X\nTaught a course on project planning\nDid Y"
        assert SectionParser().parse(text).experience == "Did X"

    def test_strict_headings_ignore_prose(self):
        """With strict_headings, long or sentence-like lines are not headings."""
        text = (
            "Jane Doe\n"
            "I have experience shipping products.\n"
            "EXPERIENCE\n"
            "Did X\n"
            "Taught a course on project planning\n"
            "Did Y"
        )
        sections = SectionParser(strict_headings=True).parse(text)
        assert sections.experience == "Did X\nTaught a course on project planning\nDid Y"
        assert sections.summary.startswith("I have experience shipping products. EXPERIENCE")

    def test_custom_keywords(self):
        keywords = {"experience": ("career",), "skills": ("toolbox",)}
        text = "Jane Doe\nCAREER\nDid X\nTOOLBOX\nPython"
        sections = SectionParser(section_keywords=keywords).parse(text)
        assert sections.experience == "Did X"
        assert sections.skills == "Python"
        assert sections.education == ""


class TestMockCvParsing:
    """End to end parsing of generated CV text."""

    def test_default_mock_cv(self, mock_cv_text):
        sections = SectionParser().parse(mock_cv_text)

        assert sections.name == "John Doe"
        assert sections.summary.startswith("Product leader")
        assert "Director of Product Management" in sections.experience
        assert sections.education.startswith("M.S. Computer Science")
        assert sections.projects.startswith("h2oFiltration")
        assert sections.skills == "Python, SQL\nPower BI"
        assert sections.contact == "john.doe@example.com\n123-456-7890"
        assert sections.achievements == ""

    def test_alternate_templates(self):
        templates = SectionTemplates(
            summary=DUMMY_CV_BLOCKS["summary"][1],
            work_experience=DUMMY_CV_BLOCKS["work_experience"][1],
            education=DUMMY_CV_BLOCKS["education"][1],
            projects=DUMMY_CV_BLOCKS["projects"][1],
            skills=DUMMY_CV_BLOCKS["skills"][1],
        )
        values = SectionValues(name="Alice Smith", company_name="Globex")
        text = MockCvGenerator(section_values=values, section_templates=templates).generate()
        sections = SectionParser().parse(text)

        assert sections.name == "Alice Smith"
        assert sections.summary.startswith("Data scientist")
        assert "Globex" in sections.experience
        assert sections.achievements == "2022 GREW ANNUAL REVENUE BY 11%"
        assert sections.projects == ""


def test_split_lines():
    assert split_lines(" a \r\n\n b\n  \n") == ["a", "b"]
