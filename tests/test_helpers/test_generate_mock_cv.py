"""test_generate_mock_cv.py
Test MockCvGenerator
"""

from cv_site.test_helpers.mock_cv_generator import (
    MockCvGenerator,
    SectionValues,
    SectionTemplates,
    DUMMY_CV_BLOCKS,
)

class TestGenerateMockCv:
    """Unit tests for the MockCvGenerator helper."""

    def test_generate_default_cv(self):
        """Should generate CV text using default values and templates."""
        text = MockCvGenerator().generate()
        assert isinstance(text, str)
        assert text.startswith("John Doe\n")
        assert len(text.strip()) > 80

    def test_lines_are_not_indented(self):
        """Template indentation never leaks into the output."""
        text = MockCvGenerator().generate()
        assert all(line == line.strip() for line in text.split("\n"))

    def test_generate_cv_with_custom_values(self):
        """Custom SectionValues should appear in the output text."""
        values = SectionValues(
            name="Alice Smith",
            email="alice@example.com",
            phone="+1 212-555-9876",
            skills="Python, NLP, Deep Learning",
            company_name="Globex",
        )
        text = MockCvGenerator(section_values=values).generate()
        for expected in ["Alice Smith", "alice@example.com", "+1 212-555-9876", "Python, NLP, Deep Learning", "Globex"]:
            assert expected in text

    def test_custom_templates_and_other_section(self):
        templates = SectionTemplates(
            education="CUSTOM EDUCATION BLOCK",
            other="Hobbies: chess, {name}",
        )
        text = MockCvGenerator(
            section_templates=templates,
            section_order=["header", "education", "other"],
        ).generate()
        assert text == "John Doe\n\nCUSTOM EDUCATION BLOCK\n\nHobbies: chess, John Doe"

    def test_unknown_placeholders_are_kept(self):
        templates = SectionTemplates(other="Ref: {unknown}")
        text = MockCvGenerator(section_templates=templates, section_order=["other"]).generate()
        assert text == "Ref: {unknown}"

    def test_empty_order_generates_nothing(self):
        assert MockCvGenerator(section_order=[]).generate() == ""

    def test_clone_overrides(self):
        original = MockCvGenerator()
        clone = original.clone(section_order=["header"])
        assert clone.generate() == "John Doe"
        assert original.section_order != ["header"]

    def test_every_block_variant_renders(self):
        for section, variants in DUMMY_CV_BLOCKS.items():
            for variant in variants:
                generator = MockCvGenerator(
                    section_templates=SectionTemplates(**{section: variant}),
                    section_order=[section],
                )
                assert generator.generate().strip()
