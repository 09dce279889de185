"""mock_cv_generator.py
Outputs plain CV text that simulates what the TextExtractor hands to the SectionParser.
"""
from dataclasses import dataclass
from typing import List, Optional
import copy
import textwrap

DEFAULT_SECTION_ORDER = [
    "header",
    "summary",
    "work_experience",
    "education",
    "projects",
    "skills",
    "contact",
]

# -------------------------------------------------------------------------
# DUMMY CV BLOCKS (to construct CVs from)
# The first entry of each list is the default used.
# -------------------------------------------------------------------------

DUMMY_CV_BLOCKS = {
    "header": [
        """{name}""",

        """{name}
        Greater New York Area""",
    ],

    "summary": [
        """SUMMARY
        Product leader with ten years of shipping analytics tools.
        Comfortable owning a roadmap end to end.""",

        """About Me
        Data scientist who likes turning messy logs into dashboards.""",
    ],

    "work_experience": [
        """WORK EXPERIENCE
        Director of Product Management
        {company_name}
        May 2018 - current Colorado Springs, CO
        Streamlined the customer support process, boosting satisfaction ratings by 27%.""",

        """Employment
        MARCH 2021 - CURRENT
        Data Scientist | {company_name} | San Diego, CA
        Pioneered segmentation in Google Analytics 4, leading to 3 successful campaigns.""",
    ],

    "education": [
        """EDUCATION
        M.S. Computer Science, San Diego State University
        February 2016 - June 2018""",

        """Academic Background
        M.A. English, University of Texas at San Antonio
        January 2021 - May 2023""",
    ],

    "projects": [
        """PROJECTS
        h2oFiltration, Group Member 2021
        Designed a water filtration system for a rural school.""",

        """ACHIEVEMENTS
        2022 GREW ANNUAL REVENUE BY 11%""",
    ],

    "skills": [
        """SKILLS
        {skills}""",

        """Technologies
        {skills}""",
    ],

    "contact": [
        """CONTACT
        {email}
        {phone}""",
    ],
}


# -------------------------------------------------------------------------
# MockCvGenerator INPUT DATA MODELS
# -------------------------------------------------------------------------
@dataclass
class SectionValues:
    """
    Fillable values substituted into the section templates.

    Attributes:
        name: Candidate name placed on the first line.
        email: Email address used in the contact block.
        phone: Phone number used in the contact block.
        skills: Skills text inserted below the skills heading.
        company_name: Company used in the work experience block.
    """
    name: str = "John Doe"
    email: str = "john.doe@example.com"
    phone: str = "123-456-7890"
    skills: str = "Python, SQL\nPower BI"
    company_name: str = "Comcast"


@dataclass
class SectionTemplates:
    """
    Text templates for every section, using `str.format()` placeholders such
    as `{name}` or `{skills}`.
    """
    header: str = DUMMY_CV_BLOCKS["header"][0]
    summary: str = DUMMY_CV_BLOCKS["summary"][0]
    work_experience: str = DUMMY_CV_BLOCKS["work_experience"][0]
    education: str = DUMMY_CV_BLOCKS["education"][0]
    projects: str = DUMMY_CV_BLOCKS["projects"][0]
    skills: str = DUMMY_CV_BLOCKS["skills"][0]
    contact: str = DUMMY_CV_BLOCKS["contact"][0]
    other: Optional[str] = None  # only used if provided


# -------------------------------------------------------------------------
# Main generator class
# -------------------------------------------------------------------------
class MockCvGenerator:
    """
    Generate realistic mock CV text for testing purposes.

    Builds the CV from predefined templates and values in `section_order`,
    separating sections with blank lines.

    Attributes:
        section_values (SectionValues): Fillable field values for substitution.
        section_templates (SectionTemplates): Templates for each CV section.
        section_order (List[str]): The sequence of sections to include.
    """

    def __init__(
        self,
        section_values: Optional[SectionValues] = None,
        section_templates: Optional[SectionTemplates] = None,
        section_order: Optional[List[str]] = None,
    ):
        self.section_values = section_values or SectionValues()
        self.section_templates = section_templates or SectionTemplates()
        self.section_order = DEFAULT_SECTION_ORDER if section_order is None else section_order

    def _render(self, template: str) -> str:
        # Unknown placeholders are left as-is
        try:
            text = template.format(**vars(self.section_values))
        except KeyError:
            text = template
        lines = textwrap.dedent(text).split("\n")
        return "\n".join(line.strip() for line in lines)

    # ----------------------
    # Public interface
    # ----------------------
    def generate(self) -> str:
        """
        Build the CV text.

        Returns:
            str: The assembled CV, or "" if `section_order` is empty.
        """
        parts = []
        for section in self.section_order:
            template = getattr(self.section_templates, section, None)
            if not template:
                continue
            parts.append(self._render(template))
        return "\n\n".join(parts)

    def clone(
        self,
        section_values: Optional[SectionValues] = None,
        section_templates: Optional[SectionTemplates] = None,
        section_order: Optional[List[str]] = None,
    ) -> "MockCvGenerator":
        """Create a copy of this generator, optionally overriding specific attributes."""
        new_gen = copy.deepcopy(self)
        if section_values is not None:
            new_gen.section_values = section_values
        if section_templates is not None:
            new_gen.section_templates = section_templates
        if section_order is not None:
            new_gen.section_order = section_order
        return new_gen
