import sys
import unittest
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.schemas.resume import (  # noqa: E402
    COUNTRY_CODES,
    Certification,
    CountryCode,
    Education,
    EducationType,
    Project,
    ResumeRecord,
    SkillCategory,
)


class ResumeRecordTests(unittest.TestCase):
    def test_empty_record_defaults(self):
        resume = ResumeRecord()
        self.assertEqual(resume.full_name, "")
        self.assertEqual(resume.total_skill_count(), 0)
        self.assertEqual(resume.all_bullets(), [])
        self.assertIsNone(resume.certifications)
        self.assertEqual(resume.country_code.dial_code, "+91")

    def test_unknown_skill_category_is_rejected(self):
        with self.assertRaises(ValidationError):
            ResumeRecord.model_validate({"skills": {"Quantum": ["Qiskit"]}})

    def test_skill_categories_parse_from_display_values(self):
        resume = ResumeRecord.model_validate({"skills": {"Soft Skills": ["Leadership"], "DevOps": ["Docker"]}})
        self.assertEqual(resume.skills_in(SkillCategory.SOFT_SKILLS), ["Leadership"])
        self.assertEqual(resume.skills_in(SkillCategory.MOBILE), [])
        self.assertEqual(resume.total_skill_count(), 2)

    def test_bullets_and_skills_are_trimmed_and_blank_entries_dropped(self):
        resume = ResumeRecord.model_validate(
            {
                "skills": {"Tools": ["  Git ", "", "   "]},
                "experience": [{"title": "Engineer", "bullets": ["  Built CI  ", "", "\t"]}],
                "projects": [{"name": "Site", "bullets": ["Designed layout"]}],
            }
        )
        self.assertEqual(resume.skills_in(SkillCategory.TOOLS), ["Git"])
        self.assertEqual(resume.all_bullets(), ["Built CI", "Designed layout"])

    def test_record_is_frozen(self):
        resume = ResumeRecord(first_name="Jane")
        with self.assertRaises(ValidationError):
            resume.first_name = "John"

    def test_contact_helpers(self):
        resume = ResumeRecord(
            first_name="Jane",
            last_name="Doe",
            phone="5551234567",
            country_code=CountryCode(name="Germany", code="DE", dial_code="+49"),
            linkedin="linkedin.com/in/jane",
            github="https://github.com/jane",
        )
        self.assertEqual(resume.full_name, "Jane Doe")
        self.assertEqual(resume.full_phone, "+49 5551234567")
        self.assertEqual(resume.linkedin_url, "https://linkedin.com/in/jane")
        self.assertEqual(resume.github_url, "https://github.com/jane")
        self.assertEqual(ResumeRecord().full_phone, "")
        self.assertIsNone(ResumeRecord().linkedin_url)

    def test_education_formatting(self):
        school = Education(type=EducationType.CLASS_X, institution="DPS", score="92")
        marks = Education(type=EducationType.CLASS_XII, institution="DPS", score="450/500")
        college = Education(type=EducationType.DEGREE, institution="IIT", degree="B.Tech", field="CSE", score="8.5")
        diploma = Education(type=EducationType.DIPLOMA, institution="Poly")

        self.assertEqual(school.formatted_score, "92%")
        self.assertEqual(marks.formatted_score, "450/500")
        self.assertEqual(college.formatted_score, "CGPA: 8.5")
        self.assertEqual(diploma.formatted_score, "")
        self.assertEqual(school.display_title, "Class X")
        self.assertEqual(college.display_title, "B.Tech in CSE")
        self.assertEqual(diploma.display_title, "Diploma")

    def test_links_and_country_flags(self):
        self.assertEqual(Project(name="CLI", link="github.com/jane/cli").url, "https://github.com/jane/cli")
        self.assertIsNone(Project(name="CLI").url)
        self.assertIsNone(Certification(name="CKA").url)
        self.assertEqual(CountryCode(name="India", code="IN", dial_code="+91").flag, "\U0001F1EE\U0001F1F3")
        self.assertEqual(len({country.code for country in COUNTRY_CODES}), len(COUNTRY_CODES))


if __name__ == "__main__":
    unittest.main()
