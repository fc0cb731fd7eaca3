import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.schemas.resume import ResumeRecord  # noqa: E402
from resume_ats.schemas.rubric import BulletLengthBonus, ContentDepthWeights, ContactWeights, ScoringRubric  # noqa: E402
from resume_ats.scoring.calculator import ScoreCalculator  # noqa: E402
from resume_ats.semantic.scorer import SemanticScorer  # noqa: E402
from resume_ats.vocabulary import get_default_vocabulary  # noqa: E402
from tests.fakes import STRONG_WORDS, StrongWordEmbeddingService, WordLemmatizer, complete_resume_payload  # noqa: E402


def _calculator(rubric=None, embedding_service="default") -> ScoreCalculator:
    service = StrongWordEmbeddingService(set(STRONG_WORDS)) if embedding_service == "default" else embedding_service
    scorer = SemanticScorer(
        embedding_service=service,
        lemmatizer=WordLemmatizer(),
        vocabulary=get_default_vocabulary().terms(),
    )
    return ScoreCalculator(scorer, rubric=rubric)


class ScoreCalculatorTests(unittest.TestCase):
    def test_empty_record_scores_zero(self):
        breakdown = _calculator().breakdown(ResumeRecord())
        self.assertEqual(breakdown.total, 0)
        self.assertEqual(
            (breakdown.contact, breakdown.education, breakdown.experience, breakdown.skills, breakdown.content_depth),
            (0, 0, 0, 0, 0),
        )

    def test_complete_record_scores_one_hundred(self):
        breakdown = _calculator().breakdown(ResumeRecord.model_validate(complete_resume_payload()))
        self.assertEqual(breakdown.contact, 15)
        self.assertEqual(breakdown.education, 10)
        self.assertEqual(breakdown.experience, 15)
        self.assertEqual(breakdown.skills, 20)
        self.assertEqual(breakdown.content_depth, 40)
        self.assertEqual(breakdown.total, 100)

    def test_five_skills_alone_score_the_skills_maximum(self):
        resume = ResumeRecord.model_validate(
            {"skills": {"Frontend": ["React", "CSS"], "Backend": ["Python"], "Tools": ["Git", "Jira"]}}
        )
        self.assertEqual(_calculator().ats_score(resume), 20)

    def test_skill_tiers(self):
        calculator = _calculator()
        cases = {0: 0, 1: 5, 2: 5, 3: 10, 4: 10, 5: 20, 9: 20}
        for count, expected in cases.items():
            resume = ResumeRecord.model_validate({"skills": {"Other": [f"skill{idx}" for idx in range(count)]}})
            self.assertEqual(calculator.breakdown(resume).skills, expected, msg=f"{count} skills")

    def test_contact_points_per_field(self):
        resume = ResumeRecord(first_name="Jane", last_name="Doe", github="github.com/jane", location="Pune")
        self.assertEqual(_calculator().breakdown(resume).contact, 9)

    def test_experience_and_projects_points(self):
        experience_only = ResumeRecord.model_validate({"experience": [{"title": "Engineer"}]})
        projects_only = ResumeRecord.model_validate({"projects": [{"name": "CLI"}]})
        self.assertEqual(_calculator().breakdown(experience_only).experience, 10)
        self.assertEqual(_calculator().breakdown(projects_only).experience, 5)

    def test_content_depth_floors_semantic_score(self):
        resume = ResumeRecord.model_validate(
            {"experience": [{"title": "Engineer", "bullets": [" ".join(STRONG_WORDS[:5])]}]}
        )
        breakdown = _calculator().breakdown(resume)
        self.assertEqual(breakdown.semantic.match_count, 5)
        self.assertEqual(breakdown.content_depth, 12)

    def test_content_depth_is_zero_without_bullets(self):
        resume = ResumeRecord.model_validate({"experience": [{"title": "Engineer", "bullets": ["  ", ""]}]})
        breakdown = _calculator().breakdown(resume)
        self.assertEqual(breakdown.content_depth, 0)
        self.assertEqual(breakdown.semantic.keywords_considered, [])

    def test_missing_embedding_service_zeroes_content_depth_only(self):
        resume = ResumeRecord.model_validate(complete_resume_payload())
        breakdown = _calculator(embedding_service=None).breakdown(resume)
        self.assertEqual(breakdown.content_depth, 0)
        self.assertEqual(breakdown.total, 60)
        self.assertTrue(breakdown.semantic.degraded)

    def test_rubric_weights_are_data(self):
        rubric = ScoringRubric(contact=ContactWeights(max_points=20, email=20))
        resume = ResumeRecord(email="jane@example.com")
        self.assertEqual(_calculator(rubric=rubric).ats_score(resume), 20)

    def test_bucket_caps_apply(self):
        rubric = ScoringRubric(contact=ContactWeights(max_points=5))
        resume = ResumeRecord.model_validate(complete_resume_payload(education=[], experience=[], projects=[], skills={}))
        self.assertEqual(_calculator(rubric=rubric).ats_score(resume), 5)

    def test_total_is_clamped_to_max_score(self):
        rubric = ScoringRubric(max_score=100, contact=ContactWeights(max_points=200, full_name=200))
        resume = ResumeRecord(first_name="Jane", last_name="Doe")
        self.assertEqual(_calculator(rubric=rubric).ats_score(resume), 100)

    def test_bullet_length_bonus_is_disabled_by_default(self):
        resume = ResumeRecord.model_validate(
            {"experience": [{"title": "Engineer", "bullets": ["Shipped payment APIs quickly"]}]}
        )
        self.assertEqual(_calculator(embedding_service=None).breakdown(resume).content_depth, 0)

    def test_bullet_length_bonus_when_enabled(self):
        rubric = ScoringRubric(
            content_depth=ContentDepthWeights(bullet_length=BulletLengthBonus(enabled=True, points=10, target_words=8))
        )
        resume = ResumeRecord.model_validate(
            {"experience": [{"title": "Engineer", "bullets": ["Shipped payment APIs quickly"]}]}
        )
        self.assertEqual(_calculator(rubric=rubric, embedding_service=None).breakdown(resume).content_depth, 5)


if __name__ == "__main__":
    unittest.main()
