from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from resume_ats.schemas.resume import ResumeRecord

MessageKind = Literal["suggestion", "praise"]

ACTION_VERBS: tuple[str, ...] = (
    "developed",
    "designed",
    "built",
    "created",
    "implemented",
    "led",
    "managed",
    "improved",
    "achieved",
    "integrated",
    "deployed",
    "automated",
    "optimized",
    "analyzed",
)
# Hyphenated compounds ("built-in", "re-designed") do not count as the verb.
_ACTION_VERB_RE = re.compile(r"(?<![\w-])(" + "|".join(ACTION_VERBS) + r")(?![\w-])", re.IGNORECASE)

MIN_SKILLS = 3

MSG_FULL_NAME = "Add your full name (first and last)."
MSG_EMAIL = "Add your email address."
MSG_PHONE = "Add your phone number."
MSG_PROFILE_LINKS = "Add a LinkedIn or GitHub profile to boost credibility."
MSG_CERTIFICATIONS_MISSING = "Consider adding certifications to validate your skills."
MSG_CERTIFICATIONS_PRESENT = "Good job adding certifications! They validate your expertise."
MSG_EDUCATION_MISSING = "Add at least one education entry."
MSG_EDUCATION_INCOMPLETE = "Complete all education entries with institution and degree."
MSG_SKILLS = f"Add at least {MIN_SKILLS} skills."
MSG_EXPERIENCE = "Add at least one experience or project."
MSG_ACTION_VERBS = "Start bullet points with strong action verbs (e.g., Developed, Managed)."


@dataclass(frozen=True, slots=True)
class RuleResult:
    rule_id: str
    message: str | None = None
    kind: MessageKind = "suggestion"

    @property
    def triggered(self) -> bool:
        return self.message is not None


def _blank(value: str | None) -> bool:
    return not (value or "").strip()


def has_action_verb(bullet: str) -> bool:
    return bool(_ACTION_VERB_RE.search(bullet or ""))


def _check_full_name(resume: ResumeRecord) -> RuleResult:
    if _blank(resume.first_name) or _blank(resume.last_name):
        return RuleResult("full_name", MSG_FULL_NAME)
    return RuleResult("full_name")


def _check_email(resume: ResumeRecord) -> RuleResult:
    if _blank(resume.email):
        return RuleResult("email", MSG_EMAIL)
    return RuleResult("email")


def _check_phone(resume: ResumeRecord) -> RuleResult:
    if _blank(resume.phone):
        return RuleResult("phone", MSG_PHONE)
    return RuleResult("phone")


def _check_profile_links(resume: ResumeRecord) -> RuleResult:
    if _blank(resume.linkedin) and _blank(resume.github):
        return RuleResult("profile_links", MSG_PROFILE_LINKS)
    return RuleResult("profile_links")


def _check_certifications(resume: ResumeRecord) -> RuleResult:
    if resume.certifications:
        return RuleResult("certifications", MSG_CERTIFICATIONS_PRESENT, kind="praise")
    return RuleResult("certifications", MSG_CERTIFICATIONS_MISSING)


def _check_education_presence(resume: ResumeRecord) -> RuleResult:
    if not resume.education:
        return RuleResult("education_presence", MSG_EDUCATION_MISSING)
    return RuleResult("education_presence")


def _check_education_completeness(resume: ResumeRecord) -> RuleResult:
    incomplete = [entry for entry in resume.education if _blank(entry.institution) or _blank(entry.degree)]
    if incomplete:
        return RuleResult("education_completeness", MSG_EDUCATION_INCOMPLETE)
    return RuleResult("education_completeness")


def _check_skills_count(resume: ResumeRecord) -> RuleResult:
    if resume.total_skill_count() < MIN_SKILLS:
        return RuleResult("skills_count", MSG_SKILLS)
    return RuleResult("skills_count")


def _check_experience_presence(resume: ResumeRecord) -> RuleResult:
    if not resume.experience and not resume.projects:
        return RuleResult("experience_presence", MSG_EXPERIENCE)
    return RuleResult("experience_presence")


def _check_action_verbs(resume: ResumeRecord) -> RuleResult:
    bullets = resume.all_bullets()
    if bullets and not any(has_action_verb(bullet) for bullet in bullets):
        return RuleResult("action_verbs", MSG_ACTION_VERBS)
    return RuleResult("action_verbs")


# Order is the presentation order of the feedback.
RULES: tuple[Callable[[ResumeRecord], RuleResult], ...] = (
    _check_full_name,
    _check_email,
    _check_phone,
    _check_profile_links,
    _check_certifications,
    _check_education_presence,
    _check_education_completeness,
    _check_skills_count,
    _check_experience_presence,
    _check_action_verbs,
)


def evaluate_rule_results(resume: ResumeRecord) -> list[RuleResult]:
    return [rule(resume) for rule in RULES]


def evaluate_rules(resume: ResumeRecord) -> list[str]:
    return [result.message for result in evaluate_rule_results(resume) if result.message is not None]
