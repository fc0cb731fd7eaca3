from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _clean_lines(values: list[str]) -> list[str]:
    cleaned: list[str] = []
    for value in values:
        text = (value or "").strip()
        if text:
            cleaned.append(text)
    return cleaned


def _as_url(value: str | None) -> str | None:
    raw = (value or "").strip()
    if not raw:
        return None
    return raw if raw.startswith("http") else f"https://{raw}"


class SkillCategory(str, Enum):
    FRONTEND = "Frontend"
    BACKEND = "Backend"
    DATABASE = "Database"
    MOBILE = "Mobile"
    DEVOPS = "DevOps"
    TOOLS = "Tools"
    LANGUAGES = "Languages"
    SOFT_SKILLS = "Soft Skills"
    OTHER = "Other"


class EducationType(str, Enum):
    CLASS_X = "Class X (10th)"
    CLASS_XII = "Class XII (12th)"
    DIPLOMA = "Diploma"
    DEGREE = "Degree (B.Tech, BCA, etc.)"
    POSTGRADUATE = "Post Graduate (M.Tech, MBA, etc.)"

    @property
    def is_school(self) -> bool:
        return self in {EducationType.CLASS_X, EducationType.CLASS_XII}

    @property
    def display_name(self) -> str:
        return {
            EducationType.CLASS_X: "Class X",
            EducationType.CLASS_XII: "Class XII",
            EducationType.DIPLOMA: "Diploma",
            EducationType.DEGREE: "Degree",
            EducationType.POSTGRADUATE: "Post Graduate",
        }[self]


class CountryCode(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    code: str
    dial_code: str

    @property
    def flag(self) -> str:
        """Regional-indicator emoji for the ISO code."""
        return "".join(chr(127397 + ord(char)) for char in self.code.upper() if "A" <= char <= "Z")


COUNTRY_CODES: tuple[CountryCode, ...] = tuple(
    CountryCode(name=name, code=code, dial_code=dial_code)
    for name, code, dial_code in (
        ("United States", "US", "+1"),
        ("United Kingdom", "GB", "+44"),
        ("India", "IN", "+91"),
        ("Canada", "CA", "+1"),
        ("Australia", "AU", "+61"),
        ("Germany", "DE", "+49"),
        ("France", "FR", "+33"),
        ("Japan", "JP", "+81"),
        ("China", "CN", "+86"),
        ("Brazil", "BR", "+55"),
        ("Mexico", "MX", "+52"),
        ("South Korea", "KR", "+82"),
        ("Italy", "IT", "+39"),
        ("Spain", "ES", "+34"),
        ("Netherlands", "NL", "+31"),
        ("Russia", "RU", "+7"),
        ("Singapore", "SG", "+65"),
        ("UAE", "AE", "+971"),
        ("Saudi Arabia", "SA", "+966"),
        ("South Africa", "ZA", "+27"),
        ("New Zealand", "NZ", "+64"),
        ("Ireland", "IE", "+353"),
        ("Sweden", "SE", "+46"),
        ("Switzerland", "CH", "+41"),
        ("Norway", "NO", "+47"),
        ("Denmark", "DK", "+45"),
        ("Finland", "FI", "+358"),
        ("Poland", "PL", "+48"),
        ("Belgium", "BE", "+32"),
        ("Austria", "AT", "+43"),
        ("Portugal", "PT", "+351"),
        ("Greece", "GR", "+30"),
        ("Israel", "IL", "+972"),
        ("Turkey", "TR", "+90"),
        ("Thailand", "TH", "+66"),
        ("Malaysia", "MY", "+60"),
        ("Indonesia", "ID", "+62"),
        ("Philippines", "PH", "+63"),
        ("Vietnam", "VN", "+84"),
        ("Pakistan", "PK", "+92"),
        ("Bangladesh", "BD", "+880"),
        ("Sri Lanka", "LK", "+94"),
        ("Nepal", "NP", "+977"),
        ("Egypt", "EG", "+20"),
        ("Nigeria", "NG", "+234"),
        ("Kenya", "KE", "+254"),
        ("Argentina", "AR", "+54"),
        ("Chile", "CL", "+56"),
        ("Colombia", "CO", "+57"),
        ("Peru", "PE", "+51"),
    )
)

DEFAULT_COUNTRY_CODE = CountryCode(name="India", code="IN", dial_code="+91")


class Education(BaseModel):
    type: EducationType = EducationType.DEGREE
    institution: str = ""
    degree: str = ""
    field: str = ""
    year: str = ""
    score: str = ""

    @property
    def formatted_score(self) -> str:
        if not self.score:
            return ""
        if self.type.is_school:
            if "%" in self.score or "/" in self.score:
                return self.score
            return f"{self.score}%"
        return f"CGPA: {self.score}"

    @property
    def display_title(self) -> str:
        if self.type.is_school or not self.degree:
            return self.type.display_name
        if self.field:
            return f"{self.degree} in {self.field}"
        return self.degree


class Experience(BaseModel):
    title: str = ""
    company: str = ""
    duration: str = ""
    bullets: list[str] = Field(default_factory=list)

    @field_validator("bullets")
    @classmethod
    def _clean_bullets(cls, value: list[str]) -> list[str]:
        return _clean_lines(value)


class Project(BaseModel):
    name: str = ""
    link: str = ""
    tools: str = ""
    bullets: list[str] = Field(default_factory=list)

    @field_validator("bullets")
    @classmethod
    def _clean_bullets(cls, value: list[str]) -> list[str]:
        return _clean_lines(value)

    @property
    def url(self) -> str | None:
        return _as_url(self.link)


class Certification(BaseModel):
    name: str = ""
    issuer: str = ""
    issue_date: str = ""
    expiry_date: str = ""
    link: str | None = None

    @property
    def url(self) -> str | None:
        return _as_url(self.link)


class ResumeRecord(BaseModel):
    """Structured résumé content as produced by the form or the OCR importer.

    The record is frozen: one scoring pass never observes a mutation.
    """

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    country_code: CountryCode = DEFAULT_COUNTRY_CODE
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""
    education: list[Education] = Field(default_factory=list)
    skills: dict[SkillCategory, list[str]] = Field(default_factory=dict)
    experience: list[Experience] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    certifications: list[Certification] | None = None

    @field_validator("skills")
    @classmethod
    def _clean_skills(cls, value: dict[SkillCategory, list[str]]) -> dict[SkillCategory, list[str]]:
        return {category: _clean_lines(names) for category, names in value.items()}

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def full_phone(self) -> str:
        if not self.phone:
            return ""
        return f"{self.country_code.dial_code} {self.phone}"

    @property
    def linkedin_url(self) -> str | None:
        return _as_url(self.linkedin)

    @property
    def github_url(self) -> str | None:
        return _as_url(self.github)

    def skills_in(self, category: SkillCategory) -> list[str]:
        return list(self.skills.get(category, []))

    def total_skill_count(self) -> int:
        return sum(len(names) for names in self.skills.values())

    def all_bullets(self) -> list[str]:
        bullets: list[str] = []
        for entry in self.experience:
            bullets.extend(entry.bullets)
        for project in self.projects:
            bullets.extend(project.bullets)
        return bullets
