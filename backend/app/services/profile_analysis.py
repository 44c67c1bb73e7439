# services/profile_analysis.py
"""Builds a StudentProfile from raw form input.

The derived fields (academic strengths, personality traits, completeness)
are computed once, at submission, from fixed rules.
"""
import re
from typing import Any, Dict, List

from pydantic import BaseModel, Field


class Strength(BaseModel):
    subject: str | None = None
    trait: str | None = None
    level: int
    category: str

    @property
    def label(self) -> str:
        return self.subject or self.trait or ""


class TeacherFeedback(BaseModel):
    strengths: str = ""
    improvements: str = ""
    recommendations: str = ""


class StudentProfile(BaseModel):
    # Basic info
    name: str = ""
    grade: str = ""
    age: str = ""
    school: str = ""

    # Academic performance
    subjects: Dict[str, str] = Field(default_factory=dict)
    gpa: str = ""
    academic_rank: str = ""

    # Extracurricular activities
    sports: List[str] = Field(default_factory=list)
    clubs: List[str] = Field(default_factory=list)
    leadership: List[str] = Field(default_factory=list)
    volunteering: List[str] = Field(default_factory=list)

    # Interests and preferences
    interests: List[str] = Field(default_factory=list)
    career_aspiration: str = ""
    work_style: str = ""

    # Teacher and parent input
    teacher_feedback: TeacherFeedback = Field(default_factory=TeacherFeedback)
    parent_observations: str = ""
    family_expectations: str = ""

    # Derived at submission
    academic_strengths: List[Strength] = Field(default_factory=list)
    personality_traits: List[Strength] = Field(default_factory=list)
    profile_completeness: int = 0


FORM_FIELDS = [
    "name", "grade", "age", "school", "subjects", "gpa", "academic_rank",
    "sports", "clubs", "leadership", "volunteering", "interests",
    "career_aspiration", "work_style", "teacher_feedback",
    "parent_observations", "family_expectations",
]

INTEREST_OPTIONS = [
    "Technology & Programming", "Science & Research", "Arts & Design",
    "Business & Entrepreneurship", "Healthcare & Medicine", "Education & Teaching",
    "Sports & Fitness", "Music & Entertainment", "Environmental Science",
    "Engineering", "Social Work", "Law & Justice",
]

ACTIVITY_OPTIONS = [
    "Student Council", "Debate Team", "Science Club", "Drama Club",
    "Math Club", "Art Club", "Music Band", "Chess Club", "Robotics Team",
    "Environmental Club", "Community Service", "Sports Teams",
]

SUBJECT_KEYS = ["mathematics", "science", "english", "social_studies", "arts", "languages"]

GRADE_OPTIONS = ["A+", "A", "B+", "B", "C+", "C", "D", "F"]

_GRADE_LEVELS = {"A+": 95, "A": 95, "B+": 85, "B": 85}


def humanize_subject(key: str) -> str:
    """'socialStudies' / 'social_studies' -> 'Social Studies'."""
    spaced = re.sub(r"(?<=[a-z])(?=[A-Z])", " ", key).replace("_", " ")
    return " ".join(word.capitalize() for word in spaced.split())


def calculate_academic_strengths(subjects: Dict[str, str]) -> List[Strength]:
    strengths = []
    for subject, grade in subjects.items():
        level = _GRADE_LEVELS.get((grade or "").strip().upper())
        if level is not None:
            strengths.append(Strength(subject=humanize_subject(subject), level=level, category="Academic"))
    return strengths


def analyze_personality_traits(data: Dict[str, Any]) -> List[Strength]:
    traits = []
    if data.get("leadership"):
        traits.append(Strength(trait="Leadership", level=90, category="Personality"))
    if data.get("sports"):
        traits.append(Strength(trait="Teamwork", level=85, category="Personality"))
    if data.get("volunteering"):
        traits.append(Strength(trait="Empathy", level=88, category="Personality"))
    if len(data.get("clubs") or []) > 2:
        traits.append(Strength(trait="Social Skills", level=80, category="Personality"))
    return traits


def _is_filled(value: Any) -> bool:
    if isinstance(value, dict):
        return any(_is_filled(v) for v in value.values())
    if isinstance(value, (list, tuple, set)):
        return len(value) > 0
    if isinstance(value, str):
        return value.strip() != ""
    return value is not None


def calculate_completeness(data: Dict[str, Any]) -> int:
    """Percentage of top-level form fields that carry a value."""
    filled = sum(1 for field in FORM_FIELDS if _is_filled(data.get(field)))
    return round(filled / len(FORM_FIELDS) * 100)


def build_profile(form_data: Dict[str, Any]) -> StudentProfile:
    """Turns submitted form data into a profile with derived fields filled in."""
    return StudentProfile(
        **{k: v for k, v in form_data.items() if k in FORM_FIELDS},
        academic_strengths=calculate_academic_strengths(form_data.get("subjects") or {}),
        personality_traits=analyze_personality_traits(form_data),
        profile_completeness=calculate_completeness(form_data),
    )


def group_strengths_by_category(profile: StudentProfile) -> Dict[str, List[Strength]]:
    grouped: Dict[str, List[Strength]] = {}
    for strength in profile.academic_strengths + profile.personality_traits:
        grouped.setdefault(strength.category, []).append(strength)
    return grouped


def match_band(score: float) -> str:
    """Display band for a match score: 'high' (>=90), 'medium' (>=80) or 'low'."""
    if score >= 90:
        return "high"
    if score >= 80:
        return "medium"
    return "low"
