# services/pathway.py
from typing import Any, Dict, Iterable, List

from app.services.profile_analysis import StudentProfile

TIMELINES = ["immediate", "short-term", "medium-term", "long-term"]

TIMELINE_LABELS = {
    "immediate": "Next 3 months",
    "short-term": "3-12 months",
    "medium-term": "1-2 years",
    "long-term": "2+ years",
}

_TECH_KEYWORDS = ("technology", "engineering", "programming")


def _step(step_id, title, description, step_type, timeline, priority, category, estimated_time, resources):
    return {
        "id": step_id,
        "title": title,
        "description": description,
        "type": step_type,
        "timeline": timeline,
        "priority": priority,
        "category": category,
        "estimated_time": estimated_time,
        "resources": resources,
    }


def generate_pathway_steps(profile: StudentProfile) -> List[Dict[str, Any]]:
    """Ordered roadmap of steps from the next three months to two-plus years out."""
    improvements = profile.teacher_feedback.improvements or "Work on presentation skills and communication"
    top_interests = " and ".join(profile.interests[:2]) or "your interests"
    top_subjects = " and ".join(s.subject for s in profile.academic_strengths[:2]) or "your strongest subjects"
    aspiration = profile.career_aspiration.split()
    aspiration_field = aspiration[0].lower() if aspiration else "your chosen"

    steps = [
        _step("improve-weak-subjects", "Focus on Growth Areas",
              f"Based on teacher feedback: {improvements}",
              "academic", "immediate", "high", "Academic Excellence", "2-3 months",
              ["Khan Academy", "Study groups", "Teacher office hours"]),
        _step("join-relevant-clubs", "Expand Extracurricular Activities",
              f"Join clubs related to {top_interests} to build experience",
              "activity", "immediate", "high", "Leadership & Activities", "1 month to join",
              ["School club directory", "Club meetings", "Activity fairs"]),
        _step("advanced-courses", "Enroll in Advanced Courses",
              f"Take AP/Honors courses in {top_subjects}",
              "academic", "short-term", "high", "Academic Excellence", "Next semester",
              ["Guidance counselor", "Course catalog", "Prerequisites check"]),
    ]

    if any(k in interest.lower() for interest in profile.interests for k in _TECH_KEYWORDS):
        steps.append(
            _step("coding-skills", "Develop Programming Skills",
                  "Learn Python and web development fundamentals",
                  "skill", "short-term", "high", "Technical Skills", "6-8 months",
                  ["Codecademy", "freeCodeCamp", "GitHub", "Local coding bootcamps"]))

    steps += [
        _step("leadership-role", "Take on Leadership Position",
              "Seek leadership role in clubs or start a new initiative",
              "activity", "short-term", "medium", "Leadership & Activities", "3-6 months",
              ["Current club leadership", "Faculty advisors", "Student government"]),
        _step("internship-experience", "Gain Real-World Experience",
              f"Pursue internship or job shadowing in {aspiration_field} field",
              "milestone", "medium-term", "high", "Career Preparation", "Summer/semester",
              ["Indeed internships", "LinkedIn", "Network connections", "Career services"]),
        _step("standardized-tests", "Excel in Standardized Tests",
              "Prepare for and take SAT/ACT with target scores for desired colleges",
              "milestone", "medium-term", "high", "College Preparation", "6-12 months prep",
              ["Khan Academy SAT", "Official prep books", "Practice tests", "Tutoring"]),
        _step("portfolio-building", "Build Portfolio/Projects",
              "Create a portfolio showcasing your best work and projects",
              "skill", "medium-term", "medium", "Career Preparation", "8-12 months",
              ["GitHub", "Personal website", "Design tools", "Project documentation"]),
        _step("college-applications", "Apply to Target Colleges",
              "Complete applications for colleges aligned with career goals",
              "application", "long-term", "high", "College Preparation", "6 months process",
              ["Common Application", "College websites", "Application essays", "Letters of recommendation"]),
        _step("scholarship-search", "Secure Scholarships & Funding",
              "Apply for scholarships and financial aid opportunities",
              "application", "long-term", "high", "Financial Planning", "Ongoing process",
              ["FAFSA", "Scholarship databases", "Local organizations", "College financial aid"]),
        _step("career-network", "Build Professional Network",
              "Connect with professionals in your field of interest",
              "skill", "long-term", "medium", "Career Preparation", "Ongoing",
              ["LinkedIn", "Professional associations", "Alumni networks", "Industry events"]),
    ]
    return steps


def steps_for_timeline(steps: List[Dict[str, Any]], timeline: str) -> List[Dict[str, Any]]:
    if timeline == "all":
        return list(steps)
    return [s for s in steps if s["timeline"] == timeline]


def progress_percentage(steps: List[Dict[str, Any]], completed: Iterable[str]) -> int:
    """Share of steps whose id is in completed, as a rounded percentage."""
    if not steps:
        return 0
    done = set(completed)
    return round(sum(1 for s in steps if s["id"] in done) / len(steps) * 100)


def timeline_progress(steps: List[Dict[str, Any]], completed: Iterable[str], timeline: str) -> int:
    return progress_percentage(steps_for_timeline(steps, timeline), completed)
