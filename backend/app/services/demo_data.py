# services/demo_data.py
from app.services.profile_analysis import StudentProfile, Strength


def demo_profile() -> StudentProfile:
    """Sample Year 11 student shown by the 'Try demo' button."""
    return StudentProfile(
        name="Alex Chen",
        grade="Year 11",
        age="16",
        school="Melbourne Secondary College",
        subjects={
            "mathematics": "A",
            "chemistry": "A+",
            "physics": "A",
            "english": "B+",
            "economics": "B",
            "informationTechnology": "A+",
        },
        gpa="ATAR Est. 95+",
        academic_rank="Top 10%",
        clubs=["Science Society", "Robotics Club", "Coding Club", "Debate Team"],
        leadership=["Science Society President", "Peer Tutor"],
        interests=["Technology & Programming", "Science & Research", "Engineering", "Innovation"],
        career_aspiration="Software Engineer or Data Scientist",
        work_style="team",
        teacher_feedback={
            "strengths": "Exceptional analytical thinking, excellent in STEM subjects, natural leadership qualities",
            "improvements": "Could develop stronger presentation skills for university applications",
            "recommendations": "Consider Specialist Mathematics and Software Development for Year 12. "
                               "Explore university early entry programs.",
        },
        parent_observations="Very curious about technology trends, spends time on coding projects and online courses",
        family_expectations="Supportive of STEM career path, encourage university education",
        academic_strengths=[
            Strength(subject="Mathematics", level=95, category="Academic"),
            Strength(subject="Chemistry", level=98, category="Academic"),
            Strength(subject="Information Technology", level=98, category="Academic"),
            Strength(subject="Physics", level=95, category="Academic"),
        ],
        personality_traits=[
            Strength(trait="Leadership", level=90, category="Personality"),
            Strength(trait="Problem Solving", level=95, category="Personality"),
            Strength(trait="Teamwork", level=85, category="Personality"),
            Strength(trait="Innovation", level=92, category="Personality"),
        ],
        profile_completeness=95,
    )
