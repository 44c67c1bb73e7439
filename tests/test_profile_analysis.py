from app.services.profile_analysis import (
    build_profile,
    calculate_academic_strengths,
    calculate_completeness,
    group_strengths_by_category,
    humanize_subject,
    match_band,
)


def test_grade_levels():
    strengths = calculate_academic_strengths({"mathematics": "A+", "english": "B", "arts": "C", "science": ""})
    assert [(s.subject, s.level) for s in strengths] == [("Mathematics", 95), ("English", 85)]
    assert all(s.category == "Academic" for s in strengths)


def test_humanize_subject():
    assert humanize_subject("socialStudies") == "Social Studies"
    assert humanize_subject("social_studies") == "Social Studies"
    assert humanize_subject("informationTechnology") == "Information Technology"


def test_personality_traits_from_activities():
    profile = build_profile({
        "name": "Sam",
        "leadership": ["Class Captain"],
        "sports": ["Rowing"],
        "volunteering": ["Food Bank"],
        "clubs": ["Chess Club", "Math Club", "Drama Club"],
    })
    traits = {t.trait: t.level for t in profile.personality_traits}
    assert traits == {"Leadership": 90, "Teamwork": 85, "Empathy": 88, "Social Skills": 80}


def test_two_clubs_do_not_count_as_social_skills():
    profile = build_profile({"clubs": ["Chess Club", "Math Club"]})
    assert profile.personality_traits == []


def test_completeness():
    assert calculate_completeness({}) == 0
    half = {
        "name": "Sam", "grade": "Year 11", "age": "16", "school": "Hilltop",
        "subjects": {"mathematics": "A"}, "gpa": "3.9", "academic_rank": "Top 5%",
        "teacher_feedback": {"strengths": "", "improvements": "Focus", "recommendations": ""},
        "subjects_extra": "ignored",
    }
    assert calculate_completeness(half) == round(8 / 17 * 100)


def test_empty_feedback_mapping_is_not_filled():
    assert calculate_completeness({"teacher_feedback": {"strengths": "", "improvements": ""}}) == 0


def test_build_profile_ignores_unknown_keys():
    profile = build_profile({"name": "Sam", "favourite_colour": "blue"})
    assert profile.name == "Sam"
    assert not hasattr(profile, "favourite_colour")


def test_group_strengths_by_category():
    profile = build_profile({"subjects": {"science": "A"}, "leadership": ["Prefect"]})
    grouped = group_strengths_by_category(profile)
    assert [s.label for s in grouped["Academic"]] == ["Science"]
    assert [s.label for s in grouped["Personality"]] == ["Leadership"]


def test_match_band():
    assert match_band(92) == "high"
    assert match_band(90) == "high"
    assert match_band(85) == "medium"
    assert match_band(79) == "low"
