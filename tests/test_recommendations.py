from app.services.demo_data import demo_profile
from app.services.profile_analysis import build_profile
from app.services.recommendations import (
    calculate_university_match,
    fetch_career_data,
    generate_career_paths,
    get_recommended_colleges,
    get_recommended_careers,
)


def test_career_paths_from_interests_sorted_by_match():
    profile = build_profile({"interests": ["Arts & Design", "Technology & Programming", "Healthcare & Medicine"]})
    titles = [p["title"] for p in generate_career_paths(profile)]
    assert titles == ["Software Engineer", "Medical Doctor", "UX/UI Designer"]


def test_career_paths_from_strengths():
    # Grade A gives level 95: above the Science thresholds of 85 and 90.
    profile = build_profile({"subjects": {"science": "A"}})
    titles = [p["title"] for p in generate_career_paths(profile)]
    assert titles == ["Medical Doctor", "Biomedical Researcher"]


def test_leadership_trait_unlocks_business_path():
    profile = build_profile({"leadership": ["Club President"]})
    assert [p["title"] for p in generate_career_paths(profile)] == ["Business Analyst"]


def test_no_signals_no_paths():
    assert generate_career_paths(build_profile({})) == []


def test_static_tables_sorted_descending():
    scores = [c["match_score"] for c in get_recommended_colleges()]
    assert scores == sorted(scores, reverse=True)
    assert get_recommended_colleges()[0]["name"] == "Massachusetts Institute of Technology"
    assert get_recommended_careers()[0]["title"] == "Software Engineer"


def test_career_lookup_by_interest():
    careers = fetch_career_data(["Science & Research", "Technology & Programming", "Law & Justice"])
    assert [c["title"] for c in careers] == ["Software Engineer", "Data Scientist"]
    assert fetch_career_data(["Law & Justice"]) == []


def test_university_match_score():
    profile = build_profile({
        "gpa": "3.9",
        "interests": ["Technology & Programming", "Science & Research"],
        "leadership": ["Prefect"],
    })
    # 60 + 20 + 10 + 15 + 10 + 10 = 125, capped
    assert calculate_university_match(profile, "MIT") == 100

    modest = build_profile({"gpa": "3.6"})
    assert calculate_university_match(modest, "Stanford") == 73
    assert calculate_university_match(modest, "Elsewhere") == 70


def test_unparsable_gpa_counts_as_three():
    assert calculate_university_match(demo_profile(), "Other") == 60 + 15 + 10 + 10


def test_gpa_with_trailing_text_uses_leading_number():
    weighted = build_profile({"gpa": "3.9 (weighted)"})
    assert calculate_university_match(weighted, "Other") == 60 + 20 + 10
    assert calculate_university_match(build_profile({"gpa": "  .5"}), "Other") == 60
