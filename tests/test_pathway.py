from app.services.demo_data import demo_profile
from app.services.pathway import generate_pathway_steps, progress_percentage, steps_for_timeline, timeline_progress
from app.services.profile_analysis import build_profile


def test_demo_pathway_includes_programming_step():
    steps = generate_pathway_steps(demo_profile())
    ids = [s["id"] for s in steps]
    assert "coding-skills" in ids
    assert len(steps) == 11
    assert steps[0]["description"].endswith("Could develop stronger presentation skills for university applications")
    assert steps[1]["description"] == "Join clubs related to Technology & Programming and Science & Research to build experience"
    internship = next(s for s in steps if s["id"] == "internship-experience")
    assert "software field" in internship["description"]


def test_empty_profile_pathway_uses_fallbacks():
    steps = generate_pathway_steps(build_profile({}))
    assert "coding-skills" not in [s["id"] for s in steps]
    assert "presentation skills" in steps[0]["description"]


def test_timeline_filter():
    steps = generate_pathway_steps(demo_profile())
    assert len(steps_for_timeline(steps, "all")) == len(steps)
    assert {s["id"] for s in steps_for_timeline(steps, "immediate")} == {"improve-weak-subjects", "join-relevant-clubs"}


def test_progress():
    steps = generate_pathway_steps(demo_profile())
    assert progress_percentage(steps, set()) == 0
    assert progress_percentage(steps, {"improve-weak-subjects"}) == round(100 / 11)
    assert timeline_progress(steps, {"improve-weak-subjects"}, "immediate") == 50
    assert progress_percentage([], {"anything"}) == 0
