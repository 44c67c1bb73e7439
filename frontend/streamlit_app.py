import streamlit as st
import logging
import uuid
from dotenv import load_dotenv
from typing import Any, Dict, List

from api_client import GuidanceApiClient
from app.services.demo_data import demo_profile
from app.services.market_data import (
    MARKET_TRENDS,
    automation_risk,
    get_data_sources,
    get_emerging_fields,
    get_industry_news,
    get_market_conditions,
    relevant_fields,
)
from app.services.pathway import TIMELINES, TIMELINE_LABELS, generate_pathway_steps, progress_percentage, steps_for_timeline, timeline_progress
from app.services.profile_analysis import (
    ACTIVITY_OPTIONS,
    GRADE_OPTIONS,
    INTEREST_OPTIONS,
    SUBJECT_KEYS,
    StudentProfile,
    build_profile,
    group_strengths_by_category,
    humanize_subject,
    match_band,
)
from app.services.recommendations import (
    calculate_university_match,
    fetch_career_data,
    generate_career_paths,
    get_learning_resources,
    get_recommended_careers,
    get_recommended_colleges,
)

# Load environment variables at the very top
load_dotenv()

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

BAND_ICONS = {"high": "🟢", "medium": "🔵", "low": "🟡"}
SPORT_OPTIONS = ["Football", "Basketball", "Cricket", "Swimming", "Athletics", "Tennis", "Netball", "Rowing"]
LEADERSHIP_OPTIONS = ["Class Captain", "Student Council Member", "Club President", "Team Captain", "Peer Tutor", "Prefect"]
VOLUNTEER_OPTIONS = ["Community Service", "Tutoring", "Environmental Cleanup", "Animal Shelter", "Food Bank", "Aged Care Visits"]
WORK_STYLES = ["", "team", "independent", "mixed"]

# Page setup
st.set_page_config(page_title="Student Career Guidance", layout="wide")

# --- Session State Initialization ---
if "profile" not in st.session_state:
    st.session_state.profile = None
if "student_id" not in st.session_state:
    st.session_state.student_id = str(uuid.uuid4())
if "completed_steps" not in st.session_state:
    st.session_state.completed_steps = set()
if "api" not in st.session_state:
    st.session_state.api = GuidanceApiClient()


def submit_profile(profile: StudentProfile):
    st.session_state.profile = profile
    st.session_state.completed_steps = set()
    saved = st.session_state.api.save_analysis(st.session_state.student_id, profile.model_dump())
    if not saved:
        logger.warning("Analysis could not be stored on the backend; continuing locally")


def logout():
    st.session_state.profile = None
    st.session_state.completed_steps = set()


# --- UI Functions for the input form ---

def show_landing_and_form():
    """Landing page with the five-step profile form and the demo shortcut."""
    st.title("🎓 Student Career Guidance Platform")
    st.markdown(
        "Career pathway analysis for secondary students based on academic performance, "
        "interests, and market trends."
    )

    if st.button("Try Demo with Sample Data", key="demo"):
        submit_profile(demo_profile())
        st.rerun()

    with st.form("profile_form"):
        basic_tab, academic_tab, activities_tab, interests_tab, feedback_tab = st.tabs(
            ["👤 Basic", "📚 Academic", "🏆 Activities", "❤️ Interests", "👥 Feedback"]
        )

        with basic_tab:
            name = st.text_input("Full Name", placeholder="Enter your full name")
            grade = st.selectbox("Current Grade", ["", "Year 9", "Year 10", "Year 11", "Year 12"])
            age = st.text_input("Age")
            school = st.text_input("School")

        with academic_tab:
            subjects = {}
            cols = st.columns(3)
            for i, key in enumerate(SUBJECT_KEYS):
                with cols[i % 3]:
                    subjects[key] = st.selectbox(humanize_subject(key), [""] + GRADE_OPTIONS, key=f"subject_{key}")
            gpa = st.text_input("GPA", placeholder="e.g. 3.7")
            academic_rank = st.text_input("Academic Rank", placeholder="e.g. Top 10%")

        with activities_tab:
            sports = st.multiselect("Sports", SPORT_OPTIONS)
            clubs = st.multiselect("Clubs", ACTIVITY_OPTIONS)
            leadership = st.multiselect("Leadership Roles", LEADERSHIP_OPTIONS)
            volunteering = st.multiselect("Volunteering", VOLUNTEER_OPTIONS)

        with interests_tab:
            interests = st.multiselect("Interests", INTEREST_OPTIONS)
            career_aspiration = st.text_input("Career Aspiration")
            work_style = st.selectbox("Preferred Work Style", WORK_STYLES)

        with feedback_tab:
            teacher_strengths = st.text_area("Teacher: Strengths")
            teacher_improvements = st.text_area("Teacher: Areas for Improvement")
            teacher_recommendations = st.text_area("Teacher: Recommendations")
            parent_observations = st.text_area("Parent Observations")
            family_expectations = st.text_area("Family Expectations")

        submitted = st.form_submit_button("Analyze My Profile")

    if submitted:
        if not name:
            st.error("Please enter at least your name.")
            return
        form_data = {
            "name": name, "grade": grade, "age": age, "school": school,
            "subjects": {k: v for k, v in subjects.items() if v},
            "gpa": gpa, "academic_rank": academic_rank,
            "sports": sports, "clubs": clubs, "leadership": leadership, "volunteering": volunteering,
            "interests": interests, "career_aspiration": career_aspiration, "work_style": work_style,
            "teacher_feedback": {
                "strengths": teacher_strengths,
                "improvements": teacher_improvements,
                "recommendations": teacher_recommendations,
            },
            "parent_observations": parent_observations,
            "family_expectations": family_expectations,
        }
        submit_profile(build_profile(form_data))
        st.rerun()


# --- Result views ---

def show_pathway(profile: StudentProfile):
    st.subheader("🗺️ Your Career Pathway")
    steps = generate_pathway_steps(profile)
    completed = st.session_state.completed_steps

    st.progress(progress_percentage(steps, completed) / 100, text=f"Overall progress: {progress_percentage(steps, completed)}%")

    timeline = st.radio("Timeline", ["all"] + TIMELINES, horizontal=True,
                        format_func=lambda t: "All" if t == "all" else TIMELINE_LABELS[t])
    if timeline != "all":
        st.caption(f"{TIMELINE_LABELS[timeline]}: {timeline_progress(steps, completed, timeline)}% complete")

    for step in steps_for_timeline(steps, timeline):
        done = st.checkbox(f"**{step['title']}** ({step['priority']} priority, {step['estimated_time']})",
                           value=step["id"] in completed, key=f"step_{step['id']}")
        if done:
            completed.add(step["id"])
        else:
            completed.discard(step["id"])
        st.caption(step["description"])
        if step["resources"]:
            st.caption("Resources: " + ", ".join(step["resources"]))


def show_strengths(profile: StudentProfile):
    st.subheader("🧠 Strengths Analysis")
    st.metric("Profile completeness", f"{profile.profile_completeness}%")

    for category, strengths in group_strengths_by_category(profile).items():
        st.markdown(f"**{category}**")
        for strength in strengths:
            st.progress(strength.level / 100, text=f"{strength.label} ({strength.level})")

    st.markdown("### Suggested Career Paths")
    paths = generate_career_paths(profile)
    if not paths:
        st.info("Add interests or subject grades to see suggested career paths.")
    for path in paths:
        icon = BAND_ICONS[match_band(path["match_percentage"])]
        with st.expander(f"{icon} {path['title']} ({path['match_percentage']}% match)"):
            st.write(path["description"])
            st.write(f"**Timeframe:** {path['timeframe']}  |  **Market demand:** {path['market_demand']}")
            st.write("**Required strengths:** " + ", ".join(path["required_strengths"]))
            st.write("**Suggested subjects:** " + ", ".join(path["suggested_subjects"]))
            st.write("**Colleges:** " + ", ".join(path["colleges"]))
            st.write("**Courses:** " + ", ".join(path["courses"]))


def show_colleges_and_careers(profile: StudentProfile):
    st.subheader("🏛️ Colleges, Careers & Learning")
    colleges_tab, careers_tab, resources_tab = st.tabs(["Colleges", "Careers", "Learning Resources"])

    with colleges_tab:
        for college in get_recommended_colleges():
            icon = BAND_ICONS[match_band(college["match_score"])]
            with st.expander(f"{icon} {college['name']} ({college['match_score']}% match)"):
                st.write(f"📍 {college['location']}  |  Rank #{college['ranking']}  |  "
                         f"Acceptance {college['acceptance_rate']}  |  Tuition {college['tuition']}")
                st.write("**Programs:** " + ", ".join(college["programs"]))
                st.write(college["campus_life"])
        st.caption(f"Your profile match with MIT: {calculate_university_match(profile, 'MIT')}%  |  "
                   f"Stanford: {calculate_university_match(profile, 'Stanford')}%")

    with careers_tab:
        careers = fetch_career_data(profile.interests) or get_recommended_careers()
        for career in careers:
            icon = BAND_ICONS[match_band(career["match_score"])]
            with st.expander(f"{icon} {career['title']} ({career['match_score']}% match)"):
                st.write(career["description"])
                st.write(f"**Salary:** {career['average_salary']}  |  **Growth:** {career['growth_rate']}")
                st.write(f"**Education:** {career['education']}")
                st.write("**Skills:** " + ", ".join(career["skills"]))

    with resources_tab:
        for resource in get_learning_resources():
            st.markdown(f"**{resource['title']}** · {resource['type']} · {resource['provider']}")
            st.caption(f"{resource['level']} · {resource['duration']} · ⭐ {resource['rating']} · {resource['description']}")


def show_market_trends(profile: StudentProfile):
    st.subheader("📈 Market Trends & Future Outlook")
    suggested = relevant_fields(profile.interests)
    options: List[str] = suggested + [f for f in MARKET_TRENDS if f not in suggested]
    field = st.selectbox("Field", options, format_func=lambda f: MARKET_TRENDS[f]["field"])

    trend: Dict[str, Any] = st.session_state.api.fetch_market_trends(field)[0]
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Growth Rate", f"{trend['growth']}%")
    c2.metric("Job Demand", trend["demand"])
    c3.metric("Job Openings", f"{trend['job_openings']:,}")
    c4.metric("Automation", automation_risk(trend["automation"]))
    st.write(f"**Average salary:** {trend['avg_salary']}")
    st.write(trend["future_outlook"])
    st.write("**Key skills:** " + ", ".join(trend["key_skills"]))
    st.write("**Emerging roles:** " + ", ".join(trend["emerging_roles"]))

    st.markdown("### Emerging Fields")
    for emerging in get_emerging_fields():
        with st.expander(f"{emerging['name']} ({emerging['growth_rate']})"):
            st.write(emerging["description"])
            st.write(f"**Timeline:** {emerging['timeline']}")
            st.write("**Skills needed:** " + ", ".join(emerging["skills_needed"]))
            st.write("**Example roles:** " + ", ".join(emerging["examples"]))
            for tip in emerging["preparation_tips"]:
                st.markdown(f"- {tip}")

    st.markdown("### Industry News")
    for item in get_industry_news(field):
        st.markdown(f"**{item['title']}** ({item['source']}, {item['date']})")
        st.caption(item["summary"])

    conditions = get_market_conditions()
    st.markdown("### Hot Skills")
    for hot in conditions["hot_skills"]:
        st.write(f"{hot['skill']}: {hot['demand']} ({hot['growth']})")


def show_data_sources():
    """Backend reachability and the external sources the tables are modelled on."""
    st.subheader("🛰️ Data Sources")
    backend_ok = st.session_state.api.health()
    st.write(f"{'✅' if backend_ok else '❌'} Guidance backend ({st.session_state.api.base_url})")
    for source in get_data_sources():
        icon = {"online": "✅", "warning": "⚠️"}.get(source["status"], "❌")
        st.write(f"{icon} **{source['name']}**: {source['description']}")
        st.caption(source["url"])


def show_student_profile(profile: StudentProfile):
    st.subheader("👥 Student Profile")
    show_data_sources()

    st.markdown("### Academic Overview")
    if profile.subjects:
        cols = st.columns(3)
        for i, (subject, grade) in enumerate(profile.subjects.items()):
            cols[i % 3].metric(humanize_subject(subject), grade)
    else:
        st.info("No subject grades recorded.")
    st.write(f"**GPA:** {profile.gpa or 'n/a'}  |  **Academic rank:** {profile.academic_rank or 'n/a'}")

    st.markdown("### Activities & Leadership")
    for label, items in [("Sports", profile.sports), ("Clubs", profile.clubs),
                         ("Leadership", profile.leadership), ("Volunteering", profile.volunteering)]:
        if items:
            st.write(f"**{label}:** " + ", ".join(items))

    st.markdown("### Teacher Feedback")
    feedback = profile.teacher_feedback
    st.write(f"**Strengths:** {feedback.strengths or 'n/a'}")
    st.write(f"**Areas for improvement:** {feedback.improvements or 'n/a'}")
    st.write(f"**Recommendations:** {feedback.recommendations or 'n/a'}")

    st.markdown("### Family Input")
    st.write(f"**Parent observations:** {profile.parent_observations or 'n/a'}")
    st.write(f"**Family expectations:** {profile.family_expectations or 'n/a'}")


def show_results():
    profile: StudentProfile = st.session_state.profile

    with st.sidebar:
        st.header(f"Hello, {profile.name or 'student'}!")
        st.write(f"{profile.grade} · {profile.school} · GPA {profile.gpa or 'n/a'}")
        st.caption(f"Profile {profile.profile_completeness}% complete · {len(profile.interests)} interests")
        st.button("Start Over", on_click=logout)

    tab1, tab2, tab3, tab4, tab5 = st.tabs(
        ["🗺️ Pathway", "🧠 Strengths", "🏛️ Colleges & Careers", "📈 Market Trends", "👥 Student Profile"]
    )
    with tab1:
        show_pathway(profile)
    with tab2:
        show_strengths(profile)
    with tab3:
        show_colleges_and_careers(profile)
    with tab4:
        show_market_trends(profile)
    with tab5:
        show_student_profile(profile)


# --- Main Application Logic (Conditional Rendering) ---
if st.session_state.profile is not None:
    show_results()
else:
    show_landing_and_form()
