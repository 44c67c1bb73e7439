import pytest
from streamlit.testing.v1 import AppTest

from api_client import GuidanceApiClient
from app.services.market_data import get_market_trend

APP_PATH = "../frontend/streamlit_app.py"


class StubApi:
    base_url = "http://stub"

    def __init__(self):
        self.saved = {}

    def fetch_market_trends(self, field):
        return [get_market_trend(field)]

    def save_analysis(self, student_id, analysis):
        self.saved[student_id] = analysis
        return True

    def health(self):
        return True


class FakeResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        return self._payload


class PartialCacheSession:
    """Backend whose cache returns a trend entry missing most of its keys."""

    def __init__(self):
        self.posted = []

    def get(self, url, **kwargs):
        if "/cache/" in url:
            return FakeResponse(200, {"success": True, "data": {"growth": 25}})
        return FakeResponse(404, {"detail": "Endpoint not found"})

    def post(self, url, json=None, **kwargs):
        self.posted.append((url, json))
        return FakeResponse(200, {"success": True, "message": "ok"})


@pytest.fixture
def stub_api():
    return StubApi()


def start_app(api):
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.session_state["api"] = api
    at.run()
    assert not at.exception
    return at


def by_label(widgets, label):
    return next(w for w in widgets if w.label == label)


def texts(at):
    return [m.value for m in at.markdown]


def test_landing_page_renders_form(stub_api):
    at = start_app(stub_api)
    assert at.title[0].value == "🎓 Student Career Guidance Platform"
    assert by_label(at.button, "Analyze My Profile")
    assert at.session_state["profile"] is None


def test_submit_without_name_shows_error(stub_api):
    at = start_app(stub_api)
    by_label(at.button, "Analyze My Profile").click().run()
    assert not at.exception
    assert at.error[0].value == "Please enter at least your name."
    assert at.session_state["profile"] is None
    assert stub_api.saved == {}


def test_form_submit_shows_results(stub_api):
    at = start_app(stub_api)
    by_label(at.text_input, "Full Name").input("Jamie Rivera")
    at.selectbox(key="subject_mathematics").select("A+")
    by_label(at.multiselect, "Interests").select("Technology & Programming")
    by_label(at.button, "Analyze My Profile").click().run()

    assert not at.exception
    profile = at.session_state["profile"]
    assert profile.name == "Jamie Rivera"
    assert profile.subjects == {"mathematics": "A+"}
    assert list(stub_api.saved.values())[0]["name"] == "Jamie Rivera"

    assert at.sidebar.header[0].value == "Hello, Jamie Rivera!"
    tab_labels = [t.label for t in at.tabs]
    for label in ["🗺️ Pathway", "🧠 Strengths", "🏛️ Colleges & Careers", "📈 Market Trends", "👥 Student Profile"]:
        assert label in tab_labels
    assert "🛰️ Data Sources" not in tab_labels
    assert any(m.label == "Mathematics" and m.value == "A+" for m in at.metric)


def test_demo_profile_fills_student_profile_tab(stub_api):
    at = start_app(stub_api)
    at.button(key="demo").click().run()

    assert not at.exception
    assert at.session_state["profile"].name == "Alex Chen"
    subheaders = [s.value for s in at.subheader]
    assert "👥 Student Profile" in subheaders
    assert "🛰️ Data Sources" in subheaders

    body = texts(at)
    assert any("Science Society President" in t for t in body)
    assert any("Supportive of STEM career path" in t for t in body)
    assert any("Could develop stronger presentation skills" in t for t in body)
    assert any(m.label == "Information Technology" and m.value == "A+" for m in at.metric)
    assert any("95% complete" in c.value and "4 interests" in c.value for c in at.sidebar.caption)


def test_start_over_returns_to_form(stub_api):
    at = start_app(stub_api)
    at.button(key="demo").click().run()
    by_label(at.sidebar.button, "Start Over").click().run()
    assert not at.exception
    assert at.session_state["profile"] is None
    assert by_label(at.button, "Analyze My Profile")


def test_incomplete_cached_trend_does_not_break_market_tab():
    session = PartialCacheSession()
    at = start_app(GuidanceApiClient(base_url="http://stub", session=session))
    at.button(key="demo").click().run()

    assert not at.exception
    assert any(m.label == "Growth Rate" and m.value == "25%" for m in at.metric)
    assert any(url.endswith("/cache/technology") for url, _ in session.posted)
