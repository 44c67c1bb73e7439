def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


def test_student_analysis_round_trip(client):
    r = client.post("/student-analysis", json={"studentId": "s1", "analysisData": {"paths": ["Software Engineer"]}})
    assert r.status_code == 200
    assert r.json()["message"] == "Analysis stored successfully"

    r = client.get("/student-analysis/s1")
    assert r.status_code == 200
    assert r.json()["data"] == {"paths": ["Software Engineer"]}


def test_missing_analysis_is_404(client):
    r = client.get("/student-analysis/nobody")
    assert r.status_code == 404
    assert r.json()["detail"] == "Analysis not found"


def test_preferences_are_stamped(client):
    r = client.post("/user-preferences", json={"userId": "u1", "preferences": {"theme": "dark"}})
    assert r.status_code == 200

    data = client.get("/user-preferences/u1").json()["data"]
    assert data["theme"] == "dark"
    assert "lastUpdated" in data


def test_analytics_counts_stored_records(client):
    client.post("/student-analysis", json={"studentId": "s1", "analysisData": {}})
    client.post("/student-analysis", json={"studentId": "s2", "analysisData": {}})
    client.post("/user-preferences", json={"userId": "u1", "preferences": {}})
    client.post("/cache/technology", json={"data": {"growth": 25}})

    data = client.get("/analytics").json()["data"]
    assert data["totalAnalyses"] == 2
    assert data["totalUsers"] == 1
    assert data["popularFields"] == {}


def test_unknown_endpoint(client):
    r = client.get("/does-not-exist")
    assert r.status_code == 404
    assert r.json() == {"detail": "Endpoint not found"}


def test_metrics_exposed(client):
    client.get("/health")
    r = client.get("/metrics")
    assert r.status_code == 200
    assert "http_requests_total" in r.text


def test_metrics_use_route_templates(client):
    for field in ("metricsfield1", "metricsfield2", "metricsfield3"):
        client.get(f"/cache/{field}")
    client.get("/no-such-route-abc")

    text = client.get("/metrics").text
    assert 'path="/cache/{field}"' in text
    assert 'path="unmatched"' in text
    assert "metricsfield1" not in text
    assert "no-such-route-abc" not in text
