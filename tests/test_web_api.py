"""Tests for the web API."""

import pytest

# Only run if fastapi/httpx are installed
try:
    from fastapi.testclient import TestClient
    from codeviz.web import create_app
    HAS_WEB = True
except ImportError:
    HAS_WEB = False

pytestmark = pytest.mark.skipif(not HAS_WEB, reason="web dependencies not installed")


@pytest.fixture
def client(fixture_project):
    app = create_app(allowed_root=fixture_project.parent)
    return TestClient(app)


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_visualize_fixture(client, fixture_project):
    res = client.post("/api/visualize", json={"path": str(fixture_project)})
    assert res.status_code == 200
    data = res.json()
    assert data["fileCount"] == 6
    assert data["message"] == "Project analyzed successfully. Found 6 files."
    in_cycle = {n["id"] for n in data["nodes"] if n["inCycle"]}
    assert in_cycle == {"src/components/Header.tsx", "src/store/index.ts"}
    assert res.headers["Cache-Control"] == "no-store"


def test_visualize_scc_mode(client, fixture_project):
    res = client.post("/api/visualize", json={"path": str(fixture_project), "cycle_mode": "scc"})
    assert res.status_code == 200


def test_visualize_bad_cycle_mode(client, fixture_project):
    res = client.post("/api/visualize", json={"path": str(fixture_project), "cycle_mode": "nope"})
    assert res.status_code == 422


def test_visualize_extension_filter(client, fixture_project):
    res = client.post("/api/visualize", json={"path": str(fixture_project), "extensions": [".js"]})
    assert res.status_code == 200
    assert res.json()["fileCount"] == 3


def test_visualize_nonexistent_path(client, fixture_project):
    res = client.post("/api/visualize", json={"path": str(fixture_project / "missing")})
    assert res.status_code == 404


def test_visualize_outside_allowed_root(client, tmp_path):
    res = client.post("/api/visualize", json={"path": str(tmp_path)})
    assert res.status_code == 403


def test_visualize_file_path(client, fixture_project):
    res = client.post("/api/visualize", json={"path": str(fixture_project / "src" / "util.js")})
    assert res.status_code == 400


def test_no_root_restriction(tmp_path):
    (tmp_path / "a.js").write_text("import b from './b';\n")
    (tmp_path / "b.js").write_text("import a from './a';\n")
    res = TestClient(create_app()).post("/api/visualize", json={"path": str(tmp_path)})
    assert res.status_code == 200
    assert all(e["animated"] for e in res.json()["edges"])
