import pytest
from frontend.web import app as flask_app

@pytest.mark.e2e
def test_frontend_health():
    client = flask_app.test_client()
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True}
