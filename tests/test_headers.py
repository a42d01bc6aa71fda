import pytest

from eveplanner_api.app.core.errors import describe_validation_errors
from eveplanner_api.app.core.headers import SECURITY_HEADERS


@pytest.mark.parametrize("path", ["/api/health", "/api/users/missing", "/api/does-not-exist"])
def test_security_headers_on_every_response(client, path):
    r = client.get(path)
    for name, value in SECURITY_HEADERS.items():
        assert r.headers[name] == value
    assert "frame-ancestors 'none'" in r.headers["content-security-policy"]


def test_unknown_route_uses_error_envelope(client):
    r = client.get("/api/does-not-exist")
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found"}


def test_cors_is_open_by_default(client):
    r = client.get("/api/health", headers={"Origin": "https://planner.example"})
    assert r.headers["access-control-allow-origin"] == "*"


def test_validation_messages_name_the_fields():
    errors = [
        {"loc": ("body", "fullName"), "msg": "Field required"},
        {"loc": ("body", "guestCount"), "msg": "Input should be greater than or equal to 0"},
        {"loc": ("body",), "msg": "Field required"},
    ]
    assert describe_validation_errors(errors) == (
        "fullName: Field required; "
        "guestCount: Input should be greater than or equal to 0; "
        "Field required"
    )
    assert describe_validation_errors([]) == "Invalid request"
