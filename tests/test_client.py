import io

import pytest
import requests

from eveplanner_api.client import EvePlannerClient


class RoutedSession:
    """Routes ``requests`` calls to a FastAPI ``TestClient``."""

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, json=None, data=None, files=None, timeout=None):
        self.calls.append((method, url))
        path = url[len("http://testserver"):]
        r = self.test_client.request(method, path, json=json, data=data, files=files)
        response = requests.Response()
        response.status_code = r.status_code
        response._content = r.content
        response.headers.update(r.headers)
        response.reason = r.reason_phrase
        response.url = url
        return response


class OfflineSession:
    def request(self, **kwargs):
        raise requests.ConnectionError("connection refused")


@pytest.fixture
def api(client):
    return EvePlannerClient(base_url="http://testserver/", session=RoutedSession(client))


def test_client_round_trip(api, tmp_path):
    created, error = api.create_user({"fullName": "Jane D.", "email": "jane@x.com"})
    assert error is None
    user_id = created["userId"]

    user, error = api.get_user(user_id)
    assert error is None and user["fullName"] == "Jane D."

    created, error = api.create_event({"userId": user_id, "eventType": "Wedding", "guestCount": 40})
    assert error is None
    event_id = created["eventId"]

    events, error = api.list_user_events(user_id)
    assert error is None and [e["id"] for e in events] == [event_id]

    path = tmp_path / "budget.csv"
    path.write_bytes(b"item,cost\nvenue,5000\n")
    uploaded, error = api.upload_file(event_id, str(path), user_id=user_id, content_type="text/csv")
    assert error is None and uploaded["fileName"] == "budget.csv"

    uploaded, error = api.upload_file(
        event_id, io.BytesIO(b"hello"), user_id=user_id, file_name="note.txt", content_type="text/plain"
    )
    assert error is None

    files, error = api.list_event_files(event_id)
    assert error is None and sorted(f["fileName"] for f in files) == ["budget.csv", "note.txt"]

    content, error = api.download_file(uploaded["fileId"])
    assert error is None and content == b"hello"

    stats, error = api.statistics()
    assert stats == {"totalUsers": 1, "totalEvents": 1, "totalFiles": 2}

    result, error = api.delete_user(user_id)
    assert error is None and result["success"] is True
    health, error = api.health()
    assert health["status"] == "Server is running"


def test_client_reports_api_errors(api):
    user, error = api.get_user("missing")
    assert user is None
    assert error == {"status_code": 404, "message": "User not found"}

    result, error = api.create_user({"email": "x@example.com"})
    assert result is None
    assert error["status_code"] == 400
    assert "fullName" in error["message"]


def test_client_reports_connection_errors():
    api = EvePlannerClient(base_url="http://localhost:1", session=OfflineSession())
    events, error = api.list_events()
    assert events == []
    assert error["status_code"] is None
    assert "connection refused" in error["message"]
