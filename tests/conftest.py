import pytest
from fastapi.testclient import TestClient

from eveplanner_api.app.core.config import Settings
from eveplanner_api.app.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=str(tmp_path / "eveplanner.db"),
        upload_dir=str(tmp_path / "uploads"),
        static_dir="",
        reconcile_uploads=True,
        max_upload_size=1024 * 1024,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan: migrations and upload dir.
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def upload_dir(settings):
    return settings.upload_dir


@pytest.fixture
def create_user(client):
    def _create(**fields):
        payload = {"fullName": "Jane D.", "email": None}
        payload.update(fields)
        r = client.post("/api/users", json=payload)
        assert r.status_code == 201, r.text
        return r.json()["userId"]

    return _create


@pytest.fixture
def create_event(client):
    def _create(user_id, **fields):
        payload = {"userId": user_id, "eventType": "Wedding"}
        payload.update(fields)
        r = client.post("/api/events", json=payload)
        assert r.status_code == 201, r.text
        return r.json()["eventId"]

    return _create


@pytest.fixture
def upload(client):
    def _upload(event_id, user_id="uploader", name="menu.pdf", content=b"%PDF-1.4 menu", content_type="application/pdf"):
        data = {"userId": user_id} if user_id is not None else None
        return client.post(
            f"/api/events/{event_id}/files",
            files={"file": (name, content, content_type)},
            data=data,
        )

    return _upload
