"""Tests for the HTTP routes."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from litestar.testing import TestClient

from api.app import create_app
from application.settings import Settings
from domain.models import UpdateResult, UpdateStatus


@pytest.fixture
def settings(documents_dir, roster_root):
    return Settings(
        roster_root=roster_root,
        documents_dir=documents_dir,
        admin_password="s3cret",
    )


@pytest.fixture
def update_service():
    service = AsyncMock()
    service.update_profile.return_value = UpdateResult(
        UpdateStatus.UPDATED, "January", "Student 202", 300
    )
    return service


@pytest.fixture
def client(settings, update_service):
    app = create_app(
        settings,
        merge_service=MagicMock(),
        update_service=update_service,
        start_scheduler=False,
    )
    with TestClient(app=app) as test_client:
        yield test_client


def form(**overrides):
    data = {
        "rollNumber": "202",
        "leetcodeUrl": "https://leetcode.com/u/carol/",
        "password": "s3cret",
    }
    data.update(overrides)
    return data


class TestDocuments:
    def test_serves_dataset_document(self, client, documents_dir):
        (documents_dir / "data_January.json").write_text(
            json.dumps([{"identifier": "201"}], indent=2), encoding="utf-8"
        )

        response = client.get("/data/January")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == [{"identifier": "201"}]

    @pytest.mark.parametrize(
        "path, dataset",
        [("/dataSep", "September"), ("/dataJan", "January"), ("/dataSecond", "Second")],
    )
    def test_legacy_routes(self, client, documents_dir, path, dataset):
        (documents_dir / f"data_{dataset}.json").write_text(
            json.dumps([{"identifier": dataset}]), encoding="utf-8"
        )

        response = client.get(path)

        assert response.status_code == 200
        assert response.json() == [{"identifier": dataset}]

    def test_unknown_dataset_is_404(self, client):
        assert client.get("/data/Summer").status_code == 404

    def test_missing_document_is_404(self, client):
        assert client.get("/data/September").status_code == 404

    def test_cors_allows_any_origin(self, client, documents_dir):
        (documents_dir / "data_January.json").write_text("[]", encoding="utf-8")

        response = client.get("/data/January", headers={"Origin": "https://example.org"})

        assert response.headers["access-control-allow-origin"] == "*"


class TestProfileUpdate:
    def test_form_page(self, client):
        response = client.get("/dataChange")

        assert response.status_code == 200
        assert 'name="rollNumber"' in response.text

    def test_update_applied(self, client, update_service):
        response = client.post("/dataChange", data=form())

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "updated"
        assert body["dataset"] == "January"
        assert body["total_solved"] == 300
        assert body["message"] == "URL changed for Student 202 with new Problems solved = 300"
        update_service.update_profile.assert_awaited_once_with(
            "202", "https://leetcode.com/u/carol/"
        )

    def test_fetch_failed_reports_no_count(self, client, update_service):
        update_service.update_profile.return_value = UpdateResult(
            UpdateStatus.FETCH_FAILED, "January", "Student 202"
        )

        response = client.post("/dataChange", data=form())

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "fetch_failed"
        assert body["total_solved"] is None
        assert body["message"].endswith("= -1")

    def test_wrong_password_is_rejected_before_update(self, client, update_service):
        response = client.post("/dataChange", data=form(password="guess"))

        assert response.status_code == 403
        update_service.update_profile.assert_not_awaited()

    def test_unknown_roll_is_404(self, client, update_service):
        update_service.update_profile.return_value = UpdateResult.not_found()

        response = client.post("/dataChange", data=form(rollNumber="999"))

        assert response.status_code == 404
        assert "Wrong Roll" in response.text

    def test_missing_field_is_400(self, client, update_service):
        response = client.post("/dataChange", data={"password": "s3cret"})

        assert response.status_code == 400
        update_service.update_profile.assert_not_awaited()

    @pytest.mark.parametrize(
        "url", ["", "   ", "https://leetcode.com/u/x\nhttps://leetcode.com/u/y"]
    )
    def test_blank_or_multiline_url_is_400(self, client, update_service, url):
        response = client.post("/dataChange", data=form(leetcodeUrl=url))

        assert response.status_code == 400
        update_service.update_profile.assert_not_awaited()


def test_updates_disabled_without_password(documents_dir, roster_root, update_service):
    settings = Settings(roster_root=roster_root, documents_dir=documents_dir)
    app = create_app(
        settings,
        merge_service=MagicMock(),
        update_service=update_service,
        start_scheduler=False,
    )

    with TestClient(app=app) as client:
        response = client.post("/dataChange", data=form(password=""))

    assert response.status_code == 403
    update_service.update_profile.assert_not_awaited()
