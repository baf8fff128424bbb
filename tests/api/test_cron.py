"""
Tests for the cron-triggered endpoints.

Every cron route shares one registration helper, so authorisation and the
202 body are checked across all of them.
"""

from unittest.mock import MagicMock

import pytest

from toolbox.api.deps import get_cron_runner, get_settings_dependency
from toolbox.configs import Settings
from toolbox.configs.app import AppSettings

CRON_ROUTES = [
    ("/api/news/cron", "news"),
    ("/api/tools/discover", "tools"),
    ("/api/prompts/discover", "prompts"),
    ("/api/seo/generate", "seo"),
]


@pytest.fixture
def mock_runner(app):
    runner = MagicMock()
    runner.start.side_effect = lambda kind: {
        "success": True,
        "message": f"{kind} job started in background",
        "job_id": f"{kind}-1700000000000-abc1234",
        "timestamp": "2026-01-01T00:00:00+00:00",
        "note": "Job is running asynchronously. Check logs for completion status.",
    }
    app.dependency_overrides[get_cron_runner] = lambda: runner
    return runner


@pytest.fixture
def cron_secret(app):
    settings = Settings(app=AppSettings(cron_secret="s3cret"))
    app.dependency_overrides[get_settings_dependency] = lambda: settings
    return "s3cret"


@pytest.mark.parametrize("path,kind", CRON_ROUTES)
def test_cron_route_starts_job_with_202(client, mock_runner, cron_secret, path, kind):
    response = client.post(path, headers={"Authorization": f"Bearer {cron_secret}"})

    assert response.status_code == 202
    body = response.json()
    assert body["success"] is True
    assert body["jobId"].startswith(f"{kind}-")
    assert body["note"].startswith("Job is running asynchronously")
    mock_runner.start.assert_called_once_with(kind)


@pytest.mark.parametrize("path,kind", CRON_ROUTES)
def test_cron_route_rejects_wrong_secret(client, mock_runner, cron_secret, path, kind):
    response = client.get(path, headers={"Authorization": "Bearer wrong"})

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}
    mock_runner.start.assert_not_called()


def test_cron_route_open_without_secret(client, app, mock_runner):
    app.dependency_overrides[get_settings_dependency] = lambda: Settings(app=AppSettings(cron_secret=None))

    response = client.get("/api/news/cron")

    assert response.status_code == 202


def test_cron_route_start_failure_returns_500(client, app, mock_runner):
    app.dependency_overrides[get_settings_dependency] = lambda: Settings(app=AppSettings(cron_secret=None))
    mock_runner.start.side_effect = RuntimeError("no loop")

    response = client.post("/api/seo/generate")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to start seo job"}
