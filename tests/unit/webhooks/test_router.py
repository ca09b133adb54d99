from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.webhooks.auth import verify_github_signature
from src.webhooks.router import router


@pytest.fixture
def app() -> FastAPI:
    """Create FastAPI test app with webhook router."""
    test_app = FastAPI()
    test_app.include_router(router, prefix="/webhooks")
    # Override the dependency for testing
    test_app.dependency_overrides[verify_github_signature] = lambda: True
    return test_app


@pytest.fixture
def valid_pr_payload() -> dict[str, object]:
    """Valid pull request webhook payload."""
    return {
        "action": "opened",
        "sender": {"login": "octocat", "id": 1, "type": "User"},
        "repository": {"name": "app", "full_name": "org/app"},
        "pull_request": {"number": 42, "title": "Update French strings", "user": {"login": "octocat"}},
    }


@pytest.fixture
def valid_headers() -> dict[str, str]:
    """Valid GitHub webhook headers."""
    return {
        "X-GitHub-Event": "pull_request",
        "X-GitHub-Delivery": "delivery-1",
        "X-Hub-Signature-256": "sha256=mock_signature",
        "Content-Type": "application/json",
    }


class TestWebhookRouter:
    """Test webhook router endpoint."""

    @pytest.mark.asyncio
    async def test_github_webhook_dispatches_event(
        self, app: FastAPI, valid_pr_payload: dict[str, object], valid_headers: dict[str, str]
    ) -> None:
        with patch("src.webhooks.router.dispatcher.dispatch", new_callable=AsyncMock) as mock_dispatch:
            mock_dispatch.return_value = {"status": "ok", "handler": "PullRequestEventHandler"}

            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
                response = await client.post("/webhooks/github", json=valid_pr_payload, headers=valid_headers)

            assert response.status_code == 200
            body = response.json()
            assert body["status"] == "event dispatched successfully"
            assert body["result"]["status"] == "ok"

            event_arg = mock_dispatch.call_args[0][0]
            assert event_arg.event_type.value == "pull_request"
            assert event_arg.payload == valid_pr_payload
            assert event_arg.delivery_id == "delivery-1"
            assert event_arg.repo_full_name == "org/app"

    @pytest.mark.asyncio
    async def test_missing_event_header(self, app: FastAPI, valid_pr_payload: dict[str, object]) -> None:
        headers = {"X-Hub-Signature-256": "sha256=mock_signature", "Content-Type": "application/json"}

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.post("/webhooks/github", json=valid_pr_payload, headers=headers)

        assert response.status_code == 400
        assert "Missing X-GitHub-Event header" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_unsupported_event_type_is_acknowledged(
        self, app: FastAPI, valid_pr_payload: dict[str, object]
    ) -> None:
        headers = {"X-GitHub-Event": "issues", "Content-Type": "application/json"}

        with patch("src.webhooks.router.dispatcher.dispatch", new_callable=AsyncMock) as mock_dispatch:
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
                response = await client.post("/webhooks/github", json=valid_pr_payload, headers=headers)

        assert response.status_code == 200
        assert response.json()["status"] == "event received but not supported"
        mock_dispatch.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_json_body(self, app: FastAPI, valid_headers: dict[str, str]) -> None:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.post("/webhooks/github", content=b"{not json", headers=valid_headers)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_non_object_payload(self, app: FastAPI, valid_headers: dict[str, str]) -> None:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.post("/webhooks/github", json=[1, 2], headers=valid_headers)

        assert response.status_code == 400
