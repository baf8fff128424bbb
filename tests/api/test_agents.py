"""
Tests for the Claude micro agent routes.

The agent service is real; the Claude agents are AsyncMocks and the
Anthropic key check is patched.
"""

from unittest.mock import AsyncMock, patch

import pytest

from toolbox.api.deps import get_agent_service
from toolbox.application.services.agent_service import AgentService
from toolbox.core.agents.claude import AgentRunResult, generate_email_template_fallback, validate_email_template_input
from toolbox.core.agents.claude.types import TokenUsage

VALID_EMAIL_BODY = {
    "emailGoal": "Cold outbound",
    "targetPersona": "Head of Sales",
    "companyDescription": "We build AI sales assistants",
    "tone": "Direct",
    "userId": "u-1",
}


@pytest.fixture
def email_agent():
    agent = AsyncMock()
    agent.id = "email-template-generator"
    return agent


@pytest.fixture
def agent_service(app, email_agent):
    service = AgentService(email_agent=email_agent, lead_magnet_agent=AsyncMock())
    app.dependency_overrides[get_agent_service] = lambda: service
    return service


def test_invalid_json_returns_400(client, agent_service):
    response = client.post(
        "/api/agents/email-template-generator",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body"}


def test_validation_failure_returns_400(client, agent_service):
    response = client.post(
        "/api/agents/email-template-generator", json={**VALID_EMAIL_BODY, "tone": "Shouty"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid tone"}


def test_without_anthropic_key_serves_fallback(client, agent_service, email_agent):
    with patch(
        "toolbox.application.services.agent_service.is_anthropic_configured", return_value=False
    ):
        response = client.post(
            "/api/agents/email-template-generator",
            json=VALID_EMAIL_BODY,
            headers={"X-Request-ID": "req-42"},
        )

    assert response.status_code == 200
    body = response.json()
    assert body["meta"] == {"requestId": "req-42", "isFallback": True, "provider": "fallback"}
    assert body["output"]["subjectLines"]
    email_agent.run.assert_not_called()


def test_agent_error_serves_fallback_after_error(client, agent_service, email_agent):
    email_agent.run.side_effect = RuntimeError("overloaded")

    with patch(
        "toolbox.application.services.agent_service.is_anthropic_configured", return_value=True
    ):
        response = client.post("/api/agents/email-template-generator", json=VALID_EMAIL_BODY)

    assert response.status_code == 200
    assert response.json()["meta"]["provider"] == "fallback_after_error"


def test_agent_success_reports_model_and_usage(client, agent_service, email_agent):
    output = generate_email_template_fallback(validate_email_template_input(VALID_EMAIL_BODY))
    email_agent.run.return_value = AgentRunResult(
        output=output,
        raw_text="{}",
        model="claude-3-5-sonnet-latest",
        usage=TokenUsage(input_tokens=120, output_tokens=480),
    )

    with patch(
        "toolbox.application.services.agent_service.is_anthropic_configured", return_value=True
    ):
        response = client.post(
            "/api/agents/email-template-generator",
            json=VALID_EMAIL_BODY,
            headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1", "User-Agent": "pytest"},
        )

    meta = response.json()["meta"]
    assert meta["provider"] == "anthropic"
    assert meta["isFallback"] is False
    assert meta["model"] == "claude-3-5-sonnet-latest"
    assert meta["usage"] == {"input_tokens": 120, "output_tokens": 480}
    context = email_agent.run.await_args.args[1]
    assert context.ip == "203.0.113.7"
    assert context.user_id == "u-1"
    assert context.user_agent == "pytest"


class TestAgentEvents:
    def test_requires_agent_id_and_event_type(self, client, agent_service):
        response = client.post("/api/agents/events", json={"agentId": "  ", "eventType": "run"})

        assert response.status_code == 400
        assert response.json() == {"error": "agentId and eventType are required"}

    def test_records_event_without_database(self, client, agent_service):
        with patch(
            "toolbox.application.services.agent_service.is_database_configured", return_value=False
        ):
            response = client.post(
                "/api/agents/events",
                json={"agentId": " email-template-generator ", "eventType": "copy"},
            )

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert len(body["id"]) == 36
