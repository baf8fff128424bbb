"""
Claude micro agent base class.

Every micro agent builds a system prompt from its skills, sends a single
user message through the Anthropic Messages API, and parses the text
reply into a typed pydantic output.

Dependencies: anthropic, pydantic, toolbox.core.agents.claude.client
System role: Shared run loop for Claude-backed content generators
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

from toolbox.core.agents.claude.client import get_anthropic_client, get_anthropic_model
from toolbox.core.agents.claude.types import AgentRunContext, AgentRunResult, Skill, TokenUsage

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)


class ClaudeAgentBase(ABC, Generic[InputT, OutputT]):
    """
    Base class for Claude micro agents.

    Subclasses set id, name and skills and implement the three prompt and
    parsing hooks. max_tokens and temperature can be overridden per agent.
    """

    id: str
    name: str
    skills: list[Skill]

    max_tokens: int = 1400
    temperature: float = 0.5

    @abstractmethod
    def build_system_prompt(self, input: InputT, context: AgentRunContext) -> str:
        """Return the system prompt for one run."""

    @abstractmethod
    def build_user_prompt(self, input: InputT, context: AgentRunContext) -> str:
        """Return the single user message for one run."""

    @abstractmethod
    def parse_output(self, raw_text: str) -> OutputT:
        """
        Turn the model's text into the agent's output model.

        Raises:
            LLMResponseError: If the text holds no usable JSON object
        """

    def skills_prompt(self) -> str:
        """Skills rendered as "- name: prompt" lines."""
        return "\n".join(f"- {s.name}: {s.prompt}" for s in self.skills)

    async def run(
        self,
        input: InputT,
        context: AgentRunContext | None = None,
    ) -> AgentRunResult[OutputT]:
        """
        Execute the agent once.

        Args:
            input: Validated agent input
            context: Request metadata for logging

        Returns:
            AgentRunResult with parsed output, raw text, model and token usage

        Raises:
            LLMNotConfiguredError: If ANTHROPIC_API_KEY is missing
            LLMResponseError: If the reply cannot be parsed
            anthropic.APIError: If the API call fails
        """
        context = context or AgentRunContext()
        model = get_anthropic_model()
        system = self.build_system_prompt(input, context)
        user = self.build_user_prompt(input, context)

        client = get_anthropic_client()
        started_at = time.perf_counter()

        response = await client.messages.create(
            model=model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            system=system,
            messages=[{"role": "user", "content": user}],
        )

        raw_text = "\n".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        ).strip()

        output = self.parse_output(raw_text)

        logger.info(
            "[claude-agent] run complete",
            extra={
                "agent_id": self.id,
                "model": model,
                "elapsed_ms": round((time.perf_counter() - started_at) * 1000),
                "request_id": context.request_id,
                "user_id": context.user_id,
                "ip": context.ip,
            },
        )

        usage = getattr(response, "usage", None)
        return AgentRunResult(
            output=output,
            raw_text=raw_text,
            model=model,
            usage=TokenUsage(
                input_tokens=getattr(usage, "input_tokens", None),
                output_tokens=getattr(usage, "output_tokens", None),
            ),
        )
