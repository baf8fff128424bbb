"""
Duplicate detection of the discovery pipelines against a real session.
"""

import pytest

from toolbox.boundary.db.CRUD.prompt_crud import prompt_crud
from toolbox.boundary.db.CRUD.tool_crud import tool_crud
from toolbox.core.agents.gemini.prompts_agent import PromptsDiscoveryAgent
from toolbox.core.agents.gemini.tools_agent import ToolsDiscoveryAgent
from toolbox.data import get_prompts_dataset, get_tools_dataset


@pytest.fixture
async def stored(session_factory):
    async with session_factory() as session:
        for tool in get_tools_dataset()[:6]:
            await tool_crud.upsert(session, tool)
        for prompt in get_prompts_dataset()[:3]:
            await prompt_crud.upsert(session, prompt)
    return session_factory


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "name,url,expected",
    [
        ("cursor", "https://new.dev", True),
        ("Midjourney", "https://new.dev", True),
        ("Brand New Tool", "https://brandnew.dev", False),
    ],
)
async def test_tool_exists(stored, name, url, expected):
    agent = ToolsDiscoveryAgent(client=object(), session_factory=stored)

    assert await agent.tool_exists(name, url) is expected


@pytest.mark.asyncio
async def test_prompt_exists(stored):
    agent = PromptsDiscoveryAgent(client=object(), session_factory=stored)

    assert await agent.prompt_exists("Reverse Role Prompting", "anything") is True
    assert await agent.prompt_exists("Chain of Thought", "anything") is True
    assert await agent.prompt_exists("Meeting Notes Summariser", "Summarise these notes") is False


@pytest.mark.asyncio
async def test_prompt_exists_matches_near_identical_text(stored):
    # Arrange: titles share no substring, but the stored text mentions the new title
    text = "write a standup summary for my team listing blockers wins and next steps for each engineer"
    async with stored() as session:
        await prompt_crud.upsert(
            session,
            dict(get_prompts_dataset()[0], id="weekly-status-digest", title="Weekly Status Digest", prompt=text),
        )
    agent = PromptsDiscoveryAgent(client=object(), session_factory=stored)

    # Act / Assert
    assert await agent.prompt_exists("standup summary", f"{text} today") is True
    assert await agent.prompt_exists("standup summary", "translate this standup summary into french") is False
