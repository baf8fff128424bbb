"""
Bundled directory dataset.

Six hand-picked flagship tools plus generated catalogue entries, and a
prompt library of three curated prompts plus generated templates. The
generator is seeded, so every process serves the same dataset.

Served by the tools and prompts services when no database is configured
or a query fails, and loaded into the database by `toolbox.scripts.seed`.

Dependencies: toolbox.core.taxonomy
System role: Offline fallback data and seed source
"""

import random
from datetime import date
from functools import lru_cache
from typing import Any
from urllib.parse import quote_plus

from toolbox.core.taxonomy import CATEGORIES

SEED = 2024
GENERATED_TOOL_COUNT = 594
GENERATED_PROMPT_COUNT = 117
MAX_ALTERNATIVES = 4

_PREFIXES = ("Neo", "Flow", "Ai", "Synth", "Deep", "Quill", "Vector", "Agent", "Pulse", "Mind", "Hyper", "Prime")
_SUFFIXES = ("ly", "ify", "base", "hub", "mind", "flow", "core", "node", "ai", "bot", "stack", "vault")

_CURATED_PROMPTS = (
    {
        "id": "p-adv-1",
        "title": "Reverse Role Prompting",
        "category": "Writing & Content",
        "use_case": "Strategic Alignment",
        "prompt": (
            "I want you to become the interviewer. Ask me 10 critical questions about my "
            "[Project/Idea] to find its weaknesses. Don't answer them yourself. Wait for my "
            "responses one by one to build a full risk assessment profile."
        ),
        "level": "Pro",
        "copy_count": 1540,
    },
    {
        "id": "p-adv-2",
        "title": "Chain of Thought Reasoning",
        "category": "Coding & Dev Tools",
        "use_case": "Complex Debugging",
        "prompt": (
            "Examine this code: [CODE]. First, explain the logic step-by-step. Second, identify "
            "potential race conditions. Third, propose a refactored version that implements the "
            "factory pattern. Think aloud for each step."
        ),
        "level": "Pro",
        "copy_count": 2100,
    },
    {
        "id": "p-adv-3",
        "title": "Few-Shot Style Mimicry",
        "category": "Marketing & Ads",
        "use_case": "Brand Voice",
        "prompt": (
            "Here are 3 examples of our brand voice: [EX 1, EX 2, EX 3]. Analyze the tone, "
            "sentence structure, and vocabulary. Now, rewrite the following announcement using "
            "exactly that style: [ANNOUNCEMENT]."
        ),
        "level": "Advanced",
        "copy_count": 890,
    },
)

# (id, name, category, tagline, rating, pricing, website_url)
_FLAGSHIP_TOOLS = (
    ("chatgpt", "ChatGPT", "Writing & Content", "Global AI tool directory leader", 98, "Freemium", "https://chat.openai.com"),
    ("claude", "Claude 3.5 Sonnet", "Writing & Content", "Top AI tool comparison winner", 99, "Freemium", "https://claude.ai"),
    ("midjourney", "Midjourney v6", "Design & Images", "Professional AI image generator", 98, "Paid", "https://midjourney.com"),
    ("cursor", "Cursor", "Coding & Dev Tools", "Advanced AI tool for developers", 99, "Freemium", "https://cursor.com"),
    ("perplexity", "Perplexity", "Research & Search", "Best AI tool review site choice", 96, "Freemium", "https://perplexity.ai"),
    ("heygen", "HeyGen", "Video & Audio", "Viral AI tool directory for video", 95, "Paid", "https://heygen.com"),
)


def _generated_level(i: int) -> str:
    return ("Beginner", "Advanced", "Pro")[i % 3]


def _generated_pricing(i: int) -> str:
    if i % 4 == 0:
        return "Free"
    if i % 3 == 0:
        return "Freemium"
    return "Paid"


def build_prompts_dataset(rng: random.Random) -> list[dict[str, Any]]:
    prompts = [dict(p) for p in _CURATED_PROMPTS]
    for i in range(GENERATED_PROMPT_COUNT):
        category = CATEGORIES[i % len(CATEGORIES)]
        prompts.append(
            {
                "id": f"prompt-gen-{i}",
                "title": f"Production {category} Template #{i}",
                "category": category,
                "use_case": "Workflow Optimization",
                "prompt": (
                    f"Generate a structured framework for {category} using the [INPUT] variables. "
                    "Focus on scalability and high-concurrency performance metrics."
                ),
                "level": _generated_level(i),
                "copy_count": rng.randrange(500),
            }
        )
    return prompts


def _tool(**fields: Any) -> dict[str, Any]:
    tool = {
        "alternatives": [],
        "discovery_source": "manual",
        "growth_rate_6mo": None,
        "is_rapidly_growing": False,
        "monthly_visits": None,
    }
    tool.update(fields)
    return tool


def build_tools_dataset(rng: random.Random) -> list[dict[str, Any]]:
    tools = [
        _tool(
            id=tool_id,
            name=name,
            tagline=tagline,
            category=category,
            sub_category="Core Ecosystem",
            description=(
                "A master-class AI utility that consistently tops our AI tool comparison "
                "charts. Perfect for high-performance teams."
            ),
            strengths=["Architecture", "Latency", "Reasoning"],
            weaknesses=["Context window limits", "Pricing volatility"],
            pricing=pricing,
            rating=rating,
            popularity=rng.randrange(10000) + 5000,
            votes=rng.randrange(5000) + 2000,
            best_for="Enterprise scalability",
            overkill_for="Single-use tasks",
            is_verified=True,
            launch_date=date(2023, 11, 15),
            website_url=website_url,
        )
        for tool_id, name, category, tagline, rating, pricing, website_url in _FLAGSHIP_TOOLS
    ]

    for i in range(GENERATED_TOOL_COUNT):
        category = CATEGORIES[i % len(CATEGORIES)]
        name = rng.choice(_PREFIXES) + rng.choice(_SUFFIXES)
        tools.append(
            _tool(
                id=f"{name.lower()}-{i}",
                name=name,
                tagline=f"Essential AI tool for {category.lower()} automation.",
                category=category,
                sub_category="Specialized Nodes",
                description=(
                    "Discovered in our AI tool directory for startups. "
                    f"This tool focuses on {category} optimization."
                ),
                strengths=["Security", "Niche Logic", "API Support"],
                weaknesses=["Community support", "Third-party plugins"],
                pricing=_generated_pricing(i),
                rating=rng.randrange(30) + 65,
                popularity=rng.randrange(3000),
                votes=rng.randrange(1000),
                best_for="Agile teams",
                overkill_for="Legacy operations",
                is_verified=rng.random() > 0.7,
                launch_date=date(2024, 1, 20),
                website_url=f"https://www.google.com/search?q={quote_plus(name)}+AI+tool",
            )
        )

    by_category: dict[str, list[dict]] = {}
    for tool in tools:
        by_category.setdefault(tool["category"], []).append(tool)
    for tool in tools:
        tool["alternatives"] = [
            other["name"]
            for other in by_category[tool["category"]]
            if other["id"] != tool["id"]
        ][:MAX_ALTERNATIVES]

    return tools


@lru_cache
def _datasets() -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    rng = random.Random(SEED)
    prompts = build_prompts_dataset(rng)
    tools = build_tools_dataset(rng)
    return tools, prompts


def get_tools_dataset() -> list[dict[str, Any]]:
    """All bundled tools (copies, safe to mutate)."""
    return [dict(tool) for tool in _datasets()[0]]


def get_prompts_dataset() -> list[dict[str, Any]]:
    """All bundled prompts (copies, safe to mutate)."""
    return [dict(prompt) for prompt in _datasets()[1]]
