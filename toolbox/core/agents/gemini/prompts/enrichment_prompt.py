"""FAQ, use-case and recommendation prompts.

Dependencies: langchain_core.prompts
System role: Prompt templates for tool detail enrichment and chat recommendations
"""

from langchain_core.prompts import PromptTemplate

TOOL_FAQ_TEMPLATE = """Generate 5-8 common questions and answers about the AI tool "{name}".

Tool Information:
- Name: {name}
- Tagline: {tagline}
- Description: {description}
- Category: {category}
- Strengths: {strengths}
- Weaknesses: {weaknesses}
- Pricing: {pricing}
- Best for: {best_for}

Generate realistic, helpful FAQs that users would actually ask about this tool. Focus on:
- What the tool does
- Who should use it
- Pricing and limitations
- Key features
- Common use cases
- Comparisons with alternatives

Return as JSON array:
[
  {{
    "question": "What is [Tool Name]?",
    "answer": "Detailed answer..."
  }}
]

Return ONLY the JSON array, no additional text."""

TOOL_USE_CASES_TEMPLATE = """Generate 5-7 specific use cases for the AI tool "{name}".

Tool Information:
- Name: {name}
- Tagline: {tagline}
- Description: {description}
- Category: {category}
- Strengths: {strengths}
- Best for: {best_for}

Generate concrete, actionable use cases that show how this tool can be used in real-world scenarios. Each use case should have:
- A clear title (what you're doing)
- A detailed description (how the tool helps)

Return as JSON array:
[
  {{
    "title": "Use Case Title",
    "description": "Detailed description of how to use the tool for this purpose..."
  }}
]

Return ONLY the JSON array, no additional text."""

RECOMMENDATION_TEMPLATE = """You are the AI Tool Box expert.
User Query: "{query}"

Available Tools (subset):
{tool_context}

Instructions:
1. Provide a concise, opinionated answer.
2. Identify the top 3 tool IDs from the list provided that perfectly match the user query.
3. Explain briefly why these tools were chosen.
4. At the end of your response, add a section exactly like this: "TOOLS_JSON:[id1, id2, id3]".

Tone: Expert, helpful, minimalist."""

TOOL_FAQ_PROMPT = PromptTemplate.from_template(TOOL_FAQ_TEMPLATE)
TOOL_USE_CASES_PROMPT = PromptTemplate.from_template(TOOL_USE_CASES_TEMPLATE)
RECOMMENDATION_PROMPT = PromptTemplate.from_template(RECOMMENDATION_TEMPLATE)


def _tool_fields(tool: dict) -> dict:
    return {
        "name": tool.get("name", ""),
        "tagline": tool.get("tagline", ""),
        "description": tool.get("description", ""),
        "category": tool.get("category", ""),
        "strengths": ", ".join(tool.get("strengths") or []),
        "weaknesses": ", ".join(tool.get("weaknesses") or []),
        "pricing": tool.get("pricing", ""),
        "best_for": tool.get("best_for", ""),
    }


def build_tool_faq_prompt(tool: dict) -> str:
    return TOOL_FAQ_PROMPT.format(**_tool_fields(tool))


def build_tool_use_cases_prompt(tool: dict) -> str:
    fields = _tool_fields(tool)
    fields.pop("weaknesses")
    fields.pop("pricing")
    return TOOL_USE_CASES_PROMPT.format(**fields)


def build_recommendation_prompt(query: str, tools: list[dict]) -> str:
    """Render the recommendation prompt with up to 150 tools as context."""
    tool_context = "\n".join(
        f"{t.get('id')}: {t.get('name')} - {t.get('tagline')}" for t in tools[:150]
    )
    return RECOMMENDATION_PROMPT.format(query=query, tool_context=tool_context)
