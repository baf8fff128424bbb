"""
Discovery prompts for the tools and prompt-library agents.

Three templates: tool search, per-tool enrichment, and prompt search.
Category lists are rendered from toolbox.core.taxonomy so the model
answers in the directory's vocabulary.

Dependencies: langchain_core.prompts, toolbox.core.taxonomy
System role: Prompt templates for Gemini discovery pipelines
"""

from langchain_core.prompts import PromptTemplate

from toolbox.core.taxonomy import CATEGORIES

TOOL_SEARCH_TEMPLATE = """You are an AI tools discovery agent. Search for new, trending, or recently launched AI tools.

Today's Date: {current_date} ({date_str})
Search Query: "{query}"

IMPORTANT REQUIREMENTS:
1. Focus on REAL, ACTIVE AI tools that are currently available
2. Tools should be launched or updated within the last 6 months (prefer recent)
3. Extract accurate, factual information only
4. URLs MUST be real, accessible tool websites
5. URLs MUST start with https:// or http://
6. URLs MUST be complete (not truncated or partial)
7. DO NOT use placeholder URLs like example.com, test.com, or localhost
8. DO NOT use search result URLs (google.com/search, etc.)

For each tool found, extract:
- Tool name (exact name)
- Tagline (short 1-line description, max 100 chars)
- Description (2-3 sentences about what the tool does)
- Website URL (must be the actual tool's homepage)
- Category (one of: {categories})
- Pricing tier (Free, Freemium, Paid, or Enterprise)
- Launch date (YYYY-MM-DD format, if available)

Return results as a JSON array:
[
  {{
    "name": "Tool Name",
    "tagline": "Short tagline",
    "description": "Detailed description",
    "websiteUrl": "https://example.com",
    "category": "Writing & Content",
    "pricing": "Freemium",
    "launchDate": "2025-01-15"
  }}
]

Return ONLY the JSON array, no additional text or markdown formatting."""

TOOL_ENRICHMENT_TEMPLATE = """You are analyzing an AI tool to extract detailed information.

Tool Name: {name}
Tagline: {tagline}
Description: {description}
Website: {website_url}
Category: {category}
Pricing: {pricing}

Extract and generate:
1. Strengths (3-5 key features/benefits as an array of strings)
2. Weaknesses (2-3 limitations/drawbacks as an array of strings)
3. Best for (one sentence describing who should use this tool)
4. Overkill for (one sentence describing who should NOT use this tool)
5. Sub-category (more specific classification within the category)
6. Initial rating estimate (0-100, based on features, description, and market position)
7. Growth metrics if available (6-month growth percentage, monthly visits if known)

For growth metrics, if you find information about rapid growth (like "88% growth in 6 months" or "911M monthly visits"), include it. Otherwise, leave null.

Return as JSON:
{{
  "strengths": ["feature1", "feature2"],
  "weaknesses": ["limitation1", "limitation2"],
  "bestFor": "Who should use this tool",
  "overkillFor": "Who should not use this tool",
  "subCategory": "Sub-category name",
  "rating": 75,
  "growthRate6mo": 50.0,
  "monthlyVisits": null
}}

Return ONLY the JSON object, no additional text."""

PROMPT_SEARCH_TEMPLATE = """You are a prompt discovery agent. Search for the best, most effective AI prompts that are currently popular, trending, or highly rated.

Today's Date: {current_date} ({date_str})
Search Query: "{query}"

IMPORTANT REQUIREMENTS:
1. Focus on REAL, WORKING prompts that are currently being used successfully
2. Prompts should be practical and actionable (not theoretical)
3. Extract the COMPLETE prompt text (not truncated)
4. Prompts should be well-structured and effective
5. Include prompts from various sources: PromptBase, FlowGPT, GitHub, Reddit, Twitter, blogs
6. Prioritize prompts with high ratings, upvotes, or usage counts
7. Ensure prompts are appropriate and safe

For each prompt found, extract:
- Title (clear, descriptive name for the prompt, max 100 chars)
- Category (one of: {categories})
- Use Case (brief description of what this prompt is used for, max 150 chars)
- Prompt (the complete, full prompt text - DO NOT truncate)
- Level (Beginner, Advanced, or Pro - based on complexity)
- Source (optional: where you found it, e.g., "PromptBase", "FlowGPT", "GitHub", "Reddit")

Return results as a JSON array:
[
  {{
    "title": "Prompt Title",
    "category": "Writing & Content",
    "useCase": "Use case description",
    "prompt": "Complete prompt text here...",
    "level": "Beginner",
    "source": "PromptBase"
  }}
]

Return ONLY the JSON array, no additional text or markdown formatting."""

TOOL_SEARCH_PROMPT = PromptTemplate.from_template(TOOL_SEARCH_TEMPLATE)
TOOL_ENRICHMENT_PROMPT = PromptTemplate.from_template(TOOL_ENRICHMENT_TEMPLATE)
PROMPT_SEARCH_PROMPT = PromptTemplate.from_template(PROMPT_SEARCH_TEMPLATE)


def build_tool_search_prompt(query: str, current_date: str, date_str: str) -> str:
    return TOOL_SEARCH_PROMPT.format(
        query=query,
        current_date=current_date,
        date_str=date_str,
        categories=", ".join(CATEGORIES),
    )


def build_tool_enrichment_prompt(tool: dict) -> str:
    """Render the enrichment prompt for a search result (camelCase keys)."""
    return TOOL_ENRICHMENT_PROMPT.format(
        name=tool.get("name", ""),
        tagline=tool.get("tagline", ""),
        description=tool.get("description", ""),
        website_url=tool.get("websiteUrl", ""),
        category=tool.get("category", ""),
        pricing=tool.get("pricing", ""),
    )


def build_prompt_search_prompt(query: str, current_date: str, date_str: str) -> str:
    return PROMPT_SEARCH_PROMPT.format(
        query=query,
        current_date=current_date,
        date_str=date_str,
        categories=", ".join(CATEGORIES),
    )
