"""News research prompt for the Gemini news agent.

Dependencies: langchain_core.prompts
System role: Prompt template for news search
"""

from langchain_core.prompts import PromptTemplate

NEWS_SEARCH_TEMPLATE = """You are an AI news research agent. Search for the latest and most relevant AI news articles from the past 24-48 hours.

Today's Date: {current_date} ({date_str})
Search Query: "{query}"

IMPORTANT: Only return articles published on or after {date_str} ({current_date}). Focus on breaking news and latest developments from the last 48 hours.

Please find and return information about the latest AI news articles. For each article, provide:
1. Title
2. URL (actual article URL - must be a real, accessible URL)
3. Brief description/snippet (2-3 sentences)
4. Source/publication name
5. Published date (format: YYYY-MM-DD, must be {date_str} or very recent)

Format your response as a JSON array with this structure:
[
  {{
    "title": "Article Title",
    "url": "https://example.com/article",
    "snippet": "Brief description of the article...",
    "source": "Publication Name",
    "publishedDate": "{date_str}"
  }}
]

Return ONLY valid JSON, no additional text. Focus on recent, high-quality AI news from reputable sources published in the last 48 hours."""

NEWS_SEARCH_PROMPT = PromptTemplate.from_template(NEWS_SEARCH_TEMPLATE)


def build_news_search_prompt(query: str, current_date: str, date_str: str) -> str:
    return NEWS_SEARCH_PROMPT.format(query=query, current_date=current_date, date_str=date_str)
