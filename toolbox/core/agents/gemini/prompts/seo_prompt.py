"""
SEO agent prompts.

Keyword research, page content, semantic duplicate check and featured
image prompts for the SEO page generator.

Dependencies: langchain_core.prompts
System role: Prompt templates for SEO page generation
"""

from langchain_core.prompts import PromptTemplate

KEYWORD_RESEARCH_TEMPLATE = """You are an SEO research expert specializing in AI tools and software directories.

Today's Date: {current_date}

Your task is to identify 3-5 high-value SEO keyword opportunities for an AI tools directory website ({site_host}).

IMPORTANT REQUIREMENTS:
1. Keywords must be SEMANTICALLY UNIQUE - avoid variations of the same topic
2. Each keyword should target a DISTINCT search intent
3. Keywords with good search volume (1000+ monthly searches)
4. Low to medium competition
5. High commercial intent
6. Relevance to AI tools, software, and productivity
7. Avoid duplicate or near-duplicate keywords (e.g., don't suggest both "best AI tools" and "top AI tools")

For each keyword opportunity, provide:
- Primary keyword (e.g., "best AI video editing tools {year}")
- Estimated search volume (number)
- Competition score (0-100, where 0 is low competition)
- 3-5 related/target keywords
- Why this keyword is valuable and how it differs from similar keywords

Format your response as a JSON array:
[
  {{
    "keyword": "Best AI Video Editing Tools {year}",
    "searchVolume": 5000,
    "competitionScore": 45,
    "targetKeywords": ["AI video editor", "automated video editing", "AI video tools"],
    "reasoning": "High search volume with growing interest in AI-powered video editing. Distinct from image editing tools."
  }}
]

Return ONLY valid JSON, no additional text."""

PAGE_CONTENT_TEMPLATE = """You are a professional SEO content writer specializing in AI tools and software reviews.

Keyword: "{keyword}"

Related AI Tools:
{tools_list}

Create a comprehensive, SEO-optimized page about "{keyword}" for an AI tools directory website.

Requirements:
1. Write engaging, informative content (1500-2000 words total)
2. Include natural keyword usage (don't stuff keywords)
3. Structure with clear headings (H2, H3)
4. Include an introduction, main sections, and conclusion
5. Make it valuable for readers searching for this topic
6. Include comparisons, features, and recommendations

FORMATTING STYLE:
- Use single asterisks (*text*) for emphasis, NOT double asterisks (**text**)
- Use bullet points with asterisks (*) for lists
- Break content into short, readable paragraphs (2-4 sentences each)
- Use clear, descriptive subheadings
- Make content scannable with proper spacing
- Write in a clean, professional style

Structure:
- Introduction (2-3 paragraphs)
- Main sections (3-5 sections with headings, each with bullet points and clear formatting)
- Conclusion (1-2 paragraphs)

Format your response as JSON:
{{
  "introduction": "2-3 paragraph introduction...",
  "sections": [
    {{
      "heading": "Section Heading",
      "content": "Section content (2-3 paragraphs)...",
      "type": "introduction|comparison|features|pricing|conclusion"
    }}
  ],
  "conclusion": "1-2 paragraph conclusion...",
  "structuredData": {{
    "@context": "https://schema.org",
    "@type": "CollectionPage",
    "name": "Best {keyword} for {year}",
    "description": "..."
  }}
}}

Return ONLY valid JSON, no additional text."""

SEMANTIC_SIMILARITY_TEMPLATE = """You are an SEO expert. Analyze if these two keywords are semantically similar or would create duplicate content.

Keyword 1: "{keyword1}"
Keyword 2: "{keyword2}"

Existing pages on the site: {existing_keywords}

Consider:
1. Do they target the same search intent?
2. Would they rank for the same queries?
3. Would the content be substantially similar?
4. Are they variations of the same topic?

Respond with JSON:
{{
  "isSimilar": true,
  "similarityScore": 0.0,
  "reason": "Brief explanation"
}}

Return ONLY valid JSON, no additional text."""

FEATURED_IMAGE_TEMPLATE = """Create a professional, modern featured image for an SEO article about "{keyword}".

Requirements:
- Clean, minimalist design with modern aesthetics
- Professional color scheme (blues, purples, or tech-inspired colors)
- 1200x630 pixels aspect ratio (landscape)
- Abstract or conceptual representation of AI tools and technology
- No text overlays, just visual elements
- High quality, suitable for website header/featured image
- Professional and trustworthy appearance

Style: Modern tech, minimalist, clean, professional"""

KEYWORD_RESEARCH_PROMPT = PromptTemplate.from_template(KEYWORD_RESEARCH_TEMPLATE)
PAGE_CONTENT_PROMPT = PromptTemplate.from_template(PAGE_CONTENT_TEMPLATE)
SEMANTIC_SIMILARITY_PROMPT = PromptTemplate.from_template(SEMANTIC_SIMILARITY_TEMPLATE)
FEATURED_IMAGE_PROMPT = PromptTemplate.from_template(FEATURED_IMAGE_TEMPLATE)


def build_keyword_research_prompt(current_date: str, site_host: str, year: int) -> str:
    return KEYWORD_RESEARCH_PROMPT.format(current_date=current_date, site_host=site_host, year=year)


def build_page_content_prompt(keyword: str, related_tools: list[dict], year: int) -> str:
    """Render the page prompt listing up to ten related tools."""
    tools_list = "\n".join(
        f"{idx}. {tool.get('name')} - {tool.get('tagline')} (Rating: {tool.get('rating')}%)"
        for idx, tool in enumerate(related_tools[:10], start=1)
    )
    return PAGE_CONTENT_PROMPT.format(
        keyword=keyword,
        tools_list=tools_list or "No specific tools provided",
        year=year,
    )


def build_semantic_similarity_prompt(keyword1: str, keyword2: str, existing_keywords: list[str]) -> str:
    return SEMANTIC_SIMILARITY_PROMPT.format(
        keyword1=keyword1,
        keyword2=keyword2,
        existing_keywords=", ".join(existing_keywords[:5]) or "None",
    )


def build_featured_image_prompt(keyword: str) -> str:
    return FEATURED_IMAGE_PROMPT.format(keyword=keyword)
