"""
ORM row to dict conversion.

Services and pipelines exchange plain snake_case dicts; the bundled seed
dataset uses the same shapes so either source can back a response.

Dependencies: toolbox.boundary.db.models
System role: Row serialization for services and agents
"""

from typing import Any

from toolbox.boundary.db.models import (
    NewsModel,
    PromptTemplateModel,
    SEOPageModel,
    ToolModel,
    UserModel,
    UserStackModel,
)


def tool_to_dict(tool: ToolModel) -> dict[str, Any]:
    return {
        "id": tool.id,
        "name": tool.name,
        "tagline": tool.tagline or "",
        "category": tool.category,
        "sub_category": tool.sub_category or "",
        "description": tool.description or "",
        "strengths": list(tool.strengths or []),
        "weaknesses": list(tool.weaknesses or []),
        "pricing": tool.pricing or "Freemium",
        "rating": tool.rating or 0,
        "popularity": tool.popularity or 0,
        "votes": tool.votes or 0,
        "alternatives": list(tool.alternatives or []),
        "best_for": tool.best_for or "",
        "overkill_for": tool.overkill_for or "",
        "is_verified": bool(tool.is_verified),
        "launch_date": tool.launch_date,
        "website_url": tool.website_url,
        "discovery_source": tool.discovery_source,
        "growth_rate_6mo": tool.growth_rate_6mo,
        "is_rapidly_growing": bool(tool.is_rapidly_growing),
        "monthly_visits": tool.monthly_visits,
    }


def user_to_dict(user: UserModel, interactions: dict[str, list[str]] | None = None) -> dict[str, Any]:
    """Serialize a user; `interactions` comes from user_crud.get_user_interactions."""
    interactions = interactions or {}
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "points": user.points,
        "referral_code": user.referral_code,
        "joined_at": user.joined_at,
        "liked_tool_ids": interactions.get("liked_tool_ids", []),
        "starred_tool_ids": interactions.get("starred_tool_ids", []),
        "bookmarked_tool_ids": interactions.get("bookmarked_tool_ids", []),
    }


def prompt_to_dict(prompt: PromptTemplateModel) -> dict[str, Any]:
    return {
        "id": prompt.id,
        "title": prompt.title,
        "category": prompt.category,
        "use_case": prompt.use_case or "",
        "prompt": prompt.prompt,
        "level": prompt.level or "Beginner",
        "copy_count": prompt.copy_count or 0,
    }


def stack_to_dict(stack: UserStackModel) -> dict[str, Any]:
    return {
        "id": stack.id,
        "user_id": stack.user_id,
        "name": stack.name,
        "tool_ids": list(stack.tool_ids or []),
        "created_at": stack.created_at,
        "updated_at": stack.updated_at,
    }


def news_to_dict(article: NewsModel) -> dict[str, Any]:
    return {
        "id": article.id,
        "title": article.title,
        "description": article.description,
        "url": article.url,
        "source": article.source,
        "author": article.author,
        "image_url": article.image_url,
        "published_at": article.published_at,
        "fetched_at": article.fetched_at,
        "category": article.category,
        "tags": list(article.tags or []),
        "view_count": article.view_count or 0,
        "is_featured": bool(article.is_featured),
    }


def seo_page_to_dict(page: SEOPageModel) -> dict[str, Any]:
    return {
        "id": page.id,
        "slug": page.slug,
        "keyword": page.keyword,
        "title": page.title,
        "meta_description": page.meta_description,
        "featured_image_url": page.featured_image_url,
        "content": page.content,
        "introduction": page.introduction,
        "sections": list(page.sections or []),
        "target_keywords": list(page.target_keywords or []),
        "search_volume": page.search_volume or 0,
        "competition_score": page.competition_score or 0,
        "related_tools": list(page.related_tools or []),
        "structured_data": page.structured_data or {},
        "canonical_url": page.canonical_url,
        "seo_score": page.seo_score or 0,
        "validation_issues": list(page.validation_issues or []),
        "is_published": bool(page.is_published),
        "last_generated_at": page.last_generated_at,
        "created_at": page.created_at,
        "updated_at": page.updated_at,
    }
