"""
Prompt library API endpoints.

Routes:
- GET /prompts - List prompts (category, search)
- GET|POST /prompts/discover - Start the discovery job (cron)
- POST /prompts/{id}/copy - Count a copy

Dependencies: toolbox.application.services, toolbox.models
System role: Prompt library HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from toolbox.api.deps.dependencies import get_prompt_service
from toolbox.api.routers.router_utils.cron_routes import add_cron_route
from toolbox.application.services.prompt_service import PromptService
from toolbox.models.prompt import PromptListResponse, PromptResponse

from .prompt_error_handling import handle_prompt_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prompts", tags=["prompts"])


@router.get("", response_model=PromptListResponse)
@handle_prompt_errors("Failed to fetch prompts")
async def list_prompts(
    category: str | None = None,
    search: str | None = None,
    prompt_service: PromptService = Depends(get_prompt_service),
) -> PromptListResponse:
    """List prompts, most copied first; "All" disables the category filter."""
    prompts = await prompt_service.list_prompts(category=category, search=search)
    return PromptListResponse(prompts=[PromptResponse(**p) for p in prompts])


add_cron_route(router, "/discover", "prompts")


@router.post("/{prompt_id}/copy", response_model=PromptResponse)
@handle_prompt_errors("Failed to copy prompt")
async def copy_prompt(
    prompt_id: str,
    prompt_service: PromptService = Depends(get_prompt_service),
) -> PromptResponse:
    """
    Raises:
        HTTPException(404): Prompt not found
    """
    prompt = await prompt_service.copy_prompt(prompt_id)
    return PromptResponse(**prompt)
