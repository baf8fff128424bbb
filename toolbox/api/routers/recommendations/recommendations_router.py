"""
Recommendation API endpoint.

Routes:
- POST /recommendations - Answer a tool question with recommended tool ids

Dependencies: toolbox.application.services, toolbox.models
System role: Chat recommendation HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from toolbox.api.deps.dependencies import get_recommendation_service
from toolbox.api.routers.router_utils.error_mapping import error_handler
from toolbox.application.services.recommendation_service import RecommendationService
from toolbox.core.exceptions import ValidationError
from toolbox.models.recommendation import RecommendationRequest, RecommendationResponse

logger = logging.getLogger(__name__)

handle_recommendation_errors = error_handler(logger)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


@router.post("", response_model=RecommendationResponse)
@handle_recommendation_errors("Failed to generate recommendations")
async def recommend(
    request: RecommendationRequest,
    recommendation_service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationResponse:
    """
    Raises:
        HTTPException(400): Query missing or blank
    """
    if not request.query or not request.query.strip():
        raise ValidationError("Query is required", field="query")
    result = await recommendation_service.recommend(request.query.strip())
    return RecommendationResponse(**result)
