"""
Tool response mapping utilities.

Dependencies: toolbox.models.tool
System role: Tool response transformation
"""

from typing import Any

from toolbox.models.tool import ToolEnrichmentResponse, ToolEnvelope, ToolListResponse, ToolResponse


def map_tool_to_response(tool_data: dict[str, Any]) -> ToolResponse:
    return ToolResponse(**tool_data)


def map_tools_to_response(tools_data: list[dict[str, Any]]) -> ToolListResponse:
    return ToolListResponse(tools=[map_tool_to_response(t) for t in tools_data])


def map_tool_envelope(tool_data: dict[str, Any]) -> ToolEnvelope:
    return ToolEnvelope(tool=map_tool_to_response(tool_data))


def map_enrichment_to_response(enrichment: dict[str, list]) -> ToolEnrichmentResponse:
    """Drop malformed stored items instead of failing the whole response."""
    faqs = [f for f in enrichment.get("faqs", []) if isinstance(f, dict) and f.get("question") and f.get("answer")]
    use_cases = [
        u for u in enrichment.get("use_cases", [])
        if isinstance(u, dict) and u.get("title") and u.get("description")
    ]
    return ToolEnrichmentResponse(faqs=faqs, use_cases=use_cases)
