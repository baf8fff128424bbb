"""
Prompt library models and schemas.

Dependencies: pydantic
System role: Prompt API contracts
"""

from toolbox.models.common import CamelModel


class PromptResponse(CamelModel):
    id: str
    title: str
    category: str
    use_case: str = ""
    prompt: str
    level: str = "Beginner"
    copy_count: int = 0


class PromptListResponse(CamelModel):
    prompts: list[PromptResponse]
