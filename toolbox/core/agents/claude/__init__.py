"""
Claude micro agents.

Exports:
  - ClaudeAgentBase: Shared prompt / call / parse loop
  - EmailTemplateGeneratorAgent, LeadMagnetGeneratorAgent: Concrete agents
  - validate_* / generate_*_fallback: Input validation and template fallbacks
"""

from toolbox.core.agents.claude.base_agent import ClaudeAgentBase
from toolbox.core.agents.claude.email_template_generator import (
    EmailTemplateGeneratorAgent,
    EmailTemplateInput,
    EmailTemplateOutput,
    generate_email_template_fallback,
    validate_email_template_input,
)
from toolbox.core.agents.claude.lead_magnet_generator import (
    LeadMagnetGeneratorAgent,
    LeadMagnetInput,
    LeadMagnetOutput,
    generate_lead_magnet_fallback,
    pick_recommended_format,
    validate_lead_magnet_input,
)
from toolbox.core.agents.claude.types import AgentRunContext, AgentRunResult, Skill

__all__ = [
    "AgentRunContext",
    "AgentRunResult",
    "ClaudeAgentBase",
    "EmailTemplateGeneratorAgent",
    "EmailTemplateInput",
    "EmailTemplateOutput",
    "LeadMagnetGeneratorAgent",
    "LeadMagnetInput",
    "LeadMagnetOutput",
    "Skill",
    "generate_email_template_fallback",
    "generate_lead_magnet_fallback",
    "pick_recommended_format",
    "validate_email_template_input",
    "validate_lead_magnet_input",
]
