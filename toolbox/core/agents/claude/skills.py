"""
Skill prompt fragments.

Each skill is a short imperative instruction; agents list the ones they
use in their system prompt as "- {name}: {prompt}".

Dependencies: toolbox.core.agents.claude.types
System role: Reusable prompt building blocks
"""

from toolbox.core.agents.claude.types import Skill

compliance_spam_avoidance = Skill(
    id="compliance_spam_avoidance",
    name="Compliance + Spam Avoidance",
    prompt=(
        "Avoid spam-trigger language and formatting: no ALL CAPS subject lines, no excessive "
        "exclamation marks, no manipulative urgency, no misleading claims. Keep it respectful "
        "and compliant."
    ),
)

conversion_copywriting = Skill(
    id="conversion_copywriting",
    name="Conversion Copywriting",
    prompt=(
        "Use proven frameworks (PAS, AIDA, value + proof + CTA). Lead with relevance, then a "
        "clear benefit, then one concrete proof point, then a low-friction CTA."
    ),
)

lead_magnet_structuring = Skill(
    id="lead_magnet_structuring",
    name="Persona-Specific Structuring",
    prompt=(
        "Structure the lead magnet like a PDF-style asset: a tight promise, a quick-start "
        "section, step-by-step guidance, checklists/templates, and a clear next step. Optimize "
        "for the persona's constraints (time, risk, complexity) and expected depth."
    ),
)

offer_positioning = Skill(
    id="offer_positioning",
    name="Offer Positioning + Hooks",
    prompt=(
        "Create a strong positioning angle: clear ICP, clear pain, clear promise, and a "
        "compelling hook. Prefer specific outcomes over generic benefits. Include a practical "
        "reason-to-believe (proof placeholder if needed)."
    ),
)

persona_understanding = Skill(
    id="persona_understanding",
    name="Persona Understanding",
    prompt=(
        "Infer what the target persona cares about (KPIs, risks, constraints, incentives) and "
        "tailor the messaging accordingly. Be specific and credible; avoid generic claims."
    ),
)

tone_control = Skill(
    id="tone_control",
    name="Tone Control",
    prompt=(
        "Maintain the requested tone consistently. Keep sentences tight, confident, and human. "
        "Avoid hype, buzzwords, and overly formal phrasing unless explicitly requested."
    ),
)

variant_generation = Skill(
    id="variant_generation",
    name="Variant Generation",
    prompt=(
        "Generate multiple options with distinct angles (different hooks, different proof "
        "types, different CTAs) while staying consistent with the inputs."
    ),
)

ALL_SKILLS = [
    compliance_spam_avoidance,
    conversion_copywriting,
    lead_magnet_structuring,
    offer_positioning,
    persona_understanding,
    tone_control,
    variant_generation,
]
