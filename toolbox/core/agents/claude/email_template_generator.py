"""
Email template generator agent.

Produces a sales-ready email package (subject lines, short and long
bodies, CTA variants, personalization tokens and a follow-up) for one
goal, persona and tone. A deterministic template fallback covers missing
credentials and unusable model output.

Dependencies: anthropic, pydantic, toolbox.core.agents.claude
System role: Claude micro agent for outbound email copy
"""

from toolbox.core.agents.claude import skills
from toolbox.core.agents.claude.base_agent import ClaudeAgentBase
from toolbox.core.agents.claude.types import AgentRunContext
from toolbox.core.agents.claude.utils import (
    as_trimmed_string,
    extract_first_json_object,
    safe_json_parse,
    unique_strings,
)
from toolbox.core.exceptions import LLMResponseError, ValidationError
from toolbox.models.common import CamelModel

EMAIL_GOALS = (
    "Cold outbound",
    "Follow-up",
    "Partnership",
    "Webinar invite",
    "Customer onboarding",
    "Re-engagement",
)
TONES = ("Professional", "Direct", "Friendly", "Founder-style")


class EmailTemplateInput(CamelModel):
    email_goal: str
    target_persona: str
    company_description: str
    tone: str
    optional_context: str = ""
    pain_point_focus: str = ""
    industry: str = ""


class EmailTemplateOutput(CamelModel):
    subject_lines: list[str]
    short_version: str
    long_version: str
    personalization_tokens: list[str]
    cta_variants: list[str]
    follow_up_suggestion: str


def validate_email_template_input(body: dict) -> EmailTemplateInput:
    """
    Validate a raw request body.

    Checks run in a fixed order so the first failing rule is reported.

    Raises:
        ValidationError: With the user-facing message
    """
    body = body if isinstance(body, dict) else {}
    email_goal = as_trimmed_string(body.get("emailGoal"))
    target_persona = as_trimmed_string(body.get("targetPersona"))
    company_description = as_trimmed_string(body.get("companyDescription"))
    tone = as_trimmed_string(body.get("tone"))

    if email_goal not in EMAIL_GOALS:
        raise ValidationError("Invalid emailGoal", field="emailGoal")
    if tone not in TONES:
        raise ValidationError("Invalid tone", field="tone")
    if not target_persona:
        raise ValidationError("targetPersona is required", field="targetPersona")
    if not company_description:
        raise ValidationError("companyDescription is required", field="companyDescription")

    return EmailTemplateInput(
        email_goal=email_goal,
        target_persona=target_persona,
        company_description=company_description,
        tone=tone,
        optional_context=as_trimmed_string(body.get("optionalContext")),
        pain_point_focus=as_trimmed_string(body.get("painPointFocus")),
        industry=as_trimmed_string(body.get("industry")),
    )


def generate_email_template_fallback(input: EmailTemplateInput) -> EmailTemplateOutput:
    """Build a plausible email package from templates, without calling a model."""
    persona = input.target_persona.strip()
    industry = input.industry.strip()
    pain = input.pain_point_focus.strip()

    tokens = unique_strings(
        [
            "{{first_name}}",
            "{{company}}",
            "{{role}}",
            "{{industry}}",
            "{{pain_point}}",
            "{{proof_point}}",
            "{{cta_link}}",
            "{{calendar_link}}",
        ],
        12,
    )

    angle = pain or (f"{industry} priorities" if industry else "your current workflow")
    subject_lines = unique_strings(
        [
            "Quick question about {{company}}",
            f"{{{{first_name}}}}, idea for {angle}",
            f"Reducing {'{{pain_point}}' if pain else 'cycle time'} without extra headcount",
            "Worth a 10-min sanity check?",
            f"{' '.join(persona.split(' ')[:3])}: 1 thought",
        ],
        5,
    )

    if input.email_goal == "Follow-up":
        opener = "Hi {{first_name}}, circling back in case this got buried."
    else:
        in_industry = f" in {industry}" if industry else ""
        opener = f"Hi {{{{first_name}}}}, quick note since you're a {persona}{in_industry}."

    if pain:
        value = f"Teams like yours usually care about improving {pain} without creating extra process."
    else:
        value = "Teams like yours usually care about faster execution and fewer manual handoffs."

    audience = f"{industry} teams" if industry else "teams"
    company = (
        f"We help {audience} {{{{primary_outcome}}}} (e.g., {{{{proof_point}}}}) "
        "with a simple workflow your team can adopt in days."
    )

    ctas = unique_strings(
        [
            "Open to a quick 10 minutes next week to see if it's relevant?",
            "Worth a fast sanity check? If not a fit, I'll close the loop.",
            "If it's useful, I can share a 2-minute walkthrough + examples.",
            "Should I send over a short plan tailored to {{company}}?",
        ],
        5,
    )

    short_version = "\n".join(
        [opener, "", value, "", company, "", ctas[0], "", "- {{sender_name}}"]
    )

    if pain:
        reason = f"many teams hit {pain} once they scale past {{{{threshold}}}}."
    else:
        reason = "this role often ends up owning both outcomes and execution."
    long_version = "\n".join(
        [
            opener,
            "",
            f"I'm reaching out because {reason}",
            "",
            company,
            "",
            "If helpful, I can tailor a quick outline for {{company}} (what to change, "
            "what to measure, and where teams usually get stuck).",
            "",
            ctas[1],
            "",
            "Best,",
            "{{sender_name}}",
            "{{title}} • {{company_name}}",
        ]
    )

    follow_up = (
        "Follow-up (2-3 days later): Reply in the same thread, reference one concrete hook "
        "(a role change, a job post, or an initiative), restate the benefit in one line, and "
        'ask a yes/no question like: "Should I send the short version or is this not a '
        'priority right now?"'
    )

    return EmailTemplateOutput(
        subject_lines=subject_lines,
        short_version=short_version,
        long_version=long_version,
        personalization_tokens=tokens,
        cta_variants=ctas,
        follow_up_suggestion=follow_up,
    )


class EmailTemplateGeneratorAgent(ClaudeAgentBase[EmailTemplateInput, EmailTemplateOutput]):
    """Conversion copywriter agent for outbound and lifecycle emails."""

    id = "email-template-generator"
    name = "Email Template Generator"
    skills = [
        skills.persona_understanding,
        skills.conversion_copywriting,
        skills.tone_control,
        skills.variant_generation,
        skills.compliance_spam_avoidance,
    ]

    def build_system_prompt(self, input: EmailTemplateInput, context: AgentRunContext) -> str:
        return "\n".join(
            [
                "You are a world-class conversion copywriter and outbound strategist.",
                "Your job: generate sales-ready email templates that get replies.",
                "",
                "Skills:",
                self.skills_prompt(),
                "",
                "Output requirements:",
                "- Return ONLY valid JSON (no markdown, no commentary).",
                "- Be concise and human. Avoid hype, fluff, and spammy language.",
                "- Use placeholders/tokens like {{first_name}}, {{company}}, {{role}}, "
                "{{industry}}, {{pain_point}} when appropriate.",
                "- Keep formatting readable in plain text email clients.",
                "",
                f"Requested tone: {input.tone}",
            ]
        )

    def build_user_prompt(self, input: EmailTemplateInput, context: AgentRunContext) -> str:
        lines = [
            "Create an email template package with the following inputs.",
            "",
            f"Email goal: {input.email_goal}",
            f"Target persona: {input.target_persona}",
            f"Company/product description: {input.company_description}",
            f"Industry: {input.industry}" if input.industry else None,
            f"Pain point focus: {input.pain_point_focus}" if input.pain_point_focus else None,
            (
                "Optional context (LinkedIn/about, triggers, extra details): "
                f"{input.optional_context}"
            )
            if input.optional_context
            else None,
            "",
            "Return JSON with this exact shape:",
            "{",
            '  "subjectLines": ["..."], // 3-5 items',
            '  "shortVersion": "string",',
            '  "longVersion": "string",',
            '  "personalizationTokens": ["{{first_name}}", "{{company}}", "..."],',
            '  "ctaVariants": ["..."], // 3-5 items',
            '  "followUpSuggestion": "string"',
            "}",
            "",
            "Constraints:",
            "- Subject lines must be distinct angles (not minor rewrites).",
            "- Short version should fit on mobile (aim ~80-120 words).",
            "- Long version can be ~150-220 words with 1 proof point placeholder.",
            '- CTA variants must be low-friction and specific (avoid "Let me know your thoughts").',
            "- Follow-up suggestion should be a concrete follow-up email (not just advice).",
        ]
        # Blank separators are dropped along with the omitted optional lines
        return "\n".join(line for line in lines if line)

    def parse_output(self, raw_text: str) -> EmailTemplateOutput:
        candidate = extract_first_json_object(raw_text)
        if not candidate:
            raise LLMResponseError("Model did not return JSON", agent_id=self.id)

        parsed = safe_json_parse(candidate)
        if not parsed["ok"]:
            raise LLMResponseError(f"Failed to parse model JSON: {parsed['error']}", agent_id=self.id)

        o = parsed["value"] if isinstance(parsed["value"], dict) else {}
        subject_lines = unique_strings(o.get("subjectLines"), 5)
        cta_variants = unique_strings(o.get("ctaVariants"), 5)
        tokens = unique_strings(o.get("personalizationTokens"), 12)
        short_version = as_trimmed_string(o.get("shortVersion"))
        long_version = as_trimmed_string(o.get("longVersion"))
        follow_up = as_trimmed_string(o.get("followUpSuggestion"))

        if len(subject_lines) < 3 or not short_version or not long_version:
            raise LLMResponseError("Model output missing required fields", agent_id=self.id)

        return EmailTemplateOutput(
            subject_lines=subject_lines,
            short_version=short_version,
            long_version=long_version,
            personalization_tokens=tokens,
            cta_variants=cta_variants,
            follow_up_suggestion=follow_up,
        )
