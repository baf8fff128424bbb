"""
Lead magnet generator agent.

Produces a PDF-style lead magnet draft plus its conversion assets
(titles, format variants, landing page snippet, CTAs, form prompts and a
nurture email) for one industry, persona and topic.

Dependencies: anthropic, pydantic, toolbox.core.agents.claude
System role: Claude micro agent for demand-gen content
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

LEAD_MAGNET_GOALS = ("Capture leads", "Webinar", "Outbound", "Product education", "Newsletter growth")
TONES = ("Professional", "Direct", "Friendly", "Founder-style")
FORMATS = ("Checklist", "Playbook", "Report", "Template")

_RECOMMENDED_FORMATS = {
    "Outbound": "Template",
    "Webinar": "Playbook",
    "Newsletter growth": "Checklist",
    "Product education": "Playbook",
    "Capture leads": "Checklist",
}


class LeadMagnetInput(CamelModel):
    industry: str
    icp_persona: str
    lead_magnet_goal: str
    topic_or_pain_point: str
    tone: str
    company_description: str = ""
    brand_style_notes: str = ""


class FormatVariant(CamelModel):
    format: str
    hook: str
    outline: list[str]


class NurtureEmailDraft(CamelModel):
    subject: str = ""
    body: str = ""


class LeadMagnetOutput(CamelModel):
    title_options: list[str]
    recommended_format: str
    format_variants: list[FormatVariant]
    lead_magnet_draft: str
    landing_page_copy_snippet: str
    cta_suggestions: list[str]
    form_prompt_suggestions: list[str]
    nurture_email_draft: NurtureEmailDraft


def pick_recommended_format(goal: str) -> str:
    """Map a lead magnet goal to its default format (Checklist when unknown)."""
    return _RECOMMENDED_FORMATS.get(goal, "Checklist")


def validate_lead_magnet_input(body: dict) -> LeadMagnetInput:
    """
    Validate a raw request body.

    Raises:
        ValidationError: With the user-facing message for the first failing rule
    """
    body = body if isinstance(body, dict) else {}
    industry = as_trimmed_string(body.get("industry"))
    icp_persona = as_trimmed_string(body.get("icpPersona"))
    goal = as_trimmed_string(body.get("leadMagnetGoal"))
    topic = as_trimmed_string(body.get("topicOrPainPoint"))
    tone = as_trimmed_string(body.get("tone"))

    if not industry:
        raise ValidationError("industry is required", field="industry")
    if not icp_persona:
        raise ValidationError("icpPersona is required", field="icpPersona")
    if not topic:
        raise ValidationError("topicOrPainPoint is required", field="topicOrPainPoint")
    if goal not in LEAD_MAGNET_GOALS:
        raise ValidationError("Invalid leadMagnetGoal", field="leadMagnetGoal")
    if tone not in TONES:
        raise ValidationError("Invalid tone", field="tone")

    return LeadMagnetInput(
        industry=industry,
        icp_persona=icp_persona,
        lead_magnet_goal=goal,
        topic_or_pain_point=topic,
        tone=tone,
        company_description=as_trimmed_string(body.get("companyDescription")),
        brand_style_notes=as_trimmed_string(body.get("brandStyleNotes")),
    )


def generate_lead_magnet_fallback(input: LeadMagnetInput) -> LeadMagnetOutput:
    """Build a complete lead magnet package from templates, without calling a model."""
    fmt = pick_recommended_format(input.lead_magnet_goal)
    persona = input.icp_persona.strip()
    industry = input.industry.strip()
    topic = input.topic_or_pain_point.strip()

    titles = unique_strings(
        [
            f"{topic}: The {fmt} for {persona} in {industry}",
            f"The {industry} {persona} {fmt} to Fix {topic}",
            f"{topic} in 30 Minutes: A {fmt} for Busy {persona}",
            f"Stop Guessing: A Practical {fmt} for {persona} on {topic}",
            f'From "Stuck" to "Shipped": The {topic} {fmt} for {industry} Teams',
        ],
        5,
    )

    variants = [
        FormatVariant(
            format="Checklist",
            hook=f"A fast, decision-ready checklist to assess and fix {topic} without boiling the ocean.",
            outline=[
                "1-page overview + who it's for",
                "Readiness checklist (10 items)",
                "Top 5 failure modes + fixes",
                "Quick-start plan (7 days)",
                "Metrics to track + targets",
                "Tooling/ops template (copy/paste)",
            ],
        ),
        FormatVariant(
            format="Playbook",
            hook=f"A step-by-step playbook to implement improvements for {topic} with minimal risk.",
            outline=[
                "Executive summary + success criteria",
                "Persona lens: what matters to this role",
                "Phase 1: Diagnose (questions + data sources)",
                "Phase 2: Design (options + tradeoffs)",
                "Phase 3: Implement (sprints + responsibilities)",
                "Phase 4: Prove impact (metrics + narrative)",
            ],
        ),
        FormatVariant(
            format="Template",
            hook=f"A fill-in-the-blank template to turn {topic} into an action plan you can share internally.",
            outline=[
                "Problem statement (copy/paste)",
                "Impact + cost of delay calculator",
                "Hypothesis + assumptions list",
                "Plan of record (30/60/90)",
                "Stakeholder update email",
                "Post-mortem / learnings section",
            ],
        ),
    ]

    draft = "\n".join(
        [
            f"TITLE: {titles[0]}",
            f"FORMAT: {fmt}",
            "",
            "WHO THIS IS FOR",
            f"- {persona} in {industry}",
            "",
            "THE PROMISE (1-2 lines)",
            f"- If you're dealing with {topic}, this gives you a clear, low-risk path to improve it in days, not months.",
            "",
            "QUICK START (15 minutes)",
            "- Circle the 3 biggest constraints you have right now: time / budget / data / approvals / tooling / team capacity",
            "- Choose one metric to move first (pick one): cycle time, conversion rate, response rate, cost per lead, meeting rate",
            "- Run the readiness checklist below and score each item 0-2",
            "",
            "READINESS CHECKLIST (score 0-2 each)",
            f'1) We can define "{topic}" in one sentence everyone agrees on.',
            "2) We have one source of truth for the core metric.",
            "3) We can name the top 3 root causes (not symptoms).",
            '4) We have one "golden path" workflow documented.',
            "5) We have a feedback loop (weekly) to review results.",
            "",
            "TOP 5 FAILURE MODES (AND FIXES)",
            "1) Vague goal -> Fix: write a single success statement + metric target.",
            "2) Too many stakeholders -> Fix: one owner + weekly decision slot.",
            "3) No proof -> Fix: add one baseline + one test.",
            "4) Over-engineering -> Fix: ship the smallest version in 7 days.",
            "5) No follow-through -> Fix: assign owners + dates for each step.",
            "",
            "7-DAY ACTION PLAN",
            "Day 1: baseline the metric + define success",
            "Day 2: map the workflow + identify the biggest bottleneck",
            'Day 3: pick 1 experiment + define what "win" looks like',
            "Day 4: implement the change",
            "Day 5: quality check + rollout",
            "Day 6: measure results + capture learnings",
            "Day 7: decide next iteration + document the new standard",
            "",
            "COPY/PASTE TEMPLATE: INTERNAL UPDATE",
            "Subject: [Update] Fixing {{topic}}: baseline + 7-day plan",
            "",
            "Team,",
            "We're addressing {{topic}}. Baseline: {{metric}} is currently {{baseline}}.",
            "This week we'll run one focused change: {{experiment}}. Success = {{target}}.",
            "Owner: {{owner}}. Next update: {{date}}.",
            "",
            "NEXT STEP",
            "- Want the tailored version for your situation? Answer the form prompts below and generate a custom draft.",
        ]
    )

    landing_copy = "\n".join(
        [
            f"Headline: Fix {topic} with a practical {fmt} for {persona}",
            f"Subhead: Built for {industry} teams. Get a clear plan, templates, and a 7-day quick start.",
            "Bullets:",
            f"- Diagnose the root causes of {topic} in 15 minutes",
            "- Use ready-to-copy templates to align stakeholders",
            "- Run a 7-day plan and prove impact with one metric",
            "CTA: Generate your free lead magnet",
        ]
    )

    ctas = unique_strings(
        [
            "Generate my free lead magnet",
            "Get the checklist + templates",
            "Build my custom playbook",
            "Send me the lead magnet",
            "Create the landing page copy",
        ],
        5,
    )

    form_prompts = unique_strings(
        [
            f'What\'s your #1 objective related to "{topic}" in the next 30 days?',
            "What is your current baseline metric (if known)?",
            "What is the biggest constraint (time, budget, data, approvals, tooling, team capacity)?",
            "What is the most common failure mode you see today?",
            "What proof point can you include (case study, stat, customer quote, metric placeholder)?",
            "What should the reader do next (book a call, start a trial, join a webinar, reply to an email)?",
        ],
        6,
    )

    nurture_email = NurtureEmailDraft(
        subject=f"Your {fmt}: {topic} for {persona}",
        body="\n".join(
            [
                "Hi {{first_name}},",
                "",
                f"Here's the {fmt} we put together on {topic} for {persona} teams in {industry}.",
                "",
                "What you'll get inside:",
                f"- A quick-start checklist to diagnose {topic}",
                "- A 7-day action plan",
                "- Copy/paste templates to align the team",
                "",
                "If you want, reply with 2 details and I'll tailor a version to your situation:",
                "1) Your baseline metric (if you know it)",
                "2) Your biggest constraint right now (time/budget/data/etc.)",
                "",
                "- {{sender_name}}",
            ]
        ),
    )

    return LeadMagnetOutput(
        title_options=titles,
        recommended_format=fmt,
        format_variants=variants,
        lead_magnet_draft=draft,
        landing_page_copy_snippet=landing_copy,
        cta_suggestions=ctas,
        form_prompt_suggestions=form_prompts,
        nurture_email_draft=nurture_email,
    )


class LeadMagnetGeneratorAgent(ClaudeAgentBase[LeadMagnetInput, LeadMagnetOutput]):
    """Demand-gen strategist agent for lead magnet drafts."""

    id = "lead-magnet-generator"
    name = "Lead Magnet Generator"
    skills = [
        skills.offer_positioning,
        skills.persona_understanding,
        skills.lead_magnet_structuring,
        skills.conversion_copywriting,
        skills.tone_control,
        skills.variant_generation,
        skills.compliance_spam_avoidance,
    ]

    # PDF-style asset plus variants needs more room than an email
    max_tokens = 2600
    temperature = 0.6

    def build_system_prompt(self, input: LeadMagnetInput, context: AgentRunContext) -> str:
        lines = [
            "You are a world-class demand gen strategist and conversion copywriter.",
            "Your job: generate a high-converting lead magnet draft (PDF-style content) plus conversion assets.",
            "",
            "Skills:",
            self.skills_prompt(),
            "",
            "Output requirements:",
            "- Return ONLY valid JSON (no markdown, no commentary).",
            "- Be specific to the persona and industry; avoid generic advice.",
            "- Use clean plain-text formatting inside strings (headings, bullets, numbered steps).",
            "- Keep it practical: templates, checklists, step-by-step.",
            "- Use placeholders where helpful (e.g., {{metric}}, {{baseline}}, {{proof_point}}).",
            "",
            f"Requested tone: {input.tone}",
            f"Brand style notes: {input.brand_style_notes}" if input.brand_style_notes else None,
        ]
        return "\n".join(line for line in lines if line)

    def build_user_prompt(self, input: LeadMagnetInput, context: AgentRunContext) -> str:
        lines = [
            "Create a lead magnet package using these inputs:",
            "",
            f"Industry: {input.industry}",
            f"ICP persona: {input.icp_persona}",
            f"Goal: {input.lead_magnet_goal}",
            f"Topic / pain point: {input.topic_or_pain_point}",
            (
                f"Company description (optional): {input.company_description}"
                if input.company_description
                else None
            ),
            "",
            "Return JSON with this exact shape:",
            "{",
            '  "titleOptions": ["..."], // 3-5 distinct options',
            '  "recommendedFormat": "Checklist" | "Playbook" | "Report" | "Template",',
            '  "formatVariants": [',
            '    { "format": "Checklist" | "Playbook" | "Report" | "Template", "hook": "string", "outline": ["..."] }',
            "  ], // 3-4 items, distinct formats/angles",
            '  "leadMagnetDraft": "string", // full PDF-style content with headings + bullets',
            '  "landingPageCopySnippet": "string", // headline, subhead, bullets, CTA (plain text)',
            '  "ctaSuggestions": ["..."], // 3-5',
            '  "formPromptSuggestions": ["..."], // 3-6',
            '  "nurtureEmailDraft": { "subject": "string", "body": "string" }',
            "}",
            "",
            "Constraints:",
            "- The draft must be immediately usable (not an outline only).",
            '- Include a "Quick Start" section, a checklist/template section, and a "Next step" CTA.',
            "- Landing page snippet should sound like a real high-converting page (no fluff).",
            "- CTA suggestions must be low-friction and specific.",
            "- Nurture email should be 120-180 words and include a simple reply prompt or next step.",
        ]
        return "\n".join(line for line in lines if line)

    def parse_output(self, raw_text: str) -> LeadMagnetOutput:
        candidate = extract_first_json_object(raw_text)
        if not candidate:
            raise LLMResponseError("Model did not return JSON", agent_id=self.id)

        parsed = safe_json_parse(candidate)
        if not parsed["ok"]:
            raise LLMResponseError(f"Failed to parse model JSON: {parsed['error']}", agent_id=self.id)

        o = parsed["value"] if isinstance(parsed["value"], dict) else {}

        title_options = unique_strings(o.get("titleOptions"), 5)
        cta_suggestions = unique_strings(o.get("ctaSuggestions"), 5)
        form_prompts = unique_strings(o.get("formPromptSuggestions"), 6)

        recommended = as_trimmed_string(o.get("recommendedFormat"))
        if recommended not in FORMATS:
            recommended = pick_recommended_format("Capture leads")

        variants: list[FormatVariant] = []
        raw_variants = o.get("formatVariants") if isinstance(o.get("formatVariants"), list) else []
        for v in raw_variants:
            v = v if isinstance(v, dict) else {}
            fmt = as_trimmed_string(v.get("format"))
            hook = as_trimmed_string(v.get("hook"))
            outline = unique_strings(v.get("outline"), 10)
            if fmt in FORMATS and hook and len(outline) >= 5:
                variants.append(FormatVariant(format=fmt, hook=hook, outline=outline))
        variants = variants[:4]

        draft = as_trimmed_string(o.get("leadMagnetDraft"))
        landing = as_trimmed_string(o.get("landingPageCopySnippet"))
        nurture_raw = o.get("nurtureEmailDraft") if isinstance(o.get("nurtureEmailDraft"), dict) else {}
        nurture = NurtureEmailDraft(
            subject=as_trimmed_string(nurture_raw.get("subject")),
            body=as_trimmed_string(nurture_raw.get("body")),
        )

        if len(title_options) < 3 or not draft or not landing or len(cta_suggestions) < 3:
            raise LLMResponseError("Model output missing required fields", agent_id=self.id)

        if not variants:
            variants = [
                FormatVariant(
                    format=recommended,
                    hook="A practical asset tailored to the persona, focused on outcomes and quick wins.",
                    outline=[
                        "Who it's for + what you'll get",
                        "Quick start",
                        "Checklist / steps",
                        "Templates + examples",
                        "Common pitfalls + fixes",
                        "Next step CTA",
                    ],
                )
            ]

        return LeadMagnetOutput(
            title_options=title_options,
            recommended_format=recommended,
            format_variants=variants,
            lead_magnet_draft=draft,
            landing_page_copy_snippet=landing,
            cta_suggestions=cta_suggestions,
            form_prompt_suggestions=form_prompts,
            nurture_email_draft=nurture,
        )
