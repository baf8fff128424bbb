"""
Tests for the Claude micro agents' validation, fallbacks and output parsing.

No network: parse_output and the fallbacks are exercised directly.
"""

import json

import pytest

from toolbox.core.agents.claude.email_template_generator import EmailTemplateGeneratorAgent
from toolbox.core.agents.claude.lead_magnet_generator import (
    FORMATS,
    LeadMagnetGeneratorAgent,
    generate_lead_magnet_fallback,
    pick_recommended_format,
    validate_lead_magnet_input,
)
from toolbox.core.agents.claude.utils import extract_first_json_object, unique_strings
from toolbox.core.exceptions import LLMResponseError, ValidationError

LEAD_MAGNET_BODY = {
    "industry": "SaaS",
    "icpPersona": "Head of Growth",
    "leadMagnetGoal": "Webinar",
    "topicOrPainPoint": "Low trial conversion",
    "tone": "Direct",
}


class TestJsonHelpers:
    def test_json_fence_preferred_over_earlier_braces(self):
        text = 'Sure {not this}\n```json\n{"a": 1}\n```\nand ```{"b": 2}```'

        assert extract_first_json_object(text) == '{"a": 1}'

    def test_plain_fence_used_without_json_fence(self):
        assert extract_first_json_object('```\n{"b": 2}\n```') == '{"b": 2}'

    def test_brace_scan_balances_nested_objects(self):
        text = 'Here you go: {"a": {"b": [1, 2]}, "c": 3} trailing {"d": 4}'

        assert extract_first_json_object(text) == '{"a": {"b": [1, 2]}, "c": 3}'

    def test_no_object(self):
        assert extract_first_json_object("no json here") is None
        assert extract_first_json_object('{"unterminated": 1') is None
        assert extract_first_json_object(None) is None

    def test_unique_strings(self):
        items = ["  Alpha ", "alpha", "", None, 3, "Beta", "GAMMA", "gamma", "Delta"]

        assert unique_strings(items) == ["Alpha", "Beta", "GAMMA", "Delta"]
        assert unique_strings(items, limit=2) == ["Alpha", "Beta"]
        assert unique_strings("not a list") == []


class TestLeadMagnetValidation:
    @pytest.mark.parametrize(
        "missing,message",
        [
            ("industry", "industry is required"),
            ("icpPersona", "icpPersona is required"),
            ("topicOrPainPoint", "topicOrPainPoint is required"),
        ],
    )
    def test_required_fields(self, missing, message):
        body = dict(LEAD_MAGNET_BODY, **{missing: "   "})

        with pytest.raises(ValidationError) as exc_info:
            validate_lead_magnet_input(body)

        assert exc_info.value.message == message

    def test_required_fields_checked_before_enums(self):
        body = dict(LEAD_MAGNET_BODY, industry="", leadMagnetGoal="Bogus", tone="Bogus")

        with pytest.raises(ValidationError) as exc_info:
            validate_lead_magnet_input(body)

        assert exc_info.value.message == "industry is required"

    def test_goal_checked_before_tone(self):
        body = dict(LEAD_MAGNET_BODY, leadMagnetGoal="Bogus", tone="Bogus")

        with pytest.raises(ValidationError) as exc_info:
            validate_lead_magnet_input(body)

        assert exc_info.value.message == "Invalid leadMagnetGoal"

    def test_invalid_tone(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_lead_magnet_input(dict(LEAD_MAGNET_BODY, tone="Casual"))

        assert exc_info.value.message == "Invalid tone"

    def test_valid_body_is_trimmed(self):
        result = validate_lead_magnet_input(dict(LEAD_MAGNET_BODY, industry="  SaaS  "))

        assert result.industry == "SaaS"
        assert result.company_description == ""


class TestLeadMagnetFallback:
    @pytest.mark.parametrize(
        "goal,expected",
        [
            ("Outbound", "Template"),
            ("Webinar", "Playbook"),
            ("Product education", "Playbook"),
            ("Newsletter growth", "Checklist"),
            ("Capture leads", "Checklist"),
            ("Anything else", "Checklist"),
        ],
    )
    def test_pick_recommended_format(self, goal, expected):
        assert pick_recommended_format(goal) == expected

    def test_fallback_is_well_formed(self):
        output = generate_lead_magnet_fallback(validate_lead_magnet_input(LEAD_MAGNET_BODY))

        assert output.recommended_format == "Playbook"
        assert 3 <= len(output.title_options) <= 5
        assert [v.format for v in output.format_variants] == ["Checklist", "Playbook", "Template"]
        assert all(len(v.outline) >= 5 for v in output.format_variants)
        assert output.lead_magnet_draft.startswith(f"TITLE: {output.title_options[0]}")
        assert "FORMAT: Playbook" in output.lead_magnet_draft
        assert 3 <= len(output.cta_suggestions) <= 5
        assert 3 <= len(output.form_prompt_suggestions) <= 6
        assert output.nurture_email_draft.subject == "Your Playbook: Low trial conversion for Head of Growth"
        assert "{{first_name}}" in output.nurture_email_draft.body


def _lead_magnet_json(**overrides) -> str:
    payload = {
        "titleOptions": ["One", "Two", "two", "Three"],
        "recommendedFormat": "Report",
        "formatVariants": [
            {"format": "Report", "hook": "Data-led", "outline": ["a", "b", "c", "d", "e"]},
            {"format": "Webinar", "hook": "Not a format", "outline": ["a", "b", "c", "d", "e"]},
            {"format": "Checklist", "hook": "Short outline", "outline": ["a", "b"]},
        ],
        "leadMagnetDraft": "Draft body",
        "landingPageCopySnippet": "Headline",
        "ctaSuggestions": ["Get it", "Download", "Start"],
        "formPromptSuggestions": ["What is your goal?"],
        "nurtureEmailDraft": {"subject": " Hi ", "body": "Body"},
    }
    payload.update(overrides)
    return json.dumps(payload)


class TestLeadMagnetParseOutput:
    def test_parses_and_filters_variants(self):
        output = LeadMagnetGeneratorAgent().parse_output(f"```json\n{_lead_magnet_json()}\n```")

        assert output.title_options == ["One", "Two", "Three"]
        assert output.recommended_format == "Report"
        assert [v.format for v in output.format_variants] == ["Report"]
        assert output.nurture_email_draft.subject == "Hi"

    def test_unknown_format_and_no_variants_use_defaults(self):
        raw = _lead_magnet_json(recommendedFormat="Ebook", formatVariants=[])

        output = LeadMagnetGeneratorAgent().parse_output(raw)

        assert output.recommended_format == "Checklist"
        assert output.recommended_format in FORMATS
        assert len(output.format_variants) == 1
        assert output.format_variants[0].format == "Checklist"
        assert len(output.format_variants[0].outline) == 6

    def test_missing_required_fields(self):
        raw = _lead_magnet_json(ctaSuggestions=["Only one"])

        with pytest.raises(LLMResponseError) as exc_info:
            LeadMagnetGeneratorAgent().parse_output(raw)

        assert exc_info.value.message == "Model output missing required fields"


class TestEmailParseOutput:
    def test_parses_valid_output(self):
        raw = json.dumps(
            {
                "subjectLines": ["A", "B", "b", "C"],
                "shortVersion": " short ",
                "longVersion": "long",
                "personalizationTokens": ["{{first_name}}"],
                "ctaVariants": ["Call?", "Demo?", "Reply?"],
                "followUpSuggestion": "Follow up",
            }
        )

        output = EmailTemplateGeneratorAgent().parse_output(f"Here it is:\n{raw}")

        assert output.subject_lines == ["A", "B", "C"]
        assert output.short_version == "short"
        assert output.personalization_tokens == ["{{first_name}}"]

    def test_no_json(self):
        with pytest.raises(LLMResponseError) as exc_info:
            EmailTemplateGeneratorAgent().parse_output("I cannot help with that.")

        assert exc_info.value.message == "Model did not return JSON"

    def test_invalid_json(self):
        with pytest.raises(LLMResponseError) as exc_info:
            EmailTemplateGeneratorAgent().parse_output('{"subjectLines": [1, 2,]}')

        assert exc_info.value.message.startswith("Failed to parse model JSON: ")

    def test_missing_required_fields(self):
        raw = json.dumps({"subjectLines": ["Only", "Two"], "shortVersion": "s", "longVersion": "l"})

        with pytest.raises(LLMResponseError) as exc_info:
            EmailTemplateGeneratorAgent().parse_output(raw)

        assert exc_info.value.message == "Model output missing required fields"
