"""Prompt templates for the Gemini pipelines."""
