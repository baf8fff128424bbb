"""LLM agents: Claude micro agents and Gemini pipelines."""
