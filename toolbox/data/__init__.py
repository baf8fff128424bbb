"""Bundled seed dataset."""

from toolbox.data.seed_data import get_prompts_dataset, get_tools_dataset

__all__ = ["get_prompts_dataset", "get_tools_dataset"]
