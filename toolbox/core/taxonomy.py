"""
Directory taxonomy.

Categories, pricing tiers, prompt levels and interaction types shared by
the API validators, the seed dataset and the discovery pipelines.

Dependencies: None (pure domain layer)
System role: Closed vocabularies of the directory
"""

CATEGORIES: tuple[str, ...] = (
    "Writing & Content",
    "Research & Search",
    "Sales & Outreach",
    "Marketing & Ads",
    "Design & Images",
    "Video & Audio",
    "Coding & Dev Tools",
    "Data & Analytics",
    "Automation & Agents",
    "Customer Support",
    "HR & Recruiting",
    "Productivity & Knowledge",
    "Founders & Startups",
    "Enterprise & Ops",
)

DEFAULT_CATEGORY = "Productivity & Knowledge"

PRICING_TIERS: tuple[str, ...] = ("Free", "Freemium", "Paid", "Enterprise")

PROMPT_LEVELS: tuple[str, ...] = ("Beginner", "Advanced", "Pro")

INTERACTION_TYPES: tuple[str, ...] = ("like", "star", "bookmark")
