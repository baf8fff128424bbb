"""
Boundary layer for external system integrations.

Handles all interactions with external systems (Postgres, S3, RSS feeds).
Provides adapters and clients for infrastructure dependencies.
"""
