"""Helpers shared by the router packages."""
