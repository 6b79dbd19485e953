"""Utility modules for Notion."""
