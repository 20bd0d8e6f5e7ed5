"""Shared constants for Skillset."""
