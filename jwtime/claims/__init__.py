"""Temporal claim coercion and validation."""
