"""Bundled sample collection data."""
