"""Packaged static data (movie character catalog)."""
