"""Bundled static catalog (catalog.json) — read via importlib.resources."""
