"""Schemas — pydantic models for the catalog file and the HTTP boundary.

Invariants:
    - Schemas validate shape only; graph rules (cycles, unknown ids) live in core/
"""
