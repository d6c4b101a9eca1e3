"""Core Layer — pure journey logic, no IO, no async, no logging.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - All functions are pure and deterministic over (catalog, completed_ids)
    - Completed-sets are read, never retained or mutated

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
    - Catalog passed explicitly to every function, never read from a module global
"""
