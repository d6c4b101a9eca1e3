"""Infrastructure Layer — catalog loading and logging setup.

Invariants:
    - All file IO of the service lives here (core/ stays pure)
"""
