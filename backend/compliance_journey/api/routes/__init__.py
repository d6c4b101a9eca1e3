"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain journey logic (delegate to core/)
    - The catalog arrives through Depends(get_catalog), never imported as a global
"""
