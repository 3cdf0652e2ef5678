"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never catch store errors (error_handlers classifies them)
"""
