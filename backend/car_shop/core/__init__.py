"""Core Layer — error hierarchy and boundary protocols, no IO.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or db/
"""
