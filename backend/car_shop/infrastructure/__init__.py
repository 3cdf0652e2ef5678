"""Infrastructure Layer — database access, store error mapping, logging.

Invariants:
    - Every SQL value travels as a bound parameter (no string interpolation)
"""
