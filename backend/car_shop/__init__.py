"""Car Shop Application Package — JSON facade over the car dealership database.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "0.1.0"
