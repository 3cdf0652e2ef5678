"""Pydantic Schemas — request/response contract of the HTTP surface.

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
