"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Request schemas validate at the system boundary before a service is called
    - Response schemas never expose User.password
    - Domain enums from core/ are used directly for role and status fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
