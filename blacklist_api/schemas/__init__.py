"""Pydantic Schemas: response contracts for API endpoints.

Invariants:
    - Schemas describe the wire format; core/ never imports them
"""
