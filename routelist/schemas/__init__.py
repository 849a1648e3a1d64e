"""Pydantic Schemas: request/response validation for the table API.

Invariants:
    - Schemas validate at the system boundary; the store never sees raw JSON
    - Wire names are camelCase, Python attributes snake_case
"""
