"""Core Layer: domain entities, in-memory table store, no HTTP, no async.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Store operations are synchronous and atomic with respect to their collection
"""
