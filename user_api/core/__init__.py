"""Core Layer: domain types, error hierarchy and storage contract. No IO.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
"""
