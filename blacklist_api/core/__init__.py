"""Core Layer: pure domain logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or schemas/
"""
