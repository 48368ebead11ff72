"""Blacklist Mock API package: health probe and name blacklist lookup.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
