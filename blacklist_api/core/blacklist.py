"""Name Blacklist: the fixed list of names and the membership check.

Invariants:
    - BLACKLISTED_NAMES is built once at import and never mutated
    - Matching is case-insensitive equality on the full string
      (no substring, no trimming, no fuzzy match)
    - Pure functions, no IO
"""

BLACKLISTED_NAMES: tuple[str, ...] = (
    "John Smith",
    "Jane Doe",
    "Mike Johnson",
    "Sarah Wilson",
    "Robert Brown",
    "Emily Davis",
    "David Miller",
    "Lisa Garcia",
    "James Rodriguez",
    "Maria Martinez",
)

_NORMALIZED = frozenset(entry.lower() for entry in BLACKLISTED_NAMES)


def list_blacklisted() -> list[str]:
    """All blacklisted names in configured order (a copy)."""
    return list(BLACKLISTED_NAMES)


def is_blacklisted(name: str) -> bool:
    return name.lower() in _NORMALIZED
