"""Infrastructure Layer: cross-cutting concerns (logging, rate limiting).

Invariants:
    - Infrastructure never holds request-visible state besides limiter counters
"""
