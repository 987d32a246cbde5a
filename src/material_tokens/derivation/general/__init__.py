"""
general
=======

Does: Domain-agnostic helpers (token naming, config loading, debug logging).
Used by: color/ derivers and the orchestrator.
"""
