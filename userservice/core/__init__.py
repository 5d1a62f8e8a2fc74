"""
Core utilities shared across the user service.

This package hosts:
- configuration helpers (env vars, storage backend selection)
- cross-cutting concerns such as logging setup.
"""
