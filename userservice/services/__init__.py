"""
High-level use cases for the user service.

Routers (FastAPI endpoints) call these services instead of touching the
repositories directly.
"""
