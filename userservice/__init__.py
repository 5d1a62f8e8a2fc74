"""User management REST service (list, fetch and create users)."""
