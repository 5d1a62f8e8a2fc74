"""
FastAPI routers for the user service.

Each module exposes either an APIRouter (``users``) or the exception handlers
(``errors``) that the application factory wires in.
"""
