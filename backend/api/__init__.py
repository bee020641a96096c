"""REST API layer (FastAPI routers, request schemas, error handlers)."""
