"""HTTP layer: FastAPI application factory and route handlers."""
