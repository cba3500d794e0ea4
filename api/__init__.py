"""HTTP surface: FastAPI routes and dependency providers."""
