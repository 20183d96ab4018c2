"""Building blocks of the FastAPI application (bodies, dependencies, handlers)."""
