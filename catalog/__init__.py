"""
Book Catalog API Package

Package Structure:
- config.py: Application configuration using Pydantic Settings
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- exceptions.py: Application errors mapped to HTTP responses
- schemas/: Pydantic models (Book, Genre, ErrorResponse)
- routers/: API route handlers
- services/: Book store, streaming, rate limiting
"""

__version__ = "0.1.0"
