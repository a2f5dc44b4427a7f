"""
API Routers Package

Router Structure:
- books.py: /books/* endpoints (CRUD, error demo, SSE stream)

Each router is imported and registered in main.py.
"""

from catalog.routers.books import router as books_router

__all__ = [
    "books_router",
]
