from library_catalog.routers import authors, books

__all__ = ["authors", "books"]
