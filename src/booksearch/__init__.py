"""
Booksearch backend
GraphQL API for searching books and keeping a personal reading list
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
