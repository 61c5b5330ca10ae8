"""Router exports for the Catalog API."""
from . import browse, details, embed, health, home, search

__all__ = ["browse", "details", "embed", "health", "home", "search"]
