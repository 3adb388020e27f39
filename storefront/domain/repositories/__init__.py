"""
Domain repositories package
"""

from .catalog_repository import CatalogRepository

__all__ = ["CatalogRepository"]
