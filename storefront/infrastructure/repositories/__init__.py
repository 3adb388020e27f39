from .in_memory_catalog_repository import InMemoryCatalogRepository

__all__ = ["InMemoryCatalogRepository"]
