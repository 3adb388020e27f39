"""
Infrastructure Layer

Contains all external dependencies and implementations:
- Startup data loading (company, catalog, site copy)
- In-memory catalog repository
- Logging infrastructure
- Shared constants, exceptions and helpers
"""
