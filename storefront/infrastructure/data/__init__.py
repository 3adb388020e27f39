from .data_loader import DataLoader, StartupDocuments

__all__ = ["DataLoader", "StartupDocuments"]
