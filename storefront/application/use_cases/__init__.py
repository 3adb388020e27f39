from .basket_management_use_case import BasketManagementUseCase

__all__ = ["BasketManagementUseCase"]
