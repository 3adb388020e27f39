"""
Domain entities package

Contains the core business entities of the storefront.
"""

from .basket_entity import Basket, BasketItem
from .company_entity import CompanyInfo
from .product_entity import Product

__all__ = ["Basket", "BasketItem", "CompanyInfo", "Product"]
