"""
Storefront basket engine

Client-side basket state, pricing and order message handling for the
storefront, plus a small stateless JSON API over it.
"""

__version__ = "1.0.0"
