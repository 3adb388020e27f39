from .basket_dtos import (
    AddItem,
    BasketCommand,
    BasketLineInfo,
    BasketOperationResponse,
    BasketSummary,
    ClearBasket,
    DecreaseItem,
    OrderMessage,
    RemoveItem,
    Totals,
)

__all__ = [
    "AddItem",
    "BasketCommand",
    "BasketLineInfo",
    "BasketOperationResponse",
    "BasketSummary",
    "ClearBasket",
    "DecreaseItem",
    "OrderMessage",
    "RemoveItem",
    "Totals",
]
