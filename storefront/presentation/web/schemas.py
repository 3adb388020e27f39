"""
API schemas

Request and response models for the basket JSON API.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from storefront.application.dtos.basket_dtos import (
    AddItem,
    BasketCommand,
    ClearBasket,
    DecreaseItem,
    RemoveItem,
)


class BasketCommandRequest(BaseModel):
    """One basket command"""

    type: Literal["add", "decrease", "remove", "clear"]
    product_id: Optional[str] = Field(default=None, min_length=1)
    quantity: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def _require_product(self):
        if self.type != "clear" and not self.product_id:
            raise ValueError(f"product_id is required for '{self.type}'")
        return self

    def to_command(self) -> BasketCommand:
        if self.type == "add":
            return AddItem(self.product_id, self.quantity)
        if self.type == "decrease":
            return DecreaseItem(self.product_id)
        if self.type == "remove":
            return RemoveItem(self.product_id)
        return ClearBasket()


class BasketLineModel(BaseModel):
    product_id: str
    name: str
    url: str
    unit_price: float
    quantity: int
    total_price: float
    quantity_label: str
    minus_icon: str
    minus_label: str
    minus_action: Literal["decrease", "remove"]
    plus_label: str


class TotalsModel(BaseModel):
    subtotal: float
    shipping_cost: float
    grand_total: float
    weight: float
    free_shipping: bool


class PanelModel(BaseModel):
    visible: bool
    button_label: str
    height: str
    badge_count: int
    badge_visible: bool
    product_total_line: str
    shipping_line: Optional[str] = None
    shipping_note: str
    grand_total_line: str
    order_button_label: str
    no_messenger_note: str


class BasketViewModel(BaseModel):
    success: bool = True
    error_message: Optional[str] = None
    query: str
    location: str
    lines: List[BasketLineModel]
    totals: TotalsModel
    panel: PanelModel


class ProductModel(BaseModel):
    id: str
    name: str
    url: str
    price: float
    short_desc: str
    basket_quantity: int
    in_basket: bool
    basket_label: Optional[str] = None


class CatalogModel(BaseModel):
    loaded: bool
    degraded: bool
    products: List[ProductModel]


class OrderModel(BaseModel):
    text: str
    link: str
    platform: str
    contact_link: str
