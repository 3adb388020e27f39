"""
Storefront JSON API

Stateless: every request carries its basket in the query string. The basket
is rebuilt from it, at most one command is applied, and the answer includes
the new query string for the client to put in its address bar.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request

from storefront import __version__
from storefront.application.dtos.basket_dtos import (
    BasketOperationResponse,
    DecreaseItem,
)
from storefront.application.session import BasketSession
from storefront.container import StorefrontController
from storefront.infrastructure.logging.logging_config import get_structured_logger
from storefront.infrastructure.utilities.exceptions import EmptyBasketError
from storefront.infrastructure.utilities.helpers import parse_quantity
from storefront.presentation.basket_view import BasketPanelView
from storefront.presentation.web.schemas import (
    BasketCommandRequest,
    BasketLineModel,
    BasketViewModel,
    CatalogModel,
    OrderModel,
    PanelModel,
    ProductModel,
    TotalsModel,
)

logger = logging.getLogger(__name__)
events = get_structured_logger(__name__)

VIEWPORT_WIDTH_HEADERS = ("sec-ch-viewport-width", "viewport-width")


def viewport_width(request: Request) -> Optional[int]:
    """Client-hint viewport width, None when absent or unparseable"""
    for header in VIEWPORT_WIDTH_HEADERS:
        width = parse_quantity(request.headers.get(header))
        if width is not None:
            return width
    return None


def create_app(controller: Optional[StorefrontController] = None) -> FastAPI:
    """Build the API around a controller (a fresh one by default)"""
    controller = controller or StorefrontController()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not controller.is_loaded:
            await controller.load()
        events.info(
            "storefront_api_started",
            products=len(controller.data.catalog.find_all()),
            degraded=controller.data.degraded,
        )
        yield
        events.info("storefront_api_stopped")

    app = FastAPI(title="Storefront Basket API", version=__version__, lifespan=lifespan)
    app.state.controller = controller

    def get_session(request: Request) -> BasketSession:
        session = controller.open_session(
            initial_query=request.url.query,
            user_agent=request.headers.get("user-agent"),
            viewport_width=viewport_width(request),
        )
        session.rehydrate()
        return session

    def basket_view(session: BasketSession, response: BasketOperationResponse) -> BasketViewModel:
        summary = response.summary
        view = BasketPanelView.from_summary(
            summary, session.data.copy, controller.settings.currency_suffix
        )
        return BasketViewModel(
            success=response.success,
            error_message=response.error_message,
            query=session.location.query,
            location=session.location.search,
            lines=[
                BasketLineModel(
                    product_id=line.product_id,
                    name=line.name,
                    url=line.url,
                    unit_price=line.unit_price.to_float(),
                    quantity=line.quantity,
                    total_price=line.total_price.to_float(),
                    quantity_label=control.quantity_label,
                    minus_icon=control.minus_icon,
                    minus_label=control.minus_label,
                    minus_action="decrease" if isinstance(control.minus_command, DecreaseItem) else "remove",
                    plus_label=control.plus_label,
                )
                for line, control in zip(summary.items, view.lines)
            ],
            totals=TotalsModel(
                subtotal=summary.totals.subtotal.to_float(),
                shipping_cost=summary.totals.shipping_cost.to_float(),
                grand_total=summary.totals.grand_total.to_float(),
                weight=float(summary.totals.weight),
                free_shipping=summary.totals.is_free_shipping,
            ),
            panel=PanelModel(
                visible=session.panel.is_shown,
                button_label=session.panel.button_label,
                height=session.panel.height,
                badge_count=view.badge_count,
                badge_visible=view.badge_visible,
                product_total_line=view.product_total_line,
                shipping_line=view.shipping_line,
                shipping_note=view.shipping_note,
                grand_total_line=view.grand_total_line,
                order_button_label=view.order_button_label,
                no_messenger_note=session.formatter.no_messenger_note(),
            ),
        )

    @app.get("/health")
    async def health_check():
        """Liveness plus startup data status"""
        return {
            "status": "ok",
            "version": __version__,
            "data_loaded": controller.data.loaded,
            "degraded": controller.data.degraded,
            "products": len(controller.data.catalog.find_all()),
        }

    @app.get("/api/catalog", response_model=CatalogModel)
    async def catalog(session: BasketSession = Depends(get_session)):
        """Products with their current basket quantity"""
        return CatalogModel(
            loaded=controller.data.loaded,
            degraded=controller.data.degraded,
            products=[
                ProductModel(
                    id=product.id.value,
                    name=product.name,
                    url=product.url,
                    price=product.price.to_float(),
                    short_desc=product.short_desc,
                    basket_quantity=session.store.quantity_of(product.id.value),
                    in_basket=session.store.is_in_basket(product.id.value),
                    basket_label=(
                        session.data.copy.tr("addedToBasket")
                        if session.store.is_in_basket(product.id.value)
                        else None
                    ),
                )
                for product in controller.data.catalog.find_all()
            ],
        )

    @app.get("/api/basket", response_model=BasketViewModel)
    async def get_basket(session: BasketSession = Depends(get_session)):
        """Basket rebuilt from the query string"""
        return basket_view(session, session.store.refresh())

    @app.post("/api/basket/commands", response_model=BasketViewModel)
    async def apply_command(
        body: BasketCommandRequest, session: BasketSession = Depends(get_session)
    ):
        """Apply one command and return the new basket and query string"""
        response = session.dispatch(body.to_command())
        return basket_view(session, response)

    @app.get("/api/basket/order", response_model=OrderModel)
    async def order(session: BasketSession = Depends(get_session)):
        """Order message and WhatsApp deep link for the caller's platform"""
        try:
            message = session.order_message()
        except EmptyBasketError as e:
            logger.info("🛒 ORDER REFUSED: %s", e)
            raise HTTPException(status_code=409, detail=e.user_message) from e
        return OrderModel(
            text=message.text,
            link=message.link,
            platform=message.platform.value,
            contact_link=session.contact_link(),
        )

    return app
