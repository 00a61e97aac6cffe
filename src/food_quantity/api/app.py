"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from food_quantity.api.models import (
    DefaultQuantityRequest,
    FoodValuePayload,
    QuantityPayload,
    QuantityRequest,
)
from food_quantity.app_logging import configure_logging
from food_quantity.containers import AppContainer
from food_quantity.domain.errors import QuantityError
from food_quantity.domain.quantities import Quantity

_UNPROCESSABLE = 422


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(QuantityError)
    async def quantity_error_handler(
        request: Request, exc: QuantityError
    ) -> JSONResponse:
        logger.info("Rejected %s: %s", request.url.path, exc)
        return JSONResponse(status_code=_UNPROCESSABLE, content=exc.to_dict())

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        logger.info("Invalid payload for %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=_UNPROCESSABLE,
            content={"message": str(exc), "code": "invalid_payload"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/quantities/food-value")
    async def food_value(payload: QuantityRequest, request: Request) -> FoodValuePayload:
        """Normalize a value in a unit into a storage-ready food value."""
        state_container: AppContainer = request.app.state.container
        service = state_container.quantity_service(payload.user_id)
        food = payload.food.to_domain()
        unit = payload.unit.to_domain(food)
        return FoodValuePayload.from_domain(service.food_value(payload.value, unit, food))

    @app.post("/quantities/equivalents")
    async def equivalents(
        payload: QuantityRequest, request: Request
    ) -> dict[str, list[QuantityPayload]]:
        """Return the quantity in every other unit the food supports."""
        state_container: AppContainer = request.app.state.container
        service = state_container.quantity_service(payload.user_id)
        food = payload.food.to_domain()
        quantity = Quantity(
            value=payload.value, unit=payload.unit.to_domain(food), food=food
        )
        return {
            "quantities": [
                QuantityPayload.from_domain(item)
                for item in service.equivalents(quantity)
            ]
        }

    @app.post("/quantities/default")
    async def default_quantity(
        payload: DefaultQuantityRequest, request: Request
    ) -> dict[str, QuantityPayload | None]:
        """Return the quantity to prefill for a food."""
        state_container: AppContainer = request.app.state.container
        service = state_container.quantity_service(payload.user_id)
        quantity = service.default_quantity(payload.food.to_domain())
        return {
            "quantity": QuantityPayload.from_domain(quantity) if quantity else None
        }

    return app
