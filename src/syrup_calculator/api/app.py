"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from syrup_calculator.api.models import (
    BaseOut,
    CalculateRequest,
    CalculateResponse,
    FlavorOut,
)
from syrup_calculator.app_logging import configure_logging
from syrup_calculator.containers import AppContainer
from syrup_calculator.domain.recipes import CalculationTarget
from syrup_calculator.services.calculator import InvalidInputError
from syrup_calculator.services.catalog import (
    IncompatibleRecipeError,
    RecipeNotFoundError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Syrup Calculator")
    app.state.container = container

    @app.exception_handler(RecipeNotFoundError)
    async def handle_not_found(
        request: Request, exc: RecipeNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(IncompatibleRecipeError)
    async def handle_incompatible(
        request: Request, exc: IncompatibleRecipeError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
        )

    @app.exception_handler(InvalidInputError)
    async def handle_invalid_input(
        request: Request, exc: InvalidInputError
    ) -> JSONResponse:
        logger.info("Rejected calculation input: %s", exc)
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "field": exc.field},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/bases", response_model=list[BaseOut])
    async def list_bases(request: Request) -> list[BaseOut]:
        """Return every base recipe."""
        state_container: AppContainer = request.app.state.container
        return [
            BaseOut.from_domain(base)
            for base in state_container.catalog_service.list_bases()
        ]

    @app.get("/flavors", response_model=list[FlavorOut])
    async def list_flavors(
        request: Request, base_id: str | None = None
    ) -> list[FlavorOut]:
        """Return flavors, optionally only those compatible with a base."""
        state_container: AppContainer = request.app.state.container
        return [
            FlavorOut.from_domain(flavor)
            for flavor in state_container.catalog_service.list_flavors(base_id)
        ]

    @app.post("/calculate", response_model=CalculateResponse)
    async def calculate(
        payload: CalculateRequest, request: Request
    ) -> CalculateResponse:
        """Scale a base+flavor pair and return it with its safety verdict."""
        state_container: AppContainer = request.app.state.container
        calculation = state_container.recipe_service.calculate(
            payload.base_id,
            payload.flavor_id,
            CalculationTarget(
                volume=payload.volume,
                target_caffeine=payload.target_caffeine,
                serving_size=payload.serving_size,
            ),
        )
        return CalculateResponse.from_domain(calculation)

    return app
