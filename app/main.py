"""
FastAPI Application Entry Point

Food Ordering API - dishes and delivery orders backed by in-memory stores.

Endpoints:
    - GET/POST /dishes: List or create dishes
    - GET/PUT /dishes/{dish_id}: Read or replace a dish
    - GET/POST /orders: List or place orders
    - GET/PUT/DELETE /orders/{order_id}: Read, replace or delete an order
    - GET /health: System health check

Request and response bodies wrap records in a ``data`` envelope; errors
are rendered as ``{"error": message}``.

Author: Khalil Bannouri
Version: 3.0.0
"""

import logging
from datetime import datetime
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings, setup_logging
from app.core.exceptions import ApplicationError
from app.schemas import (
    RequestEnvelope,
    DishResponse,
    DishListResponse,
    DishSchema,
    OrderResponse,
    OrderListResponse,
    OrderSchema,
    ErrorResponse,
    HealthResponse,
)
from app.services import (
    DishService,
    OrderService,
    get_dish_service,
    get_order_service,
)
from app.services.stores import get_dish_store, get_order_store

# Initialize configuration and logging
settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.
    """
    logger.info("=" * 60)
    logger.info(f"🚀 Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Environment: {settings.env_mode.value}")
    logger.info(f"   Debug: {settings.debug}")
    logger.info("=" * 60)

    dish_store = get_dish_store()
    order_store = get_order_store()
    logger.info(f"✅ Dish Store: {dish_store.provider_name} ({dish_store.count()} dishes)")
    logger.info(f"✅ Order Store: {order_store.provider_name} ({order_store.count()} orders)")
    logger.info("✅ Application ready!")

    yield  # Application runs

    logger.info("Shutting down...")


# =============================================================================
# APPLICATION INSTANCE
# =============================================================================

app = FastAPI(
    title=settings.app_name,
    description="Dishes and delivery orders for a food-ordering application.",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


# =============================================================================
# ROOT & HEALTH ENDPOINTS
# =============================================================================

@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """API root with navigation links."""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "environment": settings.env_mode.value,
        "documentation": "/docs",
        "health": "/health",
    }


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="System Health Check",
)
async def health_check(
    dishes: DishService = Depends(get_dish_service),
    orders: OrderService = Depends(get_order_service),
) -> HealthResponse:
    """Verify both stores are operational."""
    dish_status = "healthy" if dishes.store.health_check() else "unhealthy"
    order_status = "healthy" if orders.store.health_check() else "unhealthy"

    overall = "operational" if dish_status == order_status == "healthy" else "degraded"

    return HealthResponse(
        status=overall,
        dish_store=dish_status,
        order_store=order_status,
        dishes=dishes.store.count(),
        orders=orders.store.count(),
        timestamp=datetime.now(),
    )


# =============================================================================
# DISH ENDPOINTS
# =============================================================================

@app.get(
    "/dishes",
    response_model=DishListResponse,
    tags=["Dishes"],
    summary="List Dishes",
)
async def list_dishes(
    service: DishService = Depends(get_dish_service),
) -> DishListResponse:
    """Return every dish in menu order."""
    return DishListResponse(
        data=[DishSchema.model_validate(dish) for dish in service.list()],
    )


@app.post(
    "/dishes",
    response_model=DishResponse,
    status_code=201,
    responses=ERROR_RESPONSES,
    tags=["Dishes"],
    summary="Create Dish",
)
async def create_dish(
    envelope: Optional[RequestEnvelope] = None,
    service: DishService = Depends(get_dish_service),
) -> DishResponse:
    """Add a dish to the menu. The ID is assigned by the server."""
    payload = envelope.payload if envelope else {}
    dish = service.create(payload)
    return DishResponse(data=DishSchema.model_validate(dish))


@app.get(
    "/dishes/{dish_id}",
    response_model=DishResponse,
    responses=ERROR_RESPONSES,
    tags=["Dishes"],
)
async def get_dish(
    dish_id: str,
    service: DishService = Depends(get_dish_service),
) -> DishResponse:
    """Get a specific dish by ID."""
    return DishResponse(data=DishSchema.model_validate(service.read(dish_id)))


@app.put(
    "/dishes/{dish_id}",
    response_model=DishResponse,
    responses=ERROR_RESPONSES,
    tags=["Dishes"],
    summary="Replace Dish",
)
async def update_dish(
    dish_id: str,
    envelope: Optional[RequestEnvelope] = None,
    service: DishService = Depends(get_dish_service),
) -> DishResponse:
    """
    Replace every field of a dish.

    A body ``id`` is optional but must match the route when given.
    """
    payload = envelope.payload if envelope else {}
    dish = service.update(dish_id, payload)
    return DishResponse(data=DishSchema.model_validate(dish))


# =============================================================================
# ORDER ENDPOINTS
# =============================================================================

@app.get(
    "/orders",
    response_model=OrderListResponse,
    tags=["Orders"],
    summary="List Orders",
)
async def list_orders(
    service: OrderService = Depends(get_order_service),
) -> OrderListResponse:
    """Return every order in the order it was placed."""
    return OrderListResponse(
        data=[OrderSchema.model_validate(order) for order in service.list()],
    )


@app.post(
    "/orders",
    response_model=OrderResponse,
    status_code=201,
    responses=ERROR_RESPONSES,
    tags=["Orders"],
    summary="Place Order",
)
async def create_order(
    envelope: Optional[RequestEnvelope] = None,
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """
    Place a new order.

    Orders start as ``pending`` unless another valid status is sent.
    """
    payload = envelope.payload if envelope else {}
    order = service.create(payload)
    return OrderResponse(data=OrderSchema.model_validate(order))


@app.get(
    "/orders/{order_id}",
    response_model=OrderResponse,
    responses=ERROR_RESPONSES,
    tags=["Orders"],
)
async def get_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """Get a specific order by ID."""
    return OrderResponse(data=OrderSchema.model_validate(service.read(order_id)))


@app.put(
    "/orders/{order_id}",
    response_model=OrderResponse,
    responses=ERROR_RESPONSES,
    tags=["Orders"],
    summary="Replace Order",
)
async def update_order(
    order_id: str,
    envelope: Optional[RequestEnvelope] = None,
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """
    Replace every field of an order, including its status.

    Delivered orders cannot be changed.
    """
    payload = envelope.payload if envelope else {}
    order = service.update(order_id, payload)
    return OrderResponse(data=OrderSchema.model_validate(order))


@app.delete(
    "/orders/{order_id}",
    status_code=204,
    responses=ERROR_RESPONSES,
    tags=["Orders"],
    summary="Delete Order",
)
async def delete_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
) -> Response:
    """Delete a pending order."""
    service.delete(order_id)
    return Response(status_code=204)


# =============================================================================
# ERROR HANDLERS
# =============================================================================

@app.exception_handler(ApplicationError)
async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    """Render validation and not-found errors."""
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors (unknown path, unsupported method)."""
    if exc.status_code == 404:
        message = f"Path not found: {request.url.path}"
    elif exc.status_code == 405:
        message = f"{request.method} not allowed for {request.url.path}"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject bodies that are not a JSON object with a ``data`` object."""
    logger.debug(f"Malformed request body: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": "Request body must be a JSON object with a data object"},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all exception handler."""
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content={
            "error": str(exc) if settings.debug else "An unexpected error occurred",
        },
    )


# =============================================================================
# ENTRY POINT
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
    )
