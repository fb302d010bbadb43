# This file builds the FastAPI application and registers all API routers.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# The app adds request IDs, timing headers, open CORS, and Prometheus request metrics.
# The same routers serve both presentations; only `/` changes between API-only and dashboard mode.

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import RequestResponseEndpoint

from shoesclean.api.api_config import get_api_config
from shoesclean.api.dependencies import get_database_client
from shoesclean.api.error_handlers import register_error_handlers
from shoesclean.api.routers.health import router as health_router
from shoesclean.api.routers.products import router as products_router
from shoesclean.api.routers.root import router as root_router
from shoesclean.api.routers.services import router as services_router
from shoesclean.common.ddl import apply_catalog_ddl
from shoesclean.common.logging import configure_logging

logger = logging.getLogger(__name__)

API_HTTP_REQUESTS_TOTAL = Counter(
    "api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method", "path"],
)


def create_app() -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    config = get_api_config()

    app = FastAPI(
        title=config.api_name,
        description=(
            "Service catalog API with search, allowlisted sorting, and pagination, "
            "plus an optional HTML admin dashboard."
        ),
        version=config.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service liveness."},
            {"name": "services", "description": "Service catalog CRUD and price statistics."},
            {"name": "products", "description": "Product catalog CRUD."},
        ],
    )

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        path_label = request.url.path
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label, path=path_label).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"
            return response
        finally:
            duration_s = time.perf_counter() - started
            API_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label, path=path_label).dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.on_event("startup")
    def startup_checks() -> None:
        db = get_database_client()
        if config.auto_create_schema:
            try:
                apply_catalog_ddl(
                    db.engine,
                    services_table_name=config.services_table_name,
                    products_table_name=config.products_table_name,
                )
            except (SQLAlchemyError, ValueError) as exc:
                logger.error("Catalog schema bootstrap failed: %s", exc)
        app.state.db_connected_at_startup = db.can_connect()
        logger.info(
            "API started presentation=%s db_connected=%s",
            config.presentation,
            app.state.db_connected_at_startup,
        )

    @app.on_event("shutdown")
    def shutdown() -> None:
        get_database_client().dispose()

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(root_router)
    app.include_router(services_router)
    app.include_router(products_router)

    return app


app = create_app()
