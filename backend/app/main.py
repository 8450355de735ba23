import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api.routes_calculate import router as calculate_router
from backend.app.api.schemas import HealthResponse
from backend.app.config import AppConfig
from backend.app.middleware import RequestLoggingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    config: AppConfig = app.state.config
    logging.getLogger("flightpath.startup").info(
        "[startup] %s ready (prefix=%r, timeout_ms=%s)",
        config.app_name,
        config.api_prefix,
        config.synthesis.timeout_ms,
    )

    yield


def create_app(config: AppConfig) -> FastAPI:
    app = FastAPI(
        title=config.app_name,
        lifespan=lifespan,
    )
    app.state.config = config

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.allowed_origins,
        allow_methods=config.cors.allowed_methods,
        allow_headers=config.cors.allowed_headers,
        expose_headers=config.cors.exposed_headers,
        allow_credentials=config.cors.allow_credentials,
        max_age=config.cors.max_age,
    )

    app.include_router(
        calculate_router,
        prefix=f"{config.api_prefix}/calculate",
        tags=["calculate"],
    )

    @app.get(f"{config.api_prefix}/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="ok", service=config.app_name)

    return app


app = create_app(AppConfig.from_settings())
