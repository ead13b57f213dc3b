# apps/backend/main.py
import logging
import time

from fastapi import FastAPI, Request

from apps.backend.routes.health import router as health_router
from apps.backend.routes.rewards import config_router as rewards_config_router
from apps.backend.routes.rewards import router as rewards_router
from apps.backend.services.admin.logger import configure_logging, log_request_response
from apps.backend.utils.errors import install_error_handlers
from apps.backend.utils.settings import get_settings

log = logging.getLogger("rewards.main")


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Customer Rewards",
        version=settings.REWARDS_VERSION,
        description="Tiered loyalty points per customer, by month and in total",
    )

    # -------------------------------------------------------------------
    # Error handling (stable envelopes, no stack leaks)
    # -------------------------------------------------------------------
    install_error_handlers(app)

    # -------------------------------------------------------------------
    # Request logging (sensitive headers masked)
    # -------------------------------------------------------------------
    @app.middleware("http")
    async def request_logging(request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        log_request_response(request, response, start)
        return response

    # -------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------
    app.include_router(health_router)
    app.include_router(rewards_router)
    app.include_router(rewards_config_router)

    @app.get("/")
    def root():
        return {
            "status": "Rewards Online",
            "version": settings.REWARDS_VERSION,
            "routes": ["/health", "/rewards", "/config/rewards"],
        }

    log.info(
        "Rewards service ready: store=%s tiers=[(%s, %s), (%s, %s)]",
        settings.STORE,
        settings.LOWER_THRESHOLD,
        settings.RATE_LOW,
        settings.UPPER_THRESHOLD,
        settings.RATE_HIGH,
    )
    return app


app = create_app()
