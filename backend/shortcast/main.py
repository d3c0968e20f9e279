from typing import Optional

import uvicorn
from fastapi import FastAPI

from forecast_core.errors import RouteNotMatched

from shortcast import di
from shortcast.config import Settings, settings
from shortcast.http import init_http, close_http
from shortcast.routers import forecast
from shortcast.schemas import HealthResponse
from shortcast.utils.telemetry import configure_logging

__version__ = "0.1.0"


def create_app(cfg: Optional[Settings] = None) -> FastAPI:
    cfg = cfg or settings
    configure_logging(cfg.LOG_LEVEL)
    app = FastAPI(title="shortcast", version=__version__)

    @app.on_event("startup")
    async def startup_event():
        """Open the pooled HTTP client shared by every request."""
        await init_http(cfg)
        di.get_logger().info("HTTP client initialized")

    @app.on_event("shutdown")
    async def shutdown_event():
        await close_http()
        di.get_logger().info("HTTP client closed")
        di.reset()

    app.include_router(forecast.router)
    app.add_exception_handler(RouteNotMatched, forecast.route_not_matched_handler)

    @app.get("/")
    async def root():
        return {"ok": True, "service": "shortcast", "version": app.version}

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(environment=cfg.RUNTIME_ENV.value, metrics=di.get_metrics().snapshot())

    return app


app = create_app()


def serve():
    """Console entrypoint: uvicorn on HOST:PORT."""
    di.get_logger().info("starting service...")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    serve()
