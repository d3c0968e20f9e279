"""
Dependency injection container for the application.
Constructs singletons and provides them to routes/handlers.
"""
from fastapi import Depends

from forecast_core.adapters.base import ForecastSource, Logger
from forecast_core.services.forecast import NationalWeatherService

from shortcast.config import Settings, settings
from shortcast.http import get_http_client
from shortcast.utils.telemetry import InMemoryMetrics, StdlibLogger

# Singletons - created once and reused
_logger = None
_metrics = None
_forecast_service = None


def get_settings() -> Settings:
    return settings


def get_logger() -> Logger:
    """Get singleton logger."""
    global _logger
    if _logger is None:
        _logger = StdlibLogger("shortcast")
    return _logger


def get_metrics() -> InMemoryMetrics:
    """Get singleton metrics sink."""
    global _metrics
    if _metrics is None:
        _metrics = InMemoryMetrics()
    return _metrics


def get_forecast_service(cfg: Settings = Depends(get_settings)) -> ForecastSource:
    """Get singleton NWS forecast service. Needs the HTTP client from startup."""
    global _forecast_service
    if _forecast_service is None:
        _forecast_service = NationalWeatherService(
            points_uri=cfg.NWS_POINTS_URI,
            http_client=get_http_client(),
            logger=get_logger(),
            metrics=get_metrics(),
        )
    return _forecast_service


def reset():
    """Drop the singletons (on shutdown, so a restarted app picks up a fresh HTTP client)."""
    global _logger, _metrics, _forecast_service
    _logger = _metrics = _forecast_service = None
