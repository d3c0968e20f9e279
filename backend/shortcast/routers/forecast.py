"""
/forecast endpoints
"""
import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from forecast_core.adapters.base import ForecastSource, Logger
from forecast_core.errors import RouteNotMatched, TransportError
from forecast_core.models.geo import Latitude, Longitude
from forecast_core.models.result import Result

from shortcast.config import Settings
from shortcast.di import get_forecast_service, get_logger, get_settings
from shortcast.schemas import ForecastResponse

router = APIRouter(tags=["forecast"], prefix="/forecast")

# Plain-text bodies; clients can't tell failure causes apart beyond the status.
FAILURE_BODY = "could not process request"
NOT_COVERED_BODY = "no forecast available for the requested coordinates"


def parse_latitude(segment: str) -> Optional[Latitude]:
    return Latitude.parse(segment)


def parse_longitude(segment: str) -> Optional[Longitude]:
    return Longitude.parse(segment)


async def route_not_matched_handler(request: Request, exc: RouteNotMatched) -> JSONResponse:
    # same body as an unknown path, so a bad coordinate is indistinguishable from a bad route
    return JSONResponse({"detail": "Not Found"}, status_code=404)


@router.get("/short/lat/{lat}/lon/{lon}", response_model=ForecastResponse)
async def short_forecast(lat: str, lon: str,
                         service: ForecastSource = Depends(get_forecast_service),
                         logger: Logger = Depends(get_logger),
                         cfg: Settings = Depends(get_settings)):
    """
    Bucketed temperature + short text for the nearest NWS forecast period.
    """
    latitude = parse_latitude(lat)
    longitude = parse_longitude(lon)
    if latitude is None or longitude is None:
        raise RouteNotMatched(f"/forecast/short/lat/{lat}/lon/{lon}")

    logger.info(f"fetching lat {latitude}, lon {longitude} from NWS")

    try:
        result = await asyncio.wait_for(service.fetch_forecast(latitude, longitude), timeout=cfg.REQUEST_TIMEOUT_SEC)
    except asyncio.TimeoutError:
        result = Result.failure(TransportError(f"forecast pipeline exceeded {cfg.REQUEST_TIMEOUT_SEC}s"))

    if result.ok:
        return ForecastResponse.from_domain(result.value)

    logger.error(f"NWS error: {result.error}")
    error = result.error
    if isinstance(error, TransportError) and error.status_code == 404:
        # NWS has no grid cell for this point
        return PlainTextResponse(NOT_COVERED_BODY, status_code=404)
    return PlainTextResponse(FAILURE_BODY, status_code=500)
