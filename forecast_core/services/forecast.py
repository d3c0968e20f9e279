# forecast_core/services/forecast.py
from typing import Callable, TypeVar

import httpx

from ..adapters.base import Logger, Metrics
from ..adapters.nws import Document, parse_forecast, parse_point, to_domain
from ..errors import TransportError
from ..models.domain import Forecast
from ..models.geo import Latitude, Longitude
from ..models.result import Result

T = TypeVar("T")

# Metric names for this service
METRIC_FETCH_SUCCESS = "nws_fetch_success"
METRIC_FETCH_FAILURE = "nws_fetch_failure"


class NationalWeatherService:
    """
    Two-step NWS lookup: /points/{lat},{lon} gives the forecast URL for the grid cell,
    which is then fetched and reduced to a Forecast.

    The httpx client is shared and owned by the caller; this class never opens or closes it.
    """

    def __init__(self, points_uri: str, http_client: httpx.AsyncClient, logger: Logger, metrics: Metrics):
        self.points_uri = points_uri
        self.http = http_client
        self.logger = logger
        self.metrics = metrics

    def point_url(self, latitude: Latitude, longitude: Longitude) -> str:
        return f"{self.points_uri}{latitude},{longitude}"

    async def fetch_forecast(self, latitude: Latitude, longitude: Longitude) -> Result[Forecast]:
        if not isinstance(latitude, Latitude) or not isinstance(longitude, Longitude):
            raise TypeError(
                f"expected (Latitude, Longitude), got ({type(latitude).__name__}, {type(longitude).__name__})"
            )

        result = await self._pull(latitude, longitude)
        if not result.ok:
            self.logger.error(f"failed pulling forecast: {result.error}")
            self.metrics.uptick(METRIC_FETCH_FAILURE)
        return result

    async def _pull(self, latitude: Latitude, longitude: Longitude) -> Result[Forecast]:
        point_url = self.point_url(latitude, longitude)
        self.logger.verbose(f"pulling NWS weather at point '{point_url}'")

        point = await self._get(point_url, parse_point)
        if not point.ok:
            return point

        nws_forecast = await self._get(point.value.forecast_url, parse_forecast)
        if not nws_forecast.ok:
            return nws_forecast

        self.logger.verbose(f"successfully pulled forecast for '{point_url}'")
        self.metrics.uptick(METRIC_FETCH_SUCCESS)

        return to_domain(nws_forecast.value)

    async def _get(self, url: str, parse: Callable[[Document], Result[T]]) -> Result[T]:
        try:
            r = await self.http.get(url)
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            return Result.failure(
                TransportError(f"{status} {e.response.reason_phrase} for request GET {url}", status_code=status, url=url)
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return Result.failure(TransportError(f"request GET {url} failed: {e!r}", url=url))
        return parse(r.content)
