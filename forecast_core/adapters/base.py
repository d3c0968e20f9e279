from typing import Protocol

from ..models.domain import Forecast
from ..models.geo import Latitude, Longitude
from ..models.result import Result


class Logger(Protocol):
    def info(self, msg: str) -> None:
        ...

    def error(self, msg: str) -> None:
        ...

    def verbose(self, msg: str) -> None:
        """Trace-level detail, off unless debugging."""
        ...


class Metrics(Protocol):
    def uptick(self, metric_name: str) -> None:
        """Increment the named counter by one."""
        ...


class ForecastSource(Protocol):
    async def fetch_forecast(self, latitude: Latitude, longitude: Longitude) -> Result[Forecast]:
        """Resolve a point to its simplified forecast."""
        ...
