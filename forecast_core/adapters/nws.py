"""
Typed views over the two NWS documents the pipeline reads.

    GET /points/{lat},{lon}   -> properties.forecast (URL of the next call)
    GET <forecast url>        -> properties.periods[] {number, temperature, shortForecast}

Only those fields are modelled; everything else in the (large) NWS payload is ignored.
Validation is strict so a string temperature or a missing field is a ParseError
instead of a silently coerced value.
"""
import json
from typing import Any, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import MissingPeriod, ParseError
from ..models.domain import Forecast, characterize
from ..models.result import Result

Document = Union[str, bytes, Mapping[str, Any]]
M = TypeVar("M", bound=BaseModel)


class _NwsModel(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")


class NwsPointProperties(_NwsModel):
    # the URL to pull the forecast from, not the forecast itself
    forecast: str


class NwsPoint(_NwsModel):
    properties: NwsPointProperties

    @property
    def forecast_url(self) -> str:
        return self.properties.forecast


class NwsForecastPeriod(_NwsModel):
    number: int
    temperature_f: float = Field(alias="temperature")
    short_forecast: str = Field(alias="shortForecast")


class NwsForecastProperties(_NwsModel):
    periods: List[NwsForecastPeriod]


class NwsForecast(_NwsModel):
    properties: NwsForecastProperties

    @property
    def period_one(self) -> Optional[NwsForecastPeriod]:
        """The nearest-term period. Matched on `number`, not list position."""
        return next((p for p in self.properties.periods if p.number == 1), None)


def _parse(model: Type[M], document: Document, what: str) -> Result[M]:
    try:
        if isinstance(document, Mapping):
            # strict mode only takes nested models as JSON objects, not dicts
            document = json.dumps(document)
        return Result.success(model.model_validate_json(document))
    except ValidationError as e:
        return Result.failure(ParseError(f"error deserializing NWS {what} JSON: {e}"))


def parse_point(document: Document) -> Result[NwsPoint]:
    return _parse(NwsPoint, document, "point")


def parse_forecast(document: Document) -> Result[NwsForecast]:
    return _parse(NwsForecast, document, "forecast")


def to_domain(forecast: NwsForecast) -> Result[Forecast]:
    """Boil the NWS forecast down to period 1's bucket and short text."""
    period = forecast.period_one
    if period is None:
        return Result.failure(MissingPeriod())
    return Result.success(
        Forecast(
            characterization=characterize(period.temperature_f),
            short_forecast=period.short_forecast,
        )
    )
