import json
from enum import Enum
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import InvalidEnumValue, ParseError
from .result import Result

Fahrenheit = float


class ForecastCharacterization(str, Enum):
    """Coarse temperature bucket exposed in place of the raw reading."""

    COLD = "cold"
    MODERATE = "moderate"
    HOT = "hot"

    @classmethod
    def from_temperature_f(cls, temp_f: Fahrenheit) -> "ForecastCharacterization":
        return characterize(temp_f)

    @classmethod
    def from_label(cls, label: str) -> "ForecastCharacterization":
        for member in cls:
            if member.value == label:
                return member
        raise InvalidEnumValue(label)

    @classmethod
    def parse_label(cls, label: str) -> Result["ForecastCharacterization"]:
        try:
            return Result.success(cls.from_label(label))
        except InvalidEnumValue as e:
            return Result.failure(e)


# (exclusive upper bound, bucket), ascending; anything past the last bound is HOT
_BUCKETS = (
    (45.0, ForecastCharacterization.COLD),
    (82.0, ForecastCharacterization.MODERATE),
)


def characterize(temp_f: Fahrenheit) -> ForecastCharacterization:
    """Map any float to exactly one bucket. NaN fails every bound and lands in HOT."""
    for upper, bucket in _BUCKETS:
        if temp_f < upper:
            return bucket
    return ForecastCharacterization.HOT


class Forecast(BaseModel):
    """The service's answer: a temperature bucket and NWS's short text."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    characterization: ForecastCharacterization
    short_forecast: str = Field(alias="shortForecast")

    @field_validator("characterization", mode="before")
    @classmethod
    def _known_label(cls, v: Any) -> Any:
        if isinstance(v, str) and not isinstance(v, ForecastCharacterization):
            return ForecastCharacterization.from_label(v)
        return v

    def to_dict(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> Result["Forecast"]:
        try:
            return Result.success(cls.model_validate_json(text))
        except ValidationError as e:
            # surface the bad label itself rather than pydantic's wrapper
            for err in e.errors():
                cause = (err.get("ctx") or {}).get("error")
                if isinstance(cause, InvalidEnumValue):
                    return Result.failure(cause)
            return Result.failure(ParseError(str(e)))
