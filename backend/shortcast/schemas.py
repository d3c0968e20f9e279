from typing import Dict
from pydantic import BaseModel, ConfigDict, Field

from forecast_core.models.domain import Forecast


# ---------- Response models ----------

class ForecastResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    characterization: str = Field(..., description="Temperature bucket: cold, moderate or hot")
    short_forecast: str = Field(..., alias="shortForecast", description="NWS short text for the nearest period")

    @classmethod
    def from_domain(cls, forecast: Forecast) -> "ForecastResponse":
        return cls(characterization=forecast.characterization.value, short_forecast=forecast.short_forecast)


class HealthResponse(BaseModel):
    ok: bool = True
    environment: str
    metrics: Dict[str, int] = Field(default_factory=dict)   # counter name -> count since start
