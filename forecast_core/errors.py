"""
Failure taxonomy for the forecast pipeline.
Every error keeps the original diagnostic as its message.
"""
from typing import Optional


class ForecastError(Exception):
    """Base class for everything the pipeline can fail with."""

    @property
    def message(self) -> str:
        return str(self)


class ParseError(ForecastError):
    """Upstream JSON was malformed or did not have the expected shape."""


class MissingPeriod(ForecastError):
    def __init__(self, message: str = "no period 1 found in NWS forecast"):
        super().__init__(message)


class TransportError(ForecastError):
    """Network failure or non-2xx answer from the upstream."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class InvalidEnumValue(ForecastError, ValueError):
    def __init__(self, value: str):
        super().__init__(f"the value '{value}' is not parsable to ForecastCharacterization")
        self.value = value


class RouteNotMatched(ForecastError):
    """A path segment did not parse; surfaces only as a plain 404."""

    def __init__(self, path: str):
        super().__init__(f"no route matches '{path}'")
        self.path = path
