"""Tests for the /forecast routes via FastAPI's TestClient."""

import asyncio

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from forecast_core.errors import ParseError, TransportError
from forecast_core.models.domain import Forecast, ForecastCharacterization
from forecast_core.models.geo import Latitude, Longitude
from forecast_core.models.result import Result
from forecast_core.services.forecast import METRIC_FETCH_FAILURE, NationalWeatherService

from shortcast import di
from shortcast.config import Settings
from shortcast.di import get_forecast_service, get_logger, get_settings
from shortcast.main import create_app
from shortcast.routers.forecast import FAILURE_BODY, NOT_COVERED_BODY

from conftest import POINTS_URI, RecordingLogger, RecordingMetrics

STUB_FORECAST = Forecast(characterization=ForecastCharacterization.MODERATE, short_forecast="foobar")


class StubSource:
    """A fake NWS we control."""

    def __init__(self, result: Result, delay: float = 0.0):
        self.result = result
        self.delay = delay
        self.calls = []

    async def fetch_forecast(self, latitude, longitude):
        self.calls.append((latitude, longitude))
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.result


@pytest.fixture
def make_client(logger):
    def _make(source, cfg=None):
        app = create_app()
        app.dependency_overrides[get_forecast_service] = lambda: source
        app.dependency_overrides[get_logger] = lambda: logger
        if cfg is not None:
            app.dependency_overrides[get_settings] = lambda: cfg
        return TestClient(app)

    return _make


class TestShortForecast:
    def test_success(self, make_client, logger):
        source = StubSource(Result.success(STUB_FORECAST))
        resp = make_client(source).get("/forecast/short/lat/39.3/lon/-97.08")

        assert resp.status_code == 200
        assert resp.json() == {"characterization": "moderate", "shortForecast": "foobar"}
        assert Forecast.from_json(resp.text).unwrap() == STUB_FORECAST
        assert source.calls == [(Latitude(39.3), Longitude(-97.08))]
        assert logger.messages("info") == ["fetching lat 39.3, lon -97.08 from NWS"]

    @pytest.mark.parametrize(
        "path",
        [
            "/forecast/short/lat/39.3/lon/foobar",
            "/forecast/short/lat/north/lon/-97.08",
            "/forecast/short/lat/39.3/foobar/-97.08",
            "/forecast/short/lat/nan/lon/1",
            "/forecast/short/lat/39.3/lon/",
            "/forecast/long/lat/39.3/lon/-97.08",
            "/nowhere",
        ],
    )
    def test_not_found(self, make_client, path):
        source = StubSource(Result.success(STUB_FORECAST))
        resp = make_client(source).get(path)

        assert resp.status_code == 404
        assert resp.json() == {"detail": "Not Found"}
        assert source.calls == []

    def test_pipeline_failure_is_500(self, make_client, logger):
        source = StubSource(Result.failure(ParseError("error deserializing NWS point JSON: boom")))
        resp = make_client(source).get("/forecast/short/lat/39.3/lon/-97.08")

        assert resp.status_code == 500
        assert resp.text == FAILURE_BODY
        assert resp.headers["content-type"].startswith("text/plain")
        assert logger.messages("error") == ["NWS error: error deserializing NWS point JSON: boom"]

    def test_uncovered_point_is_404(self, make_client):
        err = TransportError("404 Not Found for request GET x", status_code=404)
        resp = make_client(StubSource(Result.failure(err))).get("/forecast/short/lat/100.0/lon/100.0")

        assert resp.status_code == 404
        assert resp.text == NOT_COVERED_BODY

    def test_timeout_is_500(self, make_client, logger):
        cfg = Settings(environ={"REQUEST_TIMEOUT_SEC": "0.05"})
        source = StubSource(Result.success(STUB_FORECAST), delay=1.0)
        resp = make_client(source, cfg).get("/forecast/short/lat/39.3/lon/-97.08")

        assert resp.status_code == 500
        assert "exceeded" in logger.messages("error")[0]

    def test_post_not_allowed(self, make_client):
        resp = make_client(StubSource(Result.success(STUB_FORECAST))).post("/forecast/short/lat/39.3/lon/-97.08")
        assert resp.status_code == 405


class TestWithNwsService:
    @respx.mock
    def test_upstream_failure_end_to_end(self, make_client):
        respx.get(f"{POINTS_URI}39.3,-97.08").mock(return_value=httpx.Response(500))
        service_logger = RecordingLogger()
        service_metrics = RecordingMetrics()
        http = httpx.AsyncClient()
        service = NationalWeatherService(POINTS_URI, http, service_logger, service_metrics)

        try:
            resp = make_client(service).get("/forecast/short/lat/39.3/lon/-97.08")
        finally:
            asyncio.run(http.aclose())

        assert resp.status_code == 500
        assert len(service_logger.messages("error")) == 1
        assert service_metrics.upticks == [METRIC_FETCH_FAILURE]
        assert http.is_closed

    def test_settings_override_reaches_points_uri(self, logger):
        cfg = Settings(environ={"NWS_POINTS_URI": "http://stub/points/"})
        app = create_app(cfg)
        app.dependency_overrides[get_settings] = lambda: cfg
        app.dependency_overrides[get_logger] = lambda: logger
        di.reset()

        try:
            with respx.mock(assert_all_called=False) as nws:
                route = nws.get("http://stub/points/39.3,-97.08").mock(return_value=httpx.Response(404))
                with TestClient(app) as client:
                    resp = client.get("/forecast/short/lat/39.3/lon/-97.08")
        finally:
            di.reset()

        assert route.called
        assert resp.status_code == 404
        assert resp.text == NOT_COVERED_BODY


class TestServiceRoutes:
    def test_health(self):
        resp = TestClient(create_app()).get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["ok"] is True
        assert isinstance(body["metrics"], dict)

    def test_root(self):
        resp = TestClient(create_app()).get("/")
        assert resp.json()["service"] == "shortcast"
