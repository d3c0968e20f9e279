"""Shared test fixtures."""

import json
from pathlib import Path
from typing import List, Tuple

import pytest

FIXTURE_DIR = Path(__file__).parent / "fixtures"

POINTS_URI = "https://test-nws.example.com/points/"
FORECAST_URL = "https://api.weather.gov/gridpoints/TOP/32,81/forecast"


class RecordingLogger:
    """Logger protocol fake that keeps every (level, message)."""

    def __init__(self):
        self.records: List[Tuple[str, str]] = []

    def info(self, msg: str) -> None:
        self.records.append(("info", msg))

    def error(self, msg: str) -> None:
        self.records.append(("error", msg))

    def verbose(self, msg: str) -> None:
        self.records.append(("verbose", msg))

    def messages(self, level: str) -> List[str]:
        return [m for lvl, m in self.records if lvl == level]


class RecordingMetrics:
    def __init__(self):
        self.upticks: List[str] = []

    def uptick(self, metric_name: str) -> None:
        self.upticks.append(metric_name)


@pytest.fixture
def point_text() -> str:
    return (FIXTURE_DIR / "nws_point.json").read_text()


@pytest.fixture
def forecast_text() -> str:
    return (FIXTURE_DIR / "nws_forecast.json").read_text()


@pytest.fixture
def point_json(point_text: str) -> dict:
    return json.loads(point_text)


@pytest.fixture
def forecast_json(forecast_text: str) -> dict:
    return json.loads(forecast_text)


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def metrics() -> RecordingMetrics:
    return RecordingMetrics()
