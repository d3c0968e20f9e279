# backend/shortcast/config.py
import os
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

dotenv_path = Path(__file__).parents[2] / '.env'
load_dotenv(dotenv_path)


class ConfigurationError(RuntimeError):
    pass


class RuntimeEnvironment(str, Enum):
    LOCALHOST = "localhost"
    DEVELOPMENT = "development"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, name: str) -> "RuntimeEnvironment":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ConfigurationError(f"unknown runtime environment '{name}'") from None


# example: https://api.weather.gov/points/39.7456,-97.0892
NWS_POINTS_URI_BY_ENV = {
    RuntimeEnvironment.LOCALHOST: "https://api.weather.gov/points/",
}


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _num(env: Mapping[str, str], key: str, default: str, cast=float):
    raw = env.get(key, default)
    try:
        return cast(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got '{raw}'") from None


class Settings:
    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        env = os.environ if environ is None else environ

        # --- Environment ---
        self.RUNTIME_ENV: RuntimeEnvironment = RuntimeEnvironment.parse(env.get("RUNTIME_ENV", "localhost"))

        # --- NWS ---
        self.NWS_POINTS_URI: str = env.get("NWS_POINTS_URI") or NWS_POINTS_URI_BY_ENV.get(self.RUNTIME_ENV, "")
        if not self.NWS_POINTS_URI:
            raise ConfigurationError(
                f"The environment '{self.RUNTIME_ENV.value}' does not have a config defined (set NWS_POINTS_URI)"
            )
        # NWS turns away requests without an identifying User-Agent
        self.NWS_USER_AGENT: str = env.get("NWS_USER_AGENT", "shortcast/0.1 (+https://github.com/shortcast)")

        # --- Server ---
        self.HOST: str = env.get("HOST", "0.0.0.0")
        self.PORT: int = _num(env, "PORT", "8080", int)
        self.LOG_LEVEL: str = env.get("LOG_LEVEL", "INFO").strip().upper()
        if self.LOG_LEVEL not in LOG_LEVELS:
            raise ConfigurationError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{self.LOG_LEVEL}'")

        # --- Outbound HTTP ---
        self.HTTP_CONNECT_TIMEOUT_SEC: float = _num(env, "HTTP_CONNECT_TIMEOUT_SEC", "10")
        self.HTTP_READ_TIMEOUT_SEC: float = _num(env, "HTTP_READ_TIMEOUT_SEC", "25")
        self.HTTP_POOL_TIMEOUT_SEC: float = _num(env, "HTTP_POOL_TIMEOUT_SEC", "30")
        self.HTTP_MAX_CONNECTIONS: int = _num(env, "HTTP_MAX_CONNECTIONS", "100", int)

        # Whole-pipeline budget for one inbound request
        self.REQUEST_TIMEOUT_SEC: float = _num(env, "REQUEST_TIMEOUT_SEC", "30")


settings = Settings()
