import httpx
from typing import Optional

from shortcast.config import Settings, settings as default_settings

# Global HTTP client instance
client: Optional[httpx.AsyncClient] = None


def build_client(cfg: Settings) -> httpx.AsyncClient:
    """Pooled client for all NWS calls."""
    timeout_config = httpx.Timeout(
        connect=cfg.HTTP_CONNECT_TIMEOUT_SEC,
        read=cfg.HTTP_READ_TIMEOUT_SEC,
        write=10.0,
        pool=cfg.HTTP_POOL_TIMEOUT_SEC,
    )
    return httpx.AsyncClient(
        timeout=timeout_config,
        limits=httpx.Limits(
            max_keepalive_connections=cfg.HTTP_MAX_CONNECTIONS,
            max_connections=cfg.HTTP_MAX_CONNECTIONS,
            keepalive_expiry=30,
        ),
        headers={
            "Accept": "application/geo+json",
            "User-Agent": cfg.NWS_USER_AGENT,
        },
    )


async def init_http(cfg: Optional[Settings] = None):
    """Initialize the global HTTP client."""
    global client
    if client is None:
        client = build_client(cfg or default_settings)


async def close_http():
    """Close the global HTTP client."""
    global client
    if client:
        await client.aclose()
        client = None


def get_http_client() -> httpx.AsyncClient:
    """Get the global HTTP client instance."""
    if client is None:
        raise RuntimeError("HTTP client not initialized. Call init_http() first.")
    return client
