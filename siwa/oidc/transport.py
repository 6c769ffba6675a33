"""Single-shot HTTP requests to the provider over httpx."""

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx

from siwa.core.errors import NetworkError
from siwa.core.settings import ProviderSettings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def open_client(
    client: httpx.AsyncClient | None, settings: ProviderSettings
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the injected client, or an owned one closed on exit."""
    if client is not None:
        yield client
        return
    if settings.http_timeout is None:
        owned = httpx.AsyncClient()
    else:
        owned = httpx.AsyncClient(timeout=settings.http_timeout)
    async with owned:
        yield owned


async def send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    data: dict[str, str] | None = None,
) -> httpx.Response:
    """Perform exactly one request; transport failures become NetworkError."""
    logger.debug("%s %s", method, url)
    try:
        response = await client.request(method, url, data=data)
    except httpx.TransportError as exc:
        logger.warning("%s %s failed: %s", method, url, exc)
        raise NetworkError(url, str(exc) or type(exc).__name__) from exc
    logger.debug("%s %s -> %d", method, url, response.status_code)
    return response


def read_json_object(response: httpx.Response) -> dict[str, Any] | None:
    """Decode the body as a JSON object, or return None if it is not one."""
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(payload, dict):
        return None
    return payload
