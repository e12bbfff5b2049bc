"""Remote REST implementation of RecordStore."""

import asyncio
import json
from typing import Any, Dict, Optional

import httpx
import structlog

from trakr.core.config import settings
from trakr.core.metrics import record_remote_store_retry, track_store_latency
from trakr.domain.exceptions import RemoteStoreException, RemoteStoreTimeoutException
from trakr.domain.interfaces import RecordStore

logger = structlog.get_logger(__name__)


class RemoteRecordStore(RecordStore):
    """
    Record store backed by a realtime-database style REST API.

    Each key lives at {base_url}/{key}.json and holds its JSON text as a
    string value. A multi-key write is a single PATCH on the root, which
    the server applies atomically.

    Timeouts, connection errors and 5xx responses are retried with
    exponential backoff; 4xx responses fail immediately.
    """

    backend = "remote"

    def __init__(
        self,
        base_url: str | None = None,
        auth_token: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_base: float = 0.1,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or settings.remote_store_url).rstrip("/")
        self._auth_token = auth_token if auth_token is not None else settings.remote_store_auth_token
        self._timeout = timeout or settings.remote_store_timeout
        self._max_retries = max_retries or settings.remote_store_max_retries
        self._backoff_base = backoff_base
        self._transport = transport

    async def get(self, key: str) -> Optional[str]:
        with track_store_latency(self.backend, "get"):
            response = await self._request("GET", f"/{key}.json")

        value = response.json()
        if value is None or isinstance(value, str):
            return value
        return json.dumps(value)

    async def set(self, key: str, value: str) -> None:
        with track_store_latency(self.backend, "set"):
            await self._request("PUT", f"/{key}.json", payload=value)

    async def set_many(self, values: Dict[str, str]) -> None:
        with track_store_latency(self.backend, "set"):
            await self._request("PATCH", "/.json", payload=values)

    async def _request(
        self,
        method: str,
        path: str,
        payload: Any = None,
    ) -> httpx.Response:
        """
        Send a request with retry logic.

        Uses exponential backoff: 0.1s, 0.2s, 0.4s, ...

        Raises:
            RemoteStoreTimeoutException: If the last attempt timed out
            RemoteStoreException: On a 4xx response or when retries run out
        """
        url = f"{self._base_url}{path}"
        params = {"auth": self._auth_token} if self._auth_token else None
        timed_out = False
        last_status: int | None = None

        for attempt in range(self._max_retries):
            try:
                async with httpx.AsyncClient(
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    kwargs: Dict[str, Any] = {"params": params}
                    if payload is not None:
                        kwargs["json"] = payload
                    response = await client.request(method, url, **kwargs)

                if response.status_code < 400:
                    return response

                last_status = response.status_code
                timed_out = False
                if response.status_code < 500:
                    logger.error(
                        "remote_store_rejected",
                        method=method,
                        path=path,
                        status_code=response.status_code,
                        response=response.text[:200],
                    )
                    raise RemoteStoreException(
                        f"Remote store rejected {method} {path}",
                        status_code=response.status_code,
                    )

                logger.warning(
                    "remote_store_server_error",
                    method=method,
                    path=path,
                    status_code=response.status_code,
                    attempt=attempt + 1,
                )

            except httpx.TimeoutException:
                timed_out = True
                logger.warning("remote_store_timeout", method=method, path=path, attempt=attempt + 1)
            except httpx.TransportError as e:
                timed_out = False
                logger.warning(
                    "remote_store_transport_error",
                    method=method,
                    path=path,
                    attempt=attempt + 1,
                    error=str(e),
                )

            if attempt < self._max_retries - 1:
                record_remote_store_retry()
                delay = 2 ** attempt * self._backoff_base
                await asyncio.sleep(delay)

        logger.error(
            "remote_store_exhausted_retries",
            method=method,
            path=path,
            max_retries=self._max_retries,
        )
        if timed_out:
            raise RemoteStoreTimeoutException()
        raise RemoteStoreException(
            f"Remote store unavailable for {method} {path}",
            status_code=last_status,
        )
