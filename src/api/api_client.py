# src/api/api_client.py

"""HTTP client for the catalog API with timeouts and linear-backoff retries."""

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from curl_cffi import requests as curl_requests

from src.config.settings import ApiConfig
from src.utils.exceptions import StorefrontError

logger = logging.getLogger("storefront.api")

SleepFunc = Callable[[float], Awaitable[None]]


class ApiError(StorefrontError):
    """Normalised failure of an API call.

    ``status`` is the HTTP status when one is known and ``details``
    carries whatever diagnostic payload was available (response text,
    or the last underlying exception after retries run out).
    """

    def __init__(
        self,
        message: str,
        status: int | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.details = details


class ApiClient:
    """Issues JSON requests against a single base URL."""

    def __init__(
        self,
        config: ApiConfig | None = None,
        sleep: SleepFunc | None = None,
    ) -> None:
        self.config = config or ApiConfig.from_settings()
        self._sleep: SleepFunc = sleep or asyncio.sleep

    def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: str | None,
        timeout: float,
    ) -> Any:
        """Perform one blocking attempt and return the decoded body."""
        resp = curl_requests.request(
            method,
            url,
            headers=headers,
            data=body,
            timeout=timeout,
            impersonate=self.config.impersonate,
        )
        if not 200 <= resp.status_code < 300:
            raise ApiError(
                f"HTTP {resp.status_code}",
                resp.status_code,
                resp.text,
            )
        if not resp.content:
            return None
        return resp.json()

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: str | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        retries: int | None = None,
    ) -> Any:
        """Call *endpoint* and return its decoded JSON payload.

        Makes at most ``retries + 1`` attempts. A failed attempt is
        followed by a pause of ``retry_delay * attempt_number`` seconds
        unless it was the last one. Raises :class:`ApiError` once every
        attempt has failed.
        """
        timeout = self.config.timeout if timeout is None else timeout
        retries = self.config.retries if retries is None else retries
        url = f"{self.config.base_url}{endpoint}"
        merged_headers = {**self.config.headers, **(headers or {})}
        last_error: Exception | None = None

        for attempt in range(retries + 1):
            try:
                data = await asyncio.to_thread(
                    self._send,
                    method,
                    url,
                    merged_headers,
                    body,
                    timeout,
                )
            except Exception as exc:
                last_error = exc
                if self.config.verbose:
                    logger.warning(
                        "API error on %s %s (attempt %d/%d): %s",
                        method,
                        endpoint,
                        attempt + 1,
                        retries + 1,
                        exc,
                    )
                if attempt < retries:
                    await self._sleep(
                        self.config.retry_delay * (attempt + 1)
                    )
                continue

            if self.config.verbose:
                logger.info(
                    "API success on %s %s (attempt %d)",
                    method,
                    endpoint,
                    attempt + 1,
                )
            return data

        raise ApiError(
            f"Request failed after {retries + 1} attempts: {last_error}",
            500,
            last_error,
        )

    async def get(self, endpoint: str, **options: Any) -> Any:
        """GET *endpoint*."""
        return await self.request(endpoint, method="GET", **options)

    async def post(
        self, endpoint: str, payload: Any = None, **options: Any,
    ) -> Any:
        """POST *payload* serialised as JSON."""
        return await self.request(
            endpoint,
            method="POST",
            body=json.dumps(payload),
            **options,
        )

    async def put(
        self, endpoint: str, payload: Any = None, **options: Any,
    ) -> Any:
        """PUT *payload* serialised as JSON."""
        return await self.request(
            endpoint,
            method="PUT",
            body=json.dumps(payload),
            **options,
        )

    async def delete(self, endpoint: str, **options: Any) -> Any:
        """DELETE *endpoint*."""
        return await self.request(endpoint, method="DELETE", **options)
