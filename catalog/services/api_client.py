import asyncio
from json import JSONDecodeError
from typing import Any, Optional, Protocol

import httpx
from loguru import logger

from catalog.exceptions import APIClientHTTPError, APIClientTransportError


class APISettings(Protocol):
    HEVY_API_URL: str
    HEVY_API_KEY: str
    API_MAX_RETRIES: int
    API_RETRY_INITIAL_DELAY: float
    API_RETRY_BACKOFF_FACTOR: float
    API_RETRY_MAX_DELAY: float
    API_TIMEOUT: int


class APIClient:
    def __init__(self, client: httpx.AsyncClient, settings: APISettings) -> None:
        self.client = client
        self.settings = settings
        self.api_url = getattr(settings, "HEVY_API_URL", "").rstrip("/")
        self.api_key = getattr(settings, "HEVY_API_KEY", "")
        self.max_retries = getattr(settings, "API_MAX_RETRIES", 0)
        self.initial_delay = getattr(settings, "API_RETRY_INITIAL_DELAY", 0.0)
        self.backoff_factor = getattr(settings, "API_RETRY_BACKOFF_FACTOR", 0.0)
        self.max_delay = getattr(settings, "API_RETRY_MAX_DELAY", 0.0)
        self.default_timeout = getattr(settings, "API_TIMEOUT", 0)

    def _build_url(self, path: str) -> str:
        return f"{self.api_url}/{path.lstrip('/')}"

    def _default_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["api-key"] = self.api_key
        return headers

    async def _api_request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[dict[str, Any]] = None,
        data: Optional[dict] = None,
        headers: Optional[dict] = None,
        timeout: int | None = None,
        allow_statuses: set[int] | None = None,
    ) -> tuple[int, Any | None]:
        request_headers = self._default_headers()
        request_headers.update(headers or {})
        timeout_value = timeout or self.default_timeout or None
        allowed = allow_statuses or set()
        attempts = max(1, self.max_retries + 1)
        delay = self.initial_delay

        for attempt in range(1, attempts + 1):
            try:
                response = await self.client.request(
                    method,
                    url,
                    params=params,
                    json=data,
                    headers=request_headers,
                    timeout=timeout_value,
                )

                if response.status_code in allowed:
                    return response.status_code, self._parse_response_json(response)

                try:
                    response.raise_for_status()
                except httpx.HTTPStatusError as exc:
                    status = exc.response.status_code
                    body = exc.response.text
                    retryable = status == 429 or status >= 500
                    if retryable and attempt < attempts:
                        logger.warning(
                            f"Retrying {method.upper()} {url} after HTTP {status} (attempt {attempt}/{attempts})"
                        )
                        await self._sleep(delay)
                        delay = self._next_delay(delay)
                        continue
                    raise APIClientHTTPError(
                        status,
                        body,
                        method=method,
                        url=url,
                        retryable=retryable,
                    ) from exc

                return response.status_code, self._parse_response_json(response)

            except APIClientHTTPError:
                raise

            except httpx.RequestError as exc:
                if attempt >= attempts:
                    raise APIClientTransportError(f"{type(exc).__name__} on {method.upper()} {url}: {exc}") from exc
                logger.warning(
                    f"Retrying {method.upper()} {url} after transport error {type(exc).__name__} "
                    f"(attempt {attempt}/{attempts})"
                )
                await self._sleep(delay)
                delay = self._next_delay(delay)

            except Exception as exc:  # noqa: BLE001
                logger.exception(f"Unexpected error during {method.upper()} {url}: {exc}")
                raise APIClientTransportError(f"Unexpected error on {method.upper()} {url}: {exc}") from exc

        raise APIClientTransportError(f"Exhausted retries for {method.upper()} {url}")

    @staticmethod
    async def _sleep(delay: float) -> None:
        if delay > 0:
            await asyncio.sleep(delay)

    def _next_delay(self, current: float) -> float:
        if current <= 0:
            return self.initial_delay or 0.0
        next_delay = current * self.backoff_factor
        if self.max_delay:
            next_delay = min(next_delay, self.max_delay)
        return next_delay

    @staticmethod
    def _parse_response_json(response: httpx.Response) -> Any | None:
        content_type = response.headers.get("content-type", "")
        if content_type.startswith("application/json"):
            try:
                return response.json()
            except JSONDecodeError:
                logger.warning(f"Failed to decode JSON response from {response.request.url}")
                return None
        return None
