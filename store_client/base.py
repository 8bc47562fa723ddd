"""Base Supabase REST client with retry logic."""

from typing import Any, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError
from tenacity import (
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

import settings
from app.errors import StoreError

M = TypeVar("M", bound=BaseModel)


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


def _error_message(resp: httpx.Response) -> str:
    """PostgREST puts the reason in a JSON ``message`` field."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return resp.reason_phrase


class BaseClient:
    """Synchronous PostgREST client with exponential backoff.

    Transient failures are retried; whatever is left after the last attempt
    is raised as StoreError.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float = settings.API_TIMEOUT,
        max_attempts: int = settings.API_MAX_ATTEMPTS,
        wait: wait_base | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        base_url = base_url or settings.SUPABASE_URL
        api_key = api_key or settings.SUPABASE_SERVICE_ROLE_KEY
        if not base_url:
            raise StoreError("Supabase URL is not configured")

        self._client = httpx.Client(
            base_url=f"{base_url.rstrip('/')}/rest/v1",
            headers={"apikey": api_key, "Authorization": f"Bearer {api_key}"},
            timeout=timeout,
            transport=transport,
        )
        self._retrying = Retrying(
            stop=stop_after_attempt(max_attempts),
            wait=wait or wait_exponential(multiplier=0.5, min=0.5, max=8),
            retry=retry_if_exception(_is_retryable_error),
            reraise=True,
        )
        logger.info("{}: {} (max_attempts={})", self.__class__.__name__, base_url, max_attempts)

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get(self, table: str, params: dict[str, str]) -> Any:
        resp = self._client.get(f"/{table}", params=params)
        resp.raise_for_status()
        return resp.json()

    def select(self, table: str, params: dict[str, str]) -> list[dict]:
        """GET /rest/v1/{table} with retry; always a list of row dicts."""
        try:
            data = self._retrying(self._get, table, params)
        except httpx.HTTPStatusError as e:
            message = _error_message(e.response)
            logger.error("Select {} failed ({}): {}", table, e.response.status_code, message)
            raise StoreError(f"Store query failed: {message}") from e
        except httpx.HTTPError as e:
            logger.error("Select {} failed: {}", table, e)
            raise StoreError(f"Store unreachable: {e}") from e
        except ValueError as e:
            logger.error("Select {} returned invalid JSON", table)
            raise StoreError("Store returned invalid JSON") from e

        if not isinstance(data, list):
            raise StoreError(f"Store returned {type(data).__name__} instead of rows")

        logger.debug("select {} {}: {} rows", table, params, len(data))
        return data


def parse_rows(schema: type[M], rows: list[dict]) -> list[M]:
    """Validate store rows; a malformed row fails the whole read."""
    try:
        return [schema.model_validate(r) for r in rows]
    except ValidationError as e:
        logger.error("Malformed {} row: {}", schema.__name__, e)
        raise StoreError(f"Store returned malformed {schema.__name__} rows") from e
