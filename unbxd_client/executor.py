"""HTTP execution and response decoding shared by all three API domains."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Callable, Optional, TypeVar

import httpx

from unbxd_client.exceptions import ErrorFamily, UnbxdError
from unbxd_client.logging import logger as default_logger
from unbxd_client.models import RawResponse, UnbxdResponse

R = TypeVar("R", bound=UnbxdResponse)

# InvalidURL is not an HTTPError subclass
TRANSPORT_FAILURES = (httpx.HTTPError, httpx.InvalidURL)

CompletionHandler = Callable[[Optional[R], Optional[UnbxdError]], None]


def decode_response(
    raw: RawResponse,
    response_type: type[R],
    errors: ErrorFamily,
    logger=None,
) -> R:
    """Turn a 200 body into ``response_type``; anything else into an api error."""

    log = logger if logger is not None else default_logger
    if raw.status_code != 200:
        log.error(
            "unbxd_api_error",
            domain=errors.domain,
            status_code=raw.status_code,
            body=raw.body[:500],
        )
        raise errors.api(raw.body, status_code=raw.status_code)

    try:
        payload: Any = json.loads(raw.body)
    except ValueError as exc:
        log.error("unbxd_decode_failed", domain=errors.domain, error=str(exc))
        raise errors.decode(f"Response is not valid JSON: {exc}", cause=exc) from exc
    if not isinstance(payload, dict):
        log.error("unbxd_decode_failed", domain=errors.domain, error="not a JSON object")
        raise errors.decode(
            f"Response is not a JSON object (got {type(payload).__name__})"
        )
    return response_type(data=payload)


class RequestExecutor:
    """Performs GET requests and hands status and body to the decoder.

    The HTTP clients are injected; when omitted, one is created on first use
    and closed by :meth:`close` / :meth:`aclose`.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        async_http_client: httpx.AsyncClient | None = None,
        *,
        timeout: float = 10.0,
        logger=None,
        redact: Callable[[str], str] | None = None,
    ) -> None:
        self._client = http_client
        self._async_client = async_http_client
        self._owns_client = http_client is None
        self._owns_async_client = async_http_client is None
        self._timeout = timeout
        self._logger = logger if logger is not None else default_logger
        self._redact = redact or (lambda url: url)
        self._pending: set[asyncio.Task[None]] = set()

    def _sync_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client()
        return self._client

    def _aclient(self) -> httpx.AsyncClient:
        if self._async_client is None:
            self._async_client = httpx.AsyncClient()
        return self._async_client

    def execute(self, url: str, response_type: type[R], errors: ErrorFamily) -> R:
        """Blocking GET; returns the decoded response or raises."""

        self._logger.debug("unbxd_request_started", domain=errors.domain, url=self._redact(url))
        try:
            response = self._sync_client().get(url, timeout=self._timeout)
            raw = RawResponse(status_code=response.status_code, body=response.text)
        except TRANSPORT_FAILURES as exc:
            raise self._transport_failure(url, errors, exc) from exc
        return decode_response(raw, response_type, errors, self._logger)

    async def execute_async(self, url: str, response_type: type[R], errors: ErrorFamily) -> R:
        """Non-blocking GET for callers already running an event loop."""

        self._logger.debug("unbxd_request_started", domain=errors.domain, url=self._redact(url))
        try:
            response = await self._aclient().get(url, timeout=self._timeout)
            raw = RawResponse(status_code=response.status_code, body=response.text)
        except TRANSPORT_FAILURES as exc:
            raise self._transport_failure(url, errors, exc) from exc
        return decode_response(raw, response_type, errors, self._logger)

    def dispatch(
        self,
        url: str,
        response_type: type[R],
        errors: ErrorFamily,
        handler: CompletionHandler,
    ) -> asyncio.Task[None]:
        """Schedule the GET on the running loop and report through ``handler``.

        The handler is called exactly once with ``(response, None)`` or
        ``(None, error)``. Request failures never propagate out of the task.
        """

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as exc:
            raise errors.configuration(
                "Callback execution requires a running event loop", cause=exc
            ) from exc

        async def _run() -> None:
            try:
                result = await self.execute_async(url, response_type, errors)
            except UnbxdError as exc:
                self._complete(handler, None, exc, errors)
            except Exception as exc:
                self._complete(handler, None, self._transport_failure(url, errors, exc), errors)
            else:
                self._complete(handler, result, None, errors)

        task = loop.create_task(_run())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def _transport_failure(self, url: str, errors: ErrorFamily, exc: Exception):
        self._logger.error(
            "unbxd_request_failed",
            domain=errors.domain,
            url=self._redact(url),
            error=str(exc),
        )
        return errors.transport(f"Request failed: {exc}", cause=exc)

    def _complete(self, handler, result, error, errors: ErrorFamily) -> None:
        try:
            handler(result, error)
        except Exception:
            self._logger.exception("unbxd_callback_failed", domain=errors.domain)

    def close(self) -> None:
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    async def aclose(self) -> None:
        self.close()
        if self._owns_async_client and self._async_client is not None:
            await self._async_client.aclose()
            self._async_client = None


__all__ = ["CompletionHandler", "RequestExecutor", "decode_response"]
