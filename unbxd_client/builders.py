"""Execution entry points shared by the three fluent request builders."""

from __future__ import annotations

import asyncio
from typing import Any, Generic, TypeVar

from unbxd_client.config import ClientSettings
from unbxd_client.exceptions import ErrorFamily
from unbxd_client.executor import CompletionHandler, RequestExecutor
from unbxd_client.models import UnbxdResponse

R = TypeVar("R", bound=UnbxdResponse)


class RequestBuilder(Generic[R]):
    """Base for the per-domain builders.

    Subclasses accumulate options through chained setters and implement
    :meth:`build` (an immutable, validated snapshot) and :meth:`_render`.
    Every execute variant renders the URL on the calling thread first, so
    configuration and encoding errors are always raised synchronously.
    """

    errors: ErrorFamily
    response_type: type[R]

    def __init__(self, settings: ClientSettings, executor: RequestExecutor) -> None:
        self._settings = settings
        self._executor = executor

    def build(self) -> Any:
        raise NotImplementedError

    def _render(self, request: Any) -> str:
        raise NotImplementedError

    def generate_url(self) -> str:
        return self._render(self.build())

    def execute(self) -> R:
        url = self.generate_url()
        return self._executor.execute(url, self.response_type, self.errors)

    async def execute_async(self) -> R:
        url = self.generate_url()
        return await self._executor.execute_async(url, self.response_type, self.errors)

    def execute_with_callback(self, handler: CompletionHandler) -> asyncio.Task[None]:
        url = self.generate_url()
        return self._executor.dispatch(url, self.response_type, self.errors, handler)


__all__ = ["RequestBuilder"]
