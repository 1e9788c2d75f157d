"""Entry point that hands out per-call request builders."""

from __future__ import annotations

import httpx

from unbxd_client.autosuggest import AutoSuggestRequestBuilder
from unbxd_client.config import ClientSettings, get_settings
from unbxd_client.executor import RequestExecutor
from unbxd_client.recommendations import RecommendationsRequestBuilder
from unbxd_client.search import SearchRequestBuilder
from unbxd_client.session import SessionStore, read_uid
from unbxd_client.urls import redact


class UnbxdClient:
    """Owns the settings, HTTP clients and logger shared by every builder.

    Builders are cheap and single-use; ask for a fresh one per call::

        client = UnbxdClient(ClientSettings(site_key="demo", api_key="key"))
        response = client.search().search("shoes").add_sort("price").execute()
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
        async_http_client: httpx.AsyncClient | None = None,
        session_store: SessionStore | None = None,
        logger=None,
    ) -> None:
        self._settings = settings or get_settings()
        self._session_store = session_store
        self._executor = RequestExecutor(
            http_client,
            async_http_client,
            timeout=self._settings.request_timeout_seconds,
            logger=logger,
            redact=lambda url: redact(url, self._settings),
        )

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    def search(self) -> SearchRequestBuilder:
        return SearchRequestBuilder(self._settings, self._executor)

    def autosuggest(self) -> AutoSuggestRequestBuilder:
        return AutoSuggestRequestBuilder(self._settings, self._executor)

    def recommendations(self, uid: str | None = None) -> RecommendationsRequestBuilder:
        """Builder for recommendation widgets.

        ``uid`` falls back to the id held in the session store, if one was
        given to the client.
        """

        if uid is None:
            uid = read_uid(self._session_store)
        return RecommendationsRequestBuilder(self._settings, self._executor, uid=uid)

    def close(self) -> None:
        self._executor.close()

    async def aclose(self) -> None:
        await self._executor.aclose()

    def __enter__(self) -> "UnbxdClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    async def __aenter__(self) -> "UnbxdClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


__all__ = ["UnbxdClient"]
