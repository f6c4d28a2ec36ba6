"""Fetch, join and cache landscape datasets.

:class:`DatasetLoader` is the entry point used by the embed UI. A call to
:meth:`DatasetLoader.load` resolves the dataset URL, downloads and decodes
the document, joins the items with their side tables, stores the result in
the :class:`~landscape_embed.cache.DatasetCache` and notifies the
subscribed observer.

Usage
-----
>>> loader = DatasetLoader(EmbedConfig.from_env())
>>> result = await loader.load("category", "networking", "/landscape")
>>> loader.get_item_by_id("category", "networking", "envoy")

"""

from __future__ import annotations

import dataclasses
import datetime as dt
import time
import typing as typ

import httpx
import msgspec

from .cache import DatasetCache
from .errors import DatasetDecodeError, DatasetError, DatasetFetchError
from .join import enrich_bundle
from .locator import ResourceLocator
from .models import dataset_key, decode_bundle
from .observability import (
    DatasetEventLogger,
    ErrorCategory,
    LoadContext,
    categorize_error,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import EmbedConfig
    from .models import EnrichedDataset, Item


@dataclasses.dataclass(frozen=True, slots=True)
class LoadResult:
    """Outcome of a single :meth:`DatasetLoader.load` call.

    Attributes
    ----------
    name
        Cache key of the view that was loaded.
    url
        Dataset URL that was requested.
    succeeded
        True when the dataset was joined and stored.
    item_count
        Number of items stored; zero on failure.
    error
        The failure, when ``succeeded`` is False.
    error_category
        Category of ``error`` for alerting.

    """

    name: str
    url: str
    succeeded: bool
    item_count: int = 0
    error: DatasetError | None = None
    error_category: ErrorCategory | None = None

    @property
    def failed(self) -> bool:
        """Return True when the load did not populate the cache."""
        return not self.succeeded


@typ.runtime_checkable
class DatasetObserver(typ.Protocol):
    """Receives the outcome of every load."""

    def update_status(self, result: LoadResult) -> None:
        """Handle a completed load, successful or not."""
        ...


class DatasetLoader:
    """Load classification views into a :class:`DatasetCache`."""

    def __init__(
        self,
        config: EmbedConfig,
        *,
        cache: DatasetCache | None = None,
        http_client: httpx.AsyncClient | None = None,
        event_logger: DatasetEventLogger | None = None,
    ) -> None:
        """Initialise the loader; an HTTP client is created when none is given."""
        self._config = config
        self._locator = ResourceLocator(config)
        self._cache = cache if cache is not None else DatasetCache()
        self._events = event_logger or DatasetEventLogger()
        self._observer: DatasetObserver | None = None
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=config.timeout_s,
            follow_redirects=True,
            headers={
                "User-Agent": config.user_agent,
                "Accept": "application/json",
            },
        )

    @property
    def cache(self) -> DatasetCache:
        """Return the cache this loader writes to."""
        return self._cache

    @property
    def locator(self) -> ResourceLocator:
        """Return the locator used to build dataset and asset URLs."""
        return self._locator

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    def subscribe(self, observer: DatasetObserver) -> None:
        """Register ``observer``, replacing any previous one."""
        self._observer = observer

    def unsubscribe(self) -> None:
        """Remove the registered observer."""
        self._observer = None

    async def load(
        self,
        classify_by: str,
        key: str,
        base_path: str | None = None,
        categories: cabc.Sequence[str] | None = None,
    ) -> LoadResult:
        """Fetch and cache the dataset for one classification view.

        Parameters
        ----------
        classify_by
            Classification dimension, e.g. ``category``.
        key
            Classification value, e.g. ``networking``.
        base_path
            Deployment base path; defaults to ``config.base_path``.
        categories
            Category filter. When non-empty the full dataset is fetched.

        Returns
        -------
        LoadResult
            The outcome also passed to the observer. Transport and decode
            failures are reported here rather than raised, and leave the
            cache untouched for this view.

        """
        name = dataset_key(classify_by, key)
        url = self._locator.dataset_url(
            classify_by,
            key,
            self._config.base_path if base_path is None else base_path,
            categories=categories,
        )
        context = LoadContext(name=name, url=url, started_at=dt.datetime.now(dt.UTC))
        self._events.log_load_started(context)
        started = time.monotonic()

        try:
            dataset = await self._fetch_dataset(url)
        except DatasetError as exc:
            duration = dt.timedelta(seconds=time.monotonic() - started)
            self._events.log_load_failed(context, exc, duration)
            result = LoadResult(
                name=name,
                url=url,
                succeeded=False,
                error=exc,
                error_category=categorize_error(exc),
            )
        else:
            self._cache.put(name, dataset)
            duration = dt.timedelta(seconds=time.monotonic() - started)
            self._events.log_load_completed(
                context, item_count=len(dataset.items), duration=duration
            )
            result = LoadResult(
                name=name,
                url=url,
                succeeded=True,
                item_count=len(dataset.items),
            )

        self._notify(result)
        return result

    async def _fetch_dataset(self, url: str) -> EnrichedDataset:
        """Download, decode and join the dataset at ``url``."""
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            raise DatasetFetchError.transport(url, exc) from exc
        if not response.is_success:
            raise DatasetFetchError.http_error(response.status_code, url)

        try:
            bundle = decode_bundle(response.content)
        except (msgspec.DecodeError, msgspec.ValidationError) as exc:
            raise DatasetDecodeError.malformed(url, exc) from exc

        return enrich_bundle(bundle, locator=self._locator)

    def _notify(self, result: LoadResult) -> None:
        if self._observer is not None:
            self._observer.update_status(result)

    def is_ready(self, name: str) -> bool:
        """Return True once the view stored under ``name`` has loaded."""
        return self._cache.has(name)

    def get_available_keys(self) -> list[str]:
        """Return the loaded cache keys in sorted order."""
        return sorted(self._cache.keys())

    def get_item_by_id(self, classify_by: str, key: str, item_id: str) -> Item | None:
        """Return an item from a loaded view, or None."""
        return self._cache.lookup_item(dataset_key(classify_by, key), item_id)
