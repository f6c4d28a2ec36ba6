"""Data preparation and caching for embeddable landscape views.

Quick example
-------------

    >>> from landscape_embed import DatasetCache, DatasetLoader, EmbedConfig
    >>> cache = DatasetCache()
    >>> loader = DatasetLoader(EmbedConfig.from_env(), cache=cache)
    >>> await loader.load("category", "networking", "/landscape")
    >>> cache.lookup_item("category_networking", "envoy")
"""

from __future__ import annotations

from .cache import DatasetCache
from .config import EmbedConfig, RuntimeMode
from .errors import (
    DatasetDecodeError,
    DatasetError,
    DatasetFetchError,
    EmbedConfigError,
)
from .join import enrich_bundle, join_item, join_items
from .loader import DatasetLoader, DatasetObserver, LoadResult
from .locator import ResourceKind, ResourceLocator
from .models import (
    DatasetBundle,
    EnrichedDataset,
    GitData,
    Item,
    Organization,
    Repository,
    dataset_key,
    decode_bundle,
)
from .observability import DatasetEventLogger, ErrorCategory, categorize_error

__all__ = [
    "DatasetBundle",
    "DatasetCache",
    "DatasetDecodeError",
    "DatasetError",
    "DatasetEventLogger",
    "DatasetFetchError",
    "DatasetLoader",
    "DatasetObserver",
    "EmbedConfig",
    "EmbedConfigError",
    "EnrichedDataset",
    "ErrorCategory",
    "GitData",
    "Item",
    "LoadResult",
    "Organization",
    "Repository",
    "ResourceKind",
    "ResourceLocator",
    "RuntimeMode",
    "categorize_error",
    "dataset_key",
    "decode_bundle",
    "enrich_bundle",
    "join_item",
    "join_items",
]
