"""In-memory cache of joined datasets keyed by classification view."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from .models import EnrichedDataset, Item


class DatasetCache:
    """Hold at most one joined dataset per cache key.

    Writes replace the stored reference in a single assignment, so readers
    observe either the previous dataset or the new one and never a partial
    update. The cache is created by the caller and handed to the loader and
    to readers; there is no module-level instance.

    Examples
    --------
    >>> cache = DatasetCache()
    >>> cache.has("category_db")
    False

    """

    def __init__(self) -> None:
        """Create an empty cache."""
        self._datasets: dict[str, EnrichedDataset] = {}

    def has(self, name: str) -> bool:
        """Return True once a dataset has been stored under ``name``."""
        return name in self._datasets

    def keys(self) -> frozenset[str]:
        """Return the populated cache keys."""
        return frozenset(self._datasets)

    def get(self, name: str) -> EnrichedDataset | None:
        """Return the dataset stored under ``name``, if any."""
        return self._datasets.get(name)

    def put(self, name: str, dataset: EnrichedDataset) -> None:
        """Store ``dataset`` under ``name``, replacing any previous value."""
        self._datasets[name] = dataset

    def lookup_item(self, name: str, item_id: str) -> Item | None:
        """Return the item with ``item_id`` from the dataset under ``name``."""
        dataset = self._datasets.get(name)
        if dataset is None:
            return None
        return dataset.find_item(item_id)

    def clear(self) -> None:
        """Drop every cached dataset."""
        self._datasets = {}

    def __contains__(self, name: object) -> bool:
        """Support ``name in cache``."""
        return name in self._datasets

    def __len__(self) -> int:
        """Return the number of populated keys."""
        return len(self._datasets)
