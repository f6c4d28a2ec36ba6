"""URL resolution for dataset fragments and static assets."""

from __future__ import annotations

import enum
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import EmbedConfig

FULL_DATASET_PATH = "data/full.json"
_DEPLOYED_ASSET_PREFIX = "../"
_RESOLVED_PREFIXES = ("http://", "https://", "data:", "/", _DEPLOYED_ASSET_PREFIX)


class ResourceKind(enum.StrEnum):
    """Resources the locator can resolve."""

    DATASET = "dataset"
    ASSET = "asset"


def partial_dataset_path(classify_by: str, key: str) -> str:
    """Return the path of the per-key dataset fragment."""
    return f"data/embed_full_{classify_by}_{key}.json"


class ResourceLocator:
    """Compute dataset and asset URLs for the configured runtime mode."""

    def __init__(self, config: EmbedConfig) -> None:
        """Bind the locator to a runtime configuration."""
        self._development = config.is_development
        self._dev_server = config.dev_server.rstrip("/")

    def resolve(
        self,
        kind: ResourceKind,
        *,
        classify_by: str | None = None,
        key: str | None = None,
        base_path: str = "",
        categories: cabc.Sequence[str] | None = None,
        path: str | None = None,
    ) -> str:
        """Resolve a dataset URL or an asset URL.

        ``DATASET`` requires ``classify_by`` and ``key`` unless a non-empty
        ``categories`` list selects the full dataset. ``ASSET`` requires
        ``path``.
        """
        if kind is ResourceKind.ASSET:
            if path is None:
                msg = "asset resolution requires a path"
                raise ValueError(msg)
            return self.asset_url(path)
        return self.dataset_url(
            classify_by or "", key or "", base_path, categories=categories
        )

    def dataset_url(
        self,
        classify_by: str,
        key: str,
        base_path: str,
        *,
        categories: cabc.Sequence[str] | None = None,
    ) -> str:
        """Return the URL of the dataset backing a classification view.

        A non-empty ``categories`` filter needs items from several
        fragments, so it is served from the full dataset instead.
        """
        relative = (
            FULL_DATASET_PATH
            if categories
            else partial_dataset_path(classify_by, key)
        )
        prefix = self._dev_server if self._development else base_path
        return f"{prefix}/{relative}"

    def asset_url(self, path: str) -> str:
        """Return the URL of a logo or report image.

        Values that already look resolved are returned unchanged.
        """
        if path.startswith(_RESOLVED_PREFIXES):
            return path
        if self._development:
            return f"{self._dev_server}/{path}"
        return f"{_DEPLOYED_ASSET_PREFIX}{path}"

    def report_url(self, path: str | None) -> str | None:
        """Resolve an optional report image reference."""
        if not path:
            return None
        return self.asset_url(path)
