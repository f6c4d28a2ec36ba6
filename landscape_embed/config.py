"""Runtime configuration for dataset loading.

The loader behaves differently in development, where every dataset and
asset is served by a local development server, and in production, where
URLs are built relative to the deployment.

Usage
-----
Create a configuration with defaults:

>>> config = EmbedConfig()
>>> config.mode
<RuntimeMode.PRODUCTION: 'production'>

Or load from environment variables:

>>> import os
>>> os.environ["LANDSCAPE_EMBED_MODE"] = "development"
>>> EmbedConfig.from_env().is_development
True

"""

from __future__ import annotations

import dataclasses as dc
import enum
import os

from .errors import EmbedConfigError

DEFAULT_DEV_SERVER = "http://localhost:8000"


class RuntimeMode(enum.StrEnum):
    """Environment the embed is running in."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"


@dc.dataclass(frozen=True, slots=True)
class EmbedConfig:
    """Configuration for the dataset loader.

    Attributes
    ----------
    mode
        Runtime mode. Development points every URL at ``dev_server``.
    dev_server
        Origin of the local development server, without a trailing slash.
    base_path
        Default deployment base path used when callers do not pass one.
    timeout_s
        HTTP timeout applied to dataset requests.
    user_agent
        ``User-Agent`` header sent with dataset requests.
    log_level
        Level passed to :func:`landscape_embed.logging.configure_logging`.

    """

    mode: RuntimeMode = RuntimeMode.PRODUCTION
    dev_server: str = DEFAULT_DEV_SERVER
    base_path: str = ""
    timeout_s: float = 20.0
    user_agent: str = "landscape-embed/0.1"
    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        """Return True when URLs should target the development server."""
        return self.mode is RuntimeMode.DEVELOPMENT

    @staticmethod
    def _parse_mode(raw: str) -> RuntimeMode:
        text = raw.strip().lower()
        if not text:
            return RuntimeMode.PRODUCTION
        try:
            return RuntimeMode(text)
        except ValueError as exc:
            raise EmbedConfigError.invalid_mode(raw) from exc

    @staticmethod
    def _parse_timeout(raw: str, default: float) -> float:
        if not raw.strip():
            return default
        try:
            value = float(raw)
        except ValueError as exc:
            raise EmbedConfigError.invalid_timeout(raw) from exc
        if value <= 0:
            raise EmbedConfigError.invalid_timeout(raw)
        return value

    @classmethod
    def from_env(cls) -> EmbedConfig:
        """Create configuration from environment variables.

        Reads the following environment variables:

        - ``LANDSCAPE_EMBED_MODE``: ``development`` or ``production``.
        - ``LANDSCAPE_EMBED_DEV_SERVER``: development server origin.
        - ``LANDSCAPE_EMBED_BASE_PATH``: default deployment base path.
        - ``LANDSCAPE_EMBED_TIMEOUT_S``: positive request timeout in seconds.
        - ``LANDSCAPE_EMBED_LOG_LEVEL``: log level name.

        Raises
        ------
        EmbedConfigError
            If the mode or timeout cannot be parsed.

        """
        defaults = cls()
        dev_server = os.environ.get("LANDSCAPE_EMBED_DEV_SERVER", "").strip()
        log_level = os.environ.get("LANDSCAPE_EMBED_LOG_LEVEL", "").strip()
        return cls(
            mode=cls._parse_mode(os.environ.get("LANDSCAPE_EMBED_MODE", "")),
            dev_server=(dev_server or defaults.dev_server).rstrip("/"),
            base_path=os.environ.get("LANDSCAPE_EMBED_BASE_PATH", "").strip(),
            timeout_s=cls._parse_timeout(
                os.environ.get("LANDSCAPE_EMBED_TIMEOUT_S", ""), defaults.timeout_s
            ),
            log_level=log_level or defaults.log_level,
        )
