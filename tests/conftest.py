"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import typing as typ

import pytest

from landscape_embed import DatasetCache, EmbedConfig, ResourceLocator, RuntimeMode
from tests.helpers import FakeDatasetServer, make_bundle_payload


@pytest.fixture
def bundle_payload() -> dict[str, typ.Any]:
    """Return the sample dataset document."""
    return make_bundle_payload()


@pytest.fixture
def dataset_server() -> FakeDatasetServer:
    """Return an empty fake dataset server."""
    return FakeDatasetServer()


@pytest.fixture
def production_config() -> EmbedConfig:
    """Return a production configuration."""
    return EmbedConfig(mode=RuntimeMode.PRODUCTION)


@pytest.fixture
def development_config() -> EmbedConfig:
    """Return a development configuration using the default dev server."""
    return EmbedConfig(mode=RuntimeMode.DEVELOPMENT)


@pytest.fixture
def production_locator(production_config: EmbedConfig) -> ResourceLocator:
    """Return a locator for deployed URLs."""
    return ResourceLocator(production_config)


@pytest.fixture
def dataset_cache() -> DatasetCache:
    """Return a fresh cache for each test."""
    return DatasetCache()
