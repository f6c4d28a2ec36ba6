"""CLI behaviour tests."""
# ruff: noqa: D103

from __future__ import annotations

import typing as typ

import msgspec
import pytest

from landscape_embed import cli
from landscape_embed.loader import DatasetLoader
from tests.helpers import BASE_PATH, FakeDatasetServer

if typ.TYPE_CHECKING:
    from landscape_embed.config import EmbedConfig

_DB_URL = f"{BASE_PATH}/data/embed_full_category_db.json"


@pytest.fixture(autouse=True)
def _wire_cli(
    monkeypatch: pytest.MonkeyPatch, dataset_server: FakeDatasetServer
) -> None:
    for name in ("LANDSCAPE_EMBED_MODE", "LANDSCAPE_EMBED_BASE_PATH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(cli, "configure_logging", lambda level: ("INFO", False))

    def _loader(config: EmbedConfig) -> DatasetLoader:
        return DatasetLoader(config, http_client=dataset_server.client())

    monkeypatch.setattr(cli, "DatasetLoader", _loader)


def test_cli_prints_summary(
    dataset_server: FakeDatasetServer,
    bundle_payload: dict[str, typ.Any],
    capsys: pytest.CaptureFixture[str],
) -> None:
    dataset_server.add_json(_DB_URL, bundle_payload)

    exit_code = cli.main(["category", "db", "--base-path", BASE_PATH])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == (
        f"loaded category_db (1 items) from {_DB_URL}"
    )


def test_cli_prints_joined_item(
    dataset_server: FakeDatasetServer,
    bundle_payload: dict[str, typ.Any],
    capsys: pytest.CaptureFixture[str],
) -> None:
    dataset_server.add_json(_DB_URL, bundle_payload)

    exit_code = cli.main(
        ["category", "db", "--base-path", BASE_PATH, "--item-id", "a1"]
    )

    assert exit_code == 0
    item = msgspec.json.decode(capsys.readouterr().out)
    assert item["crunchbase_data"]["name"] == "Acme"
    assert item["repositories"][0]["git_data"]["stars"] == 42
    assert item["logo"] == "../logos/a.svg"


def test_cli_reports_missing_item(
    dataset_server: FakeDatasetServer,
    bundle_payload: dict[str, typ.Any],
    capsys: pytest.CaptureFixture[str],
) -> None:
    dataset_server.add_json(_DB_URL, bundle_payload)

    exit_code = cli.main(
        ["category", "db", "--base-path", BASE_PATH, "--item-id", "nope"]
    )

    assert exit_code == 1
    assert "item nope not found in category_db" in capsys.readouterr().err


def test_cli_reports_load_failure(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main(["category", "db", "--base-path", BASE_PATH])

    assert exit_code == 1
    assert "failed to load category_db" in capsys.readouterr().err


def test_cli_category_filter_uses_full_dataset(
    dataset_server: FakeDatasetServer,
    bundle_payload: dict[str, typ.Any],
) -> None:
    dataset_server.add_json(f"{BASE_PATH}/data/full.json", bundle_payload)

    exit_code = cli.main(
        ["category", "db", "--base-path", BASE_PATH, "--category", "db"]
    )

    assert exit_code == 0
    assert dataset_server.requested == [f"{BASE_PATH}/data/full.json"]


def test_cli_reports_invalid_configuration(
    monkeypatch: pytest.MonkeyPatch,
    dataset_server: FakeDatasetServer,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("LANDSCAPE_EMBED_MODE", "staging")

    exit_code = cli.main(["category", "db", "--base-path", BASE_PATH])

    assert exit_code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "invalid configuration" in captured.err
    assert "'staging'" in captured.err
    assert dataset_server.requested == []
