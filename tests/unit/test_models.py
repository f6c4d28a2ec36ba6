"""Unit tests for dataset record decoding."""

from __future__ import annotations

import msgspec
import pytest

from landscape_embed.models import (
    DatasetBundle,
    Item,
    dataset_key,
    decode_bundle,
)


def test_decode_bundle_maps_wire_names() -> None:
    """Historical JSON names populate the descriptive attributes."""
    bundle = decode_bundle(
        b"""
        {
          "items": [
            {
              "id": "a1",
              "logo": "logos/a.svg",
              "crunchbase_url": "cb1",
              "clomonitor_report_summary": "reports/a.svg",
              "twitter_url": "https://twitter.com/acme",
              "accepted_at": "2021-06-01",
              "featured": {"label": "Sandbox", "order": 2}
            }
          ],
          "crunchbase_data": {"cb1": {"name": "Acme", "country": "NL"}},
          "git_data": {
            "https://github.com/org/repo": {
              "stars": 42,
              "contributors": {"count": 3, "url": "https://github.com/org/repo/graphs"},
              "latest_commit": {"ts": "2025-01-01T00:00:00Z"},
              "languages": {"Go": 1200},
              "participation_stats": [0, 2, 5]
            }
          }
        }
        """
    )

    assert bundle.items is not None
    (item,) = bundle.items
    assert item.organization_ref == "cb1"
    assert item.report_summary == "reports/a.svg"
    assert item.organization_data is None
    assert bundle.organization_table is not None
    assert bundle.organization_table["cb1"] == {"name": "Acme", "country": "NL"}
    assert bundle.git_table is not None
    git = bundle.git_table["https://github.com/org/repo"]
    assert git["contributors"] == {
        "count": 3,
        "url": "https://github.com/org/repo/graphs",
    }
    assert git["latest_commit"] == {"ts": "2025-01-01T00:00:00Z"}
    assert git["languages"] == {"Go": 1200}
    assert git["participation_stats"] == [0, 2, 5]
    assert item.twitter_url == "https://twitter.com/acme"
    assert item.accepted_at == "2021-06-01"
    assert item.featured == {"label": "Sandbox", "order": 2}


def test_empty_document_is_an_empty_bundle() -> None:
    """Every top-level section is optional."""
    assert decode_bundle(b"{}") == DatasetBundle()


def test_encode_uses_wire_names() -> None:
    """Encoding round-trips through the historical names."""
    encoded = msgspec.json.decode(
        msgspec.json.encode(Item(id="a1", logo="x.svg", organization_ref="cb1"))
    )

    assert encoded["crunchbase_url"] == "cb1"
    assert "organization_ref" not in encoded


def test_records_are_frozen() -> None:
    """Joined records cannot be edited in place."""
    item = Item(id="a1", logo="x.svg")

    with pytest.raises(AttributeError):
        item.logo = "y.svg"  # type: ignore[misc]


def test_dataset_key_joins_dimension_and_value() -> None:
    """Cache keys concatenate dimension and value with an underscore."""
    assert dataset_key("category", "networking") == "category_networking"


def test_side_table_and_item_fields_survive_reencoding() -> None:
    """Every organization, git and item field reaches the encoded output."""
    payload = {
        "items": [
            {
                "id": "a1",
                "logo": "logos/a.svg",
                "slack_url": "https://slack.example/acme",
                "repositories": [
                    {"url": "https://github.com/org/repo", "branch": "main"}
                ],
            }
        ],
        "crunchbase_data": {
            "cb1": {
                "name": "Acme",
                "stock_exchange": "NASDAQ",
                "funding_rounds": [{"kind": "seed", "amount": 1000}],
                "acquisitions": [],
            }
        },
        "git_data": {
            "https://github.com/org/repo": {
                "stars": 42,
                "license": "Apache-2.0",
                "latest_release": {"ts": "2025-02-01T00:00:00Z", "url": "r"},
            }
        },
    }

    bundle = decode_bundle(msgspec.json.encode(payload))
    encoded = msgspec.json.decode(msgspec.json.encode(bundle))

    assert encoded["crunchbase_data"] == payload["crunchbase_data"]
    assert encoded["git_data"] == payload["git_data"]
    (item,) = encoded["items"]
    assert item["slack_url"] == "https://slack.example/acme"
    assert item["repositories"][0]["branch"] == "main"
