"""Typed landscape dataset records.

Attribute names describe what a field holds; the JSON documents produced
by the landscape build use the historical names (``crunchbase_url``,
``crunchbase_data``, ``clomonitor_report_summary``), which are mapped with
``msgspec.field(name=...)`` so the structs decode the wire format directly.

Organization and git metadata are opaque to the join: they are kept as the
decoded JSON objects so every key survives, whatever the build emits.
"""

from __future__ import annotations

import typing as typ

import msgspec

Organization: typ.TypeAlias = dict[str, typ.Any]
"""Organization metadata keyed by an external organization reference."""

GitData: typ.TypeAlias = dict[str, typ.Any]
"""Repository metadata (stars, contributors, commits, languages, ...)."""


class Repository(msgspec.Struct, kw_only=True, frozen=True):
    """A repository attached to an item.

    ``git_data`` is only populated once the item has been joined.
    """

    url: str
    primary: bool = False
    branch: str | None = None
    license: str | None = None
    exclude: list[str] | None = None
    git_data: GitData | None = None


class Item(msgspec.Struct, kw_only=True, frozen=True):
    """A landscape catalog entry.

    Attributes
    ----------
    id : str
        Identifier, unique within one dataset.
    logo : str
        Logo reference; a relative asset path on the wire, a resolved URL
        after joining.
    organization_ref : str, optional
        Key into the organization table (``crunchbase_url`` on the wire).
    organization_data : Organization, optional
        Joined organization metadata (``crunchbase_data`` on the wire).
    repositories : list[Repository], optional
        Repositories in source order.
    report_summary : str, optional
        Report image reference (``clomonitor_report_summary`` on the wire).

    Dates are kept as the ISO strings found in the document; structured
    sections such as ``featured`` or ``audits`` are passed through as
    decoded JSON.
    """

    id: str
    logo: str
    name: str | None = None
    category: str | None = None
    subcategory: str | None = None
    additional_categories: list[typ.Any] | None = None
    description: str | None = None
    homepage_url: str | None = None
    maturity: str | None = None
    oss: bool | None = None
    enduser: bool | None = None
    specification: bool | None = None
    member_subcategory: str | None = None
    tag: str | None = None
    accepted_at: str | None = None
    incubating_at: str | None = None
    graduated_at: str | None = None
    archived_at: str | None = None
    joined_at: str | None = None
    latest_annual_review_at: str | None = None
    latest_annual_review_url: str | None = None
    artwork_url: str | None = None
    blog_url: str | None = None
    chat_channel: str | None = None
    devstats_url: str | None = None
    discord_url: str | None = None
    docker_url: str | None = None
    github_discussions_url: str | None = None
    gitter_url: str | None = None
    linkedin_url: str | None = None
    mailing_list_url: str | None = None
    package_manager_url: str | None = None
    slack_url: str | None = None
    stack_overflow_url: str | None = None
    twitter_url: str | None = None
    youtube_url: str | None = None
    clomonitor_name: str | None = None
    training_certifications: str | None = None
    training_type: str | None = None
    parent_project: str | None = None
    featured: dict[str, typ.Any] | None = None
    summary: dict[str, typ.Any] | None = None
    audits: list[typ.Any] | None = None
    other_links: list[typ.Any] | None = None
    organization_ref: str | None = msgspec.field(default=None, name="crunchbase_url")
    organization_data: Organization | None = msgspec.field(
        default=None, name="crunchbase_data"
    )
    repositories: list[Repository] | None = None
    report_summary: str | None = msgspec.field(
        default=None, name="clomonitor_report_summary"
    )


class DatasetBundle(msgspec.Struct, kw_only=True, frozen=True):
    """Raw, un-joined dataset document as served over HTTP."""

    items: list[Item] | None = None
    organization_table: dict[str, Organization] | None = msgspec.field(
        default=None, name="crunchbase_data"
    )
    git_table: dict[str, GitData] | None = msgspec.field(
        default=None, name="git_data"
    )


class EnrichedDataset(msgspec.Struct, kw_only=True, frozen=True):
    """Joined dataset held by the cache. Replaced wholesale, never edited."""

    items: list[Item] = msgspec.field(default_factory=list)
    organization_table: dict[str, Organization] | None = msgspec.field(
        default=None, name="crunchbase_data"
    )
    git_table: dict[str, GitData] | None = msgspec.field(
        default=None, name="git_data"
    )

    def find_item(self, item_id: str) -> Item | None:
        """Return the first item whose id equals ``item_id``."""
        return next((item for item in self.items if item.id == item_id), None)


def dataset_key(classify_by: str, key: str) -> str:
    """Return the cache key for a classification dimension and value.

    >>> dataset_key("category", "networking")
    'category_networking'
    """
    return f"{classify_by}_{key}"


def decode_bundle(payload: bytes | str) -> DatasetBundle:
    """Decode a JSON dataset document into a :class:`DatasetBundle`."""
    return msgspec.json.decode(payload, type=DatasetBundle)
