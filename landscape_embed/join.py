"""Join landscape items with their organization and repository metadata.

The join is a pure transformation: inputs are never mutated and joining an
already-joined list with the same side tables yields an equal list.
"""

from __future__ import annotations

import typing as typ

import msgspec

from .models import EnrichedDataset

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .locator import ResourceLocator
    from .models import DatasetBundle, GitData, Item, Organization, Repository


def _join_repositories(
    repositories: cabc.Sequence[Repository],
    git_table: cabc.Mapping[str, GitData],
) -> list[Repository]:
    joined: list[Repository] = []
    for repository in repositories:
        git_data = git_table.get(repository.url)
        if git_data is None:
            joined.append(msgspec.structs.replace(repository))
        else:
            joined.append(msgspec.structs.replace(repository, git_data=git_data))
    return joined


def join_item(
    item: Item,
    organization_table: cabc.Mapping[str, Organization] | None,
    git_table: cabc.Mapping[str, GitData] | None,
    *,
    locator: ResourceLocator,
) -> Item:
    """Return a joined copy of ``item``.

    Organization metadata is attached when the item declares an
    organization reference present in ``organization_table``. Repository
    metadata is attached per repository URL found in ``git_table``. The
    logo and report image references are resolved through ``locator``.
    """
    changes: dict[str, typ.Any] = {
        "logo": locator.asset_url(item.logo),
        "report_summary": locator.report_url(item.report_summary),
    }

    if item.organization_ref and organization_table:
        organization = organization_table.get(item.organization_ref)
        if organization is not None:
            changes["organization_data"] = organization

    if item.repositories is not None:
        changes["repositories"] = _join_repositories(
            item.repositories, git_table or {}
        )

    return msgspec.structs.replace(item, **changes)


def join_items(
    items: cabc.Sequence[Item] | None,
    organization_table: cabc.Mapping[str, Organization] | None,
    git_table: cabc.Mapping[str, GitData] | None,
    *,
    locator: ResourceLocator,
) -> list[Item]:
    """Join every item, preserving input order.

    Parameters
    ----------
    items
        Items as decoded from the dataset. ``None`` or empty yields ``[]``.
    organization_table
        Organization metadata keyed by organization reference.
    git_table
        Repository metadata keyed by repository URL.
    locator
        Resolves logo and report image references.

    Returns
    -------
    list[Item]
        New items; the inputs are left untouched.

    """
    if not items:
        return []
    return [
        join_item(item, organization_table, git_table, locator=locator)
        for item in items
    ]


def enrich_bundle(
    bundle: DatasetBundle, *, locator: ResourceLocator
) -> EnrichedDataset:
    """Join a decoded bundle into the dataset stored by the cache."""
    return EnrichedDataset(
        items=join_items(
            bundle.items,
            bundle.organization_table,
            bundle.git_table,
            locator=locator,
        ),
        organization_table=bundle.organization_table,
        git_table=bundle.git_table,
    )
