"""Read-only helpers for presenting joined items.

These helpers only read the records produced by the join; they never
return modified copies.
"""

from __future__ import annotations

import re
import typing as typ
from urllib.parse import quote, urlsplit

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import Item, Repository

MISSING_DESCRIPTION = "This item does not have a description available yet"

_SHORTCODE_RE = re.compile(r":[a-z_][a-z0-9_+\-]*:")
_EMOJI_RE = re.compile(
    "["
    "\U0001f000-\U0001faff"
    "\U00002600-\U000027bf"
    "\U0001f1e6-\U0001f1ff"
    "\U0000fe0f"
    "\U0000200d"
    "]+"
)
_SPACES_RE = re.compile(r"\s{2,}")

_GOOD_FIRST_ISSUE_BADGE = (
    "https://img.shields.io/github/issues/{path}/good%20first%20issue.svg"
    "?style=flat-square&label=good%20first%20issues"
    "&labelColor=e9ecef&color=6c757d"
)


def clean_emojis(text: str) -> str:
    """Strip emoji shortcodes and pictographs from ``text``."""
    stripped = _EMOJI_RE.sub("", _SHORTCODE_RE.sub("", text))
    return _SPACES_RE.sub(" ", stripped).strip()


def primary_repository(item: Item) -> Repository | None:
    """Return the first repository flagged as primary."""
    for repository in item.repositories or ():
        if repository.primary:
            return repository
    return None


def describe_item(item: Item | None) -> str:
    """Return the best available description for ``item``.

    The item's own description wins. Otherwise an item with repositories
    uses its primary repository's description, and an item without
    repositories or maturity falls back to its organization description.
    """
    if item is None:
        return MISSING_DESCRIPTION
    if item.description:
        return item.description
    if item.repositories is not None:
        primary = primary_repository(item)
        git_data = primary.git_data if primary is not None else None
        if git_data and git_data.get("description"):
            return clean_emojis(git_data["description"])
    elif (
        item.maturity is None
        and item.organization_data is not None
        and item.organization_data.get("description")
    ):
        return clean_emojis(item.organization_data["description"])
    return MISSING_DESCRIPTION


def sort_repositories(repositories: cabc.Iterable[Repository]) -> list[Repository]:
    """Order repositories with the primary first, then by URL."""
    return sorted(repositories, key=lambda repo: (not repo.primary, repo.url))


def repository_path(url: str) -> str:
    """Return the ``owner/name`` path of a repository URL."""
    return urlsplit(url).path.lstrip("/")


def is_gitlab_repository(repository: Repository) -> bool:
    """Return True for repositories hosted on a GitLab instance."""
    return "gitlab" in repository.url


def repository_license(repository: Repository) -> str | None:
    """Return the declared license, falling back to the detected one."""
    if repository.license:
        return repository.license
    if repository.git_data is not None:
        return repository.git_data.get("license")
    return None


def good_first_issue_url(repository: Repository) -> str:
    """Return the issue search URL for ``good first issue`` labels."""
    if is_gitlab_repository(repository):
        return f"{repository.url}/-/issues?state=opened&label_name[]=good first issue"
    return (
        f"{repository.url}/issues?q=is%3Aopen+is%3Aissue+label%3A"
        '"good+first+issue"'
    )


def good_first_issue_badge_url(repository: Repository) -> str | None:
    """Return a shields.io badge URL; GitLab repositories have none."""
    if is_gitlab_repository(repository):
        return None
    path = quote(repository_path(repository.url), safe="/")
    return _GOOD_FIRST_ISSUE_BADGE.format(path=path)
