"""Shared test utilities."""

from __future__ import annotations

import asyncio
import dataclasses
import json
import typing as typ

import httpx

REPO_URL = "https://github.com/org/repo"
BASE_PATH = "https://landscape.example"


T = typ.TypeVar("T")


def run_async(coro_func: typ.Callable[[], typ.Coroutine[typ.Any, typ.Any, T]]) -> T:
    """Execute an async callable within the test context."""
    return asyncio.run(coro_func())


def make_bundle_payload() -> dict[str, typ.Any]:
    """Return a dataset document with one organization and one repository."""
    return {
        "items": [
            {
                "id": "a1",
                "name": "Acme DB",
                "logo": "logos/a.svg",
                "crunchbase_url": "cb1",
                "repositories": [{"url": REPO_URL, "primary": True}],
            }
        ],
        "crunchbase_data": {"cb1": {"name": "Acme"}},
        "git_data": {REPO_URL: {"stars": 42}},
    }


@dataclasses.dataclass(slots=True)
class FakeDatasetServer:
    """Serve canned dataset responses keyed by URL through a mock transport."""

    responses: dict[str, list[httpx.Response]] = dataclasses.field(
        default_factory=dict
    )
    requested: list[str] = dataclasses.field(default_factory=list)

    def add_json(self, url: str, payload: object, *, status: int = 200) -> None:
        """Queue a JSON response for ``url``."""
        self.responses.setdefault(url, []).append(
            httpx.Response(status_code=status, json=payload)
        )

    def add_body(self, url: str, body: bytes, *, status: int = 200) -> None:
        """Queue a raw body for ``url``."""
        self.responses.setdefault(url, []).append(
            httpx.Response(status_code=status, content=body)
        )

    def add_redirect(self, url: str, location: str, *, status: int = 302) -> None:
        """Queue a redirect from ``url`` to ``location``."""
        self.responses.setdefault(url, []).append(
            httpx.Response(status_code=status, headers={"Location": location})
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        """Pop the next queued response for the requested URL."""
        url = str(request.url)
        self.requested.append(url)
        queued = self.responses.get(url)
        if not queued:
            return httpx.Response(
                status_code=404, content=json.dumps({"missing": url}).encode()
            )
        return queued.pop(0)

    def client(self, *, follow_redirects: bool = False) -> httpx.AsyncClient:
        """Return an async client routed through this fake server."""
        return httpx.AsyncClient(
            transport=httpx.MockTransport(self.handler),
            follow_redirects=follow_redirects,
        )
