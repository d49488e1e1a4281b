from typing import Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field


class ResolvedRequest(BaseModel):
    """A request template with every placeholder substituted.

    Url, query keys and query values are already percent-encoded.
    """

    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    queries: dict[str, tuple[Optional[str], ...]] = Field(default_factory=dict)
    headers: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    body: Optional[bytes] = None

    @property
    def query_string(self) -> str:
        entries: list[str] = []
        for key, values in self.queries.items():
            for value in values:
                entries.append(key if value is None else f"{key}={value}")
        return "&".join(entries)

    def target(self, base_url: Union[httpx.URL, str, None] = None) -> str:
        """Absolute (or base-relative) request target including the query string."""
        target = self.url
        if base_url is not None:
            target = str(base_url).rstrip("/") + target
        query = self.query_string
        return f"{target}?{query}" if query else target

    def to_httpx(self, base_url: Union[httpx.URL, str, None] = None) -> httpx.Request:
        """Build the wire-level ``httpx.Request`` for this resolved request."""
        headers = [
            (name, value) for name, values in self.headers.items() for value in values
        ]
        return httpx.Request(
            self.method,
            self.target(base_url),
            headers=headers,
            content=self.body,
        )
