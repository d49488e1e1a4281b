from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .._utils._placeholders import find_all_placeholders, has_placeholders
from .._utils._request_line import split_path_and_query
from .errors import TemplateBuilderConsumedError

CONTENT_LENGTH = "Content-Length"


class RequestTemplate(BaseModel):
    """Normalized, placeholder-bearing description of one HTTP request.

    Instances are produced by :class:`RequestTemplateBuilder` and are frozen:
    they are shared read-only by every call made through the same method.
    """

    model_config = ConfigDict(frozen=True)

    method: str
    url: str = ""
    queries: Mapping[str, tuple[Optional[str], ...]] = Field(default_factory=dict)
    headers: Mapping[str, tuple[str, ...]] = Field(default_factory=dict)
    body: Optional[bytes] = None
    body_template: Optional[str] = None

    @field_validator("queries", "headers", mode="after")
    @classmethod
    def freeze_mappings(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    def __hash__(self) -> int:
        return hash(
            (
                self.method,
                self.url,
                tuple(self.queries.items()),
                tuple(self.headers.items()),
                self.body,
                self.body_template,
            )
        )

    def _http_texts(self) -> list[Optional[str]]:
        texts: list[Optional[str]] = [self.url]
        for key, values in self.queries.items():
            texts.append(key)
            texts.extend(values)
        for values in self.headers.values():
            texts.extend(values)
        return texts

    def placeholders(self) -> list[str]:
        """Names referenced by the url, queries, header values and body template."""
        return find_all_placeholders([*self._http_texts(), self.body_template])

    def http_placeholders(self) -> list[str]:
        """Names referenced by the url, queries and header values only."""
        return find_all_placeholders(self._http_texts())


class RequestTemplateBuilder:
    """Mutable construction side of :class:`RequestTemplate`.

    Queries and headers accumulate: adding an existing key appends a value
    instead of replacing it. Once :meth:`build` has been called the builder
    is consumed and rejects further changes.
    """

    def __init__(self, charset: str = "utf-8") -> None:
        self._charset = charset
        self._method: Optional[str] = None
        self._url = ""
        self._queries: dict[str, list[Optional[str]]] = {}
        self._headers: dict[str, list[str]] = {}
        self._body: Optional[bytes] = None
        self._body_template: Optional[str] = None
        self._built = False

    def _check_open(self, operation: str) -> None:
        if self._built:
            raise TemplateBuilderConsumedError(operation)

    def method(self, method: str) -> "RequestTemplateBuilder":
        self._check_open("set the method")
        self._method = method
        return self

    def append(self, path_and_query: str) -> "RequestTemplateBuilder":
        """Append to the url, moving any query string into the queries."""
        self._check_open("append to the url")
        path, queries = split_path_and_query(path_and_query)
        self._url += path
        for key, value in queries:
            self.add_query(key, value)
        return self

    def add_query(self, key: str, value: Optional[str]) -> "RequestTemplateBuilder":
        self._check_open("add a query")
        self._queries.setdefault(key, []).append(value)
        return self

    def add_header(self, name: str, value: str) -> "RequestTemplateBuilder":
        self._check_open("add a header")
        self._headers.setdefault(name, []).append(value)
        return self

    def body(self, body: str) -> "RequestTemplateBuilder":
        """Install a declared body.

        A body containing placeholders becomes the body template and its
        expansion is left to call time. Otherwise it is encoded as the
        literal body and ``Content-Length`` is set to its byte length.
        """
        self._check_open("set the body")
        if has_placeholders(body):
            self._body = None
            self._body_template = body
            self._headers.pop(CONTENT_LENGTH, None)
        else:
            self._body = body.encode(self._charset)
            self._body_template = None
            self._headers[CONTENT_LENGTH] = [str(len(self._body))]
        return self

    @property
    def has_body(self) -> bool:
        return self._body is not None or self._body_template is not None

    def snapshot(self) -> RequestTemplate:
        """Return a frozen copy of the current state without consuming the builder."""
        return RequestTemplate(
            method=self._method or "",
            url=self._url,
            queries={key: tuple(values) for key, values in self._queries.items()},
            headers={name: tuple(values) for name, values in self._headers.items()},
            body=self._body,
            body_template=self._body_template,
        )

    def build(self) -> RequestTemplate:
        self._check_open("build")
        if not self._method:
            raise ValueError("A request template needs an HTTP method")
        template = self.snapshot()
        self._built = True
        return template
