"""Call-time expansion of compiled request templates."""

from typing import Any, Callable, Mapping, Optional, Sequence, Union
from urllib.parse import quote, unquote

import httpx

from ._utils._placeholders import (
    PLACEHOLDER_PATTERN,
    find_all_placeholders,
    find_placeholders,
    substitute,
)
from .models.errors import ExpansionError
from .models.metadata import MethodMetadata
from .models.resolved import ResolvedRequest
from .models.template import CONTENT_LENGTH, RequestTemplate

BodyEncoder = Callable[[Any, Any], bytes]


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(item) for item in value if item is not None)
    return str(value)


def _encode(value: Any, charset: str = "utf-8") -> str:
    return quote(_stringify(value), safe="", encoding=charset)


def _fan_out(
    text: str, arguments: Mapping[str, Any], render: Callable[[Any], str]
) -> list[str]:
    """Expand a query or header value into zero or more values.

    A value made of a single placeholder bound to a list yields one value
    per element. A value referencing a None argument yields nothing.
    """
    single = PLACEHOLDER_PATTERN.fullmatch(text)
    if single:
        argument = arguments[single.group(1)]
        if isinstance(argument, (list, tuple)):
            return [render(item) for item in argument if item is not None]

    if any(arguments[name] is None for name in find_placeholders(text)):
        return []
    return [substitute(text, lambda name: render(arguments[name]))]


def expand(
    template: RequestTemplate,
    arguments: Mapping[str, Any],
    *,
    charset: str = "utf-8",
) -> ResolvedRequest:
    """Substitute argument values into every placeholder of ``template``.

    Url and query text is percent-encoded, header values are inserted as
    they are, and a body template is expanded then percent-decoded so that
    ``%7B``/``%7D`` escapes in the template become braces.

    Raises:
        ExpansionError: If a placeholder has no value, or a url, query key
            or body placeholder is bound to None.
    """
    missing = [name for name in template.placeholders() if name not in arguments]
    required = find_all_placeholders(
        [template.url, *template.queries, template.body_template]
    )
    missing += [
        name for name in required if name in arguments and arguments[name] is None
    ]
    if missing:
        raise ExpansionError(missing)

    url = substitute(template.url, lambda name: _encode(arguments[name]))

    queries: dict[str, list[Optional[str]]] = {}
    for key, values in template.queries.items():
        resolved_key = substitute(key, lambda name: _encode(arguments[name]))
        resolved_values: list[Optional[str]] = []
        for value in values:
            if value is None:
                resolved_values.append(None)
            else:
                resolved_values.extend(_fan_out(value, arguments, _encode))
        if resolved_values:
            queries.setdefault(resolved_key, []).extend(resolved_values)

    headers: dict[str, list[str]] = {}
    for name, values in template.headers.items():
        resolved_headers: list[str] = []
        for value in values:
            resolved_headers.extend(_fan_out(value, arguments, _stringify))
        if resolved_headers:
            headers[name] = resolved_headers

    body = template.body
    if template.body_template is not None:
        expanded = substitute(
            template.body_template, lambda name: _encode(arguments[name], charset)
        )
        body = unquote(expanded, encoding=charset).encode(charset)
        headers[CONTENT_LENGTH] = [str(len(body))]

    return ResolvedRequest(
        method=template.method,
        url=url,
        queries={key: tuple(values) for key, values in queries.items()},
        headers={name: tuple(values) for name, values in headers.items()},
        body=body,
    )


def build_request(
    metadata: MethodMetadata,
    args: Sequence[Any],
    *,
    base_url: Union[httpx.URL, str, None] = None,
    charset: str = "utf-8",
    encoder: Optional[BodyEncoder] = None,
) -> httpx.Request:
    """Build the ``httpx.Request`` for one call of a compiled method.

    Args:
        metadata: The compiled method.
        args: Positional argument values, in declaration order.
        base_url: Target base URL; replaced by the URL argument when the
            method declares one.
        charset: Charset used for bodies produced here.
        encoder: Called as ``encoder(value, body_type)`` to serialize a body
            argument that is neither ``bytes`` nor ``str``.

    Raises:
        ExpansionError: If an argument needed by a placeholder is missing.
        ValueError: If no base URL is available.
        TypeError: If a body argument cannot be serialized.
    """
    resolved = expand(
        metadata.template, metadata.arguments_by_name(args), charset=charset
    )

    if metadata.url_index is not None:
        base_url = args[metadata.url_index]
    if base_url is None:
        raise ValueError(
            f"{metadata.config_key} needs a base URL to build a request"
        )

    if metadata.body_index is not None and resolved.body is None:
        value = args[metadata.body_index]
        if value is not None:
            content = _encode_body(value, metadata.body_type, charset, encoder)
            headers = dict(resolved.headers)
            headers[CONTENT_LENGTH] = (str(len(content)),)
            resolved = resolved.model_copy(
                update={"body": content, "headers": headers}
            )

    return resolved.to_httpx(base_url)


def _encode_body(
    value: Any, body_type: Any, charset: str, encoder: Optional[BodyEncoder]
) -> bytes:
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode(charset)
    if encoder is None:
        raise TypeError(f"No encoder given for a body of type {type(value).__name__}")
    return encoder(value, body_type)
