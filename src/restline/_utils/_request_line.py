"""Parsing of the request-line, query string and header micro-syntax."""

import re
from typing import Optional

_VERB_PATTERN = re.compile(r"^[A-Z]+$")
_HTTP_VERSION_PATTERN = re.compile(r"^HTTP/\d+(\.\d+)?$")


def split_request_line(request_line: str) -> Optional[tuple[str, str]]:
    """Split ``"VERB /path?query"`` into its verb and path-plus-query.

    A bare verb yields an empty path and a trailing HTTP version token is
    dropped.

    Returns:
        ``(verb, path_and_query)``, or None when no valid verb is present.

    Examples:
        >>> split_request_line("GET /users?active HTTP/1.1")
        ('GET', '/users?active')
        >>> split_request_line("PATCH")
        ('PATCH', '')
    """
    line = request_line.strip()
    parts = line.split(None, 1)
    if not parts or not _VERB_PATTERN.match(parts[0]):
        return None
    if len(parts) == 1:
        return parts[0], ""

    verb, rest = parts
    tail = rest.rsplit(None, 1)
    if len(tail) == 2 and _HTTP_VERSION_PATTERN.match(tail[1]):
        rest = tail[0]
    return verb, rest


def split_path_and_query(
    path_and_query: str,
) -> tuple[str, list[tuple[str, Optional[str]]]]:
    """Split a raw path on the first ``?`` and parse the query entries.

    Entries are separated by ``&`` and split on the first ``=``. An entry
    without ``=`` is a flag and gets a None value. Keys and values are kept
    verbatim, placeholders included.

    Examples:
        >>> split_path_and_query("/?flag&Action=GetUser")
        ('/', [('flag', None), ('Action', 'GetUser')])
    """
    path, separator, query = path_and_query.partition("?")
    if not separator:
        return path_and_query, []

    entries: list[tuple[str, Optional[str]]] = []
    for entry in query.split("&"):
        if not entry:
            continue
        key, equals, value = entry.partition("=")
        entries.append((key, value if equals else None))
    return path, entries


def parse_header(header: str) -> Optional[tuple[str, str]]:
    """Parse ``"Name: value"``. Returns None if the header is malformed."""
    name, colon, value = header.partition(":")
    name = name.strip()
    if not colon or not name:
        return None
    return name, value.strip()
