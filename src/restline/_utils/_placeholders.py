"""Location and substitution of ``{name}`` placeholders."""

import re
from typing import Callable, Iterable, Optional

# Only identifier-like names are placeholders; braces around anything else
# (e.g. a JSON object literal) are plain text.
PLACEHOLDER_PATTERN = re.compile(r"\{([A-Za-z0-9_.\-]+)\}")


def has_placeholders(text: Optional[str]) -> bool:
    """Return True if ``text`` contains at least one ``{name}`` placeholder."""
    return bool(text) and PLACEHOLDER_PATTERN.search(text) is not None


def find_placeholders(text: Optional[str]) -> list[str]:
    """List placeholder names in order of appearance, without duplicates.

    Examples:
        >>> find_placeholders("/domains/{domainId}/records/{id}/{domainId}")
        ['domainId', 'id']
    """
    if not text:
        return []
    names: dict[str, None] = {}
    for match in PLACEHOLDER_PATTERN.finditer(text):
        names.setdefault(match.group(1), None)
    return list(names)


def find_all_placeholders(texts: Iterable[Optional[str]]) -> list[str]:
    names: dict[str, None] = {}
    for text in texts:
        for name in find_placeholders(text):
            names.setdefault(name, None)
    return list(names)


def substitute(text: str, replace: Callable[[str], str]) -> str:
    """Replace every placeholder in ``text`` with ``replace(name)``."""
    return PLACEHOLDER_PATTERN.sub(lambda match: replace(match.group(1)), text)
