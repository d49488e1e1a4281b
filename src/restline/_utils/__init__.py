from ._logs import setup_logging
from ._placeholders import find_placeholders, has_placeholders
from ._request_line import parse_header, split_path_and_query, split_request_line

__all__ = [
    "find_placeholders",
    "has_placeholders",
    "parse_header",
    "setup_logging",
    "split_path_and_query",
    "split_request_line",
]
