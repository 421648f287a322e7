"""
Entry points that pick the STS header out of an HTTP response and check it.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from strenum import StrEnum

from .header import preloadable_header_string, removable_header_string
from .issues import Code, Issue, Issues

logger = logging.getLogger(__name__)

STS_HEADER = "Strict-Transport-Security"


class Mode(StrEnum):
    """Which preload list rule set a response is checked against."""

    PRELOADABLE = "preloadable"
    REMOVABLE = "removable"


def header_values(resp, name: str = STS_HEADER) -> List[str]:
    """Return all values of header `name` in wire order (name is case-insensitive).

    Works for mitmproxy Headers/Response (get_all), httpx Headers/Response
    (get_list) and http.client/email messages (get_all, None if missing).
    """
    headers = getattr(resp, "headers", resp)
    if hasattr(headers, "get_all"):
        return list(headers.get_all(name) or [])
    if hasattr(headers, "get_list"):
        return list(headers.get_list(name))
    raise TypeError(
        f"Cannot read multi-valued headers from {type(resp).__name__} object"
    )


def select_header(values: Sequence[str]) -> Tuple[Optional[str], Optional[Issue]]:
    """Return the single header value, or the issue explaining why there is none."""
    if len(values) == 0:
        return None, Issue(
            Code.NO_HEADER,
            "No HSTS header",
            "Response error: No HSTS header is present on the response.",
        )
    if len(values) > 1:
        # RFC6797 section 8.1: only the first is processed, but a host must only send one
        return None, Issue(
            Code.MULTIPLE_HEADERS,
            "Multiple HSTS headers",
            f"Response error: Multiple HSTS headers (number of HSTS headers: {len(values)}).",
        )
    return values[0], None


def preloadable_response(resp) -> Tuple[Optional[str], Issues]:
    """Check the STS header of `resp` against the preload list submission requirements."""
    header, issue = select_header(header_values(resp))
    if issue is not None:
        logger.debug(f"No single STS header: {issue.code}")
        return None, Issues(errors=[issue])
    return header, preloadable_header_string(header)


def removable_response(resp) -> Tuple[Optional[str], Issues]:
    """Check the STS header of `resp` against the preload list removal requirements."""
    header, issue = select_header(header_values(resp))
    if issue is not None:
        logger.debug(f"No single STS header: {issue.code}")
        return None, Issues(errors=[issue])
    return header, removable_header_string(header)


def check_response(resp, mode: Mode = Mode.PRELOADABLE) -> Tuple[Optional[str], Issues]:
    if Mode(mode) == Mode.REMOVABLE:
        return removable_response(resp)
    return preloadable_response(resp)
