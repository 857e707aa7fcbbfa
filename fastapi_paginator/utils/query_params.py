"""Helpers for reading the page number from query parameters."""

from __future__ import annotations

import logging
from typing import Any, Mapping

logger = logging.getLogger(__name__)


def parse_page_number(params: Mapping[str, Any], name: str = "page") -> int:
    """Return the page number in ``params[name]``, or 0 when it is unusable.

    Zero is the "no page requested" sentinel, which the paginator treats as
    the first page. Missing, blank and non-integer values never raise.
    """
    value = params.get(name)
    if value is None:
        return 0
    raw_value = str(value).strip()
    if not raw_value:
        return 0
    try:
        return int(raw_value)
    except ValueError:
        logger.debug("Ignoring malformed %s query parameter: %r", name, raw_value)
        return 0
