"""Pagination errors and their JSON error-document form."""

from typing import Any


class PaginationError(Exception):
    """Base class for errors raised by the paginator."""

    title = "Pagination Error"


class PaginationTypeError(PaginationError, TypeError):
    """Raised when a summary payload is not a sequence or a count is not an integer."""

    title = "Invalid Pagination Data"


class PaginationValueError(PaginationError, ValueError):
    """Raised when item counts or page sizes are out of range."""

    title = "Invalid Pagination Arguments"


def error_object(
    *,
    status: str | None = None,
    title: str | None = None,
    detail: str | None = None,
    meta: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Return an error object carrying only the supplied members."""
    error: dict[str, Any] = {}
    if status is not None:
        error["status"] = status
    if title is not None:
        error["title"] = title
    if detail is not None:
        error["detail"] = detail
    if meta is not None:
        error["meta"] = meta
    if not error:
        raise ValueError("Error object must include at least one field.")
    return error


def error_document(exc: PaginationError, *, status: str = "500") -> dict[str, Any]:
    """Return an error document describing a pagination error."""
    return {"errors": [error_object(status=status, title=exc.title, detail=str(exc))]}
