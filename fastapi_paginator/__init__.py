"""Pagination metadata for FastAPI handlers."""

from .config import PaginatorConfig
from .core.errors import PaginationError, PaginationTypeError, PaginationValueError
from .core.paginator import Paginator
from .dependencies import RequestedPage
from .schemas.summary import PaginationSummary

__all__ = [
    "Paginator",
    "PaginationError",
    "PaginationSummary",
    "PaginationTypeError",
    "PaginationValueError",
    "PaginatorConfig",
    "RequestedPage",
]
