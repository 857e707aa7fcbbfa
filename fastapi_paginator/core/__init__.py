"""Core paginator and pagination errors."""

from .errors import PaginationError, PaginationTypeError, PaginationValueError
from .paginator import Paginator, RequestLike

__all__ = [
    "Paginator",
    "PaginationError",
    "PaginationTypeError",
    "PaginationValueError",
    "RequestLike",
]
