"""Pydantic schema for the serialized pagination summary."""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PaginationSummary(BaseModel, Generic[T]):
    """Flat snapshot of a paginator plus an optional page of data.

    Field names are the JSON keys returned to API consumers.
    """

    model_config = ConfigDict(frozen=True)

    per_page: int
    total_entries: int
    page: int
    offset: int
    next_page: int
    previous_page: int
    total_pages: int
    data: List[T] = Field(default_factory=list)
