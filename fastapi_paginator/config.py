"""Paginator configuration."""

from pydantic import BaseModel, ConfigDict, PositiveInt


class PaginatorConfig(BaseModel):
    """Settings shared by request-driven paginators.

    ``page_param`` names the query parameter holding the requested page.
    ``items_per_page`` is the page size used when a handler has no other.
    """

    model_config = ConfigDict(frozen=True)

    page_param: str = "page"
    items_per_page: PositiveInt = 25
