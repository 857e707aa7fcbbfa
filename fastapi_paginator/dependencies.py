"""FastAPI dependencies for request-driven pagination."""

from fastapi import Request

from fastapi_paginator.config import PaginatorConfig
from fastapi_paginator.core.paginator import Paginator
from fastapi_paginator.utils.query_params import parse_page_number


class RequestedPage:
    """Dependency returning the page number requested in the query string.

    Examples:
        requested_page = RequestedPage()

        @app.get("/articles")
        async def list_articles(page: int = Depends(requested_page)) -> Any:
            total = await count_articles()
            paginator = Paginator(total, 25, page)
            ...
    """

    def __init__(self, config: PaginatorConfig | None = None) -> None:
        """Store the configuration naming the page query parameter."""
        self.config = config or PaginatorConfig()

    def __call__(self, request: Request) -> int:
        """Return the lenient page number; 0 when none was given."""
        return parse_page_number(request.query_params, self.config.page_param)

    def paginate(
        self, request: Request, number_of_items: int, items_per_page: int | None = None
    ) -> Paginator:
        """Build a paginator for ``request`` using the configured page size by default."""
        return Paginator.from_request(
            number_of_items,
            items_per_page if items_per_page is not None else self.config.items_per_page,
            request,
            self.config,
        )
