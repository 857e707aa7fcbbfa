"""Example FastAPI app serving a paginated in-memory collection.

Run with:
    uvicorn examples.paginated_example_app:app --reload

Then try ``/articles``, ``/articles?page=3`` or ``/articles/pages``.
"""
from __future__ import annotations

import os
import sys
from typing import Any

from fastapi import Depends, FastAPI, Request
from pydantic import BaseModel

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi_paginator import PaginationSummary, PaginatorConfig, RequestedPage  # noqa: E402
from fastapi_paginator.middleware import ErrorHandlerMiddleware  # noqa: E402


class Article(BaseModel):
    id: int
    title: str


ARTICLES = [Article(id=i, title=f"Article {i}") for i in range(1, 74)]

config = PaginatorConfig(items_per_page=25)
requested_page = RequestedPage(config)

app = FastAPI(title="Paginated Example API")
app.add_middleware(ErrorHandlerMiddleware)


@app.get("/articles", response_model=PaginationSummary[Article])
async def list_articles(request: Request) -> Any:
    paginator = requested_page.paginate(request, len(ARTICLES))
    page = ARTICLES[paginator.offset : paginator.offset + paginator.items_per_page]
    return paginator.to_summary_with_data(page)


@app.get("/articles/pages")
async def list_article_pages(request: Request, page: int = Depends(requested_page)) -> Any:
    paginator = requested_page.paginate(request, len(ARTICLES))
    return {
        "show": paginator.show,
        "pages": [
            {"number": number, "current": paginator.is_current_page(number)}
            for number in paginator.pages_stream()
        ],
        "requested": page,
    }
