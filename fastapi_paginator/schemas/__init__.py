"""Pydantic schemas for pagination responses."""

from .summary import PaginationSummary

__all__ = ["PaginationSummary"]
