"""Utility helpers for request parsing."""

from .query_params import parse_page_number

__all__ = ["parse_page_number"]
