"""Typed models used across the application."""

from .article import ArticleRecord
from .search import SearchPreferences, SearchRequest, SortOrder

__all__ = ["ArticleRecord", "SearchPreferences", "SearchRequest", "SortOrder"]
