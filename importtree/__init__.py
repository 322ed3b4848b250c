"""Data model for per-page import trees."""

from .model import ImportTree, ImportTreePage

__all__ = ["ImportTree", "ImportTreePage"]
