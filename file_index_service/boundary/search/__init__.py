"""
Search index boundary.

Exports: OpenSearchIndexClient, SearchDocument
"""

from .opensearch_client import OpenSearchIndexClient, SearchDocument

__all__ = ["OpenSearchIndexClient", "SearchDocument"]
