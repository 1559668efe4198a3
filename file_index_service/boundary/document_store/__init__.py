"""
Document store boundary.

Exports: DocumentStoreClient
"""

from .client import DocumentStoreClient

__all__ = ["DocumentStoreClient"]
