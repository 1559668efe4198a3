"""
Task modules for the document indexing pipeline.

Exports: AuthenticationTask, MetadataTask, ScanStatusTask, ExtractionTask,
IndexingTask, QuarantineTask
"""

from .authentication_task import AuthenticationTask
from .extraction_task import ExtractionTask
from .indexing_task import IndexingTask
from .metadata_task import MetadataTask
from .quarantine_task import QuarantineTask
from .scan_status_task import ScanStatusTask

__all__ = [
    "AuthenticationTask",
    "MetadataTask",
    "ScanStatusTask",
    "ExtractionTask",
    "IndexingTask",
    "QuarantineTask",
]
