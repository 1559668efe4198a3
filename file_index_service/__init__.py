"""
File index service.

Consumes SQS batches of document identifiers, indexes document content in
OpenSearch and forwards the raw bytes to a quarantine bucket for scanning.
"""
