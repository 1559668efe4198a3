"""
Boundary modules.

Thin adapters for the external collaborators: document store, search index
and quarantine bucket.
"""
