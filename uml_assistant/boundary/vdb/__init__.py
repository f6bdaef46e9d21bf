"""
Vector database boundary: loading the persisted document index.
"""

from uml_assistant.boundary.vdb.vector_store_factory import get_vector_store

__all__ = ["get_vector_store"]
