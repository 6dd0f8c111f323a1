"""
Provides a simple in-memory implementation of the data store.
Nothing is persisted: the bikes are lost when the process exits.
"""

from .store import MemoryStore
