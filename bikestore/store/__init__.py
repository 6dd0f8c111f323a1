"""
Handles the storage for the application. There is currently
a single, volatile, in-memory implementation.
"""

from .memory import MemoryStore
from .store import Store, BikeNotFoundError

SEED_BIKES = [
    ("Suzuki", "Gsxs750", 14000),
    ("Yamaha", "MT-07", 12000),
    ("Kawasaki", "Z900", 15000),
]
"""The bikes the store is stocked with when the server starts."""
