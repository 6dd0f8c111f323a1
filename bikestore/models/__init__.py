"""
.. autoclasstree:: bikestore.models

The models package defines the entities managed by the system.
"""

from .bike import Bike
from .util import CanonicalUUID
