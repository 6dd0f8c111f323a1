"""
Model Serializers
-----------------

Defines serializers for the various models in the system.
"""

from marshmallow import Schema
from marshmallow.fields import String, UUID

from .fields import JSONNumber


class BikeSchema(Schema):
    """The schema corresponding to the :class:`~bikestore.models.bike.Bike` model."""

    id = UUID(required=True)
    brand = String(required=True)
    model = String(required=True)
    price = JSONNumber(required=True)
