from marshmallow import Schema, RAISE
from marshmallow.fields import String
from marshmallow.validate import Length, Range

from bikestore.serializer.fields import JSONNumber


class BikeDetailsSchema(Schema):
    """
    The schema of the body sent to create or replace a bike.

    Every field is required, and any field not listed here is refused.
    """

    class Meta:
        unknown = RAISE

    brand = String(required=True, validate=Length(min=1), metadata={"description": "The manufacturer."})
    model = String(required=True, validate=Length(min=1), metadata={"description": "The model name."})
    price = JSONNumber(required=True, validate=Range(min=0), metadata={"description": "The price, at least 0."})
