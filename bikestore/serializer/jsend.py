"""
JSend Schema
------------

Every response from the bike store is wrapped in a JSend envelope:
``success`` and ``fail`` carry a ``data`` object (fails always with a
``message`` for the client), while ``error`` carries a top level ``message``.
"""

from enum import Enum

from marshmallow import Schema, fields, validates_schema, ValidationError
from marshmallow.fields import Field

from .fields import EnumField


class JSendStatus(str, Enum):
    SUCCESS = "success"
    """The bike (or bikes) are in ``data``."""

    FAIL = "fail"
    """The client sent something we could not act on."""

    ERROR = "error"
    """The server broke while handling the request."""


class JSendSchema(Schema):
    """The untyped envelope. Use :meth:`of` to pin down the shape of ``data``."""

    status = EnumField(JSendStatus, required=True)
    data = fields.Raw()
    message = fields.String()
    code = fields.Integer()

    @validates_schema
    def assert_envelope(self, data, **kwargs):
        status = data["status"]
        if status in (JSendStatus.SUCCESS, JSendStatus.FAIL) and "data" not in data:
            raise ValidationError(f"A {status.value} response needs a data field.")
        if status == JSendStatus.FAIL and "message" not in data["data"]:
            raise ValidationError("A fail response needs a message for the client.")
        if status == JSendStatus.ERROR and "message" not in data:
            raise ValidationError("An error response needs a message field.")

    @staticmethod
    def of(**data_fields):
        """
        Builds an envelope whose ``data`` holds exactly the given fields.
        Schemas are nested, plain fields are used as they are.

        >>> JSendSchema.of(bike=BikeSchema()).load(await response.json())
        """

        DataSchema = type('DataSchema', (Schema,), {
            name: value if isinstance(value, Field) else fields.Nested(value)
            for name, value in data_fields.items()
        })

        class TypedJSendSchema(JSendSchema):
            data = fields.Nested(DataSchema)

        return TypedJSendSchema()
