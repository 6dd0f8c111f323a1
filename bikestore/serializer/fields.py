"""
Fields
-------

Defines some additional fields so that the Schemas can
serialize to and from additional native python data types.
"""

import math
from enum import Enum
from numbers import Real
from typing import Optional, Type

from marshmallow import fields, ValidationError


class JSONNumber(fields.Field):
    """
    A field that only accepts real JSON numbers, and passes them through
    untouched so that integers stay integers (however large they are).

    Unlike :class:`~marshmallow.fields.Float`, strings such as ``"12"``
    are not coerced, and booleans (which are ints in python) are refused.
    """

    default_error_messages = {
        "invalid": "Not a valid number.",
        "special": "Special numeric values (nan or infinity) are not permitted.",
    }

    def _serialize(self, value: Optional[Real], attr, obj, **kwargs):
        return value

    def _deserialize(self, value, attr, data, **kwargs) -> Real:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self.make_error("invalid")
        # only floats can be nan or infinite, and big ints can't become floats
        if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
            raise self.make_error("special")
        return value


class EnumField(fields.Field):
    """
    A field that serializes an :class:`~enum.Enum` to its value and back.
    """

    def __init__(self, enum_type: Type[Enum], *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not issubclass(enum_type, Enum):
            raise ValueError(f"Expected enum type, got {type(enum_type)} instead")
        self._enum_type = enum_type

    def _serialize(self, value, attr, obj, **kwargs):
        if isinstance(value, self._enum_type):
            return value.value
        if value in (member.value for member in self._enum_type):
            return value
        return None

    def _deserialize(self, value, attr, data, **kwargs) -> Enum:
        try:
            return self._enum_type(value)
        except ValueError as error:
            raise ValidationError(f"Must be one of {', '.join(str(m.value) for m in self._enum_type)}.") from error


def Many(schema):
    return fields.List(fields.Nested(schema))
