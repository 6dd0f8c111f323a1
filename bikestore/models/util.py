"""
Model Utilities
---------------
"""

import re
from uuid import UUID

CANONICAL_UUID_REGEX = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")


class CanonicalUUID(UUID):
    """
    A :class:`~uuid.UUID` that may only be parsed from the canonical
    hyphenated form (``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx``).

    The standard constructor also accepts braces, ``urn:uuid:`` prefixes
    and bare hex strings, none of which are valid bike identifiers.

    :raises ValueError: If the value is not a canonical UUID string.
    """

    def __init__(self, value: str):
        if not isinstance(value, str) or not CANONICAL_UUID_REGEX.fullmatch(value):
            raise ValueError(f'"{value}" is not a valid UUID.')
        super().__init__(value)
