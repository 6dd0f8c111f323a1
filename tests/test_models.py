from uuid import uuid4, UUID

import pytest
from pytest import raises

from bikestore.models import Bike, CanonicalUUID


class TestCanonicalUUID:

    def test_lowercase(self):
        value = uuid4()
        assert CanonicalUUID(str(value)) == value

    def test_uppercase(self):
        value = uuid4()
        assert CanonicalUUID(str(value).upper()) == value

    def test_hashes_like_uuid(self):
        value = uuid4()
        assert {value: "bike"}[CanonicalUUID(str(value))] == "bike"

    @pytest.mark.parametrize("value", [
        "not-a-uuid",
        "1234",
        "{12345678-1234-5678-1234-567812345678}",
        "urn:uuid:12345678-1234-5678-1234-567812345678",
        "12345678123456781234567812345678",
        "12345678-1234-5678-1234-56781234567g",
        "",
    ])
    def test_malformed(self, value):
        with raises(ValueError):
            CanonicalUUID(value)

    def test_not_a_string(self):
        with raises(ValueError):
            CanonicalUUID(None)


class TestBike:

    def test_generated_id(self):
        bike = Bike("Honda", "CB500", 8000)
        assert isinstance(bike.id, UUID)
        assert Bike("Honda", "CB500", 8000).id != bike.id

    def test_copy_is_detached(self):
        bike = Bike("Honda", "CB500", 8000)
        copy = bike.copy()
        copy.price = 1

        assert copy.id == bike.id
        assert bike.price == 8000

    def test_serialize(self):
        bike = Bike("Honda", "CB500", 8000)
        assert bike.serialize() == {"id": bike.id, "brand": "Honda", "model": "CB500", "price": 8000}
