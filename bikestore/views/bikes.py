"""
Bike Related Views
-------------------------

Handles all the bike CRUD
"""
from http import HTTPStatus

from bikestore.models import Bike, CanonicalUUID
from bikestore.serializer import JSendStatus, JSendSchema
from bikestore.serializer.decorators import returns, expects
from bikestore.serializer.fields import Many
from bikestore.serializer.misc import BikeDetailsSchema
from bikestore.serializer.models import BikeSchema
from bikestore.store import BikeNotFoundError
from bikestore.views.base import BaseView
from bikestore.views.decorators import match_getter


def get_bike(view: BaseView, *, bike_id):
    return view.bike_store.get_bike(bike_id)


def missing_bike(error: BikeNotFoundError):
    return "missing", {
        "status": JSendStatus.FAIL,
        "data": {
            "message": str(error.args[0]),
            "params": {"bike_id": str(error.bike_id)}
        }
    }


class BikesView(BaseView):
    """
    Gets the bikes, or adds a new bike.
    """
    url = "/bikes"
    name = "bikes"

    @returns(JSendSchema.of(bikes=Many(BikeSchema())))
    async def get(self):
        """Gets all the bikes from the system, in the order they were added."""
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"bikes": [bike.serialize() for bike in await self.bike_store.get_bikes()]}
        }

    @expects(BikeDetailsSchema())
    @returns(JSendSchema.of(bike=BikeSchema()), HTTPStatus.CREATED)
    async def post(self):
        """Adds a bike to the store."""
        bike = await self.bike_store.create_bike(**self.request["data"])
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"bike": bike.serialize()}
        }


class BikeView(BaseView):
    """
    Gets, replaces, or deletes a single bike.
    """
    url = "/bikes/{id}"
    name = "bike"
    with_bike = match_getter(get_bike, 'bike', bike_id=('id', CanonicalUUID))

    @with_bike
    @returns(JSendSchema.of(bike=BikeSchema()))
    async def get(self, bike: Bike):
        """Gets a single bike by its id."""
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"bike": bike.serialize()}
        }

    @with_bike
    @expects(BikeDetailsSchema())
    @returns(
        updated=JSendSchema.of(bike=BikeSchema()),
        missing=(JSendSchema(), HTTPStatus.NOT_FOUND)
    )
    async def patch(self, bike: Bike):
        """Replaces the brand, model, and price of a bike. All three are required."""
        try:
            bike = await self.bike_store.update_bike(bike.id, **self.request["data"])
        except BikeNotFoundError as error:
            return missing_bike(error)
        else:
            return "updated", {
                "status": JSendStatus.SUCCESS,
                "data": {"bike": bike.serialize()}
            }

    @with_bike
    @returns(
        deleted=JSendSchema.of(bike=BikeSchema()),
        missing=(JSendSchema(), HTTPStatus.NOT_FOUND)
    )
    async def delete(self, bike: Bike):
        """Deletes a bike by its id, returning the removed bike."""
        try:
            bike = await self.bike_store.delete_bike(bike.id)
        except BikeNotFoundError as error:
            return missing_bike(error)
        else:
            return "deleted", {
                "status": JSendStatus.SUCCESS,
                "data": {"bike": bike.serialize()}
            }
