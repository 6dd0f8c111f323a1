from asyncio import Lock
from typing import List
from uuid import UUID

from bikestore import logger
from bikestore.models.bike import Bike, Price
from bikestore.store.store import Store, BikeNotFoundError


class MemoryStore(Store):
    """
    Emulates a database by doing all the operations on a list in memory.

    Mutations are serialized with a lock so that concurrent requests
    are applied one at a time, in the order they acquire it. Bikes
    are copied on the way in and out, so callers can never modify
    the stored records directly.
    """

    def __init__(self):
        self._bikes: List[Bike] = []
        self._lock = Lock()

    def __len__(self):
        return len(self._bikes)

    def _index_of(self, bike_id: UUID) -> int:
        for index, bike in enumerate(self._bikes):
            if bike.id == bike_id:
                return index
        raise BikeNotFoundError(bike_id)

    async def get_bikes(self) -> List[Bike]:
        return [bike.copy() for bike in self._bikes]

    async def get_bike(self, bike_id: UUID) -> Bike:
        return self._bikes[self._index_of(bike_id)].copy()

    async def create_bike(self, brand: str, model: str, price: Price) -> Bike:
        async with self._lock:
            bike = Bike(brand, model, price)
            self._bikes.append(bike)

        logger.info("Created bike %s (%s %s)", bike.id, brand, model)
        return bike.copy()

    async def update_bike(self, bike_id: UUID, brand: str, model: str, price: Price) -> Bike:
        async with self._lock:
            index = self._index_of(bike_id)
            bike = Bike(brand, model, price, id=self._bikes[index].id)
            self._bikes[index] = bike

        logger.info("Updated bike %s", bike_id)
        return bike.copy()

    async def delete_bike(self, bike_id: UUID) -> Bike:
        async with self._lock:
            bike = self._bikes.pop(self._index_of(bike_id))

        logger.info("Deleted bike %s", bike_id)
        return bike

    async def clear(self) -> int:
        """Removes every bike, returning the number removed."""
        async with self._lock:
            count = len(self._bikes)
            self._bikes.clear()
        return count
