"""
This module hosts the base class for all Stores.
A store must implement all functions to be usable.
"""

from abc import ABC, abstractmethod
from typing import List, Iterable, Tuple
from uuid import UUID

from bikestore.models.bike import Bike, Price


class BikeNotFoundError(LookupError):
    """
    Raised when no bike with the given identifier exists in the store.
    """

    def __init__(self, bike_id: UUID):
        super().__init__(f"Bike with id {bike_id} not found")
        self.bike_id = bike_id


class Store(ABC):
    """The abstract store interface."""

    @abstractmethod
    async def get_bikes(self) -> List[Bike]:
        """Gets all the bikes in the order they were added."""

    @abstractmethod
    async def get_bike(self, bike_id: UUID) -> Bike:
        """
        Gets a single bike.

        :raises BikeNotFoundError: If there is no bike with that id.
        """

    @abstractmethod
    async def create_bike(self, brand: str, model: str, price: Price) -> Bike:
        """Adds a new bike with a freshly generated id."""

    @abstractmethod
    async def update_bike(self, bike_id: UUID, brand: str, model: str, price: Price) -> Bike:
        """
        Replaces the brand, model, and price of a bike.

        :raises BikeNotFoundError: If there is no bike with that id.
        """

    @abstractmethod
    async def delete_bike(self, bike_id: UUID) -> Bike:
        """
        Removes a bike, returning it as it was before removal.

        :raises BikeNotFoundError: If there is no bike with that id.
        """

    async def seed(self, bikes: Iterable[Tuple[str, str, Price]]) -> List[Bike]:
        """Creates a bike for each (brand, model, price) triple."""
        return [await self.create_bike(brand, model, price) for brand, model, price in bikes]
