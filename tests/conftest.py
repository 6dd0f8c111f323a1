import pytest
from aiohttp.test_utils import TestClient
from faker import Faker

from bikestore.app import build_app
from bikestore.models import Bike
from bikestore.store import MemoryStore

pytest_plugins = 'aiohttp.pytest_plugin'

fake = Faker()


@pytest.fixture
def bike_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def random_bike_details():
    """Creates random, valid, bike details."""

    def create_details():
        return {
            "brand": fake.company(),
            "model": fake.bothify("??-###").upper(),
            "price": fake.random_int(0, 30000),
        }

    return create_details


@pytest.fixture
async def client(aiohttp_client) -> TestClient:
    """A client for an app that has been stocked with the seed bikes."""
    return await aiohttp_client(build_app())


@pytest.fixture
async def empty_client(aiohttp_client) -> TestClient:
    """A client for an app with no bikes at all."""
    return await aiohttp_client(build_app(seed_store=False))


@pytest.fixture
async def random_bike(client, random_bike_details) -> Bike:
    """Creates a random bike in the store of the client."""
    return await client.server.app["bike_store"].create_bike(**random_bike_details())
