"""
Some tests for the expects and returns decorators.
"""

from http import HTTPStatus

from aiohttp import web
from aiohttp.test_utils import TestClient

from bikestore.serializer import JSendSchema, JSendStatus, returns


class TestExpectDecorator:

    async def test_expects_no_data(self, client: TestClient):
        """Assert that trying to add a bike with no data fails."""
        resp = await client.post('/bikes')
        data = JSendSchema().load(await resp.json())
        assert resp.status == 400
        assert "only accepts JSON" in data["data"]["message"]
        assert data["status"] == JSendStatus.FAIL
        assert data["data"]["fields"] == ["brand", "model", "price"]

    async def test_expects_wrong_content_type(self, client: TestClient):
        resp = await client.post('/bikes', data='{"brand": "Honda"}', headers={"Content-Type": "text/plain"})
        data = JSendSchema().load(await resp.json())
        assert resp.status == 400
        assert "only accepts JSON" in data["data"]["message"]

    async def test_expects_malformed_json(self, client: TestClient):
        """Assert that trying to add a bike with broken JSON fails."""
        resp = await client.post('/bikes', data="[", headers={"Content-Type": "application/json"})
        data = JSendSchema().load(await resp.json())
        assert resp.status == 400
        assert data["status"] == JSendStatus.FAIL
        assert "Could not parse" in data["data"]["message"]

    async def test_expects_invalid_data(self, client: TestClient):
        """Assert that trying to add a bike with invalid data fails."""
        resp = await client.post('/bikes', json={"wrong": "data"})
        data = JSendSchema().load(await resp.json())
        assert resp.status == 400
        assert data["status"] == JSendStatus.FAIL
        assert "did not validate" in data["data"]["message"]
        assert "wrong" in data["data"]["errors"]
        assert "brand" in data["data"]["errors"]

    async def test_expects_json_array(self, client: TestClient):
        resp = await client.post('/bikes', json=[{"brand": "Honda", "model": "CB500", "price": 8000}])
        data = JSendSchema().load(await resp.json())
        assert resp.status == 400
        assert "did not validate" in data["data"]["message"]

    async def test_expects_undecodable_body(self, client: TestClient):
        """Assert that a body that is not valid utf-8 is refused as unparseable."""
        resp = await client.post(
            '/bikes', data=b'{"brand": "\xff", "model": "x", "price": 1}',
            headers={"Content-Type": "application/json"}
        )
        data = JSendSchema().load(await resp.json())
        assert resp.status == 400
        assert "Could not parse" in data["data"]["message"]
        assert len(client.server.app["bike_store"]) == 3

    async def test_expects_unknown_charset(self, client: TestClient):
        resp = await client.post(
            '/bikes', data=b'{"brand": "Honda", "model": "CB500", "price": 1}',
            headers={"Content-Type": "application/json; charset=no-such-charset"}
        )
        data = JSendSchema().load(await resp.json())
        assert resp.status == 400
        assert "Could not parse" in data["data"]["message"]


class BrokenView(web.View):

    @returns(ok=JSendSchema())
    async def get(self):
        return "not_ok", {"status": JSendStatus.SUCCESS, "data": {}}


class TestReturnsDecorator:

    async def test_unknown_response_name(self, aiohttp_client):
        """Assert that returning an undeclared response is reported as a server error."""
        app = web.Application()
        app.router.add_view("/broken", BrokenView)
        client = await aiohttp_client(app)

        resp = await client.get("/broken")
        data = JSendSchema().load(await resp.json())

        assert resp.status == HTTPStatus.INTERNAL_SERVER_ERROR
        assert data["status"] == JSendStatus.ERROR
        assert data["code"] == 500
        assert "came out wrong" in data["message"]
