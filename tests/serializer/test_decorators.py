"""
Some tests for the expects and returns decorators, mostly run through the motorcycle routes.
"""
from datetime import date

import pytest
from aiohttp import web
from aiohttp.test_utils import TestClient

from motorent.models import RentStatus
from motorent.serializer import JSendSchema, JSendStatus, returns, success
from motorent.serializer.models import RentSchema


class TestExpectDecorator:

    async def test_expects_no_data(self, client: TestClient, admin_token):
        resp = await client.post('/api/v1/motorcycles', headers={"Authorization": f"Bearer {admin_token}"})
        data = JSendSchema().load(await resp.json())
        assert "only accepts JSON" in data["data"]["message"]
        assert data["status"] == JSendStatus.FAIL
        assert "schema" in data["data"]

    async def test_expects_malformed_json(self, client: TestClient, admin_token):
        resp = await client.post(
            '/api/v1/motorcycles', data="[",
            headers={"Content-Type": "application/json", "Authorization": f"Bearer {admin_token}"}
        )
        data = JSendSchema().load(await resp.json())
        assert data["status"] == JSendStatus.FAIL
        assert "Could not parse" in data["data"]["message"]

    async def test_expects_invalid_data(self, client: TestClient, admin_token):
        resp = await client.post(
            '/api/v1/motorcycles', json={"wrong": "data"}, headers={"Authorization": f"Bearer {admin_token}"}
        )
        data = JSendSchema().load(await resp.json())
        assert data["status"] == JSendStatus.FAIL
        assert "did not validate" in data["data"]["message"]
        assert "plate" in data["data"]["errors"]


class TestExpectsQueryDecorator:

    async def test_invalid_query(self, client: TestClient, admin_token):
        resp = await client.get(
            '/api/v1/rents', params={"status": "lost"}, headers={"Authorization": f"Bearer {admin_token}"}
        )
        data = JSendSchema().load(await resp.json())
        assert resp.status == 400
        assert "query string" in data["data"]["message"]
        assert "status" in data["data"]["errors"]


class BrokenRentView(web.View):

    @returns(JSendSchema.of(rent=RentSchema()))
    async def get(self):
        # a returned rent must say when it came back
        return success(rent={
            "id": 1, "deliverer_id": 1, "start_date": date(2024, 5, 1), "end_date": date(2024, 5, 8),
            "delivery_forecast_date": date(2024, 5, 8), "plan": {"days": 7, "daily_rate": 3000},
            "total_cost": 21000, "status": RentStatus.RETURNED,
        })


class PlainView(web.View):

    @returns(JSendSchema.of(rent=RentSchema()))
    async def get(self):
        return web.Response(text="queued", status=202)


class TestReturnsDecorator:

    @pytest.fixture
    async def broken_client(self, aiohttp_client):
        app = web.Application()
        app.router.add_view("/broken", BrokenRentView)
        app.router.add_view("/plain", PlainView)
        return await aiohttp_client(app)

    async def test_invalid_response(self, broken_client: TestClient):
        resp = await broken_client.get('/broken')
        data = JSendSchema().load(await resp.json())

        assert resp.status == 500
        assert data["status"] == JSendStatus.ERROR
        assert data["code"] == 500
        assert "came out wrong" in data["message"]

    async def test_response_passes_through(self, broken_client: TestClient):
        resp = await broken_client.get('/plain')
        assert resp.status == 202
        assert await resp.text() == "queued"

    async def test_created(self, client: TestClient, admin_token):
        resp = await client.post(
            '/api/v1/motorcycles', json={"year": 2022, "model": "Pop 110i", "plate": "QWE2R34"},
            headers={"Authorization": f"Bearer {admin_token}"}
        )
        data = JSendSchema().load(await resp.json())

        assert resp.status == 201
        assert data["status"] == JSendStatus.SUCCESS
