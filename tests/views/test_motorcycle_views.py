from aiohttp.test_utils import TestClient

from motorent.models import Motorcycle
from motorent.serializer import JSendSchema, JSendStatus, Many
from motorent.serializer.models import MotorcycleSchema, PaginateSchema


def admin(token):
    return {"Authorization": f"Bearer {token}"}


class TestMotorcyclesView:

    async def test_create(self, client: TestClient, admin_token):
        response_schema = JSendSchema.of(motorcycle=MotorcycleSchema())
        response = await client.post(
            '/api/v1/motorcycles', json={"year": 2023, "model": "Mottu Sport", "plate": "abc1d23"},
            headers=admin(admin_token)
        )
        response_data = response_schema.load(await response.json())

        assert response.status == 201
        assert response_data["data"]["motorcycle"]["plate"] == "ABC1D23"

    async def test_create_duplicate_plate(self, client: TestClient, admin_token, random_motorcycle):
        response = await client.post(
            '/api/v1/motorcycles', json={"year": 2023, "model": "Mottu Sport", "plate": random_motorcycle.plate},
            headers=admin(admin_token)
        )
        response_data = JSendSchema().load(await response.json())

        assert response.status == 400
        assert "plate" in response_data["data"]["errors"]

    async def test_create_not_admin(self, client: TestClient, random_deliverer):
        response = await client.post(
            '/api/v1/motorcycles', json={"year": 2023, "model": "Mottu Sport", "plate": "ABC1D23"},
            headers=admin(random_deliverer.auth_id)
        )

        assert response.status == 401
        assert not await Motorcycle.exists(plate="ABC1D23")

    async def test_list_by_plate(self, client: TestClient, admin_token, random_motorcycle_factory):
        await random_motorcycle_factory()
        motorcycle = await random_motorcycle_factory()
        response_schema = JSendSchema.of(motorcycles=Many(MotorcycleSchema()), paginate=PaginateSchema())

        response = await client.get(
            '/api/v1/motorcycles', params={"plate": motorcycle.plate.lower()}, headers=admin(admin_token)
        )
        response_data = response_schema.load(await response.json())

        assert [m["id"] for m in response_data["data"]["motorcycles"]] == [motorcycle.id]


class TestMotorcycleView:

    async def test_get(self, client: TestClient, admin_token, random_motorcycle):
        response_schema = JSendSchema.of(motorcycle=MotorcycleSchema())
        response = await client.get(f'/api/v1/motorcycles/{random_motorcycle.id}', headers=admin(admin_token))
        response_data = response_schema.load(await response.json())

        assert response_data["status"] == JSendStatus.SUCCESS
        assert response_data["data"]["motorcycle"]["url"] == f"/api/v1/motorcycles/{random_motorcycle.id}"

    async def test_update_plate(self, client: TestClient, admin_token, random_motorcycle):
        response_schema = JSendSchema.of(motorcycle=MotorcycleSchema())
        response = await client.patch(
            f'/api/v1/motorcycles/{random_motorcycle.id}', json={"plate": "NEW0001"}, headers=admin(admin_token)
        )
        response_data = response_schema.load(await response.json())

        assert response_data["data"]["motorcycle"]["plate"] == "NEW0001"
        assert (await Motorcycle.get(id=random_motorcycle.id)).plate == "NEW0001"

    async def test_delete(self, client: TestClient, admin_token, random_motorcycle):
        response = await client.delete(f'/api/v1/motorcycles/{random_motorcycle.id}', headers=admin(admin_token))

        assert response.status == 204
        assert not await Motorcycle.exists(id=random_motorcycle.id)

    async def test_delete_rented(self, client: TestClient, admin_token, active_rent, random_motorcycle):
        response = await client.delete(f'/api/v1/motorcycles/{random_motorcycle.id}', headers=admin(admin_token))
        response_data = JSendSchema().load(await response.json())

        assert response.status == 400
        assert response_data["status"] == JSendStatus.FAIL
        assert await Motorcycle.exists(id=random_motorcycle.id)

    async def test_get_missing(self, client: TestClient, admin_token):
        response = await client.get('/api/v1/motorcycles/1234', headers=admin(admin_token))

        assert response.status == 404
