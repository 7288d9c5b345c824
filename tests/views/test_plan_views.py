from aiohttp.test_utils import TestClient

from motorent.serializer import JSendSchema, JSendStatus, Many
from motorent.serializer.models import RentPlanSchema


async def test_get_plans(client: TestClient):
    """Assert that anyone can see the plans, shortest first."""
    response_schema = JSendSchema.of(plans=Many(RentPlanSchema()))
    response = await client.get('/api/v1/plans')
    response_data = response_schema.load(await response.json())

    assert response_data["status"] == JSendStatus.SUCCESS
    plans = response_data["data"]["plans"]
    assert [plan["days"] for plan in plans] == [7, 15, 30, 45, 50]
    assert plans[0] == {"days": 7, "daily_rate": 3000, "total": 21000}
