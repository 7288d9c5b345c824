from datetime import datetime, date, timedelta, timezone
from itertools import count

import pytest
from aiohttp import web
from aiohttp.test_utils import TestClient
from faker import Faker
from tortoise import Tortoise

from motorent.app import install_services
from motorent.middleware import validate_token_middleware, service_error_middleware
from motorent.models import Deliverer, Motorcycle, Rent, LicenseType, RentStatus
from motorent.pricing import RENT_PLANS
from motorent.service import FixedClock
from motorent.service.access.rents import RentRepository
from motorent.service.verify_token import DummyVerifier
from motorent.signals import register_signals
from motorent.views import register_views

fake = Faker()

TODAY = date(2024, 4, 30)


@pytest.fixture
def clock() -> FixedClock:
    """A clock stopped at noon on the 30th of April 2024."""
    return FixedClock(datetime(2024, 4, 30, 12, tzinfo=timezone.utc))


@pytest.fixture
async def database():
    await Tortoise.init(
        db_url="sqlite://:memory:",
        modules={'models': ['motorent.models']},
    )
    await Tortoise.generate_schemas()
    yield
    await Tortoise.close_connections()


@pytest.fixture
def admin_token() -> str:
    return fake.sha1()


@pytest.fixture
async def client(aiohttp_client, database, clock, admin_token, tmp_path) -> TestClient:
    app = web.Application(middlewares=[validate_token_middleware, service_error_middleware])
    app['token_verifier'] = DummyVerifier()
    app['admin_ids'] = frozenset({admin_token})

    install_services(app, clock=clock, strategy_name="penalty", license_dir=str(tmp_path / "licenses"))
    register_signals(app, init_database=False)  # we get the database from a fixture
    register_views(app, "/api/v1")

    return await aiohttp_client(app)


@pytest.fixture
def random_deliverer_factory(database):
    ids = count(1)

    async def create_deliverer(license_type=LicenseType.A):
        number = next(ids)
        return await Deliverer.create(
            auth_id=fake.sha1(), name=fake.name(), email=f"{number}.{fake.email()}",
            cnpj=f"{number:014d}", birth_date=fake.date_of_birth(minimum_age=18),
            driver_license_number=f"{number:011d}", driver_license_type=license_type,
        )

    return create_deliverer


@pytest.fixture
def random_motorcycle_factory(database):
    ids = count(1)

    async def create_motorcycle():
        return await Motorcycle.create(
            year=fake.random_int(2000, 2024), model=fake.word().title(), plate=f"MOT{next(ids):04d}"
        )

    return create_motorcycle


@pytest.fixture
async def random_deliverer(random_deliverer_factory) -> Deliverer:
    """Creates a random deliverer with an A license."""
    return await random_deliverer_factory()


@pytest.fixture
async def random_motorcycle(random_motorcycle_factory) -> Motorcycle:
    return await random_motorcycle_factory()


@pytest.fixture
def rent_factory(database):
    """Creates a week long rent starting today for the given deliverer."""

    async def create_rent(deliverer, start_date=TODAY, plan=RENT_PLANS[0]):
        rent = await RentRepository().create({
            "deliverer": deliverer,
            "start_date": start_date,
            "end_date": start_date + timedelta(days=plan.days),
            "delivery_forecast_date": start_date + timedelta(days=plan.days),
            "plan": plan,
            "total_cost": plan.total,
            "status": RentStatus.PROCESSING,
        })
        return await Rent.get(id=rent.id).prefetch_related("motorcycle")

    return create_rent


@pytest.fixture
async def random_rent(rent_factory, random_deliverer) -> Rent:
    return await rent_factory(random_deliverer)


@pytest.fixture
async def active_rent(random_rent, random_motorcycle) -> Rent:
    """A rent that has picked up a motorcycle."""
    random_rent.motorcycle = random_motorcycle
    random_rent.status = RentStatus.RENTED
    await random_rent.save()
    return random_rent
