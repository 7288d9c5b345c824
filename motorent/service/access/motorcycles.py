"""
Motorcycles
-----------
"""
from typing import Optional, List

from tortoise.exceptions import IntegrityError

from motorent.models import Motorcycle, Rent
from motorent.service.access import unique_violations
from motorent.service.access.paginate import Paginate, build_paginate
from motorent.service.errors import BadRequestError


class MotorcycleExistsError(BadRequestError):
    def __init__(self, errors):
        super().__init__("A motorcycle with that plate already exists.", errors=errors)
        self.errors = errors


async def get_motorcycles(*, plate: str = None, paginate: Paginate = Paginate()) -> List[Motorcycle]:
    """
    Gets a page of the motorcycles in the fleet.

    :param plate: An optional plate to filter by.
    :param paginate: The page to get.
    """
    query = Motorcycle.all().order_by("id")

    if plate is not None:
        query = query.filter(plate=plate.upper())

    return await build_paginate(paginate, query)


async def get_motorcycle(*, motorcycle_id=None, plate=None) -> Optional[Motorcycle]:
    kwargs = {}
    if motorcycle_id is not None:
        kwargs["id"] = motorcycle_id

    if plate is not None:
        kwargs["plate"] = plate.upper()

    if not kwargs:
        return None

    return await Motorcycle.filter(**kwargs).first()


async def create_motorcycle(year: int, model: str, plate: str) -> Motorcycle:
    """
    Adds a motorcycle to the fleet.

    :raises MotorcycleExistsError: When the plate is already registered.
    """
    try:
        return await Motorcycle.create(year=year, model=model, plate=plate.upper())
    except IntegrityError as error:
        errors = {field: "Motorcycle with that item already exists!" for field in unique_violations(error)}

        if not errors:
            raise error

        raise MotorcycleExistsError(errors)


async def update_motorcycle(motorcycle: Motorcycle, *, plate: str) -> Motorcycle:
    """
    Changes the plate of the given motorcycle.

    :raises MotorcycleExistsError: When the plate is already registered.
    """
    motorcycle.plate = plate.upper()

    try:
        await motorcycle.save()
    except IntegrityError as error:
        errors = {field: "Motorcycle with that item already exists!" for field in unique_violations(error)}

        if not errors:
            raise error

        raise MotorcycleExistsError(errors)

    return motorcycle


async def delete_motorcycle(motorcycle: Motorcycle):
    """
    Removes a motorcycle from the fleet.

    :raises BadRequestError: If the motorcycle has ever been rented.
    """
    if await Rent.filter(motorcycle_id=motorcycle.id).exists():
        raise BadRequestError("Motorcycle has rents and cannot be removed.")

    await motorcycle.delete()
