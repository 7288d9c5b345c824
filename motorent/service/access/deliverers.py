"""
Deliverers
----------
"""
from typing import Optional, List, Dict, Any

from tortoise.exceptions import IntegrityError

from motorent.models import Deliverer
from motorent.service.access import unique_violations
from motorent.service.access.paginate import Paginate, build_paginate
from motorent.service.errors import BadRequestError


class DelivererExistsError(BadRequestError):
    def __init__(self, errors):
        super().__init__("A deliverer with those details already exists.", errors=errors)
        self.errors = errors


async def get_deliverers(filters: Optional[Dict[str, Any]] = None, paginate: Paginate = Paginate()) -> List[Deliverer]:
    """
    Gets a page of the deliverers in the system.

    :param filters: Field values to filter by.
    :param paginate: The page to get.
    """
    query = Deliverer.filter(**(filters or {})).order_by("id")
    return await build_paginate(paginate, query)


async def get_deliverer(*, deliverer_id=None, auth_id=None) -> Optional[Deliverer]:
    """
    :param deliverer_id: The id of the deliverer to get.
    :param auth_id: The token subject of the deliverer to get.
    :return: The matching deliverer, or None.
    """

    kwargs = {}
    if deliverer_id is not None:
        kwargs["id"] = deliverer_id

    if auth_id is not None:
        kwargs["auth_id"] = auth_id

    if not kwargs:
        return None

    return await Deliverer.filter(**kwargs).first()


async def create_deliverer(auth_id: str, **data) -> Deliverer:
    """
    Creates a new deliverer.

    :param auth_id: The subject of the token that registered it.
    :raises DelivererExistsError: When a deliverer with any of the unique details already exists.
    """
    try:
        return await Deliverer.create(auth_id=auth_id, **data)
    except IntegrityError as error:
        errors = {field: "Deliverer with that item already exists!" for field in unique_violations(error)}

        if not errors:
            raise error

        raise DelivererExistsError(errors)


async def set_license_image(deliverer: Deliverer, path: str) -> Deliverer:
    deliverer.driver_license_image = path
    await deliverer.save()
    return deliverer
