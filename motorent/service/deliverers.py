"""
Deliverers
----------

Registration and lookup of deliverers, and storage of their driver license images.
"""

import asyncio
import os
from concurrent.futures import Executor
from contextlib import suppress
from pathlib import Path
from typing import Optional, List, Dict, Any

from motorent import logger
from motorent.models import Deliverer
from motorent.service.access.deliverers import get_deliverer, get_deliverers, create_deliverer, set_license_image
from motorent.service.access.paginate import FilterQuery
from motorent.service.errors import NotFoundError, BadRequestError

LICENSE_IMAGE_TYPES = {
    "image/png": "png",
    "image/bmp": "bmp",
}


def _write_file(path: Path, content: bytes):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


def _remove_file(path: str):
    with suppress(FileNotFoundError):
        os.remove(path)


class DelivererService:

    def __init__(self, license_image_dir: str, executor: Executor = None):
        self.license_image_dir = Path(license_image_dir)
        self._executor = executor

    async def find_by_id(self, deliverer_id) -> Deliverer:
        """
        :raises NotFoundError: If there is no such deliverer.
        """
        deliverer = await get_deliverer(deliverer_id=deliverer_id)
        if deliverer is None:
            raise NotFoundError("Deliverer not found")
        return deliverer

    async def find_by_auth_id(self, auth_id: str) -> Optional[Deliverer]:
        return await get_deliverer(auth_id=auth_id)

    async def register_deliverer(self, data: Dict[str, Any], auth_id: str) -> Deliverer:
        """
        Registers a deliverer to the given token subject.

        :raises DelivererExistsError: If any of the unique details are taken.
        """
        deliverer = await create_deliverer(auth_id, **data)
        logger.info("Registered deliverer %s (%s)", deliverer.id, deliverer.name)
        return deliverer

    async def paginate(self, search_query: FilterQuery) -> List[Deliverer]:
        return await get_deliverers(search_query.filters, search_query.paginate)

    async def attach_document(self, deliverer: Deliverer, content_type: str, content: bytes) -> Deliverer:
        """
        Stores the image of the deliverer's driver license, replacing any previous one.

        :param deliverer: The owner of the license.
        :param content_type: The mime type of the image. Only PNG and BMP are accepted.
        :param content: The raw image.
        :raises BadRequestError: If the image is empty or of the wrong type.
        """
        extension = LICENSE_IMAGE_TYPES.get(content_type)
        if extension is None:
            raise BadRequestError("Driver license image must be a PNG or BMP file.")
        if not content:
            raise BadRequestError("Driver license image is empty.")

        path = self.license_image_dir / f"{deliverer.id}.{extension}"
        previous = deliverer.driver_license_image

        loop = asyncio.get_running_loop()
        await loop.run_in_executor(self._executor, _write_file, path, content)
        if previous and previous != str(path):
            await loop.run_in_executor(self._executor, _remove_file, previous)

        logger.info("Stored driver license image for deliverer %s at %s", deliverer.id, path)
        return await set_license_image(deliverer, str(path))
