"""Device Service — devices and their owners.

Invariants:
    - A device is only created for an existing owner
    - update re-resolves the owner only when it changed, and before any other field is touched
    - Owner-scoped queries require the owner to exist (0 devices is a valid answer)
    - delete cascades to the device's repairs
"""

import logging

from repairshop.core.domain_types import DeviceId, EntityKind, UserId
from repairshop.core.errors import ResourceNotFoundError
from repairshop.core.repository_protocols import DeviceStore, UserStore
from repairshop.models.device import Device
from repairshop.models.user import User
from repairshop.schemas.device import DeviceRequest, DeviceResponse

logger = logging.getLogger(__name__)


def to_device_response(device: Device) -> DeviceResponse:
    return DeviceResponse(
        id=device.id,
        brand=device.brand,
        model=device.model,
        owner_id=device.owner_id,
        owner_username=device.owner.username,
    )


class DeviceService:
    """Device use cases; owners are resolved through the UserStore."""

    def __init__(self, devices: DeviceStore, users: UserStore):
        self.devices = devices
        self.users = users

    async def create(self, body: DeviceRequest) -> DeviceResponse:
        owner = await self._require_owner(body.owner_id)
        device = await self.devices.save(Device(
            brand=body.brand, model=body.model, owner_id=owner.id,
        ))
        logger.info(
            f"Device created: {device.brand} {device.model}",
            extra={"entity": EntityKind.DEVICE.value, "entity_id": str(device.id)},
        )
        return to_device_response(device)

    async def get_by_id(self, device_id: DeviceId) -> DeviceResponse:
        return to_device_response(await self._require(device_id))

    async def list_all(self) -> list[DeviceResponse]:
        return [to_device_response(d) for d in await self.devices.find_all()]

    async def list_by_owner_id(self, owner_id: UserId) -> list[DeviceResponse]:
        owner = await self._require_owner(owner_id)
        return [
            to_device_response(d) for d in await self.devices.find_by_owner(owner)
        ]

    async def list_by_brand(self, brand: str) -> list[DeviceResponse]:
        return [
            to_device_response(d) for d in await self.devices.find_by_brand(brand)
        ]

    async def list_by_brand_and_model(
        self, brand: str, model: str,
    ) -> list[DeviceResponse]:
        devices = await self.devices.find_by_brand_and_model(brand, model)
        return [to_device_response(d) for d in devices]

    async def count_by_owner_id(self, owner_id: UserId) -> int:
        owner = await self._require_owner(owner_id)
        return await self.devices.count_by_owner(owner)

    async def update(
        self, device_id: DeviceId, body: DeviceRequest,
    ) -> DeviceResponse:
        device = await self._require(device_id)
        if body.owner_id != device.owner_id:
            owner = await self._require_owner(body.owner_id)
            device.owner_id = owner.id
        device.brand = body.brand
        device.model = body.model

        device = await self.devices.save(device)
        logger.info(
            f"Device updated: {device.brand} {device.model}",
            extra={"entity": EntityKind.DEVICE.value, "entity_id": str(device.id)},
        )
        return to_device_response(device)

    async def delete(self, device_id: DeviceId) -> None:
        if not await self.devices.exists_by_id(device_id):
            raise ResourceNotFoundError(EntityKind.DEVICE.value, str(device_id))
        await self.devices.delete_by_id(device_id)
        logger.info(
            "Device deleted",
            extra={"entity": EntityKind.DEVICE.value, "entity_id": str(device_id)},
        )

    async def _require(self, device_id: DeviceId) -> Device:
        device = await self.devices.find_by_id(device_id)
        if not device:
            raise ResourceNotFoundError(EntityKind.DEVICE.value, str(device_id))
        return device

    async def _require_owner(self, owner_id: UserId) -> User:
        owner = await self.users.find_by_id(owner_id)
        if not owner:
            raise ResourceNotFoundError(EntityKind.OWNER.value, str(owner_id))
        return owner
