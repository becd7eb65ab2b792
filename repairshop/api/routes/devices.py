"""Device Routes — CRUD and owner/brand lookups for devices."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from repairshop.api.deps import get_device_service
from repairshop.core.domain_types import DeviceId, UserId
from repairshop.schemas.common import CountResponse, DeletedResponse
from repairshop.schemas.device import DeviceRequest, DeviceResponse
from repairshop.services.device_service import DeviceService

router = APIRouter(prefix="/api/v1/devices", tags=["devices"])


@router.post(
    "", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED,
)
async def create_device(
    body: DeviceRequest, service: DeviceService = Depends(get_device_service),
):
    return await service.create(body)


@router.get("", response_model=list[DeviceResponse])
async def list_devices(service: DeviceService = Depends(get_device_service)):
    return await service.list_all()


@router.get("/owner/{owner_id}", response_model=list[DeviceResponse])
async def list_devices_by_owner(
    owner_id: UUID, service: DeviceService = Depends(get_device_service),
):
    return await service.list_by_owner_id(UserId(owner_id))


@router.get("/owner/{owner_id}/count", response_model=CountResponse)
async def count_devices_by_owner(
    owner_id: UUID, service: DeviceService = Depends(get_device_service),
):
    return CountResponse(count=await service.count_by_owner_id(UserId(owner_id)))


@router.get("/brand/{brand}", response_model=list[DeviceResponse])
async def list_devices_by_brand(
    brand: str, service: DeviceService = Depends(get_device_service),
):
    return await service.list_by_brand(brand)


@router.get("/brand/{brand}/model/{model}", response_model=list[DeviceResponse])
async def list_devices_by_brand_and_model(
    brand: str, model: str,
    service: DeviceService = Depends(get_device_service),
):
    return await service.list_by_brand_and_model(brand, model)


@router.get("/{device_id}", response_model=DeviceResponse)
async def get_device(
    device_id: UUID, service: DeviceService = Depends(get_device_service),
):
    return await service.get_by_id(DeviceId(device_id))


@router.put("/{device_id}", response_model=DeviceResponse)
async def update_device(
    device_id: UUID, body: DeviceRequest,
    service: DeviceService = Depends(get_device_service),
):
    return await service.update(DeviceId(device_id), body)


@router.delete("/{device_id}", response_model=DeletedResponse)
async def delete_device(
    device_id: UUID, service: DeviceService = Depends(get_device_service),
):
    await service.delete(DeviceId(device_id))
    return DeletedResponse(message="Device deleted successfully", id=device_id)
