"""Composition Root — builds stores and services per request from one AsyncSession.

Invariants:
    - Every store used by one request shares the request's session
    - Services see only store Protocols; concrete classes are chosen here and nowhere else
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from repairshop.infrastructure.database import get_db
from repairshop.repositories.devices import SQLAlchemyDeviceStore
from repairshop.repositories.repairs import SQLAlchemyRepairStore
from repairshop.repositories.users import SQLAlchemyUserStore
from repairshop.services.device_service import DeviceService
from repairshop.services.repair_service import RepairService
from repairshop.services.user_service import UserService


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(SQLAlchemyUserStore(db))


def get_device_service(db: AsyncSession = Depends(get_db)) -> DeviceService:
    return DeviceService(SQLAlchemyDeviceStore(db), SQLAlchemyUserStore(db))


def get_repair_service(db: AsyncSession = Depends(get_db)) -> RepairService:
    return RepairService(
        SQLAlchemyRepairStore(db),
        SQLAlchemyDeviceStore(db),
        SQLAlchemyUserStore(db),
    )
