"""ORM Models — SQLAlchemy declarative models for users, devices and repairs.

Invariants:
    - All models inherit from Base (db/base.py)
    - User owns Devices, Device owns Repairs; both collections delete orphans

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from repairshop.models.user import User  # noqa: F401
from repairshop.models.device import Device  # noqa: F401
from repairshop.models.repair import Repair  # noqa: F401
