"""Device Schemas — device payloads and the owner-flattened response.

Invariants:
    - brand: 1-50 chars, model: 1-100 chars, both stripped
    - DeviceResponse flattens the owner to owner_id + owner_username
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class DeviceRequest(BaseModel):
    """Device create/update payload."""
    brand: str = Field(min_length=1, max_length=50)
    model: str = Field(min_length=1, max_length=100)
    owner_id: UUID

    @field_validator("brand", "model", mode="before")
    @classmethod
    def strip_text(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("value cannot be empty or whitespace")
        return v


class DeviceResponse(BaseModel):
    id: UUID
    brand: str
    model: str
    owner_id: UUID
    owner_username: str

