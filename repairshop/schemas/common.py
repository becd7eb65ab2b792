"""Shared Schemas — small acknowledgement and scalar responses used by every resource."""

from uuid import UUID

from pydantic import BaseModel


class DeletedResponse(BaseModel):
    """Acknowledgement returned by every DELETE endpoint."""
    message: str
    id: UUID


class ExistsResponse(BaseModel):
    exists: bool


class CountResponse(BaseModel):
    count: int
