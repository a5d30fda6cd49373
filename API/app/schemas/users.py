from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.fields import DecodedStr


class CredentialsRequest(BaseModel):
    email: DecodedStr = Field(..., description="User email address")
    password: DecodedStr


class UserResponse(BaseModel):
    """Public user record; the stored password hash is never part of it."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime
    email: str
