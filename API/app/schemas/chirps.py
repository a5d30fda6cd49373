from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from app.schemas.fields import DecodedStr


class ValidateChirpRequest(BaseModel):
    body: DecodedStr


class ValidateChirpResponse(BaseModel):
    cleaned_body: str


class CreateChirpRequest(BaseModel):
    body: DecodedStr
    user_id: UUID


class ChirpResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime
    user_id: UUID
    body: str
