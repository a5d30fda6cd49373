import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.content import validate_chirp
from app.core.logging import DOMAIN_CHIRPS, get_domain_logger
from app.schemas.chirps import (
    ChirpResponse,
    CreateChirpRequest,
    ValidateChirpRequest,
    ValidateChirpResponse,
)
from app.storage import queries
from app.storage.database import get_db

router = APIRouter(prefix="/api", tags=["chirps"])
logger = get_domain_logger(__name__, DOMAIN_CHIRPS)


@router.post("/validate_chirp", response_model=ValidateChirpResponse)
async def validate(payload: ValidateChirpRequest):
    return ValidateChirpResponse(cleaned_body=validate_chirp(payload.body))


@router.post("/chirps", response_model=ChirpResponse, status_code=201)
async def create_chirp(payload: CreateChirpRequest, db: AsyncSession = Depends(get_db)):
    cleaned = validate_chirp(payload.body)
    try:
        chirp = await queries.create_chirp(db, body=cleaned, user_id=payload.user_id)
    except IntegrityError as exc:
        await db.rollback()
        logger.info("Chirp rejected | user_id=%s | %s", payload.user_id, exc.orig)
        raise HTTPException(status_code=400, detail="Couldn't create chirp") from exc
    return ChirpResponse.model_validate(chirp)


@router.get("/chirps", response_model=list[ChirpResponse])
async def list_chirps(db: AsyncSession = Depends(get_db)):
    chirps = await queries.get_chirps(db)
    return [ChirpResponse.model_validate(c) for c in chirps]


@router.get("/chirps/{chirp_id}", response_model=ChirpResponse)
async def get_chirp(chirp_id: str, db: AsyncSession = Depends(get_db)):
    try:
        parsed_id = uuid.UUID(chirp_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid chirp ID")
    chirp = await queries.get_chirp(db, parsed_id)
    if chirp is None:
        raise HTTPException(status_code=404, detail="Couldn't get chirp")
    return ChirpResponse.model_validate(chirp)
