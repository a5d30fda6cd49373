"""Users API: registration and email/password login.

Login returns the public user record only; no session or token is issued.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from app.core.errors import CredentialMismatch
from app.core.logging import DOMAIN_AUTH, get_domain_logger
from app.core.password import hash_password, simulate_verify, verify_password
from app.schemas.users import CredentialsRequest, UserResponse
from app.storage import queries
from app.storage.database import get_db

router = APIRouter(prefix="/api", tags=["users"])
logger = get_domain_logger(__name__, DOMAIN_AUTH)


@router.post("/users", response_model=UserResponse, status_code=201)
async def create_user(payload: CredentialsRequest, db: AsyncSession = Depends(get_db)):
    # CPU-bound; runs in the threadpool.
    hashed_password = await run_in_threadpool(hash_password, payload.password)
    try:
        user = await queries.create_user(db, email=payload.email, hashed_password=hashed_password)
    except IntegrityError as exc:
        await db.rollback()
        logger.info("User creation rejected | email=%s | %s", payload.email, exc.orig)
        raise HTTPException(status_code=409, detail="Couldn't create user") from exc
    logger.info("User created | user_id=%s", user.id)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=UserResponse)
async def login(payload: CredentialsRequest, db: AsyncSession = Depends(get_db)):
    user = await queries.get_user_by_email(db, payload.email)
    if user is None:
        # Unknown emails cost the same PBKDF2 time as a wrong password.
        await run_in_threadpool(simulate_verify)
        raise CredentialMismatch()
    await run_in_threadpool(verify_password, payload.password, user.hashed_password)
    return UserResponse.model_validate(user)
