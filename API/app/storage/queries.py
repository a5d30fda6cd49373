"""Parameterized queries used by the API handlers.

Each function takes the request-scoped AsyncSession. Writes commit and then
reload the row, so the returned record matches what a later read will see.
"""
from __future__ import annotations

import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.entities import Chirp, User


async def create_user(db: AsyncSession, *, email: str, hashed_password: str) -> User:
    user = User(email=email, hashed_password=hashed_password)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    return (await db.execute(select(User).where(User.email == email))).scalar_one_or_none()


async def create_chirp(db: AsyncSession, *, body: str, user_id: uuid.UUID) -> Chirp:
    chirp = Chirp(body=body, user_id=user_id)
    db.add(chirp)
    await db.commit()
    await db.refresh(chirp)
    return chirp


async def get_chirps(db: AsyncSession) -> list[Chirp]:
    result = await db.execute(select(Chirp).order_by(Chirp.created_at.asc()))
    return list(result.scalars().all())


async def get_chirp(db: AsyncSession, chirp_id: uuid.UUID) -> Chirp | None:
    return await db.get(Chirp, chirp_id)


async def reset(db: AsyncSession) -> None:
    """Delete every user and chirp; the schema is left alone."""
    await db.execute(delete(Chirp))
    await db.execute(delete(User))
    await db.commit()
