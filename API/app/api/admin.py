"""Admin API: fileserver metrics page and the dev-only reset."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.hit_counter import get_hits, reset_hits
from app.core.logging import DOMAIN_ADMIN, get_domain_logger
from app.core.settings import settings
from app.storage import queries
from app.storage.database import get_db

router = APIRouter(prefix="/admin", tags=["admin"])
logger = get_domain_logger(__name__, DOMAIN_ADMIN)

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""


@router.get("/metrics", response_class=HTMLResponse)
async def metrics():
    return METRICS_TEMPLATE.format(hits=get_hits())


@router.post("/reset", response_class=PlainTextResponse)
async def reset(db: AsyncSession = Depends(get_db)):
    """Zero the hit counter and delete all users and chirps (dev platform only)."""
    if settings.platform != "dev":
        return PlainTextResponse("Reset is only allowed in dev environment.", status_code=403)
    reset_hits()
    await queries.reset(db)
    logger.warning("Hits and database reset | platform=%s", settings.platform)
    return "Hits reset to 0 and database reset to initial state."
