from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/healthz", response_class=PlainTextResponse)
async def readiness():
    return "OK"
