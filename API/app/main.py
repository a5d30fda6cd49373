import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.admin import router as admin_router
from app.api.chirps import router as chirps_router
from app.api.health import router as health_router
from app.api.users import router as users_router
from app.core.bootstrap import initialize_database
from app.core.errors import (
    ChirpyError,
    chirpy_exception_handler,
    http_exception_handler,
    request_id_middleware,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.core.hit_counter import fileserver_hits_middleware
from app.core.logging import configure_logging
from app.core.settings import settings
from app.storage.database import engine


configure_logging(settings.log_level)

app = FastAPI(title="Chirpy API", version="0.1.0")
app.include_router(health_router)
app.include_router(users_router)
app.include_router(chirps_router)
app.include_router(admin_router)
app.mount("/app", StaticFiles(directory=settings.filepath_root, html=True), name="app")
app.middleware("http")(fileserver_hits_middleware)
app.middleware("http")(request_id_middleware)
app.add_exception_handler(ChirpyError, chirpy_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


@app.on_event("startup")
async def on_startup():
    await initialize_database(engine)


@app.on_event("shutdown")
async def on_shutdown():
    await engine.dispose()


def run() -> None:
    uvicorn.run(app, host=settings.app_host, port=settings.app_port, log_level=settings.log_level.lower())
