import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from core import db, schema, settings
from core.errors import install_error_handlers
from core.logging_config import setup_logging
from notifications import router as notifications_router
from students import router as students_router

_dotenv_loaded = settings.load_environment()
setup_logging(settings.log_level())

logger = logging.getLogger(__name__)
if not _dotenv_loaded:
    logger.info("No .env file found")


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process and create missing tables.
    await db.init_pool()
    try:
        await schema.ensure_schema()
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)
install_error_handlers(app)

app.include_router(students_router.router, tags=["students"])
app.include_router(notifications_router.router, tags=["notifications"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    logger.info("JSON API running on port: %s", settings.port())
    uvicorn.run(app, host=settings.host(), port=settings.port())
