import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from eventwall.config import settings
from eventwall.database import async_session, create_tables
from eventwall.routers.analytics import router as analytics_router
from eventwall.routers.display import router as display_router
from eventwall.routers.events import router as events_router
from eventwall.routers.photos import router as photos_router
from eventwall.seed import seed_data
from eventwall.utils.exceptions import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    os.makedirs(settings.upload_dir, exist_ok=True)
    await create_tables()
    async with async_session() as session:
        await seed_data(session)
    logger.info("eventwall ready, uploads in %s", settings.upload_dir)
    yield


app = FastAPI(
    title="EventWall API",
    description="Event photo sharing: uploads, moderation and a public slideshow",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Admin routes carry their own X-API-Key dependency
app.include_router(photos_router, prefix="/api")
app.include_router(events_router, prefix="/api")
app.include_router(display_router, prefix="/api")
app.include_router(analytics_router, prefix="/api")

app.mount("/uploads", StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")


@app.get("/health")
async def health_check():
    return {"status": "success", "data": {"service": "eventwall-api", "version": "0.1.0"}, "message": None}
