from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from careerpath.api.v1.router import api_router
from careerpath.core.config import settings
from careerpath.core.logging import configure_logging
from careerpath.db.seed import seed_database
from careerpath.db.session import database

configure_logging(settings)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    try:
        await database.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize database, continuing without DB")

    if database.initialized and settings.SEED_ON_STARTUP:
        try:
            async with database.session() as session:
                await seed_database(session, settings.SEED_DATA_DIR or None)
        except Exception:
            logger.exception("Failed to seed database, continuing with existing data")
    yield
    await database.close()


app = FastAPI(
    title="CareerPath API",
    description="Employee directory with career history",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "CareerPath API"}
