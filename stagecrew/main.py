"""FastAPI application — main entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stagecrew.config import get_settings
from stagecrew.core.exceptions import register_exception_handlers
from stagecrew.core.logging import configure_logging
from stagecrew.core.middleware import setup_middleware
from stagecrew.infrastructure.database import Base, engine

# Import all models so SQLAlchemy knows about them
import stagecrew.domain.models  # noqa: F401

from stagecrew.interfaces.api.cron import router as cron_router
from stagecrew.interfaces.api.dev import router as dev_router
from stagecrew.interfaces.api.notifications import router as notifications_router
from stagecrew.interfaces.api.technical_settings import router as technical_settings_router
from stagecrew.interfaces.api.unavailabilities import router as unavailabilities_router
from stagecrew.interfaces.api.users import router as users_router
from stagecrew.interfaces.api.workdays import router as workdays_router

settings = get_settings()

configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Stagecrew scheduling API", env=settings.ENVIRONMENT)

    # Dev convenience; production schemas are migrated out of band
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    yield

    logger.info("Stagecrew scheduling API stopped")


app = FastAPI(
    title="Stagecrew — Theater Staff Scheduling",
    description="Shifts, hours, unavailabilities and notifications for venue staff",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app)
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(cron_router)
app.include_router(notifications_router)
app.include_router(technical_settings_router)
app.include_router(unavailabilities_router)
app.include_router(users_router)
app.include_router(workdays_router)
app.include_router(dev_router)


@app.get("/health")
def health():
    return {"status": "healthy"}
