import logging

from fastapi import FastAPI
from contextlib import asynccontextmanager

from src.core.config import settings
from src.core.database import Base, engine, SessionLocal
from src.core.error_handlers import register_error_handlers
from src.core.exceptions import DuplicateEntityError
from src.core.seed_locations import seed_locations

import src.models  # Ensure models are registered

from src.routes.address import address_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ---- STARTUP ----
    Base.metadata.create_all(bind=engine)
    if settings.SEED_SAMPLE_DATA:
        db = SessionLocal()
        try:
            seed_locations(db)
        except DuplicateEntityError as e:
            logger.info(f"Sample data already present, skipping seed: {e.message}")
        finally:
            db.close()

    yield

app = FastAPI(
    title="Address Directory API",
    version="1.0.0",
    lifespan=lifespan
)

register_error_handlers(app)

API_PREFIX = settings.API_PREFIX

app.include_router(address_router, prefix=API_PREFIX)


@app.get(f"{API_PREFIX}/")
def root():
    return {"message": "Address Directory API is running"}
