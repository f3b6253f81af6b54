# app/main.py
import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.routes import employee_router
from app.store import insert_sample_data, store
from app.error_handler import register_exception_handlers
from app.config import get_settings

settings = get_settings()

logger = logging.getLogger(__name__)

def configure_logging(level: str = settings.LOG_LEVEL):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging()
    if settings.SEED_SAMPLE_DATA:
        insert_sample_data()
    logger.info("Employee store ready with %d records", len(store))
    yield

app = FastAPI(title="Employee Directory", lifespan=lifespan)

register_exception_handlers(app)

app.include_router(employee_router, prefix=settings.API_PREFIX, tags=["employees"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Employee Directory"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
