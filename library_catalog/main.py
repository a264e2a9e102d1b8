import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from library_catalog.config import APP_TITLE, APP_VERSION, LOG_LEVEL
from library_catalog.database import Base, engine, get_db
from library_catalog.exceptions import register_exception_handlers
from library_catalog.logging_config import setup_logging
from library_catalog.routers import authors, books
from library_catalog import schemas

setup_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Alembic owns the schema in production; this only fills in missing tables
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")
    yield

app = FastAPI(
    title=APP_TITLE,
    description="REST API for a library catalog of authors and books",
    version=APP_VERSION,
    lifespan=lifespan
)

app_v1 = FastAPI(
    title="Library Catalog API V1",
    description="Version 1 of the library catalog API",
    version="1.0.0"
)

app_v1.include_router(authors.router, prefix="/authors", tags=["Authors"])
app_v1.include_router(books.router, prefix="/books", tags=["Books"])
register_exception_handlers(app_v1)
register_exception_handlers(app)

app.mount("/api/v1", app_v1)

@app.get("/", tags=["Root"])
def root():
    """Service information and documentation links."""
    return {
        "message": f"{APP_TITLE} v{APP_VERSION}",
        "versions": {
            "v1": "/api/v1/docs"
        },
        "documentation": "/docs"
    }

@app.get("/health", response_model=schemas.HealthResponse, tags=["Health"])
def health_check(db: Session = Depends(get_db)):
    """Basic health check with a database round trip."""
    try:
        db.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        logger.error("Database health check failed: %s", e)
        db_status = f"error: {str(e)}"
    
    return schemas.HealthResponse(
        status="healthy",
        timestamp=datetime.utcnow(),
        database=db_status
    )
