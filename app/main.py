"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.routes import health, property_monies
from app.core.config import settings
from app.core.database import Base, engine
from app.core.errors import BadRequestAlertException, bad_request_alert_handler
from app.core.logging import setup_logging
from app.core.timing import TimingMiddleware

# Import models for Base.metadata.create_all
from app.models import property_money  # noqa: F401


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    # Startup: Create database tables
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Property money REST API",
    lifespan=lifespan,
)

app.add_exception_handler(BadRequestAlertException, bad_request_alert_handler)  # type: ignore[arg-type]
app.add_middleware(TimingMiddleware)  # type: ignore[arg-type]

# Include API routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(property_monies.router, prefix="/api")


@app.get("/")
def root() -> dict[str, str]:
    """Service banner."""
    return {"message": f"{settings.PROJECT_NAME} API", "version": settings.VERSION}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
