"""Engine and session factory for the property money store."""

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from app.core.config import settings

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    # Sessions are used from FastAPI's threadpool
    connect_args["check_same_thread"] = False

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    """Declarative base; ``Base.metadata`` holds the property_money table."""


def get_db():
    """Yield one session per request and close it when the response is done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
