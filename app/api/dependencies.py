"""Shared API dependencies."""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.property_money_service import PropertyMoneyService


def get_property_money_service(db: Session = Depends(get_db)) -> PropertyMoneyService:
    """Dependency providing a PropertyMoneyService bound to the request's session."""
    return PropertyMoneyService(db)
