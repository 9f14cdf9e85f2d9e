"""PropertyMoney API routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from app.api.dependencies import get_property_money_service
from app.core import headers
from app.core.errors import BadRequestAlertException
from app.core.pagination import Pageable, generate_pagination_headers, get_pageable
from app.schemas.property_money import (
    MAX_ID,
    MIN_ID,
    PropertyMoneyPayload,
    PropertyMoneyResponse,
)
from app.services.property_money_service import ENTITY_NAME, PropertyMoneyService

logger = logging.getLogger(__name__)

BASE_PATH = "/api/property-monies"

router = APIRouter(prefix="/property-monies", tags=["property-monies"])


@router.post("", response_model=PropertyMoneyResponse, status_code=status.HTTP_201_CREATED)
def create_property_money(
    payload: PropertyMoneyPayload,
    response: Response,
    service: PropertyMoneyService = Depends(get_property_money_service),
) -> PropertyMoneyResponse:
    """Create a new property money record. The body must not carry an ID."""
    logger.debug("REST request to save PropertyMoney : %s", payload)
    if payload.id is not None:
        raise BadRequestAlertException(
            "A new propertyMoney cannot already have an ID", ENTITY_NAME, "idexists"
        )
    result = service.save(payload)
    response.headers["Location"] = f"{BASE_PATH}/{result.id}"
    response.headers.update(headers.create_entity_creation_alert(ENTITY_NAME, str(result.id)))
    return PropertyMoneyResponse.model_validate(result)


@router.put("", response_model=PropertyMoneyResponse)
def update_property_money(
    payload: PropertyMoneyPayload,
    response: Response,
    service: PropertyMoneyService = Depends(get_property_money_service),
) -> PropertyMoneyResponse:
    """Update an existing property money record. The body must carry its ID."""
    logger.debug("REST request to update PropertyMoney : %s", payload)
    if payload.id is None:
        raise BadRequestAlertException("Invalid id", ENTITY_NAME, "idnull")
    result = service.save(payload)
    response.headers.update(headers.create_entity_update_alert(ENTITY_NAME, str(payload.id)))
    return PropertyMoneyResponse.model_validate(result)


@router.get("", response_model=list[PropertyMoneyResponse])
def list_property_monies(
    response: Response,
    pageable: Pageable = Depends(get_pageable),
    service: PropertyMoneyService = Depends(get_property_money_service),
) -> list[PropertyMoneyResponse]:
    """Get a page of property money records; pagination metadata goes in the headers."""
    logger.debug("REST request to get a page of PropertyMonies")
    page = service.find_all(pageable)
    response.headers.update(generate_pagination_headers(page, BASE_PATH))
    return [PropertyMoneyResponse.model_validate(m) for m in page.content]


@router.get("/{money_id}", response_model=PropertyMoneyResponse)
def get_property_money(
    money_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    service: PropertyMoneyService = Depends(get_property_money_service),
) -> PropertyMoneyResponse:
    """Get a property money record by ID."""
    logger.debug("REST request to get PropertyMoney : %s", money_id)
    money = service.find_one(money_id)
    if money is None:
        raise HTTPException(status_code=404, detail="PropertyMoney not found")
    return PropertyMoneyResponse.model_validate(money)


@router.delete("/{money_id}")
def delete_property_money(
    money_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    service: PropertyMoneyService = Depends(get_property_money_service),
) -> Response:
    """Delete a property money record. Succeeds whether or not it existed."""
    logger.debug("REST request to delete PropertyMoney : %s", money_id)
    service.delete(money_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=headers.create_entity_deletion_alert(ENTITY_NAME, str(money_id)),
    )
