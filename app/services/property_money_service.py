"""PropertyMoney service for business logic."""

import logging
from typing import Any

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.orm import Session

from app.core.errors import BadRequestAlertException
from app.core.pagination import Order, Page, Pageable
from app.models.property_money import PropertyMoney
from app.schemas.property_money import PropertyMoneyPayload

logger = logging.getLogger(__name__)

ENTITY_NAME = "propertyMoney"


class PropertyMoneyService:
    """CRUD operations on PropertyMoney records within one database session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def save(self, payload: PropertyMoneyPayload) -> PropertyMoney:
        """
        Save a property money record.

        Without an id a new row is inserted and the store assigns the id.
        With an id the stored row is overwritten, or inserted under that id
        if no row has it yet.

        Args:
            payload: Validated request body

        Returns:
            The persisted record

        """
        logger.debug("Request to save PropertyMoney : %s", payload)
        data = payload.model_dump(exclude={"id"})

        db_money = self.db.get(PropertyMoney, payload.id) if payload.id is not None else None
        if db_money is None:
            db_money = PropertyMoney(id=payload.id, **data)
            self.db.add(db_money)
        else:
            for field, value in data.items():
                setattr(db_money, field, value)

        self.db.commit()
        self.db.refresh(db_money)
        return db_money

    def find_all(self, pageable: Pageable) -> Page[PropertyMoney]:
        """
        Get one page of property money records.

        Args:
            pageable: Page index, page size and sort orders

        Returns:
            The requested page and the total record count

        """
        logger.debug("Request to get all PropertyMonies")
        order_by = self._order_by(pageable.sort)
        total = self.db.scalar(select(func.count()).select_from(PropertyMoney)) or 0
        content: list[PropertyMoney] = []
        # Offsets past the end can exceed the store's integer range
        if pageable.offset < total:
            result = self.db.scalars(
                select(PropertyMoney)
                .order_by(*order_by)
                .offset(pageable.offset)
                .limit(pageable.size)
            )
            content = list(result.all())
        return Page(
            content=content,
            number=pageable.page,
            size=pageable.size,
            total_elements=total,
            sort=pageable.sort,
        )

    def find_one(self, money_id: int) -> PropertyMoney | None:
        """Get a property money record by ID, or None if not found."""
        logger.debug("Request to get PropertyMoney : %s", money_id)
        return self.db.get(PropertyMoney, money_id)

    def delete(self, money_id: int) -> None:
        """Delete a property money record. Deleting a missing ID is a no-op."""
        logger.debug("Request to delete PropertyMoney : %s", money_id)
        db_money = self.db.get(PropertyMoney, money_id)
        if db_money is None:
            return
        self.db.delete(db_money)
        self.db.commit()

    @staticmethod
    def _order_by(orders: tuple[Order, ...]) -> list[ColumnElement[Any]]:
        columns = PropertyMoney.__table__.columns
        clauses = []
        for order in orders:
            if order.property not in columns:
                raise BadRequestAlertException(
                    f"Unknown sort property: {order.property}", ENTITY_NAME, "sort"
                )
            column = columns[order.property]
            clauses.append(column.desc() if order.direction == "desc" else column.asc())
        # id last keeps pages stable when sort keys tie
        if not any(order.property == "id" for order in orders):
            clauses.append(PropertyMoney.id.asc())
        return clauses
