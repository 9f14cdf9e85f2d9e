"""PropertyMoney database model."""

from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.models.enums import MoneyType


class PropertyMoney(Base):
    """A monetary amount associated with a property."""

    __tablename__ = "property_money"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(21, 2))
    currency: Mapped[str] = mapped_column(String(3), default="USD")
    money_type: Mapped[MoneyType] = mapped_column(String(20), default=MoneyType.OTHER)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    property_name: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True)

    # Metadata
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    def __repr__(self) -> str:
        return (
            f"PropertyMoney(id={self.id!r}, amount={self.amount!r}, currency={self.currency!r}, "
            f"money_type={self.money_type!r}, property_name={self.property_name!r})"
        )
