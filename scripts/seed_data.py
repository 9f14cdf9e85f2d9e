"""Seed script to populate the database with sample data."""

from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.database import Base, SessionLocal, engine
from app.models.enums import MoneyType
from app.models.property_money import PropertyMoney

SAMPLE_RECORDS = [
    {
        "amount": Decimal("1450.00"),
        "money_type": MoneyType.RENT,
        "property_name": "Harbor View 12",
    },
    {
        "amount": Decimal("2900.00"),
        "money_type": MoneyType.DEPOSIT,
        "property_name": "Harbor View 12",
    },
    {
        "amount": Decimal("35.50"),
        "money_type": MoneyType.FEE,
        "property_name": "Harbor View 12",
        "description": "Late payment fee",
    },
    {
        "amount": Decimal("980.00"),
        "currency": "EUR",
        "money_type": MoneyType.RENT,
        "property_name": "Elm Street 4",
    },
    {
        "amount": Decimal("212.75"),
        "currency": "EUR",
        "money_type": MoneyType.TAX,
        "property_name": "Elm Street 4",
        "description": "Quarterly property tax",
    },
]


def seed_database(db: Session) -> int:
    """Insert the sample records unless the table already has data. Returns rows inserted."""
    if db.scalars(select(PropertyMoney).limit(1)).first() is not None:
        print("Database already has data. Skipping seed.")
        return 0

    print("Seeding database...")
    for record in SAMPLE_RECORDS:
        db.add(PropertyMoney(**record))
    db.commit()
    print(f"Created {len(SAMPLE_RECORDS)} property money records")
    return len(SAMPLE_RECORDS)


if __name__ == "__main__":
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as session:
        seed_database(session)
