"""Tests for PropertyMoneyService against an in-memory database."""

from decimal import Decimal

import pytest

from app.core.errors import BadRequestAlertException
from app.core.pagination import Order, Pageable
from app.models.enums import MoneyType
from app.models.property_money import PropertyMoney
from app.schemas.property_money import PropertyMoneyPayload
from app.services.property_money_service import PropertyMoneyService


@pytest.fixture
def service(test_db):
    return PropertyMoneyService(test_db)


def test_save_new_assigns_id(service):
    saved = service.save(PropertyMoneyPayload(amount=Decimal("12.50"), money_type=MoneyType.FEE))
    assert saved.id is not None
    assert saved.amount == Decimal("12.50")
    assert saved.money_type == MoneyType.FEE
    assert saved.created_at is not None


def test_save_existing_overwrites_fields(service, test_db):
    saved = service.save(PropertyMoneyPayload(amount=Decimal("1"), description="old"))
    service.save(PropertyMoneyPayload(id=saved.id, amount=Decimal("2"), description=None))

    stored = test_db.get(PropertyMoney, saved.id)
    assert stored.amount == Decimal("2")
    assert stored.description is None
    assert test_db.query(PropertyMoney).count() == 1


def test_find_one(service):
    saved = service.save(PropertyMoneyPayload(amount=Decimal("3")))
    assert service.find_one(saved.id).id == saved.id
    assert service.find_one(saved.id + 100) is None


def test_find_all_pages(service):
    for i in range(5):
        service.save(PropertyMoneyPayload(amount=Decimal(i)))

    page = service.find_all(Pageable(page=2, size=2))
    assert [m.id for m in page.content] == [5]
    assert page.total_elements == 5
    assert page.total_pages == 3
    assert not page.has_next()
    assert page.has_previous()


def test_find_all_sorted(service):
    for amount in ("2", "3", "1"):
        service.save(PropertyMoneyPayload(amount=Decimal(amount)))

    page = service.find_all(Pageable(size=10, sort=(Order("amount", "desc"),)))
    assert [m.amount for m in page.content] == [Decimal("3"), Decimal("2"), Decimal("1")]


def test_find_all_unknown_sort_property(service):
    with pytest.raises(BadRequestAlertException) as exc_info:
        service.find_all(Pageable(sort=(Order("password"),)))
    assert exc_info.value.error_key == "sort"
    assert exc_info.value.entity_name == "propertyMoney"


def test_delete(service):
    saved = service.save(PropertyMoneyPayload(amount=Decimal("3")))
    service.delete(saved.id)
    assert service.find_one(saved.id) is None


def test_delete_missing_is_noop(service):
    service.delete(12345)
    assert service.find_all(Pageable()).total_elements == 0


def test_find_all_offset_beyond_integer_range(service):
    service.save(PropertyMoneyPayload(amount=Decimal("1")))

    page = service.find_all(Pageable(page=10**18, size=2000))
    assert page.content == []
    assert page.total_elements == 1
    assert page.has_previous()


def test_save_defaults_for_empty_payload(service):
    saved = service.save(PropertyMoneyPayload())
    assert saved.amount == Decimal("0")
    assert saved.currency == "USD"
    assert saved.money_type == MoneyType.OTHER
