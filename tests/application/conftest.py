"""Shared wiring for application-layer tests."""

from dataclasses import dataclass

import pytest

from retail_oms.domain.model.product import Product
from retail_oms.domain.model.user import User
from retail_oms.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, FakeProductRepository, FakeUserRepository


@dataclass
class Repos:
    orders: FakeOrderRepository
    products: FakeProductRepository
    users: FakeUserRepository


@pytest.fixture
def repos() -> Repos:
    products = [
        Product.create(
            id="1", name="Widget", price=Money.of("50.00"),
            stock_quantity=10, category="Tools", sku="WID-001",
        ),
        Product.create(
            id="2", name="Gadget", price=Money.of("25.00"),
            stock_quantity=5, category="Tools", sku="GAD-001",
        ),
    ]
    users = [
        User(id="1", username="alice", email="alice@example.com"),
        User(id="2", username="bob", email="bob@example.com"),
    ]
    return Repos(
        orders=FakeOrderRepository(),
        products=FakeProductRepository(products),
        users=FakeUserRepository(users),
    )
