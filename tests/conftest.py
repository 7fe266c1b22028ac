"""
Test configuration and fixtures for the Autopartes storefront core
"""

import os
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.application.storefront_store import StorefrontStore
from src.domain.entities.product_entity import Product
from src.domain.value_objects.money import Money
from src.domain.value_objects.product_id import ProductId
from src.infrastructure.configuration.config import reset_config
from src.infrastructure.database.operations import DatabaseManager
from src.infrastructure.repositories.sqlalchemy_client_state_repository import (
    SQLAlchemyClientStateRepository,
)


# Mock environment variables for testing
@pytest.fixture(autouse=True)
def mock_env(tmp_path):
    """Mock environment variables for testing"""
    test_env = {
        'API_BASE_URL': 'http://storefront.test/api/',
        'CLIENT_STATE_DATABASE_URL': 'sqlite:///:memory:',
        'ENVIRONMENT': 'test',
        'LOG_LEVEL': 'DEBUG',
        'LOG_DIR': str(tmp_path / 'logs'),
        'STOREFRONT_DEFAULT_LANG': 'es',
    }

    with patch.dict(os.environ, test_env, clear=True):
        reset_config()
        yield test_env
        reset_config()


def make_product(
    product_id="p-1",
    name="Filtro de aceite",
    retail="120",
    wholesale="90",
    category="cars",
    is_active=True,
):
    return Product(
        id=ProductId(product_id),
        name=name,
        category=category,
        retail_price=Money(Decimal(retail)),
        wholesale_price=Money(Decimal(wholesale)),
        image_url=f"/img/{product_id}.png",
        is_active=is_active,
    )


@pytest.fixture
def product():
    """Retail 120 / wholesale 90 product"""
    return make_product()


@pytest.fixture
def expensive_product():
    return make_product("p-600", "Kit de embrague", retail="600", wholesale="450")


@pytest.fixture
def tiered_product():
    return make_product("p-100", "Bujía", retail="100", wholesale="70")


@pytest.fixture
def database_manager():
    """In-memory SQLite client state database"""
    manager = DatabaseManager(database_url="sqlite:///:memory:")
    manager.create_tables()
    yield manager
    manager.close()


@pytest.fixture
def client_state_repository(database_manager):
    return SQLAlchemyClientStateRepository(database_manager)


@pytest.fixture
def store():
    """Store without persistence"""
    return StorefrontStore()


@pytest.fixture
def persisted_store(client_state_repository):
    return StorefrontStore.load(client_state_repository)


@pytest.fixture
def mock_order_repository():
    repo = MagicMock()
    repo.create_order = AsyncMock(
        return_value={"id": "ord-1", "pointsEarned": 290, "status": "completed"}
    )
    repo.get_orders_by_user = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def mock_payment_gateway():
    gateway = MagicMock()
    gateway.create_payment_intent = AsyncMock(return_value="pi_secret_123")
    return gateway


@pytest.fixture
def mock_game_result_repository():
    repo = MagicMock()
    repo.save_result = AsyncMock(return_value={"id": "game-1"})
    return repo


@pytest.fixture
def product_factory():
    """Build products with custom prices/categories"""
    return make_product
