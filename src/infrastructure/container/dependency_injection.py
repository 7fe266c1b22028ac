"""
Dependency Injection Container

Manages the instantiation and lifecycle of dependencies for Clean Architecture.
"""

import logging
from typing import Any, Dict, Optional

from ...application.storefront_store import StorefrontStore
from ...application.use_cases.cart_management_use_case import CartManagementUseCase
from ...application.use_cases.checkout_use_case import CheckoutUseCase
from ...application.use_cases.product_catalog_use_case import ProductCatalogUseCase
from ...application.use_cases.rewards_use_case import RewardsUseCase
from ...application.use_cases.wholesale_access_use_case import WholesaleAccessUseCase
from ...domain.entities.cart_entity import ShippingPolicy
from ...domain.repositories.client_state_repository import ClientStateRepository
from ...domain.repositories.game_result_repository import GameResultRepository
from ...domain.repositories.order_repository import OrderRepository
from ...domain.repositories.payment_gateway import PaymentGateway
from ...domain.repositories.product_repository import ProductRepository
from ...domain.repositories.wholesale_auth_gateway import WholesaleAuthGateway
from ...domain.value_objects.money import Money
from ..configuration.config import Settings, get_config
from ..database.operations import DatabaseManager
from ..http.api_client import StorefrontApiClient
from ..repositories.http_game_result_repository import HttpGameResultRepository
from ..repositories.http_order_repository import HttpOrderRepository
from ..repositories.http_payment_gateway import HttpPaymentGateway
from ..repositories.http_product_repository import HttpProductRepository
from ..repositories.http_wholesale_auth_gateway import HttpWholesaleAuthGateway
from ..repositories.sqlalchemy_client_state_repository import SQLAlchemyClientStateRepository

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency injection container for Clean Architecture

    Manages the instantiation and lifecycle of:
    - Repositories and service clients (Infrastructure layer)
    - The shopper's StorefrontStore
    - Use Cases (Application layer)
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        database_manager: Optional[DatabaseManager] = None,
        api_client: Optional[StorefrontApiClient] = None,
    ):
        self._instances: Dict[str, Any] = {}
        self._logger = logging.getLogger(self.__class__.__name__)
        self._config = config or get_config()
        self._database_manager = database_manager or DatabaseManager(self._config)
        self._api_client = api_client or StorefrontApiClient(
            self._config.api_base_url, timeout=self._config.request_timeout_seconds
        )
        self._setup_dependencies()

    def _setup_dependencies(self):
        """Setup all dependencies and their relationships"""
        self._logger.info("Setting up dependency injection container...")

        # Infrastructure Layer - Repositories
        self._register_repositories()

        # Application Layer - State
        self._register_store()

        # Application Layer - Use Cases
        self._register_use_cases()

        self._logger.info("Dependency injection container setup complete")

    def _register_repositories(self):
        """Register repository implementations"""
        self._database_manager.create_tables()
        self._instances["client_state_repository"] = SQLAlchemyClientStateRepository(
            self._database_manager
        )
        self._instances["product_repository"] = HttpProductRepository(
            self._api_client, currency=self._config.currency
        )
        self._instances["order_repository"] = HttpOrderRepository(self._api_client)
        self._instances["payment_gateway"] = HttpPaymentGateway(self._api_client)
        self._instances["wholesale_auth_gateway"] = HttpWholesaleAuthGateway(self._api_client)
        self._instances["game_result_repository"] = HttpGameResultRepository(self._api_client)

        self._logger.debug("Repositories registered successfully")

    def _register_store(self):
        """Seed the shopper state from the persisted client state"""
        shipping_policy = ShippingPolicy(
            free_shipping_threshold=Money.of(self._config.free_shipping_threshold, self._config.currency),
            flat_fee=Money.of(self._config.flat_shipping_fee, self._config.currency),
        )
        self._instances["storefront_store"] = StorefrontStore.load(
            self.get_client_state_repository(),
            shipping_policy=shipping_policy,
            currency=self._config.currency,
        )

    def _register_use_cases(self):
        """Register use case implementations with their dependencies"""
        language = self._config.default_language
        store = self.get_storefront_store()

        self._instances["product_catalog_use_case"] = ProductCatalogUseCase(
            product_repository=self.get_product_repository(), language=language
        )

        self._instances["cart_management_use_case"] = CartManagementUseCase(
            store=store, points_per_cart_add=self._config.points_per_cart_add, language=language
        )

        self._instances["checkout_use_case"] = CheckoutUseCase(
            store=store,
            order_repository=self.get_order_repository(),
            payment_gateway=self.get_payment_gateway(),
            language=language,
        )

        self._instances["rewards_use_case"] = RewardsUseCase(
            store=store,
            game_result_repository=self.get_game_result_repository(),
            points_per_visit=self._config.points_per_visit,
            point_value=self._config.point_value,
            language=language,
        )

        self._instances["wholesale_access_use_case"] = WholesaleAccessUseCase(
            store=store, auth_gateway=self.get_wholesale_auth_gateway(), language=language
        )

        self._logger.debug("Use cases registered successfully")

    @property
    def config(self) -> Settings:
        return self._config

    # Repository getters
    def get_client_state_repository(self) -> ClientStateRepository:
        """Get client state repository instance"""
        return self._instances["client_state_repository"]

    def get_product_repository(self) -> ProductRepository:
        """Get product repository instance"""
        return self._instances["product_repository"]

    def get_order_repository(self) -> OrderRepository:
        """Get order repository instance"""
        return self._instances["order_repository"]

    def get_payment_gateway(self) -> PaymentGateway:
        return self._instances["payment_gateway"]

    def get_wholesale_auth_gateway(self) -> WholesaleAuthGateway:
        return self._instances["wholesale_auth_gateway"]

    def get_game_result_repository(self) -> GameResultRepository:
        return self._instances["game_result_repository"]

    def get_storefront_store(self) -> StorefrontStore:
        """Get the shopper state container"""
        return self._instances["storefront_store"]

    # Use Case getters
    def get_product_catalog_use_case(self) -> ProductCatalogUseCase:
        """Get product catalog use case instance"""
        return self._instances["product_catalog_use_case"]

    def get_cart_management_use_case(self) -> CartManagementUseCase:
        """Get cart management use case instance"""
        return self._instances["cart_management_use_case"]

    def get_checkout_use_case(self) -> CheckoutUseCase:
        """Get checkout use case instance"""
        return self._instances["checkout_use_case"]

    def get_rewards_use_case(self) -> RewardsUseCase:
        """Get rewards use case instance"""
        return self._instances["rewards_use_case"]

    def get_wholesale_access_use_case(self) -> WholesaleAccessUseCase:
        """Get wholesale access use case instance"""
        return self._instances["wholesale_access_use_case"]

    async def aclose(self):
        """Close the HTTP client, then release everything else"""
        await self._api_client.aclose()
        self.cleanup()

    def cleanup(self):
        """Cleanup resources when shutting down"""
        self._logger.info("Cleaning up dependency container...")
        self._database_manager.close()
        self._instances.clear()


# Global container instance
_container: Optional[DependencyContainer] = None


def get_container() -> DependencyContainer:
    """Get the global dependency container instance"""
    global _container
    if _container is None:
        _container = DependencyContainer()
    return _container


def initialize_container(
    config: Optional[Settings] = None,
    database_manager: Optional[DatabaseManager] = None,
    api_client: Optional[StorefrontApiClient] = None,
) -> DependencyContainer:
    """Initialize the global dependency container"""
    global _container
    if _container:
        _container.cleanup()
    _container = DependencyContainer(
        config=config, database_manager=database_manager, api_client=api_client
    )
    return _container


def reset_container():
    """Reset the global container (useful for testing)"""
    global _container
    if _container:
        _container.cleanup()
    _container = None
