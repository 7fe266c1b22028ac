#!/usr/bin/env python3
"""
Entry point for the Autopartes storefront core

Boots a shopper session against the configured storefront API: restores the
persisted client state, awards the daily visit and loads the catalog.
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from src.infrastructure.configuration.config import get_config  # noqa: E402
from src.infrastructure.container.dependency_injection import initialize_container  # noqa: E402
from src.infrastructure.logging.logging_config import ProductionLogger  # noqa: E402
from src.infrastructure.utilities.exceptions import ClientStateError  # noqa: E402


async def start_session() -> int:
    """Restore the session, record the visit and show what the shopper would see"""
    logger = logging.getLogger(__name__)
    config = get_config()

    try:
        container = initialize_container(config)
    except ClientStateError as e:
        logger.critical("Client state store unavailable: %s", e)
        return 1

    try:
        visit = container.get_rewards_use_case().record_daily_visit()
        logger.info(visit.message)

        catalog = await container.get_product_catalog_use_case().get_products(
            is_wholesale=container.get_storefront_store().session.is_wholesale_tier
        )
        if not catalog.success:
            logger.warning(catalog.error_message)
        else:
            logger.info("Catalog loaded: %d products", len(catalog.products))

        summary = container.get_cart_management_use_case().get_cart_summary()
        logger.info(
            "Cart: %d items, subtotal %.2f, shipping %.2f, total %.2f",
            summary.item_count,
            summary.subtotal,
            summary.shipping,
            summary.total,
        )
        return 0
    finally:
        await container.aclose()


def main():
    ProductionLogger.setup_logging()
    sys.exit(asyncio.run(start_session()))


if __name__ == "__main__":
    main()
