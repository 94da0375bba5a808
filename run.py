# -*- coding: utf-8 -*-

import logging
import os
import sys

from StorefrontPaginator import (
    ClientSettings,
    GQLError,
    create_client_from_settings,
    print_graphql_error,
    query_collection_all,
)
from StorefrontPaginator.logger import configure_logger
from StorefrontPaginator.queries import COLLECTIONS_WITH_PRODUCTS_QUERY

logger = configure_logger(getattr(logging, os.environ.get("LOG_LEVEL", "INFO")))

settings = ClientSettings.from_env()
client = create_client_from_settings(settings)

try:
    collections = query_collection_all(
        client,
        COLLECTIONS_WITH_PRODUCTS_QUERY,
        first=int(os.environ.get("PAGE_SIZE", 100)),
        first_product=int(os.environ.get("PRODUCT_PAGE_SIZE", 100)),
    )
except GQLError as e:
    logger.error(f"Unable to fetch collections: {e}")
    print_graphql_error(e)
    sys.exit(1)

for collection in collections:
    products = collection.products.edges if collection.products is not None else []
    logger.info(f"{collection.fields.get('title')}: {len(products)} products")
