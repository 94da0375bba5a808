# Storefront API version the endpoint is built for
API_VERSION = "2019-10"

STOREFRONT_TOKEN_HEADER = "X-Shopify-Storefront-Access-Token"

DEFAULT_FIRST = 100
DEFAULT_FIRST_PRODUCT = 100

# A nested collection is always re-fetched as a single parent record
COLLECTION_PAGE_SIZE = 1

CHILD_COLLECTION_FIELD = "products"

# Query documents alias the paginated connection as `data`
DEFAULT_CONNECTION_KEY = "data"


class Variables:
    """Names of the variables a query document must declare."""

    FIRST = "first"
    AFTER = "after"
    FIRST_PRODUCT = "firstProduct"
    AFTER_PRODUCT = "afterProduct"
