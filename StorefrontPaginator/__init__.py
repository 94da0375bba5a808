from StorefrontPaginator.classes.ErrorPrinter import print_graphql_error, render
from StorefrontPaginator.classes.Paginator import (
    query_all,
    query_collection_all,
    query_collection_products,
)
from StorefrontPaginator.classes.Settings import ClientSettings
from StorefrontPaginator.classes.gql.Errors import (
    GQLError,
    TransportError,
    GraphQLResponseError,
    MalformedResponseError,
    PaginationCursorError,
)
from StorefrontPaginator.classes.gql.Integration import (
    GraphQLClient,
    create_client,
    create_client_from_settings,
    query_once,
)
from StorefrontPaginator.classes.gql.data.response.Pagination import (
    Edge,
    Node,
    PageInfo,
    Paginated,
)

__version__ = "1.0.0"
