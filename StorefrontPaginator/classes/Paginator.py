import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, TypeVar

from StorefrontPaginator.classes.gql.Errors import PaginationCursorError
from StorefrontPaginator.classes.gql.Integration import GraphQLClient, query_once
from StorefrontPaginator.classes.gql.data.Parser import Parser
from StorefrontPaginator.classes.gql.data.response.Pagination import (
    Edge,
    Node,
    PageInfo,
    Paginated,
)
from StorefrontPaginator.constants import (
    CHILD_COLLECTION_FIELD,
    COLLECTION_PAGE_SIZE,
    DEFAULT_CONNECTION_KEY,
    DEFAULT_FIRST,
    DEFAULT_FIRST_PRODUCT,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _walk(
    fetch_page: Callable[[str | None], Paginated],
    resolve_page: Callable[[Paginated], list[T]],
    after: str | None,
    connection: str,
) -> tuple[list[T], PageInfo]:
    """
    Requests pages until one reports that there is no next page, resuming each request after the last edge of the
    previous page.
    :param fetch_page: Requests and parses the page after the given cursor.
    :param resolve_page: Turns a page into the values to accumulate, in edge order.
    :param after: The cursor to start after, None to start at the beginning.
    :param connection: Name of the connection, for logging and errors.
    :return: The accumulated values and the page info of the last page.
    :raises PaginationCursorError: If a page has a next page but no edges.
    """
    accumulated: list[T] = []
    cursor = after
    page_number = 0
    while True:
        page_number += 1
        page = fetch_page(cursor)
        logger.debug(
            f"{connection}: page {page_number} after {cursor!r} has {len(page.edges)} edges, "
            f"has next page: {page.page_info.has_next_page}"
        )
        if page.page_info.has_next_page and page.last_cursor is None:
            raise PaginationCursorError(connection, cursor)
        accumulated.extend(resolve_page(page))
        if not page.page_info.has_next_page:
            return accumulated, page.page_info
        cursor = page.last_cursor


def parent_cursor(edges: list[Edge], index: int) -> str | None:
    """
    The `after` cursor that makes a `first: 1` request return the record at `index` of the same page: the cursor of the
    edge before it, or None for the first edge.
    """
    if index == 0:
        return None
    return edges[index - 1].cursor


def query_all(
    client: GraphQLClient,
    query: str,
    first: int = DEFAULT_FIRST,
    after: str | None = None,
    connection_key: str = DEFAULT_CONNECTION_KEY,
    parser: Parser = Parser(),
) -> list[Node]:
    """
    Gets all paginated records of a query. Will execute multiple requests as needed.
    :param client: The client to make requests with.
    :param query: The query document, declaring `$first` and `$after`.
    :param first: The page size.
    :param after: The cursor to start after, None to start at the beginning.
    :param connection_key: The name (or alias) of the paginated connection in the response data.
    :param parser: The parser for each page.
    :return: Every record, in the order the pages returned them.
    :raises GQLError: If any request fails or returns an unexpected page.
    """

    def fetch_page(cursor: str | None) -> Paginated[Node]:
        return parser.parse_connection(
            query_once(client, query, first, cursor, first_product=None), connection_key
        )

    nodes, _ = _walk(
        fetch_page,
        lambda page: [edge.node for edge in page.edges],
        after,
        connection_key,
    )
    logger.info(f"{connection_key}: fetched {len(nodes)} records")
    return nodes


def _collect_products(
    client: GraphQLClient,
    query: str,
    first: int,
    after: str | None,
    first_product: int,
    after_product: str | None,
    connection_key: str,
    parser: Parser,
) -> tuple[list[Edge[dict]], PageInfo]:
    def fetch_page(cursor: str | None) -> Paginated[dict]:
        return parser.parse_child_connection(
            query_once(client, query, first, after, first_product, cursor),
            connection_key,
        )

    return _walk(
        fetch_page,
        lambda page: page.edges,
        after_product,
        f"{connection_key}.{CHILD_COLLECTION_FIELD}",
    )


def query_collection_products(
    client: GraphQLClient,
    query: str,
    first: int = COLLECTION_PAGE_SIZE,
    after: str | None = None,
    first_product: int = DEFAULT_FIRST_PRODUCT,
    after_product: str | None = None,
    connection_key: str = DEFAULT_CONNECTION_KEY,
    parser: Parser = Parser(),
) -> list[Edge[dict]]:
    """
    Gets every child edge of one record's `products` collection. Each request re-fetches the single parent record
    selected by `first` and `after` together with the next page of its children.
    :param client: The client to make requests with.
    :param query: The query document, declaring `$first`, `$after`, `$firstProduct` and `$afterProduct`.
    :param first: The parent page size, 1 so that the parent is the only record returned.
    :param after: The cursor selecting the parent record, see `parent_cursor`.
    :param first_product: The child page size.
    :param after_product: The child cursor to start after, None to start at the first child.
    :param connection_key: The name (or alias) of the parent connection in the response data.
    :param parser: The parser for each page.
    :return: The child edges, in order.
    :raises GQLError: If any request fails or returns an unexpected page.
    """
    edges, _ = _collect_products(
        client, query, first, after, first_product, after_product, connection_key, parser
    )
    return edges


def _resolve_collections(
    client: GraphQLClient,
    query: str,
    page: Paginated[Node],
    first_product: int,
    connection_key: str,
    parser: Parser,
) -> list[Node]:
    pending = [index for index, edge in enumerate(page.edges) if edge.node.has_more_products]
    if len(pending) == 0:
        return [edge.node for edge in page.edges]

    logger.info(
        f"{connection_key}: resolving more {CHILD_COLLECTION_FIELD} for {len(pending)} of {len(page.edges)} records"
    )
    with ThreadPoolExecutor(max_workers=len(pending)) as executor:
        futures = {
            index: executor.submit(
                _collect_products,
                client,
                query,
                COLLECTION_PAGE_SIZE,
                parent_cursor(page.edges, index),
                first_product,
                None,
                connection_key,
                parser,
            )
            for index in pending
        }
        resolved = {index: future.result() for index, future in futures.items()}

    nodes = []
    for index, edge in enumerate(page.edges):
        node = edge.node
        if index in resolved:
            edges, page_info = resolved[index]
            node = Node(node.fields, Paginated(edges, page_info))
        nodes.append(node)
    return nodes


def query_collection_all(
    client: GraphQLClient,
    query: str,
    first: int = DEFAULT_FIRST,
    after: str | None = None,
    first_product: int = DEFAULT_FIRST_PRODUCT,
    connection_key: str = DEFAULT_CONNECTION_KEY,
    parser: Parser = Parser(),
) -> list[Node]:
    """
    Gets all paginated records of a query together with every child of each record's `products` collection.
    Records whose collection has more pages are resolved concurrently, one request chain per record, and all of them
    finish before the next page of records is requested.
    :param client: The client to make requests with.
    :param query: The query document, declaring `$first`, `$after`, `$firstProduct` and `$afterProduct`.
    :param first: The page size of records.
    :param after: The cursor to start after, None to start at the beginning.
    :param first_product: The page size of children.
    :param connection_key: The name (or alias) of the paginated connection in the response data.
    :param parser: The parser for each page.
    :return: Every record, in order, with complete child collections.
    :raises GQLError: If any request fails or returns an unexpected page.
    """

    def fetch_page(cursor: str | None) -> Paginated[Node]:
        return parser.parse_connection(
            query_once(client, query, first, cursor, first_product), connection_key
        )

    nodes, _ = _walk(
        fetch_page,
        lambda page: _resolve_collections(
            client, query, page, first_product, connection_key, parser
        ),
        after,
        connection_key,
    )
    logger.info(
        f"{connection_key}: fetched {len(nodes)} records with "
        f"{sum(len(node.products.edges) for node in nodes if node.products is not None)} {CHILD_COLLECTION_FIELD}"
    )
    return nodes
