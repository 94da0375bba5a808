from typing import Callable, Any, ContextManager, TypeVar

from StorefrontPaginator.classes.gql.Errors import (
    MalformedResponseError,
    GraphQLResponseError,
)
from StorefrontPaginator.classes.gql.data.response.Error import Error
from StorefrontPaginator.classes.gql.data.response.Pagination import (
    PageInfo,
    Paginated,
    Edge,
    Node,
)
from StorefrontPaginator.constants import CHILD_COLLECTION_FIELD, DEFAULT_CONNECTION_KEY

T = TypeVar("T")


class JsonParentContext(ContextManager):
    """Context Manager that appends the parent name to MalformedResponseErrors"""

    def __init__(self, name: str | int):
        self.name = name

    def __exit__(self, exc_type, exc_val, exc_tb):
        if isinstance(exc_val, MalformedResponseError):
            exc_val.path.append(self.name)


def expect_dict(value: Any) -> dict:
    """
    Parser that checks that the value is a dict then returns it.
    :raises MalformedResponseError: if the value is not a dict
    """
    if not isinstance(value, dict):
        raise MalformedResponseError([], "dict expected")
    return value


def expect_list(value: Any) -> list:
    """
    Parser that checks that the value is a list then returns it.
    :raises MalformedResponseError: if the value is not a list.
    """
    if not isinstance(value, list):
        raise MalformedResponseError([], "list expected")
    return value


def expect_str(value: Any) -> str:
    """
    Parser that checks that the value is a string then returns it.
    :raises MalformedResponseError: if the value is not a string.
    """
    if not isinstance(value, str):
        raise MalformedResponseError([], "str expected")
    return value


def expect_bool(value: Any) -> bool:
    """
    Parser that checks that the value is a bool then returns it.
    :raises MalformedResponseError: if the value is not a bool.
    """
    if not isinstance(value, bool):
        raise MalformedResponseError([], "bool expected")
    return value


def parse_expected_value(
    source: dict, property_name: str, type_parser: Callable[[Any], T]
) -> T:
    """
    Parses a value, with the given property name, in the given dict, and parses it using the given parser.
    :param source: The parent object, containing the value to parse.
    :param property_name: The property name of the value to parse.
    :param type_parser: A parser for the type of the value.
    :return: The parsed value.
    :raises MalformedResponseError: if the property is not in the dict or the value cannot be parsed.
    """
    if property_name not in source:
        raise MalformedResponseError([property_name], "value should not be None")
    with JsonParentContext(property_name):
        return type_parser(source[property_name])


def parse_value(
    source: dict,
    property_name: str,
    type_parser: Callable[[Any], T],
    default: T | None = None,
) -> T | None:
    """
    Parses a value, with the given property name, in the given dict, and parses it using the given parser. The property
    may not exist in the source, in which case we return the default value.
    :param source: The parent object, containing the value to parse.
    :param property_name: The property name of the value to parse.
    :param type_parser: A parser for the type of the value.
    :param default: The default value to return if the value cannot be found (defaults to None).
    :return: The parsed value or the default if the property cannot be found.
    """
    if property_name not in source:
        return default
    with JsonParentContext(property_name):
        return type_parser(source[property_name])


def list_parser(value_type_parser: Callable[[Any], T]) -> Callable[[Any], list[T]]:
    """
    Returns a parser function that parses a value as a list and each item in the list using the given parser.
    :param value_type_parser: The parser for each value in the list.
    :return: The list parser function.
    """

    def inner_parser(source: Any) -> list[T]:
        expect_list(source)

        parsed = []
        for index, item in enumerate(source):
            with JsonParentContext(index):
                parsed.append(value_type_parser(item))
        return parsed

    return inner_parser


def optional_parser(
    value_type_parser: Callable[[Any], T],
) -> Callable[[Any], T | None]:
    """
    Returns a parser function that parses a value as either None or using the given parser.
    :param value_type_parser: The parser for the type of the value.
    :return: The parser function.
    """

    def inner_parser(value: Any) -> T | None:
        if value is None:
            return None
        else:
            return value_type_parser(value)

    return inner_parser


# Parsers for GQL response types


def error_parser(value: Any) -> Error:
    expect_dict(value)
    return Error(
        message=parse_expected_value(value, "message", expect_str),
        path=parse_value(value, "path", list_parser(lambda item: item)),
        extensions=parse_value(value, "extensions", expect_dict),
    )


def page_info_parser(value: Any) -> PageInfo:
    expect_dict(value)
    return PageInfo(
        has_next_page=parse_expected_value(value, "hasNextPage", expect_bool),
        start_cursor=parse_value(value, "startCursor", optional_parser(expect_str)),
        end_cursor=parse_value(value, "endCursor", optional_parser(expect_str)),
    )


def paginated_parser(
    value_parser: Callable[[Any], T],
) -> Callable[[Any], Paginated[T]]:
    """
    Gets a parser for Paginated values.
    :param value_parser: The parser for the `node` of the paginated data.
    :return: The Paginated data.
    """

    def edge_parser(edge: Any) -> Edge[T]:
        expect_dict(edge)
        cursor = parse_expected_value(edge, "cursor", expect_str)
        node = parse_expected_value(edge, "node", value_parser)
        return Edge(cursor, node)

    def inner_parser(container: Any) -> Paginated[T]:
        expect_dict(container)
        edges = parse_expected_value(container, "edges", list_parser(edge_parser))
        page_info = parse_expected_value(container, "pageInfo", page_info_parser)
        return Paginated(edges, page_info)

    return inner_parser


def node_parser(value: Any) -> Node:
    """
    Parses a record, splitting out its child collection when the query requested one.
    :raises MalformedResponseError: if the record is not a dict or its child collection is not a page.
    """
    expect_dict(value)
    products = parse_value(
        value, CHILD_COLLECTION_FIELD, optional_parser(paginated_parser(expect_dict))
    )
    fields = {key: item for key, item in value.items() if key != CHILD_COLLECTION_FIELD}
    return Node(fields, products)


class Parser:
    """Class that can parse responses from the Storefront GQL API."""

    def parse_base_response(
        self, response: Any, request: dict | None = None
    ) -> dict:
        """
        Minimal parser for a base GQL response envelope. Gets the `errors` and `data` fields.
        :param response: The decoded JSON body.
        :param request: The request the response answers, attached to any error raised.
        :return: The data dict.
        :raises GraphQLResponseError: If the envelope contains errors.
        :raises MalformedResponseError: If the envelope is not a dict or has no data.
        """
        response_dict = expect_dict(response)
        errors = parse_value(response_dict, "errors", optional_parser(list_parser(error_parser)))
        data = parse_value(response_dict, "data", optional_parser(expect_dict))
        if errors:
            raise GraphQLResponseError(errors, request, data)
        if data is None:
            raise MalformedResponseError(["data"], "response has no data")
        return data

    def parse_connection(
        self,
        data: Any,
        connection_key: str = DEFAULT_CONNECTION_KEY,
        value_parser: Callable[[Any], Any] = node_parser,
    ) -> Paginated:
        """
        Parses the paginated connection in the data returned by a request.
        :param data: The data returned by the transport.
        :param connection_key: The name (or alias) of the connection in the data.
        :param value_parser: The parser for each `node`.
        :return: The page.
        :raises MalformedResponseError: If `edges` or `pageInfo` are missing or have the wrong shape.
        """
        expect_dict(data)
        return parse_expected_value(data, connection_key, paginated_parser(value_parser))

    def parse_child_connection(
        self, data: Any, connection_key: str = DEFAULT_CONNECTION_KEY
    ) -> Paginated[dict]:
        """
        Parses the child collection of the single parent record returned by a request made with `first: 1`.
        :param data: The data returned by the transport.
        :param connection_key: The name (or alias) of the parent connection in the data.
        :return: The page of children.
        :raises MalformedResponseError: If there is no parent record or it has no child collection.
        """
        page = self.parse_connection(data, connection_key)
        with JsonParentContext(connection_key):
            if len(page.edges) == 0:
                raise MalformedResponseError(["edges"], "expected a parent record")
            node = page.edges[0].node
            if node.products is None:
                raise MalformedResponseError(
                    [CHILD_COLLECTION_FIELD, "node", 0, "edges"],
                    "expected a child collection on the parent record",
                )
        return node.products
