import pytest

from StorefrontPaginator.classes.gql.Errors import (
    GraphQLResponseError,
    MalformedResponseError,
)
from StorefrontPaginator.classes.gql.data.Parser import Parser, node_parser, page_info_parser
from StorefrontPaginator.classes.gql.data.response.Pagination import Node, PageInfo


@pytest.fixture
def parser():
    return Parser()


test_parse_connection_error_data = [
    ({}, '["data"]'),
    ({"data": []}, '["data"]'),
    ({"data": {"pageInfo": {"hasNextPage": False}}}, '["data", "edges"]'),
    ({"data": {"edges": []}}, '["data", "pageInfo"]'),
    ({"data": {"edges": [], "pageInfo": {"hasNextPage": "yes"}}}, '["data", "pageInfo", "hasNextPage"]'),
    ({"data": {"edges": {}, "pageInfo": {"hasNextPage": False}}}, '["data", "edges"]'),
    (
        {"data": {"edges": [{"cursor": 1, "node": {}}], "pageInfo": {"hasNextPage": False}}},
        '["data", "edges", 0, "cursor"]',
    ),
    (
        {"data": {"edges": [{"cursor": "c", "node": "id"}], "pageInfo": {"hasNextPage": False}}},
        '["data", "edges", 0, "node"]',
    ),
    (
        {
            "data": {
                "edges": [{"cursor": "c", "node": {"products": {"edges": []}}}],
                "pageInfo": {"hasNextPage": False},
            }
        },
        '["data", "edges", 0, "node", "products", "pageInfo"]',
    ),
]


@pytest.mark.parametrize("data,path", test_parse_connection_error_data)
def test_parse_connection_error(parser, data, path):
    with pytest.raises(MalformedResponseError) as e:
        parser.parse_connection(data)
    assert str(e.value).startswith(f"JSON at {path} ")


def test_parse_connection(parser):
    page = parser.parse_connection(
        {
            "data": {
                "edges": [
                    {"cursor": "c-1", "node": {"id": "1", "title": "First"}},
                    {"cursor": "c-2", "node": {"id": "2", "title": "Second"}},
                ],
                "pageInfo": {"hasNextPage": True, "endCursor": "c-2"},
            }
        }
    )

    assert [edge.cursor for edge in page.edges] == ["c-1", "c-2"]
    assert page.edges[1].node == Node({"id": "2", "title": "Second"})
    assert page.page_info == PageInfo(True, end_cursor="c-2")
    assert page.last_cursor == "c-2"


def test_node_parser_splits_products():
    products = {
        "edges": [{"cursor": "p-1", "node": {"id": "p1"}}],
        "pageInfo": {"hasNextPage": True},
    }
    node = node_parser({"id": "1", "products": products})

    assert node.fields == {"id": "1"}
    assert node.has_more_products
    assert node.products.edges[0].node == {"id": "p1"}
    assert node.to_dict() == {"id": "1", "products": products}


test_node_parser_no_products_data = [
    {"id": "1"},
    {"id": "1", "products": None},
]


@pytest.mark.parametrize("value", test_node_parser_no_products_data)
def test_node_parser_no_products(value):
    node = node_parser(value)

    assert node.products is None
    assert not node.has_more_products
    assert node.to_dict() == {"id": "1"}


def test_page_info_parser_cursors():
    page_info = page_info_parser({"hasNextPage": False, "startCursor": None, "endCursor": "c-9"})

    assert page_info == PageInfo(False, None, "c-9")


def test_parse_base_response(parser):
    assert parser.parse_base_response({"data": {"data": {}}}) == {"data": {}}


def test_parse_base_response_errors(parser):
    request = {"url": "https://example.com", "query": "query {}", "variables": {}}
    response = {
        "errors": [{"message": "Field 'foo' doesn't exist", "path": ["data", 0]}],
        "data": None,
    }

    with pytest.raises(GraphQLResponseError) as e:
        parser.parse_base_response(response, request)
    assert e.value.request is request
    assert e.value.response == response
    assert e.value.errors[0].message == "Field 'foo' doesn't exist"


test_parse_base_response_malformed_data = [
    [],
    "error",
    {},
    {"data": None},
    {"data": "value"},
    {"errors": "value", "data": {}},
]


@pytest.mark.parametrize("response", test_parse_base_response_malformed_data)
def test_parse_base_response_malformed(parser, response):
    with pytest.raises(MalformedResponseError):
        parser.parse_base_response(response)


def test_parse_child_connection(parser):
    page = parser.parse_child_connection(
        {
            "data": {
                "edges": [
                    {
                        "cursor": "c-1",
                        "node": {
                            "id": "1",
                            "products": {
                                "edges": [{"cursor": "p-1", "node": {"id": "p1"}}],
                                "pageInfo": {"hasNextPage": False},
                            },
                        },
                    }
                ],
                "pageInfo": {"hasNextPage": True},
            }
        }
    )

    assert [edge.cursor for edge in page.edges] == ["p-1"]
    assert not page.page_info.has_next_page
