import io

import pytest
from colorama import Fore

from StorefrontPaginator.classes.ErrorPrinter import print_graphql_error, render
from StorefrontPaginator.classes.gql.Errors import (
    GraphQLResponseError,
    PaginationCursorError,
    TransportError,
)
from StorefrontPaginator.classes.gql.data.response.Error import Error

REQUEST = {"url": "https://example.com/graphql.json", "query": "query {}", "variables": {"first": 1}}

test_render_data = [
    ("text", "text"),
    (None, "null"),
    (True, "true"),
    ({"a": 1, "b": "two"}, "a: 1\nb: two"),
    ({"a": {"b": [1, 2]}}, "a:\n  b:\n    - 1\n    - 2"),
    ([{"message": "x", "path": []}], "-\n  message: x\n  path: (empty array)"),
    ({"data": None, "extensions": {}}, "data: null\nextensions: {}"),
]


@pytest.mark.parametrize("value,expected", test_render_data)
def test_render(value, expected):
    assert render(value, colored=False) == expected


def test_render_colored():
    rendered = render({"errors": ["x"]})

    assert f"{Fore.RED}errors:" in rendered
    assert f"{Fore.RED}-" in rendered


def test_print_graphql_error_response_errors():
    stream = io.StringIO()
    error = GraphQLResponseError([Error("Throttled", extensions={"code": "THROTTLED"})], REQUEST)

    print_graphql_error(error, stream, colored=False)

    assert stream.getvalue() == (
        "-\n"
        "  message: Throttled\n"
        "  extensions:\n"
        "    code: THROTTLED\n"
        "url: https://example.com/graphql.json\n"
        "query: query {}\n"
        "variables:\n"
        "  first: 1\n"
    )


def test_print_graphql_error_transport():
    stream = io.StringIO()

    print_graphql_error(TransportError("Connection refused", REQUEST), stream, colored=False)

    assert stream.getvalue().startswith("url: https://example.com/graphql.json\n")


test_print_graphql_error_nothing_data = [
    ValueError("unrelated"),
    PaginationCursorError("data", "c-1"),
]


@pytest.mark.parametrize("error", test_print_graphql_error_nothing_data)
def test_print_graphql_error_nothing_to_print(error):
    stream = io.StringIO()

    print_graphql_error(error, stream)

    assert stream.getvalue() == ""
