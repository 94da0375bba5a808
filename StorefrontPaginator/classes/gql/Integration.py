import logging
from typing import Any

import requests

from StorefrontPaginator.classes.Settings import ClientSettings
from StorefrontPaginator.classes.gql.Errors import TransportError
from StorefrontPaginator.classes.gql.data.Parser import Parser
from StorefrontPaginator.constants import (
    API_VERSION,
    STOREFRONT_TOKEN_HEADER,
    DEFAULT_FIRST,
    DEFAULT_FIRST_PRODUCT,
    Variables,
)

logger = logging.getLogger(__name__)


class GraphQLClient:
    """
    Executes GraphQL requests against a single endpoint.
    """

    def __init__(
        self,
        endpoint: str,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
        parser: Parser = Parser(),
        post_request=requests.post,
    ):
        self.endpoint = endpoint
        """The URL requests are posted to."""
        self.headers = {"Content-Type": "application/json", **(headers or {})}
        """Headers sent with every request."""
        self.timeout = timeout
        """Seconds to wait for a response, None to wait indefinitely."""
        self.parser = parser
        """The parser for the response envelope."""
        self.post_request = post_request
        """Function for posting GQL requests."""

    def request(self, document: str, variables: dict[str, Any] | None = None) -> dict:
        """
        Posts the given query document and returns the `data` of the response.
        :param document: The GraphQL query document.
        :param variables: The variables for the document.
        :return: The data dict.
        :raises TransportError: If the request failed or the response was not JSON.
        :raises GraphQLResponseError: If the response contained errors.
        :raises MalformedResponseError: If the response had no data.
        """
        variables = variables or {}
        request_info = {"url": self.endpoint, "query": document, "variables": variables}
        try:
            response = self.post_request(
                self.endpoint,
                json={"query": document, "variables": variables},
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(str(e), request_info) from e

        logger.debug(
            f"Variables: {variables}, Status code: {response.status_code}, Content: {response.text}"
        )
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise TransportError(str(e), request_info, response.status_code) from e

        try:
            response_json = response.json()
        except ValueError as e:
            raise TransportError(
                f"Invalid JSON in response: {e}", request_info, response.status_code
            ) from e
        return self.parser.parse_base_response(response_json, request_info)

    def __repr__(self):
        return f"GraphQLClient(endpoint={self.endpoint!r})"


def create_client(
    store_url: str,
    storefront_token: str,
    api_version: str = API_VERSION,
    timeout: float | None = None,
) -> GraphQLClient:
    """
    Creates a Storefront GraphQL client for the provided store and token.
    :param store_url: The base URL of the store, e.g. `https://example.myshopify.com`.
    :param storefront_token: The Storefront access token.
    :param api_version: The Storefront API version.
    :param timeout: Optional request timeout in seconds.
    :return: The client.
    """
    return GraphQLClient(
        f"{store_url.rstrip('/')}/api/{api_version}/graphql.json",
        headers={STOREFRONT_TOKEN_HEADER: storefront_token},
        timeout=timeout,
    )


def create_client_from_settings(settings: ClientSettings) -> GraphQLClient:
    return create_client(
        settings.store_url,
        settings.storefront_token,
        api_version=settings.api_version,
        timeout=settings.timeout,
    )


def query_once(
    client: GraphQLClient,
    query: str,
    first: int = DEFAULT_FIRST,
    after: str | None = None,
    first_product: int | None = DEFAULT_FIRST_PRODUCT,
    after_product: str | None = None,
) -> dict:
    """
    Requests a single page. Variables that are None are left out, so queries without child pagination can pass
    `first_product=None`.
    :return: The data returned by the client.
    """
    variables = {
        Variables.FIRST: first,
        Variables.AFTER: after,
        Variables.FIRST_PRODUCT: first_product,
        Variables.AFTER_PRODUCT: after_product,
    }
    return client.request(
        query, {name: value for name, value in variables.items() if value is not None}
    )
