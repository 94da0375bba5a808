import abc

from StorefrontPaginator.classes.gql.data.response.Error import Error


class GQLError(abc.ABC, Exception):
    """Abstract base class for errors raised while querying the Storefront API."""

    request: dict | None = None
    """The request that failed: `url`, `query` and `variables`, if known."""
    response: dict | None = None
    """The response that caused the failure, if one was received."""


class TransportError(GQLError):
    """Raised when a request could not be made or the server did not answer with a JSON body."""

    def __init__(self, message: str, request: dict | None = None, status_code: int | None = None):
        self.message = message
        """Information about the failure."""
        self.request = request
        self.status_code = status_code
        """The HTTP status code, None if no response was received."""

    def __str__(self):
        if self.status_code is not None:
            return f"Request failed with status {self.status_code}: {self.message}"
        return f"Request failed: {self.message}"


class GraphQLResponseError(GQLError):
    """Raised when a GQL response contained Errors."""

    def __init__(self, errors: list[Error], request: dict | None = None, data: dict | None = None):
        self.errors = errors
        """The list of errors in the response."""
        self.request = request
        self.response = {"errors": [error.to_dict() for error in errors], "data": data}

    def __str__(self):
        return f"GQL request returned errors: {[error.message for error in self.errors]}"


class MalformedResponseError(GQLError):
    """Raised when a GQL response has an unexpected shape."""

    def __init__(self, path: list[str | int], message: str):
        self.path = path
        """The path in the JSON to the unexpected value, innermost first."""
        self.message = message
        """Information about the unexpected value."""

    def __str__(self):
        def render_path_item(item: int | str) -> str:
            if isinstance(item, int):
                return str(item)
            else:
                return f'"{item}"'

        return f'JSON at [{", ".join(map(render_path_item, reversed(self.path)))}] has an invalid shape: {self.message}'


class PaginationCursorError(GQLError):
    """Raised when a page claims there is a next page but has no edge to take a cursor from."""

    def __init__(self, connection: str, after: str | None):
        self.connection = connection
        """The connection being paginated."""
        self.after = after
        """The cursor the empty page was requested with."""

    def __str__(self):
        return f"Page of '{self.connection}' requested after {self.after!r} has a next page but no edges to resume from"
