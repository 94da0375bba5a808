from typing import Any, Generic, TypeVar


class PageInfo:
    """Information about the current pagination state."""

    def __init__(self, has_next_page: bool, start_cursor: str | None = None, end_cursor: str | None = None):
        self.has_next_page = has_next_page
        """Whether there are more pages available."""
        self.start_cursor = start_cursor
        """The cursor at the start of the page."""
        self.end_cursor = end_cursor
        """The cursor at the end of the page."""

    def to_dict(self) -> dict:
        result: dict[str, Any] = {"hasNextPage": self.has_next_page}
        if self.start_cursor is not None:
            result["startCursor"] = self.start_cursor
        if self.end_cursor is not None:
            result["endCursor"] = self.end_cursor
        return result

    def __eq__(self, other):
        if isinstance(other, PageInfo):
            return self.__dict__ == other.__dict__
        return False

    def __repr__(self) -> str:
        return f"PageInfo({self.__dict__})"


T = TypeVar("T")


class Edge(Generic[T]):
    """Representation of a Pagination Edge."""

    def __init__(self, cursor: str, node: T):
        self.cursor = cursor
        """The cursor of this Edge. Can be used to resume Paginated requests from this point."""
        self.node = node
        """The entity at this point of Pagination."""

    def to_dict(self) -> dict:
        node = self.node.to_dict() if hasattr(self.node, "to_dict") else self.node
        return {"cursor": self.cursor, "node": node}

    def __eq__(self, other):
        if isinstance(other, Edge):
            return self.cursor == other.cursor and self.node == other.node
        return False

    def __repr__(self) -> str:
        return f"Edge({self.__dict__})"


class Paginated(Generic[T]):
    """Representation of a GQL Paginated response."""

    def __init__(self, edges: list[Edge[T]], page_info: PageInfo):
        self.edges = edges
        """The "edges" are a wrapper containing the actual value we want."""
        self.page_info = page_info
        """Information about the current pagination state."""

    @property
    def last_cursor(self) -> str | None:
        """The cursor of the last edge on this page, None if the page is empty."""
        if len(self.edges) == 0:
            return None
        return self.edges[-1].cursor

    def to_dict(self) -> dict:
        return {
            "edges": [edge.to_dict() for edge in self.edges],
            "pageInfo": self.page_info.to_dict(),
        }

    def __eq__(self, other):
        if isinstance(other, Paginated):
            return self.edges == other.edges and self.page_info == other.page_info
        return False

    def __repr__(self) -> str:
        return f"Paginated({self.__dict__})"


class Node:
    """
    A record returned by a paginated query. The record itself is opaque, apart from the optional
    `products` field which, when requested by the query, is a paginated child collection.
    """

    def __init__(self, fields: dict, products: Paginated[dict] | None = None):
        self.fields = fields
        """Every field of the record except `products`."""
        self.products = products
        """The child collection, None if the record has none."""

    @property
    def has_more_products(self) -> bool:
        """True if the child collection has pages beyond the one fetched with the record."""
        return self.products is not None and self.products.page_info.has_next_page

    def to_dict(self) -> dict:
        result = dict(self.fields)
        if self.products is not None:
            result["products"] = self.products.to_dict()
        return result

    def __getitem__(self, item):
        return self.fields[item]

    def __eq__(self, other):
        if isinstance(other, Node):
            return self.fields == other.fields and self.products == other.products
        return False

    def __repr__(self) -> str:
        return f"Node({self.__dict__})"
