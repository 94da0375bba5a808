# Query documents for the paginator. The paginated connection is aliased as `data` and every document declares
# the variables the paginator sends.

PRODUCTS_QUERY = """
query Products($first: Int!, $after: String) {
  data: products(first: $first, after: $after) {
    edges {
      cursor
      node {
        id
        handle
        title
      }
    }
    pageInfo {
      hasNextPage
    }
  }
}
"""

COLLECTIONS_WITH_PRODUCTS_QUERY = """
query CollectionsWithProducts($first: Int!, $after: String, $firstProduct: Int!, $afterProduct: String) {
  data: collections(first: $first, after: $after) {
    edges {
      cursor
      node {
        id
        handle
        title
        products(first: $firstProduct, after: $afterProduct) {
          edges {
            cursor
            node {
              id
              handle
              title
            }
          }
          pageInfo {
            hasNextPage
          }
        }
      }
    }
    pageInfo {
      hasNextPage
    }
  }
}
"""
