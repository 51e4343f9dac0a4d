"""
GraphQL documents for the feeds

Each document aliases its connection as `results` so the paginator can find
the nodes and pageInfo without knowing the resource.
"""

PRODUCTS_QUERY = """
query getProducts($cursor: String, $first: Int!) {
    results: products(first: $first, after: $cursor) {
        edges {
            node {
                title
                handle
                publishedOnCurrentPublication
            }
        }
        pageInfo {
            hasNextPage
            endCursor
        }
    }
}
"""

VARIANTS_QUERY = """
query getVariants($cursor: String, $first: Int!) {
    results: productVariants(first: $first, after: $cursor) {
        edges {
            node {
                title
                sku
                product {
                    title
                    handle
                    status
                    publishedOnCurrentPublication
                }
            }
        }
        pageInfo {
            hasNextPage
            endCursor
        }
    }
}
"""

COLLECTIONS_QUERY = """
query getCollections($cursor: String, $first: Int!) {
    results: collections(first: $first, after: $cursor) {
        edges {
            node {
                title
                handle
            }
        }
        pageInfo {
            hasNextPage
            endCursor
        }
    }
}
"""
