from catalog_server.graphql.schema import schema

__all__ = ["schema"]
