"""Resolver package for the GraphQL schema.

Each module holds the field resolvers for one entity type plus the root
query and mutation resolvers that return it. Resolvers read and write the
store found in the GraphQL context.
"""

# Intentionally empty; functions are defined in sibling modules.
