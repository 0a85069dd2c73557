"""Resolver package for the GraphQL schema.

Field and root resolvers read from or append to the InMemoryStore carried
in the GraphQL context. They are synchronous and never perform I/O.
"""
