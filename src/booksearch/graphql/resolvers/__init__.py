"""Resolver package for the GraphQL schema.

Resolvers take the request's ``AuthContext`` and a ``UserStore`` as explicit
arguments, so they can be exercised without a GraphQL execution context.
"""
