"""
GraphQL Todo Service package.

Serves a seeded, in-memory todo list through a strawberry schema mounted on
a FastAPI endpoint at /graphql.
"""
