"""
Runtime plumbing shared by the REST and GraphQL todo services.

Holds environment-driven settings and the middleware setup both FastAPI
applications apply; neither service's domain code lives here.
"""
