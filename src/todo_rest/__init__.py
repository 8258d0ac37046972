"""
REST Todo Service package.

Exposes an in-memory todo list over a REST-style HTTP API built on FastAPI.
The application factory lives in :mod:`todo_rest.main`.
"""
