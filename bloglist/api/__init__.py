"""
API layer for the blog list backend.

Exposes HTTP endpoints under /api/v1 (login, users, blogs, statistics),
plus the middleware and error handlers shared by all of them.
"""
