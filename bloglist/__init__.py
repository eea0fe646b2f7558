"""
Blog List Backend - root package.

This package contains the FastAPI app entry point (main.py), API routes,
use cases, domain logic (models, repository contracts, blog statistics)
and infrastructure (MongoDB repositories, bcrypt and JWT adapters).
"""
