"""
Routes package for the Todo API.

This package contains route blueprints:
- api: JSON CRUD endpoints for todos, mounted at /v1/todos
- views: the plain-text root page used as a liveness check
"""
