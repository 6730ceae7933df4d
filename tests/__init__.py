"""
Test suite for the Todo API.

This package contains:
- unit/: store, partial-update and configuration tests
- integration/: HTTP-level CRUD and validation tests via the Flask test client
- smoke/: quick liveness and critical-path checks
"""
