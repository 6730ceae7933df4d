"""
API test package for the Todo API.

This package contains tests for the /v1/todos endpoints.
Tests use the Flask test client and demonstrate:
- CRUD operation testing
- Input validation testing
- Error handling testing
"""
