"""
REST API endpoints for Todo management.

This module provides CRUD operations for todos via HTTP methods.
All endpoints return JSON responses and follow REST conventions.

Endpoints (mounted under /v1/todos):
    GET    /v1/todos        - List all todos
    GET    /v1/todos/<id>   - Get a single todo by ID
    POST   /v1/todos        - Create a new todo
    PATCH  /v1/todos/<id>   - Partially update a todo
    DELETE /v1/todos/<id>   - Delete a todo
"""

import logging
import re
from typing import Any

from flask import Blueprint, Response, jsonify, request

from app import get_store
from app.models import TodoNotFoundError, TodoPatch

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

_TODO_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

NOT_FOUND = "todo not found"

# Ids are signed 64-bit integers
MIN_TODO_ID = -(2 ** 63)
MAX_TODO_ID = 2 ** 63 - 1


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def parse_todo_id(raw_id: str) -> int | None:
    """
    Parse the id path segment.

    Args:
        raw_id: The id exactly as it appeared in the URL.

    Returns:
        The integer id, or None if the segment is not an integer
        or falls outside the signed 64-bit range.
    """
    if not _TODO_ID_PATTERN.fullmatch(raw_id):
        return None
    todo_id = int(raw_id)
    if not MIN_TODO_ID <= todo_id <= MAX_TODO_ID:
        return None
    return todo_id


def read_json_body() -> Any:
    """Decode the request body as JSON whatever its Content-Type; None if invalid."""
    return request.get_json(force=True, silent=True)


def error_response(message: str, status: int) -> tuple[Response, int]:
    """Build the ``{"error": ...}`` payload shared by every failure."""
    return jsonify({"error": message}), status


def bad_id_response(raw_id: str) -> tuple[Response, int]:
    logger.warning("Rejected todo id %r", raw_id)
    return error_response("cannot parse id", 400)


def not_found_response(todo_id: int) -> tuple[Response, int]:
    logger.warning("Todo %s not found", todo_id)
    return error_response(NOT_FOUND, 404)


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/", methods=["GET"], strict_slashes=False)
def get_todos() -> tuple[Response, int]:
    """
    List all todos in the order they were created.

    Returns:
        JSON array of todos and 200 status code.
    """
    todos = get_store().list()
    logger.info("Listing %d todos", len(todos))
    return jsonify([todo.to_dict() for todo in todos]), 200


@api_bp.route("/<todo_id>", methods=["GET"])
def get_todo(todo_id: str) -> tuple[Response, int]:
    """
    Get a single todo by ID.

    Args:
        todo_id: The id path segment.

    Returns:
        JSON response with todo data and 200 status code,
        400 if the id is not an integer, or 404 if not found.
    """
    parsed_id = parse_todo_id(todo_id)
    if parsed_id is None:
        return bad_id_response(todo_id)

    try:
        todo = get_store().get(parsed_id)
    except TodoNotFoundError:
        return not_found_response(parsed_id)

    return jsonify(todo.to_dict()), 200


@api_bp.route("/", methods=["POST"], strict_slashes=False)
def create_todo() -> tuple[Response, int]:
    """
    Create a new todo.

    Request Body (JSON):
        name: Todo label (string; an absent or null name creates an unnamed todo)

    Returns:
        JSON response with created todo and 201 status code,
        or error message and 400 if the body cannot be parsed.
    """
    data = read_json_body()
    if not isinstance(data, dict):
        logger.warning("Create rejected: body is not a JSON object")
        return error_response("cannot parse json", 400)

    name = data.get("name")
    if name is None:
        name = ""
    elif not isinstance(name, str):
        logger.warning("Create rejected: 'name' is not a string")
        return error_response("cannot parse json", 400)

    todo = get_store().create(name)

    logger.info("Created todo with ID: %s", todo.id)
    return jsonify(todo.to_dict()), 201


@api_bp.route("/<todo_id>", methods=["PATCH"])
def update_todo(todo_id: str) -> tuple[Response, int]:
    """
    Update the supplied fields of an existing todo.

    Args:
        todo_id: The id path segment.

    Request Body (JSON):
        name: New label (optional)
        completed: New completion flag (optional)

    Returns:
        JSON response with updated todo and 200 status code,
        400 if the id or body cannot be parsed, or 404 if not found.
    """
    parsed_id = parse_todo_id(todo_id)
    if parsed_id is None:
        return bad_id_response(todo_id)

    try:
        patch = TodoPatch.from_json(read_json_body())
    except ValueError as exc:
        logger.warning("Update of todo %s rejected: %s", parsed_id, exc)
        return error_response("cannot parse body", 400)

    try:
        todo = get_store().update(parsed_id, patch)
    except TodoNotFoundError:
        return not_found_response(parsed_id)

    logger.info("Updated todo %s", parsed_id)
    return jsonify(todo.to_dict()), 200


@api_bp.route("/<todo_id>", methods=["DELETE"])
def delete_todo(todo_id: str) -> tuple[str, int] | tuple[Response, int]:
    """
    Delete a todo.

    Args:
        todo_id: The id path segment.

    Returns:
        Empty 204 response, 400 if the id is not an integer,
        or 404 if not found.
    """
    parsed_id = parse_todo_id(todo_id)
    if parsed_id is None:
        return bad_id_response(todo_id)

    try:
        get_store().delete(parsed_id)
    except TodoNotFoundError:
        return not_found_response(parsed_id)

    logger.info("Deleted todo %s", parsed_id)
    return "", 204


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.app_errorhandler(404)
def not_found(error: Exception) -> tuple[Response, int]:
    """Handle 404 Not Found errors."""
    return error_response("resource not found", 404)


@api_bp.app_errorhandler(405)
def method_not_allowed(error: Exception) -> tuple[Response, int]:
    """Handle 405 Method Not Allowed errors."""
    response, status = error_response("method not allowed", 405)
    valid_methods = getattr(error, "valid_methods", None)
    if valid_methods:
        response.headers["Allow"] = ", ".join(valid_methods)
    return response, status


@api_bp.app_errorhandler(500)
def internal_error(error: Exception) -> tuple[Response, int]:
    """Handle 500 Internal Server errors."""
    logger.error("Internal server error: %s", error)
    return error_response("internal server error", 500)
