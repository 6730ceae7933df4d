"""
Data model and in-memory store for the Todo API.

This module defines the Todo record, the partial-update request used by
PATCH, and the TodoStore that owns every record for the lifetime of the
process. Nothing is persisted: restarting the server loses all todos.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterable


class _Unset(Enum):
    """Marker type for a field that was not supplied."""

    UNSET = "unset"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset.UNSET


class TodoNotFoundError(LookupError):
    """Raised when no todo with the requested id is in the store."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"todo {todo_id} not found")
        self.todo_id = todo_id


@dataclass
class Todo:
    """
    A single task item.

    Attributes:
        id: Identifier assigned by the store, unique among current todos.
        name: Free-text label.
        completed: Whether the task is done.
    """

    id: int
    name: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the todo to a dictionary representation.

        Returns:
            Dictionary containing all todo fields.
        """
        return {
            "id": self.id,
            "name": self.name,
            "completed": self.completed,
        }


@dataclass(frozen=True)
class TodoPatch:
    """
    Fields to change on an existing todo.

    Each field is either a value to write or UNSET, in which case the
    stored value is left alone.
    """

    name: str | _Unset = UNSET
    completed: bool | _Unset = UNSET

    @classmethod
    def from_json(cls, data: Any) -> TodoPatch:
        """
        Build a patch from a decoded JSON request body.

        A JSON null for a field counts as not supplied.

        Raises:
            ValueError: If the body is not an object or a field has the
                wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError("body must be a JSON object")

        name = data.get("name")
        if name is not None and not isinstance(name, str):
            raise ValueError("'name' must be a string")

        completed = data.get("completed")
        if completed is not None and not isinstance(completed, bool):
            raise ValueError("'completed' must be a boolean")

        return cls(
            name=UNSET if name is None else name,
            completed=UNSET if completed is None else completed,
        )

    def apply(self, todo: Todo) -> None:
        """Write the supplied fields onto ``todo`` in place."""
        if self.name is not UNSET:
            todo.name = self.name
        if self.completed is not UNSET:
            todo.completed = self.completed


# Starter records loaded when SEED_TODOS is enabled
DEFAULT_TODOS = (
    Todo(id=1, name="Clean Car"),
    Todo(id=2, name="Clean Room"),
)


class TodoStore:
    """
    Ordered, in-memory collection of todos.

    Records are kept in insertion order. Ids come from a counter that only
    moves forward, so an id is never handed out twice even after deletes.
    Every operation holds the store lock, and callers always receive copies
    of the stored records.
    """

    def __init__(self, seed: Iterable[Todo] = ()) -> None:
        self._lock = threading.Lock()
        self._todos: list[Todo] = []
        self._last_id = 0
        self.reset(seed)

    def reset(self, seed: Iterable[Todo] = ()) -> None:
        """Drop every todo and restart id assignment after the seed records."""
        with self._lock:
            self._todos = [replace(todo) for todo in seed]
            self._last_id = max((todo.id for todo in self._todos), default=0)

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def _index_of(self, todo_id: int) -> int:
        for index, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return index
        raise TodoNotFoundError(todo_id)

    def list(self) -> list[Todo]:
        """Return all todos in insertion order."""
        with self._lock:
            return [replace(todo) for todo in self._todos]

    def get(self, todo_id: int) -> Todo:
        """
        Look up a todo by id.

        Raises:
            TodoNotFoundError: If no todo has this id.
        """
        with self._lock:
            return replace(self._todos[self._index_of(todo_id)])

    def create(self, name: str) -> Todo:
        """Append a new, not yet completed todo and return it."""
        with self._lock:
            self._last_id += 1
            todo = Todo(id=self._last_id, name=name, completed=False)
            self._todos.append(todo)
            return replace(todo)

    def update(self, todo_id: int, patch: TodoPatch) -> Todo:
        """
        Apply a partial update to a todo and return the result.

        Raises:
            TodoNotFoundError: If no todo has this id.
        """
        with self._lock:
            todo = self._todos[self._index_of(todo_id)]
            patch.apply(todo)
            return replace(todo)

    def delete(self, todo_id: int) -> None:
        """
        Remove a todo, keeping the remaining ones in order.

        Raises:
            TodoNotFoundError: If no todo has this id.
        """
        with self._lock:
            del self._todos[self._index_of(todo_id)]
