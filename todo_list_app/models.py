import time
from dataclasses import dataclass

from .errors import BackendError


@dataclass(frozen=True)
class Task:
    """A single to-do item as shown in the list."""

    id: str
    text: str

    @classmethod
    def from_json(cls, data):
        """
        Build a Task from a backend object shaped like {"_id": ..., "task": ...}.

        Raises:
            BackendError: If the object is not a dict or lacks either key
        """
        if not isinstance(data, dict) or "_id" not in data or "task" not in data:
            raise BackendError(f"Unexpected task entry from backend: {data!r}")
        return cls(id=str(data["_id"]), text=str(data["task"]))

    def to_json(self):
        return {"_id": self.id, "task": self.text}


def tasks_from_json(payload):
    """Convert the backend's list response into a tuple of Task objects."""
    if not isinstance(payload, list):
        raise BackendError(f"Expected a JSON array of tasks, got {type(payload).__name__}")
    return tuple(Task.from_json(item) for item in payload)


def temporary_id():
    """Placeholder id for an optimistic insert: current time in milliseconds."""
    return str(int(time.time() * 1000))


# --- Pure list helpers (the client swaps in the returned tuple) ---

def prepend(tasks, task):
    return (task,) + tuple(tasks)


def without(tasks, task_id):
    """Drop every task whose id matches; unknown ids leave the list as is."""
    return tuple(task for task in tasks if task.id != task_id)
